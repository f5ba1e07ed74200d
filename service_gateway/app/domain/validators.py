"""
Field validators applied to request bodies before anything is forwarded.

Each validator raises ``ValidationError`` carrying the message returned to
the client.
"""

import math
import re
from typing import Optional

from shared.errors import ValidationError


EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PASSWORD_PATTERN = re.compile(r"^[a-zA-Z0-9!@#$%^&*]{8,}$")
NAME_PATTERN = re.compile(r"^[a-zA-Z\s]{2,50}$")
PHONE_PATTERN = re.compile(r"^\d{10}$")
PINCODE_PATTERN = re.compile(r"^\d{6}$")

ORDER_STATUSES = frozenset({"ACCEPTED", "PREPARING", "READY", "DELIVERED"})


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.fullmatch(email or ""):
        raise ValidationError("Invalid email format")


def validate_password(password: str) -> None:
    if not PASSWORD_PATTERN.fullmatch(password or ""):
        raise ValidationError("Password must be at least 8 characters")


def validate_name(name: str, message: str = "Invalid name format") -> None:
    if not NAME_PATTERN.fullmatch(name or ""):
        raise ValidationError(message)


def validate_phone(phone_number: int) -> None:
    """Phone numbers are exactly ten digits."""
    if isinstance(phone_number, bool) or not PHONE_PATTERN.fullmatch(str(phone_number)):
        raise ValidationError("Invalid phone number format")


def validate_pincode(pincode: str) -> None:
    if not PINCODE_PATTERN.fullmatch(pincode or ""):
        raise ValidationError("invalid pincode format")


def validate_address(address) -> None:
    """Validate an address model with street, locality, state and pincode."""
    if not address.street_name.strip():
        raise ValidationError("street name cannot be empty")
    if not address.locality.strip():
        raise ValidationError("locality cannot be empty")
    if not address.state.strip():
        raise ValidationError("state cannot be empty")
    validate_pincode(address.pincode)


def require(value: Optional[str], field: str) -> str:
    """Reject empty identifiers."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return str(value).strip()


def validate_product(name: str, price: float, stock: int) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if not math.isfinite(price) or price <= 0:
        raise ValidationError("Price must be greater than 0")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")


def validate_stock_delta(value: int, operation: str) -> None:
    if value <= 0:
        raise ValidationError(f"{operation} value must be greater than 0")


def validate_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise ValidationError("Quantity must be greater than 0")


def validate_order_status(status: str) -> None:
    if status not in ORDER_STATUSES:
        raise ValidationError("Invalid order status")
