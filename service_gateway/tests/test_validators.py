"""
Unit tests for request field validators.
"""

import pytest

from service_gateway.app.domain import validators
from service_gateway.app.models.requests import Address
from shared.errors import ValidationError


def make_address(**overrides) -> Address:
    fields = {
        "street_name": "MG Road",
        "locality": "Indiranagar",
        "state": "Karnataka",
        "pincode": "560038",
    }
    fields.update(overrides)
    return Address(**fields)


class TestFieldValidators:
    """Test cases for the individual field validators."""

    @pytest.mark.parametrize("email", ["john.doe@example.com", "a_b+c@mail.co.in"])
    def test_valid_email(self, email):
        validators.validate_email(email)

    @pytest.mark.parametrize("email", ["", "john", "john@", "john@example", "john doe@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_email(email)

        assert exc_info.value.message == "Invalid email format"
        assert exc_info.value.status_code == 400

    def test_valid_password(self):
        validators.validate_password("Passw0rd!")

    @pytest.mark.parametrize("password", ["", "short", "has space1", "pass~word"])
    def test_invalid_password(self, password):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_password(password)

        assert exc_info.value.message == "Password must be at least 8 characters"

    @pytest.mark.parametrize("name", ["Jo", "Mary Ann"])
    def test_valid_name(self, name):
        validators.validate_name(name)

    @pytest.mark.parametrize("name", ["J", "R2D2", "x" * 51])
    def test_invalid_name_uses_given_message(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_name(name, "Invalid first name format")

        assert exc_info.value.message == "Invalid first name format"

    def test_valid_phone(self):
        validators.validate_phone(9876543210)

    @pytest.mark.parametrize("phone", [12345, 98765432101, True])
    def test_invalid_phone(self, phone):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_phone(phone)

        assert exc_info.value.message == "Invalid phone number format"

    @pytest.mark.parametrize("pincode", ["12345", "1234567", "abcdef", ""])
    def test_invalid_pincode(self, pincode):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_pincode(pincode)

        assert exc_info.value.message == "invalid pincode format"

    def test_require_strips_value(self):
        assert validators.require("  product-1 ", "Product ID") == "product-1"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_require_rejects_empty(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validators.require(value, "Product ID")

        assert exc_info.value.message == "Product ID is required"


class TestAddressValidator:
    """Test cases for address validation."""

    def test_valid_address(self):
        validators.validate_address(make_address())

    @pytest.mark.parametrize(
        "field,message",
        [
            ("street_name", "street name cannot be empty"),
            ("locality", "locality cannot be empty"),
            ("state", "state cannot be empty"),
        ],
    )
    def test_blank_field_rejected(self, field, message):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_address(make_address(**{field: "   "}))

        assert exc_info.value.message == message

    def test_bad_pincode_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_address(make_address(pincode="5600"))

        assert exc_info.value.message == "invalid pincode format"


class TestProductValidators:
    """Test cases for product, stock and cart quantity validation."""

    def test_valid_product(self):
        validators.validate_product("Paneer Tikka", 249.0, 0)

    @pytest.mark.parametrize(
        "name,price,stock,message",
        [
            ("  ", 10.0, 1, "Product name is required"),
            ("Dosa", 0, 1, "Price must be greater than 0"),
            ("Dosa", -5.0, 1, "Price must be greater than 0"),
            ("Dosa", float("nan"), 1, "Price must be greater than 0"),
            ("Dosa", float("inf"), 1, "Price must be greater than 0"),
            ("Dosa", 10.0, -1, "Stock cannot be negative"),
        ],
    )
    def test_invalid_product(self, name, price, stock, message):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_product(name, price, stock)

        assert exc_info.value.message == message

    @pytest.mark.parametrize("operation", ["Increment", "Decrement"])
    def test_stock_delta_must_be_positive(self, operation):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_stock_delta(0, operation)

        assert exc_info.value.message == f"{operation} value must be greater than 0"

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            validators.validate_quantity(0)

    @pytest.mark.parametrize("status", sorted(validators.ORDER_STATUSES))
    def test_known_order_statuses(self, status):
        validators.validate_order_status(status)

    @pytest.mark.parametrize("status", ["accepted", "CANCELLED", ""])
    def test_unknown_order_status(self, status):
        with pytest.raises(ValidationError) as exc_info:
            validators.validate_order_status(status)

        assert exc_info.value.message == "Invalid order status"
