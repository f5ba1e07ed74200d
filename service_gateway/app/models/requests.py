"""
Request bodies accepted by the gateway.

Field names are camelCase on the wire and snake_case in Python. Binding
failures surface as 400 "Invalid request format" envelopes.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Base for request bodies: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Address(RequestModel):
    street_name: str
    locality: str
    state: str
    pincode: str

    def to_message(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# Users

class LoginRequest(RequestModel):
    email: str
    password: str


class SignupRequest(RequestModel):
    email: str
    password: str
    first_name: str
    last_name: str
    phone_number: int
    address: Address


class UpdateProfileRequest(RequestModel):
    name: str
    phone_number: int


class VerifyEmailRequest(RequestModel):
    verification_code: str


class AddressRequest(RequestModel):
    address: Address


# Restaurants and products

class RestaurantLoginRequest(RequestModel):
    owner_email: str
    password: str


class RestaurantSignupRequest(RequestModel):
    restaurant_name: str
    owner_email: str
    password: str
    phone_number: int
    address: Address


class EditRestaurantRequest(RequestModel):
    restaurant_name: str
    phone_number: int
    address: Address


class ProductRequest(RequestModel):
    name: str
    description: str = ""
    price: float
    stock: int
    category: Optional[str] = None


class EditProductRequest(ProductRequest):
    # Admins name the restaurant they act for; restaurants use their own id.
    restaurant_id: Optional[str] = None


class StockChangeRequest(RequestModel):
    value: int
    restaurant_id: Optional[str] = None


# Cart and orders

class CartItemRequest(RequestModel):
    restaurant_id: str
    product_id: str
    quantity: int


class CartProductRequest(RequestModel):
    restaurant_id: str
    product_id: str


class ClearCartRequest(RequestModel):
    restaurant_id: str


class PlaceOrderRequest(RequestModel):
    restaurant_id: str
    delivery_address_id: str


class UpdateOrderStatusRequest(RequestModel):
    new_status: str


# Admin

class AdminLoginRequest(RequestModel):
    email: str
    password: str
