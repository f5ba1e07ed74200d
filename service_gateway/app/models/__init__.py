"""
Request models for the Gateway.
"""

from .requests import (
    Address,
    AddressRequest,
    AdminLoginRequest,
    CartItemRequest,
    CartProductRequest,
    ClearCartRequest,
    EditProductRequest,
    EditRestaurantRequest,
    LoginRequest,
    PlaceOrderRequest,
    ProductRequest,
    RestaurantLoginRequest,
    RestaurantSignupRequest,
    SignupRequest,
    StockChangeRequest,
    UpdateOrderStatusRequest,
    UpdateProfileRequest,
    VerifyEmailRequest,
)

__all__ = [
    "Address",
    "AddressRequest",
    "AdminLoginRequest",
    "CartItemRequest",
    "CartProductRequest",
    "ClearCartRequest",
    "EditProductRequest",
    "EditRestaurantRequest",
    "LoginRequest",
    "PlaceOrderRequest",
    "ProductRequest",
    "RestaurantLoginRequest",
    "RestaurantSignupRequest",
    "SignupRequest",
    "StockChangeRequest",
    "UpdateOrderStatusRequest",
    "UpdateProfileRequest",
    "VerifyEmailRequest",
]
