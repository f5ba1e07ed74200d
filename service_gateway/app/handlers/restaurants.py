"""
Restaurant routes: signup/login, restaurant profile and product catalogue.

Product mutations pass through the ownership resolver before anything is
forwarded to the restaurant service.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from shared.errors import UpstreamError, ValidationError
from shared.logging import get_logger

from ..adapters.backends import BackendClients
from ..auth.tokens import AuthContext, Role, TokenCodec
from ..domain.auth_middleware import AuthMiddleware
from ..domain.ownership import OwnershipResolver
from ..domain.validators import (
    require,
    validate_address,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
    validate_product,
    validate_stock_delta,
)
from ..models import (
    EditProductRequest,
    EditRestaurantRequest,
    ProductRequest,
    RestaurantLoginRequest,
    RestaurantSignupRequest,
    StockChangeRequest,
)
from .base import forward, respond


def _validate_restaurant_address(address) -> None:
    try:
        validate_address(address)
    except ValidationError as e:
        raise ValidationError(f"invalid address: {e.message}")


def build_restaurant_router(clients: BackendClients, auth: AuthMiddleware, tokens: TokenCodec,
                            ownership: OwnershipResolver) -> APIRouter:
    """Routes served on behalf of the restaurant service."""
    router = APIRouter()
    logger = get_logger("gateway.handlers.restaurants")
    restaurant_only = auth.require(Role.RESTAURANT)
    product_owner = auth.require(Role.RESTAURANT, Role.ADMIN)

    def issue_restaurant_token(response: dict, failure_message: str) -> str:
        restaurant_id = str(response.get("restaurantId") or "")
        if not restaurant_id:
            raise UpstreamError("restaurant", failure_message, cause="restaurant service returned no restaurantId")
        return tokens.issue(restaurant_id, Role.RESTAURANT)

    async def acting_restaurant(context: AuthContext, product_id: str,
                                named_restaurant: Optional[str], action: str) -> str:
        """Restaurant id to send with a product mutation, after the ownership check."""
        restaurant_id = await ownership.verify(context, product_id, action)
        if restaurant_id is not None:
            return restaurant_id
        if named_restaurant:
            return named_restaurant
        return await forward(
            clients.restaurant.get_restaurant_id_by_product(product_id),
            "Failed to resolve product owner",
        )

    # Public

    @router.post("/auth/restaurant/signup")
    async def signup(body: RestaurantSignupRequest):
        """Register a restaurant and return a token for it."""
        validate_email(body.owner_email)
        validate_password(body.password)
        validate_name(body.restaurant_name, "Invalid restaurant name format")
        validate_phone(body.phone_number)
        _validate_restaurant_address(body.address)

        logger.info("Restaurant signup", owner_email=body.owner_email, restaurant_name=body.restaurant_name)
        response = await forward(
            clients.restaurant.signup(
                restaurant_name=body.restaurant_name,
                owner_email=body.owner_email,
                password=body.password,
                phone_number=body.phone_number,
                address=body.address.to_message(),
            ),
            "Restaurant signup failed",
        )
        token = issue_restaurant_token(response, "Restaurant signup failed")
        return respond("Restaurant signup successful", {**response, "token": token})

    @router.post("/auth/restaurant/login")
    async def login(body: RestaurantLoginRequest):
        validate_email(body.owner_email)
        validate_password(body.password)

        logger.info("Restaurant login", owner_email=body.owner_email)
        response = await forward(
            clients.restaurant.login(body.owner_email, body.password),
            "Restaurant login failed",
        )
        token = issue_restaurant_token(response, "Restaurant login failed")
        return respond("Restaurant login successful", {**response, "token": token})

    @router.get("/api/restaurants")
    async def list_restaurants():
        response = await forward(
            clients.restaurant.get_all_restaurants_with_products(),
            "Failed to retrieve restaurants",
        )
        return respond("Restaurants retrieved successfully", response)

    @router.get("/api/restaurants/{restaurant_id}/products")
    async def list_restaurant_products(restaurant_id: str):
        restaurant_id = require(restaurant_id, "restaurantId")
        response = await forward(
            clients.restaurant.get_restaurant_products(restaurant_id),
            "Failed to retrieve products",
        )
        return respond("Products retrieved successfully", response)

    @router.get("/api/products/{product_id}")
    async def get_product(product_id: str):
        product_id = require(product_id, "productId")
        response = await forward(clients.restaurant.get_product(product_id), "Failed to retrieve product")
        return respond("Product retrieved successfully", response)

    @router.get("/api/products/{product_id}/stock")
    async def get_stock(product_id: str):
        product_id = require(product_id, "productId")
        response = await forward(clients.restaurant.get_stock(product_id), "Failed to retrieve stock")
        return respond("Stock retrieved successfully", response)

    @router.get("/api/products/{product_id}/restaurant")
    async def get_product_restaurant(product_id: str):
        product_id = require(product_id, "productId")
        restaurant_id = await forward(
            clients.restaurant.get_restaurant_id_by_product(product_id),
            "Failed to retrieve restaurant",
        )
        return respond("Restaurant retrieved successfully", {"restaurantId": restaurant_id})

    # Restaurant owners

    @router.put("/api/restaurants/profile")
    async def edit_restaurant(body: EditRestaurantRequest, context: AuthContext = Depends(restaurant_only)):
        validate_name(body.restaurant_name, "Invalid restaurant name format")
        validate_phone(body.phone_number)
        _validate_restaurant_address(body.address)

        response = await forward(
            clients.restaurant.edit_restaurant(
                restaurant_id=context.entity_id,
                restaurant_name=body.restaurant_name,
                phone_number=body.phone_number,
                address=body.address.to_message(),
            ),
            "Failed to update restaurant",
        )
        return respond("Restaurant updated successfully", response)

    @router.post("/api/restaurants/products")
    async def add_product(body: ProductRequest, context: AuthContext = Depends(restaurant_only)):
        validate_product(body.name, body.price, body.stock)
        response = await forward(
            clients.restaurant.add_product(
                restaurant_id=context.entity_id,
                name=body.name,
                description=body.description,
                price=body.price,
                stock=body.stock,
                category=body.category,
            ),
            "Failed to add product",
        )
        return respond("Product added successfully", response)

    @router.put("/api/restaurants/products/{product_id}")
    async def edit_product(product_id: str, body: EditProductRequest,
                           context: AuthContext = Depends(product_owner)):
        product_id = require(product_id, "productId")
        validate_product(body.name, body.price, body.stock)

        restaurant_id = await acting_restaurant(context, product_id, body.restaurant_id, "edit")
        response = await forward(
            clients.restaurant.edit_product(
                restaurant_id=restaurant_id,
                product_id=product_id,
                name=body.name,
                description=body.description,
                price=body.price,
                stock=body.stock,
                category=body.category,
            ),
            "Failed to update product",
        )
        return respond("Product updated successfully", response)

    @router.delete("/api/restaurants/products/{product_id}")
    async def delete_product(product_id: str,
                             restaurant_id: Optional[str] = Query(default=None, alias="restaurantId"),
                             context: AuthContext = Depends(product_owner)):
        product_id = require(product_id, "productId")

        owner_id = await acting_restaurant(context, product_id, restaurant_id, "delete")
        response = await forward(
            clients.restaurant.delete_product(owner_id, product_id),
            "Failed to delete product",
        )
        return respond("Product deleted successfully", response)

    @router.post("/api/restaurants/products/{product_id}/stock/increment")
    async def increment_stock(product_id: str, body: StockChangeRequest,
                              context: AuthContext = Depends(product_owner)):
        product_id = require(product_id, "productId")
        validate_stock_delta(body.value, "Increment")

        restaurant_id = await acting_restaurant(context, product_id, body.restaurant_id, "modify")
        response = await forward(
            clients.restaurant.increment_stock(restaurant_id, product_id, body.value),
            "Failed to increment stock",
        )
        return respond("Stock incremented successfully", response)

    @router.post("/api/restaurants/products/{product_id}/stock/decrement")
    async def decrement_stock(product_id: str, body: StockChangeRequest,
                              context: AuthContext = Depends(product_owner)):
        product_id = require(product_id, "productId")
        validate_stock_delta(body.value, "Decrement")

        restaurant_id = await acting_restaurant(context, product_id, body.restaurant_id, "modify")
        response = await forward(
            clients.restaurant.decrement_stock(restaurant_id, product_id, body.value),
            "Failed to decrement stock",
        )
        return respond("Stock decremented successfully", response)

    return router
