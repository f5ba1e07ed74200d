"""
Cart and order routes, forwarded to the order/cart service.

User routes act on the caller's own cart and orders; restaurant routes act
on orders placed with the calling restaurant.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from shared.errors import ValidationError
from shared.logging import get_logger

from ..adapters.backends import BackendClients
from ..auth.tokens import AuthContext, Role
from ..domain.auth_middleware import AuthMiddleware
from ..domain.validators import require, validate_order_status, validate_quantity
from ..models import (
    CartItemRequest,
    CartProductRequest,
    ClearCartRequest,
    PlaceOrderRequest,
    UpdateOrderStatusRequest,
)
from .base import forward, respond


def build_order_router(clients: BackendClients, auth: AuthMiddleware) -> APIRouter:
    """Routes served on behalf of the order/cart service."""
    router = APIRouter()
    logger = get_logger("gateway.handlers.orders")
    user_only = auth.require(Role.USER, check_ban=True)
    restaurant_only = auth.require(Role.RESTAURANT)

    # Cart

    @router.get("/api/cart")
    async def get_cart(restaurant_id: str = Query(default="", alias="restaurantId"),
                       context: AuthContext = Depends(user_only)):
        restaurant_id = require(restaurant_id, "restaurantId")
        response = await forward(
            clients.order_cart.get_cart_items(context.entity_id, restaurant_id),
            "Failed to retrieve cart",
        )
        return respond("Cart retrieved successfully", response)

    @router.get("/api/cart/all")
    async def get_all_carts(context: AuthContext = Depends(user_only)):
        response = await forward(clients.order_cart.get_all_carts(context.entity_id), "Failed to retrieve carts")
        return respond("Carts retrieved successfully", response)

    @router.post("/api/cart/items")
    async def add_to_cart(body: CartItemRequest, context: AuthContext = Depends(user_only)):
        restaurant_id = require(body.restaurant_id, "restaurantId")
        product_id = require(body.product_id, "productId")
        validate_quantity(body.quantity)

        response = await forward(
            clients.order_cart.add_product_to_cart(context.entity_id, restaurant_id, product_id, body.quantity),
            "Failed to add product to cart",
        )
        return respond("Product added to cart successfully", response)

    @router.post("/api/cart/items/increment")
    async def increment_quantity(body: CartProductRequest, context: AuthContext = Depends(user_only)):
        restaurant_id = require(body.restaurant_id, "restaurantId")
        product_id = require(body.product_id, "productId")
        response = await forward(
            clients.order_cart.increment_quantity(context.entity_id, restaurant_id, product_id),
            "Failed to increment quantity",
        )
        return respond("Quantity incremented successfully", response)

    @router.post("/api/cart/items/decrement")
    async def decrement_quantity(body: CartProductRequest, context: AuthContext = Depends(user_only)):
        restaurant_id = require(body.restaurant_id, "restaurantId")
        product_id = require(body.product_id, "productId")
        response = await forward(
            clients.order_cart.decrement_quantity(context.entity_id, restaurant_id, product_id),
            "Failed to decrement quantity",
        )
        return respond("Quantity decremented successfully", response)

    @router.post("/api/cart/items/remove")
    async def remove_from_cart(body: CartProductRequest, context: AuthContext = Depends(user_only)):
        restaurant_id = require(body.restaurant_id, "restaurantId")
        product_id = require(body.product_id, "productId")
        response = await forward(
            clients.order_cart.remove_product(context.entity_id, restaurant_id, product_id),
            "Failed to remove product from cart",
        )
        return respond("Product removed from cart successfully", response)

    @router.post("/api/cart/clear")
    async def clear_cart(body: ClearCartRequest, context: AuthContext = Depends(user_only)):
        restaurant_id = require(body.restaurant_id, "restaurantId")
        response = await forward(
            clients.order_cart.clear_cart(context.entity_id, restaurant_id),
            "Failed to clear cart",
        )
        return respond("Cart cleared successfully", response)

    # Orders placed by users

    @router.post("/api/orders")
    async def place_order(body: PlaceOrderRequest, context: AuthContext = Depends(user_only)):
        """Place an order for the caller's cart at one restaurant.

        The delivery address must belong to the caller and the restaurant must
        not be banned.
        """
        restaurant_id = require(body.restaurant_id, "restaurantId")
        address_id = require(body.delivery_address_id, "deliveryAddressId")

        address_valid = await forward(
            clients.user.validate_address(context.entity_id, address_id),
            "Failed to validate delivery address",
        )
        if not address_valid:
            raise ValidationError("Invalid delivery address")

        restaurant = await forward(
            clients.restaurant.get_restaurant(restaurant_id),
            "Failed to get restaurant details",
        )
        if restaurant.get("isBanned"):
            raise ValidationError("Restaurant is currently unavailable")

        response = await forward(
            clients.order_cart.place_order(context.entity_id, restaurant_id, address_id),
            "Failed to place order",
        )
        logger.info("Order placed", restaurant_id=restaurant_id, order_id=response.get("orderId"))
        return respond("Order placed successfully", response)

    @router.get("/api/orders")
    async def list_orders(status: Optional[str] = Query(default=None),
                          context: AuthContext = Depends(user_only)):
        response = await forward(
            clients.order_cart.get_user_orders(context.entity_id, status),
            "Failed to retrieve orders",
        )
        return respond("Orders retrieved successfully", response)

    @router.get("/api/orders/{order_id}")
    async def get_order(order_id: str, context: AuthContext = Depends(user_only)):
        order_id = require(order_id, "orderId")
        response = await forward(
            clients.order_cart.get_order(context.entity_id, order_id),
            "Failed to retrieve order",
        )
        return respond("Order retrieved successfully", response)

    @router.post("/api/orders/{order_id}/cancel")
    async def cancel_order(order_id: str, context: AuthContext = Depends(user_only)):
        order_id = require(order_id, "orderId")
        response = await forward(
            clients.order_cart.cancel_order(context.entity_id, order_id),
            "Failed to cancel order",
        )
        return respond("Order cancelled successfully", response)

    # Orders received by restaurants

    @router.get("/api/restaurants/orders")
    async def list_restaurant_orders(status: Optional[str] = Query(default=None),
                                     context: AuthContext = Depends(restaurant_only)):
        response = await forward(
            clients.order_cart.get_restaurant_orders(context.entity_id, status),
            "Failed to retrieve restaurant orders",
        )
        return respond("Orders retrieved successfully", response)

    @router.post("/api/restaurants/orders/{order_id}/status")
    async def update_order_status(order_id: str, body: UpdateOrderStatusRequest,
                                  context: AuthContext = Depends(restaurant_only)):
        order_id = require(order_id, "orderId")
        validate_order_status(body.new_status)
        response = await forward(
            clients.order_cart.update_order_status(context.entity_id, order_id, body.new_status),
            "Failed to update order status",
        )
        return respond("Order status updated successfully", response)

    @router.post("/api/restaurants/orders/{order_id}/confirm")
    async def confirm_order(order_id: str, context: AuthContext = Depends(restaurant_only)):
        order_id = require(order_id, "orderId")
        response = await forward(
            clients.order_cart.confirm_order(context.entity_id, order_id),
            "Failed to confirm order",
        )
        return respond("Order confirmed successfully", response)

    return router
