"""
Order and cart service client for Gateway.
"""

from typing import Any, Dict, Optional

from .rpc import RpcClient


class OrderCartClient(RpcClient):
    """Client for communicating with the order/cart service."""

    service_name = "order_cart"
    full_service_name = "ordercart.OrderCartService"

    # Cart

    async def add_product_to_cart(self, user_id: str, restaurant_id: str,
                                  product_id: str, quantity: int) -> Dict[str, Any]:
        return await self.call("AddProductToCart", {
            "userId": user_id,
            "restaurantId": restaurant_id,
            "productId": product_id,
            "quantity": quantity,
        })

    async def get_cart_items(self, user_id: str, restaurant_id: str) -> Dict[str, Any]:
        return await self.call("GetCartItems", {"userId": user_id, "restaurantId": restaurant_id})

    async def get_all_carts(self, user_id: str) -> Dict[str, Any]:
        return await self.call("GetAllCarts", {"userId": user_id})

    async def increment_quantity(self, user_id: str, restaurant_id: str, product_id: str) -> Dict[str, Any]:
        return await self.call("IncrementProductQuantity", {
            "userId": user_id,
            "restaurantId": restaurant_id,
            "productId": product_id,
        })

    async def decrement_quantity(self, user_id: str, restaurant_id: str, product_id: str) -> Dict[str, Any]:
        return await self.call("DecrementProductQuantity", {
            "userId": user_id,
            "restaurantId": restaurant_id,
            "productId": product_id,
        })

    async def remove_product(self, user_id: str, restaurant_id: str, product_id: str) -> Dict[str, Any]:
        return await self.call("RemoveProductFromCart", {
            "userId": user_id,
            "restaurantId": restaurant_id,
            "productId": product_id,
        })

    async def clear_cart(self, user_id: str, restaurant_id: str) -> Dict[str, Any]:
        return await self.call("ClearCart", {"userId": user_id, "restaurantId": restaurant_id})

    # Orders

    async def place_order(self, user_id: str, restaurant_id: str, delivery_address_id: str) -> Dict[str, Any]:
        return await self.call("PlaceOrderByRestID", {
            "userId": user_id,
            "restaurantId": restaurant_id,
            "deliveryAddressId": delivery_address_id,
        })

    async def get_user_orders(self, user_id: str, status: Optional[str] = None) -> Dict[str, Any]:
        return await self.call("GetOrderDetailsAll", {"userId": user_id, "status": status or ""})

    async def get_order(self, user_id: str, order_id: str) -> Dict[str, Any]:
        return await self.call("GetOrderDetailsByID", {"userId": user_id, "orderId": order_id})

    async def cancel_order(self, user_id: str, order_id: str) -> Dict[str, Any]:
        return await self.call("CancelOrder", {"userId": user_id, "orderId": order_id})

    async def update_order_status(self, restaurant_id: str, order_id: str, new_status: str) -> Dict[str, Any]:
        return await self.call("UpdateOrderStatus", {
            "restaurantId": restaurant_id,
            "orderId": order_id,
            "newStatus": new_status,
        })

    async def get_restaurant_orders(self, restaurant_id: str, status: Optional[str] = None) -> Dict[str, Any]:
        return await self.call("GetRestaurantOrders", {"restaurantId": restaurant_id, "status": status or ""})

    async def confirm_order(self, restaurant_id: str, order_id: str) -> Dict[str, Any]:
        return await self.call("ConfirmOrder", {"restaurantId": restaurant_id, "orderId": order_id})
