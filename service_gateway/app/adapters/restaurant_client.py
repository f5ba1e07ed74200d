"""
Restaurant service client for Gateway.
"""

from typing import Any, Dict, Optional

from .rpc import RpcClient


class RestaurantClient(RpcClient):
    """Client for communicating with the restaurant service."""

    service_name = "restaurant"
    full_service_name = "restaurant.RestaurantService"

    async def signup(self, restaurant_name: str, owner_email: str, password: str,
                     phone_number: int, address: Dict[str, Any]) -> Dict[str, Any]:
        return await self.call("RestaurantSignup", {
            "restaurantName": restaurant_name,
            "ownerEmail": owner_email,
            "password": password,
            "phoneNumber": phone_number,
            "address": address,
        })

    async def login(self, owner_email: str, password: str) -> Dict[str, Any]:
        """Check credentials; the response carries ``restaurantId``."""
        return await self.call("RestaurantLogin", {"ownerEmail": owner_email, "password": password})

    async def edit_restaurant(self, restaurant_id: str, restaurant_name: str,
                              phone_number: int, address: Dict[str, Any]) -> Dict[str, Any]:
        return await self.call("EditRestaurant", {
            "restaurantId": restaurant_id,
            "restaurantName": restaurant_name,
            "phoneNumber": phone_number,
            "address": address,
        })

    async def get_restaurant(self, restaurant_id: str) -> Dict[str, Any]:
        return await self.call("GetRestaurantByID", {"restaurantId": restaurant_id})

    async def get_restaurant_products(self, restaurant_id: str) -> Dict[str, Any]:
        return await self.call("GetRestaurantProductsByID", {"restaurantId": restaurant_id})

    async def get_all_restaurants_with_products(self) -> Dict[str, Any]:
        return await self.call("GetAllRestaurantWithProducts", {})

    async def add_product(self, restaurant_id: str, name: str, description: str,
                          price: float, stock: int, category: Optional[str]) -> Dict[str, Any]:
        return await self.call("AddProduct", {
            "restaurantId": restaurant_id,
            "name": name,
            "description": description,
            "price": price,
            "stock": stock,
            "category": category or "",
        })

    async def edit_product(self, restaurant_id: str, product_id: str, name: str, description: str,
                           price: float, stock: int, category: Optional[str]) -> Dict[str, Any]:
        return await self.call("EditProduct", {
            "restaurantId": restaurant_id,
            "productId": product_id,
            "name": name,
            "description": description,
            "price": price,
            "stock": stock,
            "category": category or "",
        })

    async def delete_product(self, restaurant_id: str, product_id: str) -> Dict[str, Any]:
        return await self.call("DeleteProductByID", {
            "restaurantId": restaurant_id,
            "productId": product_id,
        })

    async def get_product(self, product_id: str) -> Dict[str, Any]:
        return await self.call("GetProductByID", {"productId": product_id})

    async def get_stock(self, product_id: str) -> Dict[str, Any]:
        return await self.call("GetStockByProductID", {"productId": product_id})

    async def increment_stock(self, restaurant_id: str, product_id: str, value: int) -> Dict[str, Any]:
        # Method name matches the backend contract as deployed.
        return await self.call("IncremenentProductStockByValue", {
            "restaurantId": restaurant_id,
            "productId": product_id,
            "value": value,
        })

    async def decrement_stock(self, restaurant_id: str, product_id: str, value: int) -> Dict[str, Any]:
        return await self.call("DecrementProductStockByValue", {
            "restaurantId": restaurant_id,
            "productId": product_id,
            "value": value,
        })

    async def get_restaurant_id_by_product(self, product_id: str) -> str:
        """Resolve the restaurant that owns ``product_id``."""
        response = await self.call("GetRestaurantIDviaProductID", {"productId": product_id})
        return str(response.get("restaurantId", ""))

    async def ban_restaurant(self, restaurant_id: str) -> Dict[str, Any]:
        return await self.call("BanRestaurant", {"restaurantId": restaurant_id})

    async def unban_restaurant(self, restaurant_id: str) -> Dict[str, Any]:
        return await self.call("UnbanRestaurant", {"restaurantId": restaurant_id})
