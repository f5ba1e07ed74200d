"""
Adapters package for the Gateway Service.

Contains gRPC client wrappers for the backend services (user, restaurant,
order/cart, admin). These adapters encapsulate:

- Method names and request shapes
- Per-call deadlines
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .admin_client import AdminClient
from .backends import BackendClients, create_backend_clients
from .order_cart_client import OrderCartClient
from .restaurant_client import RestaurantClient
from .rpc import RpcChannel, RpcClient
from .user_client import UserClient

__all__ = [
    "AdminClient",
    "BackendClients",
    "OrderCartClient",
    "RestaurantClient",
    "RpcChannel",
    "RpcClient",
    "UserClient",
    "create_backend_clients",
]
