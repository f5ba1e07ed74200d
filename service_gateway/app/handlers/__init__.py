"""
Route handlers grouped by the backend service they front.
"""

from .admin import build_admin_router
from .orders import build_order_router
from .restaurants import build_restaurant_router
from .users import build_user_router

__all__ = [
    "build_admin_router",
    "build_order_router",
    "build_restaurant_router",
    "build_user_router",
]
