"""
Domain utilities for the Gateway Service.

Includes the role gate, the product ownership resolver and the field
validators that run before requests are forwarded.
"""

from .auth_middleware import AuthMiddleware
from .ownership import OwnershipResolver

__all__ = [
    "AuthMiddleware",
    "OwnershipResolver",
]
