"""
Authentication helpers for the gateway: bearer token codec and caller roles.
"""

from .tokens import AuthContext, Role, TokenCodec

__all__ = [
    "AuthContext",
    "Role",
    "TokenCodec",
]
