"""
Rate limiting package for the Gateway.

Holds the in-memory per-address visitor limiter and the middleware that
rejects over-limit traffic before it reaches authentication or handlers.
"""

from .visitor_limiter import RateLimitMiddleware, Visitor, VisitorRateLimiter, get_client_address

__all__ = [
    "RateLimitMiddleware",
    "Visitor",
    "VisitorRateLimiter",
    "get_client_address",
]
