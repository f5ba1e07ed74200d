"""
Shared error handling for the FoodBuddy access gateway.

Every error raised while serving a request derives from ``GatewayError`` and
carries the HTTP status it maps to; a single exception handler in
``shared.base_service`` renders it as a failed envelope.
"""

from enum import Enum
from typing import Dict, Any, Optional

from shared.responses import Envelope, error_response


class AuthFailure(str, Enum):
    """Reasons a request fails authentication or authorization."""

    MISSING = "missing"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    FORBIDDEN = "forbidden"


_AUTH_MESSAGES = {
    AuthFailure.MISSING: "Authorization header is required",
    AuthFailure.MALFORMED: "Invalid token format",
    AuthFailure.EXPIRED: "Token has expired",
    AuthFailure.FORBIDDEN: "Access denied",
}


class GatewayError(Exception):
    """Base exception for gateway errors."""

    status_code: int = 500

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @property
    def error(self) -> Optional[str]:
        """Detail string surfaced in the envelope ``error`` field."""
        return self.details.get("error")

    def to_response(self) -> Envelope:
        """Convert to a failed envelope."""
        return error_response(self.message, self.error)


class ValidationError(GatewayError):
    """Request body or parameter failed validation."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class AuthError(GatewayError):
    """Authentication (401) or authorization (403) failure."""

    def __init__(
        self,
        kind: AuthFailure,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.kind = kind
        status_code = 403 if kind is AuthFailure.FORBIDDEN else 401
        super().__init__(
            f"AUTH_{kind.name}",
            message or _AUTH_MESSAGES[kind],
            details,
            status_code=status_code,
        )


class UpstreamError(GatewayError):
    """A backend call failed; the backend detail is carried verbatim."""

    status_code = 500

    def __init__(
        self,
        service: str,
        message: str = "Upstream service error",
        cause: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.service = service
        self.cause = cause
        merged = dict(details or {})
        if cause is not None:
            merged.setdefault("error", cause)
        super().__init__("UPSTREAM_ERROR", message, merged)

    def reword(self, message: str) -> "UpstreamError":
        """Return the same failure with an operation-specific message."""
        return type(self)(self.service, message, self.cause, self.details)


class NotFoundError(UpstreamError):
    """The backend reported that the requested entity does not exist."""

    status_code = 404

    def __init__(
        self,
        service: str,
        message: str = "Resource not found",
        cause: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(service, message, cause, details)
        self.code = "NOT_FOUND"


class RateLimitError(GatewayError):
    """Rate limiting errors."""

    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded", details: Optional[Dict[str, Any]] = None):
        super().__init__("RATE_LIMIT_ERROR", message, details)


class ConfigurationError(GatewayError):
    """Invalid configuration detected at startup."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)
