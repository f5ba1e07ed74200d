"""
Authentication middleware for Gateway.

Protected routes declare the roles they accept through ``AuthMiddleware.require``,
which returns a FastAPI dependency running the chain: bearer extraction, token
validation, role check and, for user routes, a ban check against the user
service.
"""

from typing import Awaitable, Callable, Optional, Sequence

from fastapi import Request

from shared.errors import AuthError, AuthFailure, UpstreamError
from shared.logging import get_logger, set_identity_context
from shared.metrics import MetricsCollector

from ..adapters.user_client import UserClient
from ..auth.tokens import AuthContext, Role, TokenCodec


ROLE_DENIALS = {
    Role.USER: "User access required",
    Role.RESTAURANT: "Restaurant access required",
    Role.ADMIN: "Admin access required",
}


class AuthMiddleware:
    """Authentication and role gate for protected routes."""

    def __init__(self, token_codec: TokenCodec, user_client: UserClient,
                 metrics: Optional[MetricsCollector] = None):
        self.token_codec = token_codec
        self.user_client = user_client
        self.metrics = metrics
        self.logger = get_logger("gateway.auth_middleware")

    def _fail(self, error: AuthError) -> AuthError:
        self.logger.warning("Request rejected", reason=error.kind.value, message=error.message)
        if self.metrics is not None:
            self.metrics.record_auth_failure(error.kind.value)
        return error

    async def authenticate_request(self, request: Request) -> AuthContext:
        """Authenticate the request from its ``Authorization: Bearer`` header."""
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            raise self._fail(AuthError(AuthFailure.MISSING))

        if not auth_header.startswith("Bearer "):
            raise self._fail(AuthError(AuthFailure.MALFORMED))

        token = auth_header[7:].strip()
        if not token:
            raise self._fail(AuthError(AuthFailure.MALFORMED, "Authorization header contained empty bearer token"))

        try:
            context = self.token_codec.validate(token)
        except AuthError as e:
            raise self._fail(e)

        request.state.auth_context = context
        set_identity_context(context.entity_id, context.role.value)
        return context

    def authorize_role(self, context: AuthContext, allowed: Sequence[Role]) -> None:
        """Reject callers whose role is not in ``allowed``."""
        if context.role not in allowed:
            raise self._fail(AuthError(AuthFailure.FORBIDDEN, ROLE_DENIALS[allowed[0]]))

    async def ensure_not_banned(self, context: AuthContext) -> None:
        """Reject users the user service reports as banned."""
        try:
            banned = await self.user_client.is_banned(context.entity_id)
        except UpstreamError as e:
            raise e.reword("Failed to verify account status")
        if banned:
            raise self._fail(AuthError(AuthFailure.FORBIDDEN, "User account is banned"))

    def require(self, *roles: Role, check_ban: bool = False) -> Callable[[Request], Awaitable[AuthContext]]:
        """Build a dependency admitting only callers holding one of ``roles``."""
        if not roles:
            raise ValueError("at least one role is required")

        async def dependency(request: Request) -> AuthContext:
            context = await self.authenticate_request(request)
            self.authorize_role(context, roles)
            if check_ban:
                await self.ensure_not_banned(context)
            return context

        return dependency
