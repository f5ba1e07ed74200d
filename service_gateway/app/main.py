"""
API Gateway service for FoodBuddy.
"""

import sys
from typing import Dict, Optional

from shared.base_service import BaseService
from shared.config import GatewayConfig, get_config
from shared.errors import ConfigurationError, UpstreamError
from shared.logging import get_logger

from .adapters.backends import BackendClients, create_backend_clients
from .auth.tokens import TokenCodec
from .domain.auth_middleware import AuthMiddleware
from .domain.ownership import OwnershipResolver
from .handlers import build_admin_router, build_order_router, build_restaurant_router, build_user_router
from .ratelimit.visitor_limiter import RateLimitMiddleware, VisitorRateLimiter


class GatewayService(BaseService):
    """API Gateway service implementation.

    Configuration, backend clients and the rate limiter are created once
    here and handed to the components that use them. Tests pass their own
    ``clients`` to avoid opening gRPC channels.
    """

    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        clients: Optional[BackendClients] = None,
        rate_limiter: Optional[VisitorRateLimiter] = None,
    ):
        config = config or get_config()
        self.rate_limiter = rate_limiter or VisitorRateLimiter(
            limit=config.rate_limit_requests,
            reset_interval=config.rate_limit_reset_seconds,
            ttl=config.rate_limit_ttl_seconds,
        )
        super().__init__(config)

        self.token_codec = TokenCodec(self.config.jwt_secret, ttl_hours=self.config.token_ttl_hours)
        self._owns_clients = clients is None
        self.clients = clients or create_backend_clients(self.config, self.metrics)
        self.auth_middleware = AuthMiddleware(self.token_codec, self.clients.user, self.metrics)
        self.ownership = OwnershipResolver(self.clients.restaurant)

        @self.app.on_event("startup")
        async def _startup():
            if self._owns_clients:
                try:
                    await self.clients.connect()
                except UpstreamError as e:
                    self.logger.critical(
                        "Backend service unavailable at startup",
                        service=e.service,
                        error=e.cause,
                    )
                    raise
            self.rate_limiter.start(self.config.rate_limit_sweep_seconds)
            self.logger.info("API Gateway started", port=self.config.port, env=self.config.env)

        @self.app.on_event("shutdown")
        async def _shutdown():
            await self.rate_limiter.stop()
            if self._owns_clients:
                await self.clients.close()

        self._setup_gateway_routes()
        self._setup_service_routes()

    def _setup_middleware(self):
        """Rate limiting sits inside the request-context middleware."""
        self.app.add_middleware(
            RateLimitMiddleware,
            rate_limiter=self.rate_limiter,
            metrics=self.metrics,
        )
        super()._setup_middleware()

    def _setup_gateway_routes(self):
        """Set up gateway info routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": self.service_name,
                "message": "FoodBuddy API Gateway",
                "version": self.config.version,
            }

    def _setup_service_routes(self):
        """Mount the routers fronting each backend service."""
        self.app.include_router(build_user_router(self.clients, self.auth_middleware, self.token_codec))
        self.app.include_router(
            build_restaurant_router(self.clients, self.auth_middleware, self.token_codec, self.ownership)
        )
        self.app.include_router(build_order_router(self.clients, self.auth_middleware))
        self.app.include_router(build_admin_router(self.clients, self.auth_middleware, self.token_codec))

    async def _check_dependencies(self) -> Dict[str, str]:
        """Report backend channel connectivity."""
        if not self._owns_clients:
            return {}
        return self.clients.states()


def create_app(
    config: Optional[GatewayConfig] = None,
    clients: Optional[BackendClients] = None,
    rate_limiter: Optional[VisitorRateLimiter] = None,
):
    """Create FastAPI application."""
    service = GatewayService(config, clients, rate_limiter)
    return service.app


def main():
    try:
        service = GatewayService()
    except ConfigurationError as e:
        get_logger("api_gateway.main").critical("Invalid gateway configuration", error=e.message)
        sys.exit(1)
    service.run()


if __name__ == "__main__":
    main()
