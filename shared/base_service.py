"""
Base service class for the FoodBuddy access gateway.
"""

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Dict
import time
import os

from shared.config import GatewayConfig
from shared.logging import clear_context, configure_logging, get_logger, set_request_id
from shared.metrics import get_metrics_collector
from shared.errors import GatewayError
from shared.responses import error_response


class BaseService:
    """Base service class with common functionality."""

    def __init__(self, config: GatewayConfig):
        self.config = config
        self.service_name = config.service_name
        self._start_time = time.time()

        # Configure logging
        configure_logging(
            self.service_name,
            self.config.log_level,
            version=self.config.version,
            env=self.config.env,
            log_dir=self.config.log_dir,
        )
        self.logger = get_logger(f"{self.service_name}.service")
        self.metrics = get_metrics_collector(self.service_name, self.config.version)

        # Create FastAPI app
        self.app = self._create_app()

        # Set up middleware
        self._setup_middleware()

        # Set up routes
        self._setup_routes()

    def _create_app(self) -> FastAPI:
        """Create FastAPI application."""
        return FastAPI(
            title="FoodBuddy API Gateway",
            description="HTTP entry point for the FoodBuddy user, restaurant, order and admin services",
            version=self.config.version,
            docs_url="/docs" if self.config.env == "local" else None,
            redoc_url="/redoc" if self.config.env == "local" else None,
        )

    def _setup_middleware(self):
        """Set up middleware."""

        # CORS middleware
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"] if self.config.env == "local" else [],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        # Request ID and timing middleware
        @self.app.middleware("http")
        async def add_request_context(request: Request, call_next):
            request_id = set_request_id(request.headers.get("X-Request-ID"))
            start_time = time.time()

            try:
                response = await call_next(request)

                duration = time.time() - start_time

                self.metrics.record_http_request(
                    method=request.method,
                    endpoint=request.url.path,
                    status_code=response.status_code,
                    duration=duration
                )

                self.logger.info(
                    "HTTP request",
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    duration_ms=round(duration * 1000, 2)
                )

                response.headers["X-Request-ID"] = request_id
                return response
            finally:
                clear_context()

    def _setup_routes(self):
        """Set up common routes."""

        @self.app.get("/health")
        async def health_check():
            """Health check endpoint."""
            try:
                dependencies = await self._check_dependencies()

                self.metrics.record_health_check("ok")

                return {
                    "service": self.service_name,
                    "status": "ok",
                    "uptime_seconds": self._get_uptime(),
                    "dependencies": dependencies,
                    "version": self.config.version,
                    "commit": os.getenv("GIT_COMMIT", "unknown")
                }
            except Exception as e:
                self.logger.error("Health check failed", error=str(e))
                self.metrics.record_health_check("error")
                return JSONResponse(
                    status_code=503,
                    content={
                        "service": self.service_name,
                        "status": "error",
                        "error": str(e)
                    }
                )

        @self.app.get("/metrics")
        async def metrics_endpoint():
            """Prometheus metrics endpoint."""
            return Response(
                content=self.metrics.render(),
                media_type=self.metrics.content_type
            )

        # Error handlers
        @self.app.exception_handler(GatewayError)
        async def gateway_exception_handler(request: Request, exc: GatewayError):
            """Render a GatewayError as a failed envelope."""
            log = self.logger.error if exc.status_code >= 500 else self.logger.warning
            log(
                "Request failed",
                code=exc.code,
                message=exc.message,
                details=exc.details,
                path=request.url.path,
            )
            return JSONResponse(
                status_code=exc.status_code,
                content=exc.to_response().to_content()
            )

        @self.app.exception_handler(RequestValidationError)
        async def request_validation_handler(request: Request, exc: RequestValidationError):
            """Binding failures are reported as 400 with the first offending field."""
            errors = exc.errors()
            detail = None
            if errors:
                first = errors[0]
                location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
                detail = f"{location}: {first.get('msg')}" if location else first.get("msg")
            self.logger.warning("Invalid request format", path=request.url.path, error=detail)
            return JSONResponse(
                status_code=400,
                content=error_response("Invalid request format", detail).to_content()
            )

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle general exceptions."""
            self.logger.error("Unhandled exception", error=str(exc), exc_info=True)
            return JSONResponse(
                status_code=500,
                content=error_response("Internal server error").to_content()
            )

    async def _check_dependencies(self) -> Dict[str, str]:
        """Check service dependencies. Override in subclasses."""
        return {}

    def _get_uptime(self) -> float:
        """Get service uptime in seconds."""
        return time.time() - self._start_time

    def run(self):
        """Run the service."""
        import uvicorn
        uvicorn.run(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower()
        )
