"""
Shared configuration management for the FoodBuddy access gateway.

Settings are read once at startup from the environment and an optional
``.env`` file, then passed explicitly to the components that need them.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env: str = Field(default="local", validation_alias="ENVIRONMENT")
    log_level: str = Field(default="info", validation_alias="LOG_LEVEL")
    log_dir: Optional[str] = Field(default=None, validation_alias="LOG_DIR")


class GatewayConfig(BaseConfig):
    """Gateway configuration."""

    service_name: str = "api_gateway"
    version: str = "1.0"
    host: str = Field(default="0.0.0.0", validation_alias="APIGATEWAYHOST")
    port: int = Field(default=8080, validation_alias="APIGATEWAYPORT")

    # Security
    jwt_secret: str = Field(default="", validation_alias="JWTSECRET")
    token_ttl_hours: int = Field(default=24, validation_alias="TOKEN_TTL_HOURS")

    # Backend services
    backend_host: str = Field(default="localhost", validation_alias="BACKEND_HOST")
    user_grpc_port: int = Field(default=50051, validation_alias="USERGRPCPORT")
    restaurant_grpc_port: int = Field(default=50052, validation_alias="RESTAURANTGRPCPORT")
    order_cart_grpc_port: int = Field(default=50053, validation_alias="ORDERCARTGRPCPORT")
    admin_grpc_port: int = Field(default=50054, validation_alias="ADMINGRPCPORT")
    rpc_timeout_seconds: float = Field(default=10.0, validation_alias="RPC_TIMEOUT_SECONDS")
    rpc_connect_timeout_seconds: float = Field(default=5.0, validation_alias="RPC_CONNECT_TIMEOUT_SECONDS")

    # Rate limiting
    rate_limit_requests: int = Field(default=3, validation_alias="RATE_LIMIT_REQUESTS")
    rate_limit_reset_seconds: float = Field(default=60.0, validation_alias="RATE_LIMIT_RESET_SECONDS")
    rate_limit_ttl_seconds: float = Field(default=180.0, validation_alias="RATE_LIMIT_TTL_SECONDS")
    rate_limit_sweep_seconds: float = Field(default=60.0, validation_alias="RATE_LIMIT_SWEEP_SECONDS")

    @property
    def user_service_address(self) -> str:
        return f"{self.backend_host}:{self.user_grpc_port}"

    @property
    def restaurant_service_address(self) -> str:
        return f"{self.backend_host}:{self.restaurant_grpc_port}"

    @property
    def order_cart_service_address(self) -> str:
        return f"{self.backend_host}:{self.order_cart_grpc_port}"

    @property
    def admin_service_address(self) -> str:
        return f"{self.backend_host}:{self.admin_grpc_port}"


def get_config(**overrides) -> GatewayConfig:
    """Load gateway configuration; keyword overrides take precedence over the environment."""
    return GatewayConfig(**overrides)
