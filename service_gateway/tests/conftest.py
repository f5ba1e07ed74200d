"""
Shared fixtures for Gateway tests.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from service_gateway.app.adapters.admin_client import AdminClient
from service_gateway.app.adapters.backends import BackendClients
from service_gateway.app.adapters.order_cart_client import OrderCartClient
from service_gateway.app.adapters.restaurant_client import RestaurantClient
from service_gateway.app.adapters.user_client import UserClient
from service_gateway.app.auth.tokens import Role
from service_gateway.app.main import GatewayService
from shared.config import GatewayConfig
from shared.test_helpers import TEST_SECRET


@pytest.fixture
def gateway_config():
    """Configuration with a test secret and a generous rate limit."""
    return GatewayConfig(
        jwt_secret=TEST_SECRET,
        env="test",
        log_level="warning",
        rate_limit_requests=10000,
    )


@pytest.fixture
def backend_clients():
    """Backend clients replaced by async mocks."""
    user = AsyncMock(spec=UserClient)
    user.is_banned.return_value = False
    restaurant = AsyncMock(spec=RestaurantClient)
    order_cart = AsyncMock(spec=OrderCartClient)
    admin = AsyncMock(spec=AdminClient)
    return BackendClients(user=user, restaurant=restaurant, order_cart=order_cart, admin=admin)


@pytest.fixture
def gateway_service(gateway_config, backend_clients):
    """Gateway wired to mocked backends."""
    return GatewayService(gateway_config, clients=backend_clients)


@pytest.fixture
def client(gateway_service):
    """Test client for the gateway app."""
    return TestClient(gateway_service.app)


@pytest.fixture
def token_codec(gateway_service):
    return gateway_service.token_codec


@pytest.fixture
def user_headers(token_codec):
    return {"Authorization": f"Bearer {token_codec.issue('user-1', Role.USER)}"}


@pytest.fixture
def restaurant_headers(token_codec):
    return {"Authorization": f"Bearer {token_codec.issue('restaurant-1', Role.RESTAURANT)}"}


@pytest.fixture
def admin_headers(token_codec):
    return {"Authorization": f"Bearer {token_codec.issue('admin', Role.ADMIN)}"}
