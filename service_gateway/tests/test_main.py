"""
Unit tests for Gateway main service.
"""

import asyncio

import grpc
import pytest
from fastapi.testclient import TestClient

import service_gateway.app.main as gateway_main
from service_gateway.app.adapters.admin_client import AdminClient
from service_gateway.app.adapters.backends import BackendClients
from service_gateway.app.adapters.order_cart_client import OrderCartClient
from service_gateway.app.adapters.restaurant_client import RestaurantClient
from service_gateway.app.adapters.rpc import RpcChannel
from service_gateway.app.adapters.user_client import UserClient
from service_gateway.app.main import GatewayService, create_app
from service_gateway.app.ratelimit.visitor_limiter import VisitorRateLimiter
from shared.config import GatewayConfig
from shared.errors import ConfigurationError, UpstreamError
from shared.test_helpers import TEST_SECRET


class StubChannel:
    """Minimal grpc.aio.Channel replacement for lifecycle tests."""

    def __init__(self, ready=True):
        self.ready = ready
        self.closed = False

    async def channel_ready(self):
        if not self.ready:
            await asyncio.Event().wait()

    def get_state(self, try_to_connect=False):
        return grpc.ChannelConnectivity.READY

    async def close(self):
        self.closed = True


def stub_backend_clients(ready=True):
    channels = [
        RpcChannel(name, f"localhost:{port}", connect_timeout=0.05, channel=StubChannel(ready))
        for name, port in [("user", 1), ("restaurant", 2), ("order_cart", 3), ("admin", 4)]
    ]
    return BackendClients(
        user=UserClient(channels[0]),
        restaurant=RestaurantClient(channels[1]),
        order_cart=OrderCartClient(channels[2]),
        admin=AdminClient(channels[3]),
        channels=channels,
    )


class TestGatewayService:
    """Test cases for GatewayService."""

    def test_root_endpoint(self, client):
        """Test root endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "api_gateway"
        assert data["message"] == "FoodBuddy API Gateway"

    def test_health_endpoint(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "api_gateway"
        assert "uptime_seconds" in data

    def test_metrics_endpoint(self, client):
        client.get("/")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "http_requests_total" in response.text
        assert "upstream_calls_total" in response.text

    def test_request_id_echoed(self, client):
        response = client.get("/", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self, client):
        response = client.get("/")

        assert response.headers["X-Request-ID"]

    def test_unhandled_error_is_generic_500(self, gateway_service, backend_clients):
        """Unexpected exceptions never leak their text to the client."""
        backend_clients.restaurant.get_all_restaurants_with_products.side_effect = RuntimeError("boom")
        client = TestClient(gateway_service.app, raise_server_exceptions=False)

        response = client.get("/api/restaurants")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}

    def test_empty_secret_refused(self, backend_clients):
        """The gateway will not start without a signing secret."""
        with pytest.raises(ConfigurationError):
            GatewayService(GatewayConfig(jwt_secret="", env="test"), clients=backend_clients)

    def test_main_exits_without_secret(self, monkeypatch):
        """The entry point logs and exits instead of raising on a missing secret."""
        monkeypatch.setattr(gateway_main, "get_config", lambda: GatewayConfig(jwt_secret="", env="test"))
        monkeypatch.setattr(gateway_main.GatewayService, "run", lambda self: pytest.fail("service started"))

        with pytest.raises(SystemExit) as exc_info:
            gateway_main.main()

        assert exc_info.value.code == 1

    def test_create_app(self, gateway_config, backend_clients):
        app = create_app(gateway_config, backend_clients)

        assert TestClient(app).get("/").status_code == 200


class TestGatewayRateLimiting:
    """Test cases for rate limiting in the assembled gateway."""

    @pytest.fixture
    def client(self, backend_clients):
        config = GatewayConfig(jwt_secret=TEST_SECRET, env="test", log_level="warning")
        service = GatewayService(config, clients=backend_clients)
        return TestClient(service.app)

    def test_fourth_request_rejected(self, client):
        """With the default limit the fourth request from one address is refused."""
        statuses = [client.get("/").status_code for _ in range(4)]

        assert statuses == [200, 200, 200, 429]

    def test_rejection_carries_request_id(self, client):
        for _ in range(3):
            client.get("/")

        response = client.get("/", headers={"X-Request-ID": "req-9"})

        assert response.status_code == 429
        assert response.headers["X-Request-ID"] == "req-9"
        assert response.json()["error"] == "too many requests"

    def test_health_never_limited(self, client):
        assert all(client.get("/health").status_code == 200 for _ in range(6))

    def test_injected_limiter_used(self, gateway_config, backend_clients):
        rate_limiter = VisitorRateLimiter(limit=1)
        service = GatewayService(gateway_config, clients=backend_clients, rate_limiter=rate_limiter)
        client = TestClient(service.app)

        assert client.get("/").status_code == 200
        assert client.get("/").status_code == 429


class TestGatewayLifecycle:
    """Test cases for startup and shutdown."""

    def test_startup_connects_and_shutdown_closes(self, gateway_config, monkeypatch):
        clients = stub_backend_clients()
        monkeypatch.setattr(gateway_main, "create_backend_clients", lambda config, metrics=None: clients)
        service = GatewayService(gateway_config)

        with TestClient(service.app) as client:
            health = client.get("/health").json()
            assert health["dependencies"] == {
                "user": "ready",
                "restaurant": "ready",
                "order_cart": "ready",
                "admin": "ready",
            }
            assert service.rate_limiter._sweeper is not None

        assert all(channel.state() == "idle" for channel in clients.channels)
        assert service.rate_limiter._sweeper is None

    def test_unreachable_backend_aborts_startup(self, gateway_config, monkeypatch):
        """A backend that never becomes ready stops the gateway from starting."""
        monkeypatch.setattr(
            gateway_main, "create_backend_clients", lambda config, metrics=None: stub_backend_clients(ready=False)
        )
        service = GatewayService(gateway_config)

        with pytest.raises(UpstreamError) as exc_info:
            with TestClient(service.app):
                pass

        assert exc_info.value.service == "user"

    def test_injected_clients_not_connected(self, gateway_config):
        clients = stub_backend_clients(ready=False)
        service = GatewayService(gateway_config, clients=clients)

        with TestClient(service.app) as client:
            assert client.get("/health").json()["dependencies"] == {}
