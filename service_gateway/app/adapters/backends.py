"""
Construction and lifecycle of the gateway's backend clients.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from shared.config import GatewayConfig
from shared.metrics import MetricsCollector

from .admin_client import AdminClient
from .order_cart_client import OrderCartClient
from .restaurant_client import RestaurantClient
from .rpc import RpcChannel
from .user_client import UserClient


@dataclass
class BackendClients:
    """One client per backend service plus the channels they share."""

    user: UserClient
    restaurant: RestaurantClient
    order_cart: OrderCartClient
    admin: AdminClient
    channels: List[RpcChannel] = field(default_factory=list)

    async def connect(self) -> None:
        """Wait for every channel; the first unreachable backend raises."""
        for channel in self.channels:
            await channel.connect()

    async def close(self) -> None:
        for channel in self.channels:
            await channel.close()

    def states(self) -> Dict[str, str]:
        return {channel.name: channel.state() for channel in self.channels}


def create_backend_clients(config: GatewayConfig,
                           metrics: Optional[MetricsCollector] = None) -> BackendClients:
    """Build clients for the addresses in ``config``; channels open lazily."""
    timeout = config.rpc_timeout_seconds
    connect_timeout = config.rpc_connect_timeout_seconds

    user_channel = RpcChannel("user", config.user_service_address, connect_timeout)
    restaurant_channel = RpcChannel("restaurant", config.restaurant_service_address, connect_timeout)
    order_cart_channel = RpcChannel("order_cart", config.order_cart_service_address, connect_timeout)
    admin_channel = RpcChannel("admin", config.admin_service_address, connect_timeout)

    return BackendClients(
        user=UserClient(user_channel, timeout, metrics),
        restaurant=RestaurantClient(restaurant_channel, timeout, metrics),
        order_cart=OrderCartClient(order_cart_channel, timeout, metrics),
        admin=AdminClient(admin_channel, timeout, metrics),
        channels=[user_channel, restaurant_channel, order_cart_channel, admin_channel],
    )
