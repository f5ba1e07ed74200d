"""
gRPC plumbing shared by the backend service clients.

Messages travel as JSON documents with camelCase field names over unary
gRPC calls. Every call carries a deadline; failures are mapped onto the
shared error types and never retried.
"""

import asyncio
import json
import time
from typing import Any, Dict, Optional

import grpc

from shared.errors import NotFoundError, UpstreamError
from shared.logging import get_logger
from shared.metrics import MetricsCollector


def serialize_message(payload: Dict[str, Any]) -> bytes:
    """Encode an outgoing message."""
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def deserialize_message(data: bytes) -> Dict[str, Any]:
    """Decode an incoming message; an empty body is an empty message."""
    if not data:
        return {}
    return json.loads(data.decode("utf-8"))


class RpcChannel:
    """Lazily opened insecure channel to one backend service."""

    def __init__(self, name: str, address: str, connect_timeout: float = 5.0,
                 channel: Optional[grpc.aio.Channel] = None):
        self.name = name
        self.address = address
        self.connect_timeout = connect_timeout
        self._channel = channel
        self.logger = get_logger(f"gateway.rpc.{name}")

    @property
    def channel(self) -> grpc.aio.Channel:
        if self._channel is None:
            self._channel = grpc.aio.insecure_channel(self.address)
        return self._channel

    async def connect(self) -> None:
        """Wait until the channel is ready or the connect timeout passes."""
        try:
            await asyncio.wait_for(self.channel.channel_ready(), timeout=self.connect_timeout)
        except asyncio.TimeoutError:
            self.logger.critical("Backend unreachable", service=self.name, address=self.address)
            raise UpstreamError(
                self.name,
                f"Failed to connect to {self.name} service",
                cause=f"{self.address} not ready after {self.connect_timeout}s",
            )
        self.logger.info("Connected to backend", service=self.name, address=self.address)

    def state(self) -> str:
        """Connectivity state without triggering a connection attempt."""
        if self._channel is None:
            return "idle"
        return self._channel.get_state(try_to_connect=False).name.lower()

    async def close(self) -> None:
        if self._channel is not None:
            await self._channel.close()
            self._channel = None


class RpcClient:
    """Base class for a client of one backend gRPC service."""

    service_name = ""
    full_service_name = ""

    def __init__(self, channel: RpcChannel, timeout: float = 10.0,
                 metrics: Optional[MetricsCollector] = None):
        self.channel = channel
        self.timeout = timeout
        self.metrics = metrics
        self.logger = get_logger(f"gateway.{self.service_name}_client")

    def _record(self, method: str, outcome: str, started: float) -> None:
        if self.metrics is not None:
            self.metrics.record_upstream_call(self.service_name, method, outcome, time.time() - started)

    async def call(self, method: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Invoke ``method`` on the backend with the configured deadline."""
        stub = self.channel.channel.unary_unary(
            f"/{self.full_service_name}/{method}",
            request_serializer=serialize_message,
            response_deserializer=deserialize_message,
        )
        started = time.time()
        try:
            response = await stub(payload, timeout=self.timeout)
        except grpc.aio.AioRpcError as e:
            code = e.code()
            self._record(method, code.name.lower(), started)
            self.logger.error(
                "Backend call failed",
                method=method,
                status=code.name,
                error=e.details(),
            )
            if code == grpc.StatusCode.NOT_FOUND:
                raise NotFoundError(self.service_name, cause=e.details())
            raise UpstreamError(
                self.service_name,
                f"{self.service_name} service call failed",
                cause=e.details() or code.name,
                details={"status": code.name},
            )

        self._record(method, "ok", started)
        return response or {}
