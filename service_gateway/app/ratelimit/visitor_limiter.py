"""
In-memory per-address rate limiter for the Gateway.

Each client address is a visitor with a request counter. Every request
increments the counter; requests past the limit are rejected. After an
accepted request completes, the counter is zeroed ``reset_interval`` seconds
later, and a background sweep evicts visitors unseen for longer than ``ttl``.
"""

import asyncio
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from shared.logging import get_logger
from shared.metrics import MetricsCollector
from shared.errors import RateLimitError


@dataclass
class Visitor:
    """Request counter for one client address."""

    requests: int
    last_seen: float


class VisitorRateLimiter:
    """Counts requests per client address under a single lock."""

    def __init__(
        self,
        limit: int = 3,
        reset_interval: float = 60.0,
        ttl: float = 180.0,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.limit = limit
        self.reset_interval = reset_interval
        self.ttl = ttl
        self._clock = clock or time.monotonic
        self._visitors: Dict[str, Visitor] = {}
        self._lock = threading.Lock()
        self._sweeper: Optional[asyncio.Task] = None
        self.logger = get_logger("gateway.rate_limiter")

    def hit(self, address: str) -> int:
        """Record a request from ``address`` and return its current count."""
        now = self._clock()
        with self._lock:
            visitor = self._visitors.get(address)
            if visitor is None:
                visitor = Visitor(requests=0, last_seen=now)
                self._visitors[address] = visitor
            visitor.requests += 1
            visitor.last_seen = now
            return visitor.requests

    def allow(self, address: str) -> bool:
        """Record a request and report whether it is within the limit."""
        return self.hit(address) <= self.limit

    def reset(self, address: str) -> None:
        """Zero the counter for ``address`` if it is still tracked."""
        with self._lock:
            visitor = self._visitors.get(address)
            if visitor is not None:
                visitor.requests = 0

    def schedule_reset(self, address: str) -> None:
        """Reset ``address`` once the reset interval has elapsed."""
        loop = asyncio.get_running_loop()
        loop.call_later(self.reset_interval, self.reset, address)

    def sweep(self) -> int:
        """Evict visitors unseen for longer than the TTL; return how many."""
        cutoff = self._clock() - self.ttl
        with self._lock:
            stale = [address for address, visitor in self._visitors.items() if visitor.last_seen < cutoff]
            for address in stale:
                del self._visitors[address]
        if stale:
            self.logger.debug("Evicted idle visitors", count=len(stale))
        return len(stale)

    def get_visitor(self, address: str) -> Optional[Visitor]:
        """Return a copy of the visitor record for ``address``."""
        with self._lock:
            visitor = self._visitors.get(address)
            return Visitor(visitor.requests, visitor.last_seen) if visitor else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._visitors)

    async def _sweep_forever(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            self.sweep()

    def start(self, sweep_interval: float = 60.0) -> None:
        """Start the background sweep on the running loop."""
        if self._sweeper is None or self._sweeper.done():
            self._sweeper = asyncio.get_running_loop().create_task(self._sweep_forever(sweep_interval))

    async def stop(self) -> None:
        """Cancel the background sweep."""
        if self._sweeper is not None:
            self._sweeper.cancel()
            try:
                await self._sweeper
            except asyncio.CancelledError:
                pass
            self._sweeper = None


def get_client_address(request: Request) -> str:
    """Extract the client address, honouring proxy headers."""
    forwarded_for = request.headers.get('X-Forwarded-For')
    if isinstance(forwarded_for, str) and forwarded_for:
        return forwarded_for.split(',')[0].strip()

    real_ip = request.headers.get('X-Real-IP')
    if isinstance(real_ip, str) and real_ip:
        return real_ip

    return request.client.host if request.client else 'unknown'


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests from addresses over the limit with a 429 envelope."""

    def __init__(
        self,
        app,
        rate_limiter: VisitorRateLimiter,
        metrics: Optional[MetricsCollector] = None,
        exempt_paths: Iterable[str] = ("/health", "/metrics"),
    ):
        super().__init__(app)
        self.rate_limiter = rate_limiter
        self.metrics = metrics
        self.exempt_paths = frozenset(exempt_paths)
        self.logger = get_logger("gateway.rate_limit_middleware")

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        address = get_client_address(request)
        if not self.rate_limiter.allow(address):
            self.logger.warning("Rate limit exceeded", client_address=address, path=request.url.path)
            if self.metrics is not None:
                self.metrics.record_rate_limit_rejection()
            exc = RateLimitError(f"rate limit exceeded for IP: {address}", {"error": "too many requests"})
            return JSONResponse(status_code=exc.status_code, content=exc.to_response().to_content())

        try:
            return await call_next(request)
        finally:
            self.rate_limiter.schedule_reset(address)
