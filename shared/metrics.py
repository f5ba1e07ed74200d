"""
Shared metrics configuration for the FoodBuddy access gateway.
"""

from typing import Dict, Any, Optional

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, Info, generate_latest


class MetricsCollector:
    """Centralized metrics collector for the gateway.

    Each collector owns its registry so several app instances (one per test,
    for example) never collide on metric names.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, service_name: str, version: str = "1.0", registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.version = version
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up common metrics for the service."""

        # Service info
        self._metrics["service_info"] = Info(
            "service_info",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": self.version
        })

        # HTTP metrics
        self._metrics["http_requests_total"] = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=self.registry
        )

        self._metrics["http_request_duration_seconds"] = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=self.registry
        )

        # Health check metrics
        self._metrics["health_check_total"] = Counter(
            "health_check_total",
            "Total health check requests",
            ["status"],
            registry=self.registry
        )

        self._setup_gateway_metrics()

    def _setup_gateway_metrics(self):
        """Set up gateway-specific metrics."""
        self._metrics["rate_limit_rejections_total"] = Counter(
            "rate_limit_rejections_total",
            "Requests rejected by the per-address rate limiter",
            registry=self.registry
        )

        self._metrics["auth_failures_total"] = Counter(
            "auth_failures_total",
            "Authentication and authorization failures",
            ["reason"],
            registry=self.registry
        )

        self._metrics["upstream_calls_total"] = Counter(
            "upstream_calls_total",
            "Calls made to backend services",
            ["service", "method", "outcome"],
            registry=self.registry
        )

        self._metrics["upstream_call_duration_seconds"] = Histogram(
            "upstream_call_duration_seconds",
            "Backend call duration in seconds",
            ["service", "method"],
            registry=self.registry
        )

    def render(self) -> bytes:
        """Render the registry in the Prometheus text format."""
        return generate_latest(self.registry)

    def record_http_request(self, method: str, endpoint: str, status_code: int, duration: float):
        """Record HTTP request metrics."""
        self._metrics["http_requests_total"].labels(
            method=method,
            endpoint=endpoint,
            status_code=str(status_code)
        ).inc()

        self._metrics["http_request_duration_seconds"].labels(
            method=method,
            endpoint=endpoint
        ).observe(duration)

    def record_health_check(self, status: str):
        """Record health check metrics."""
        self._metrics["health_check_total"].labels(status=status).inc()

    def record_rate_limit_rejection(self):
        self._metrics["rate_limit_rejections_total"].inc()

    def record_auth_failure(self, reason: str):
        self._metrics["auth_failures_total"].labels(reason=reason).inc()

    def record_upstream_call(self, service: str, method: str, outcome: str, duration: float):
        """Record the outcome and latency of one backend call."""
        self._metrics["upstream_calls_total"].labels(
            service=service, method=method, outcome=outcome
        ).inc()
        self._metrics["upstream_call_duration_seconds"].labels(
            service=service, method=method
        ).observe(duration)


def get_metrics_collector(service_name: str, version: str = "1.0",
                          registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for a service."""
    return MetricsCollector(service_name, version, registry)
