"""
Shared utilities for the FoodBuddy access gateway.

This package aggregates common building blocks consumed by the gateway:

- config: Gateway configuration via pydantic-settings
- logging: Structured logging with request/identity correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types mapped to HTTP statuses
- responses: The uniform response envelope
- base_service: FastAPI app scaffolding (middleware, health, metrics, error handlers)

Do not import from service_gateway into shared/.
"""
