"""
API Gateway package for FoodBuddy.

The gateway fronts client requests, enforcing:
- Authentication: HS256 bearer tokens issued at login/signup
- Authorization: role gates, ban checks and product ownership checks
- Rate limiting: in-memory per-address counter with a reset window

Structure:
- app.main: FastAPI app, routes, and middleware wiring.
- app.adapters: gRPC clients for the user, restaurant, order/cart and admin services.
- app.auth: Token codec and roles.
- app.domain: Role gate, ownership resolver and field validators.
- app.handlers: Route handlers grouped by backend service.
- app.models: Request models.
- app.ratelimit: Visitor rate limiter and middleware.
"""
