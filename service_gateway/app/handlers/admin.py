"""
Admin routes: login and moderation of users and restaurants.
"""

from fastapi import APIRouter, Depends

from shared.logging import get_logger

from ..adapters.backends import BackendClients
from ..auth.tokens import AuthContext, Role, TokenCodec
from ..domain.auth_middleware import AuthMiddleware
from ..domain.validators import require, validate_email
from ..models import AdminLoginRequest
from .base import forward, respond

ADMIN_ENTITY_ID = "admin"


def build_admin_router(clients: BackendClients, auth: AuthMiddleware, tokens: TokenCodec) -> APIRouter:
    """Routes under ``/admin``."""
    router = APIRouter(prefix="/admin")
    logger = get_logger("gateway.handlers.admin")
    admin_only = auth.require(Role.ADMIN)

    @router.post("/login")
    async def login(body: AdminLoginRequest):
        """Authenticate against the admin service and issue an admin token."""
        validate_email(body.email)
        require(body.password, "password")

        logger.info("Admin login", email=body.email)
        response = await forward(clients.admin.login(body.email, body.password), "Admin login failed")
        admin_id = str(response.get("adminId") or ADMIN_ENTITY_ID)
        token = tokens.issue(admin_id, Role.ADMIN)
        return respond("Admin login successful", {**response, "token": token})

    @router.get("/users")
    async def list_users(context: AuthContext = Depends(admin_only)):
        response = await forward(clients.user.get_all_users(), "Failed to retrieve users")
        return respond("Users retrieved successfully", response)

    @router.get("/users/{user_id}/ban")
    async def check_ban(user_id: str, context: AuthContext = Depends(admin_only)):
        user_id = require(user_id, "userId")
        response = await forward(clients.user.check_ban(user_id), "Failed to check ban status")
        return respond("Ban status retrieved successfully", response)

    @router.post("/users/{user_id}/ban")
    async def ban_user(user_id: str, context: AuthContext = Depends(admin_only)):
        user_id = require(user_id, "userId")
        response = await forward(clients.user.ban_user(user_id), "Failed to ban user")
        logger.info("User banned", user_id=user_id)
        return respond("User banned successfully", response)

    @router.post("/users/{user_id}/unban")
    async def unban_user(user_id: str, context: AuthContext = Depends(admin_only)):
        user_id = require(user_id, "userId")
        response = await forward(clients.user.unban_user(user_id), "Failed to unban user")
        logger.info("User unbanned", user_id=user_id)
        return respond("User unbanned successfully", response)

    @router.post("/restaurants/{restaurant_id}/ban")
    async def ban_restaurant(restaurant_id: str, context: AuthContext = Depends(admin_only)):
        restaurant_id = require(restaurant_id, "restaurantId")
        response = await forward(clients.restaurant.ban_restaurant(restaurant_id), "Failed to ban restaurant")
        logger.info("Restaurant banned", restaurant_id=restaurant_id)
        return respond("Restaurant banned successfully", response)

    @router.post("/restaurants/{restaurant_id}/unban")
    async def unban_restaurant(restaurant_id: str, context: AuthContext = Depends(admin_only)):
        restaurant_id = require(restaurant_id, "restaurantId")
        response = await forward(clients.restaurant.unban_restaurant(restaurant_id), "Failed to unban restaurant")
        logger.info("Restaurant unbanned", restaurant_id=restaurant_id)
        return respond("Restaurant unbanned successfully", response)

    return router
