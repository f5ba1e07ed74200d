"""
User routes: signup/login, profile, email verification and addresses.
"""

from fastapi import APIRouter, Depends

from shared.errors import UpstreamError
from shared.logging import get_logger

from ..adapters.backends import BackendClients
from ..auth.tokens import AuthContext, Role, TokenCodec
from ..domain.auth_middleware import AuthMiddleware
from ..domain.validators import (
    require,
    validate_address,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)
from ..models import (
    AddressRequest,
    LoginRequest,
    SignupRequest,
    UpdateProfileRequest,
    VerifyEmailRequest,
)
from .base import forward, respond


def build_user_router(clients: BackendClients, auth: AuthMiddleware, tokens: TokenCodec) -> APIRouter:
    """Routes served on behalf of the user service."""
    router = APIRouter()
    logger = get_logger("gateway.handlers.users")
    user_only = auth.require(Role.USER, check_ban=True)

    def issue_user_token(response: dict, failure_message: str) -> str:
        user_id = str(response.get("userId") or "")
        if not user_id:
            raise UpstreamError("user", failure_message, cause="user service returned no userId")
        return tokens.issue(user_id, Role.USER)

    @router.post("/auth/user/signup")
    async def signup(body: SignupRequest):
        """Register a user and return a token for the new account."""
        validate_email(body.email)
        validate_password(body.password)
        validate_name(body.first_name)
        validate_name(body.last_name)
        validate_phone(body.phone_number)
        validate_address(body.address)

        logger.info("User signup", email=body.email)
        response = await forward(
            clients.user.signup(
                email=body.email,
                password=body.password,
                username=f"{body.first_name} {body.last_name}",
                phone_number=body.phone_number,
                address=body.address.to_message(),
            ),
            "Signup failed",
        )
        token = issue_user_token(response, "Signup failed")
        return respond("Signup successful", {**response, "token": token})

    @router.post("/auth/user/login")
    async def login(body: LoginRequest):
        validate_email(body.email)
        validate_password(body.password)

        logger.info("User login", email=body.email)
        response = await forward(clients.user.login(body.email, body.password), "Login failed")
        token = issue_user_token(response, "Login failed")
        return respond("Login successful", {**response, "token": token})

    @router.get("/api/users/profile")
    async def get_profile(context: AuthContext = Depends(user_only)):
        response = await forward(clients.user.get_profile(context.entity_id), "Failed to retrieve profile")
        return respond("Profile retrieved successfully", response)

    @router.put("/api/users/profile")
    async def update_profile(body: UpdateProfileRequest, context: AuthContext = Depends(user_only)):
        validate_name(body.name)
        validate_phone(body.phone_number)

        response = await forward(
            clients.user.update_profile(context.entity_id, body.name, body.phone_number),
            "Failed to update profile",
        )
        return respond("Profile updated successfully", response)

    @router.post("/api/users/email/verify")
    async def verify_email(body: VerifyEmailRequest, context: AuthContext = Depends(user_only)):
        code = require(body.verification_code, "verificationCode")
        response = await forward(
            clients.user.verify_email(context.entity_id, code),
            "Email verification failed",
        )
        return respond("Email verified successfully", response)

    @router.get("/api/users/token")
    async def get_user_by_token(context: AuthContext = Depends(user_only)):
        """Look up the account behind the caller's bearer token."""
        response = await forward(clients.user.get_user_by_token(context.token), "Failed to retrieve user")
        return respond("User retrieved successfully", response)

    @router.get("/api/users/addresses")
    async def get_addresses(context: AuthContext = Depends(user_only)):
        response = await forward(clients.user.get_addresses(context.entity_id), "Failed to retrieve addresses")
        return respond("Addresses retrieved successfully", response)

    @router.post("/api/users/addresses")
    async def add_address(body: AddressRequest, context: AuthContext = Depends(user_only)):
        validate_address(body.address)
        response = await forward(
            clients.user.add_address(context.entity_id, body.address.to_message()),
            "Failed to add address",
        )
        return respond("Address added successfully", response)

    @router.put("/api/users/addresses/{address_id}")
    async def edit_address(address_id: str, body: AddressRequest, context: AuthContext = Depends(user_only)):
        address_id = require(address_id, "addressId")
        validate_address(body.address)
        response = await forward(
            clients.user.edit_address(context.entity_id, address_id, body.address.to_message()),
            "Failed to update address",
        )
        return respond("Address updated successfully", response)

    @router.delete("/api/users/addresses/{address_id}")
    async def delete_address(address_id: str, context: AuthContext = Depends(user_only)):
        address_id = require(address_id, "addressId")
        response = await forward(
            clients.user.delete_address(context.entity_id, address_id),
            "Failed to delete address",
        )
        return respond("Address deleted successfully", response)

    return router
