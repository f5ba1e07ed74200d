"""
User service client for Gateway.
"""

from typing import Any, Dict

from .rpc import RpcClient


class UserClient(RpcClient):
    """Client for communicating with the user service."""

    service_name = "user"
    full_service_name = "user.UserService"

    async def signup(self, email: str, password: str, username: str,
                     phone_number: int, address: Dict[str, Any]) -> Dict[str, Any]:
        return await self.call("UserSignup", {
            "email": email,
            "password": password,
            "username": username,
            "phoneNumber": phone_number,
            "address": address,
        })

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Check credentials; the response carries ``userId``."""
        return await self.call("UserLogin", {"email": email, "password": password})

    async def get_profile(self, user_id: str) -> Dict[str, Any]:
        return await self.call("GetProfile", {"userId": user_id})

    async def update_profile(self, user_id: str, name: str, phone_number: int) -> Dict[str, Any]:
        return await self.call("UpdateProfile", {
            "userId": user_id,
            "name": name,
            "phoneNumber": phone_number,
        })

    async def verify_email(self, user_id: str, verification_code: str) -> Dict[str, Any]:
        return await self.call("VerifyEmail", {
            "userId": user_id,
            "verificationCode": verification_code,
        })

    async def get_user_by_token(self, token: str) -> Dict[str, Any]:
        return await self.call("GetUserByToken", {"token": token})

    async def add_address(self, user_id: str, address: Dict[str, Any]) -> Dict[str, Any]:
        return await self.call("AddAddress", {"userId": user_id, "address": address})

    async def get_addresses(self, user_id: str) -> Dict[str, Any]:
        return await self.call("GetAddresses", {"userId": user_id})

    async def edit_address(self, user_id: str, address_id: str, address: Dict[str, Any]) -> Dict[str, Any]:
        return await self.call("EditAddress", {
            "userId": user_id,
            "addressId": address_id,
            "address": address,
        })

    async def delete_address(self, user_id: str, address_id: str) -> Dict[str, Any]:
        return await self.call("DeleteAddress", {"userId": user_id, "addressId": address_id})

    async def validate_address(self, user_id: str, address_id: str) -> bool:
        """Whether ``address_id`` belongs to ``user_id``."""
        response = await self.call("ValidateUserAddress", {"userId": user_id, "addressId": address_id})
        return bool(response.get("isValid"))

    async def ban_user(self, user_id: str) -> Dict[str, Any]:
        return await self.call("BanUser", {"userId": user_id})

    async def unban_user(self, user_id: str) -> Dict[str, Any]:
        return await self.call("UnBanUser", {"userId": user_id})

    async def check_ban(self, user_id: str) -> Dict[str, Any]:
        return await self.call("CheckBan", {"userId": user_id})

    async def is_banned(self, user_id: str) -> bool:
        response = await self.check_ban(user_id)
        return bool(response.get("isBanned"))

    async def get_all_users(self) -> Dict[str, Any]:
        return await self.call("GetAllUsers", {})
