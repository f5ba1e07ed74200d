"""
Admin service client for Gateway.
"""

from typing import Any, Dict

from .rpc import RpcClient


class AdminClient(RpcClient):
    """Client for communicating with the admin service."""

    service_name = "admin"
    full_service_name = "admin.AdminService"

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        return await self.call("AdminLogin", {"email": email, "password": password})
