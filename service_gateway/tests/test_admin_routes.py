"""
Route tests for admin login and moderation.
"""

import pytest

from service_gateway.app.auth.tokens import Role
from shared.errors import UpstreamError


class TestAdminLogin:
    """Test cases for /admin/login."""

    def test_login_issues_admin_token(self, client, backend_clients, token_codec):
        backend_clients.admin.login.return_value = {"adminId": "admin-7"}

        response = client.post("/admin/login", json={"email": "admin@foodbuddy.com", "password": "secret"})

        assert response.status_code == 200
        assert response.json()["message"] == "Admin login successful"
        context = token_codec.validate(response.json()["data"]["token"])
        assert context.role is Role.ADMIN
        assert context.entity_id == "admin-7"

    def test_login_without_admin_id(self, client, backend_clients, token_codec):
        backend_clients.admin.login.return_value = {}

        response = client.post("/admin/login", json={"email": "admin@foodbuddy.com", "password": "secret"})

        assert token_codec.validate(response.json()["data"]["token"]).entity_id == "admin"

    def test_login_invalid_email(self, client, backend_clients):
        response = client.post("/admin/login", json={"email": "admin", "password": "secret"})

        assert response.status_code == 400
        backend_clients.admin.login.assert_not_awaited()

    def test_login_rejected(self, client, backend_clients):
        backend_clients.admin.login.side_effect = UpstreamError("admin", cause="invalid credentials")

        response = client.post("/admin/login", json={"email": "admin@foodbuddy.com", "password": "wrong"})

        assert response.status_code == 500
        assert response.json()["message"] == "Admin login failed"
        assert response.json()["error"] == "invalid credentials"


class TestAdminModeration:
    """Test cases for admin-only moderation routes."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/admin/users"),
            ("get", "/admin/users/user-2/ban"),
            ("post", "/admin/users/user-2/ban"),
            ("post", "/admin/users/user-2/unban"),
            ("post", "/admin/restaurants/restaurant-2/ban"),
            ("post", "/admin/restaurants/restaurant-2/unban"),
        ],
    )
    def test_non_admin_forbidden(self, client, user_headers, method, path):
        response = getattr(client, method)(path, headers=user_headers)

        assert response.status_code == 403
        assert response.json() == {"success": False, "message": "Admin access required"}

    def test_requires_token(self, client):
        response = client.get("/admin/users")

        assert response.status_code == 401

    def test_list_users(self, client, backend_clients, admin_headers):
        backend_clients.user.get_all_users.return_value = {"users": []}

        response = client.get("/admin/users", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"users": []}

    def test_admin_not_subject_to_user_ban_check(self, client, backend_clients, admin_headers):
        backend_clients.user.get_all_users.return_value = {"users": []}

        client.get("/admin/users", headers=admin_headers)

        backend_clients.user.is_banned.assert_not_awaited()

    def test_check_ban(self, client, backend_clients, admin_headers):
        backend_clients.user.check_ban.return_value = {"isBanned": True}

        response = client.get("/admin/users/user-2/ban", headers=admin_headers)

        assert response.json()["data"] == {"isBanned": True}
        backend_clients.user.check_ban.assert_awaited_once_with("user-2")

    def test_ban_and_unban_user(self, client, backend_clients, admin_headers):
        backend_clients.user.ban_user.return_value = {}
        backend_clients.user.unban_user.return_value = {}

        banned = client.post("/admin/users/user-2/ban", headers=admin_headers)
        unbanned = client.post("/admin/users/user-2/unban", headers=admin_headers)

        assert banned.json()["message"] == "User banned successfully"
        assert unbanned.json()["message"] == "User unbanned successfully"
        backend_clients.user.ban_user.assert_awaited_once_with("user-2")
        backend_clients.user.unban_user.assert_awaited_once_with("user-2")

    def test_ban_and_unban_restaurant(self, client, backend_clients, admin_headers):
        backend_clients.restaurant.ban_restaurant.return_value = {}
        backend_clients.restaurant.unban_restaurant.return_value = {}

        banned = client.post("/admin/restaurants/restaurant-2/ban", headers=admin_headers)
        unbanned = client.post("/admin/restaurants/restaurant-2/unban", headers=admin_headers)

        assert banned.status_code == 200
        assert unbanned.status_code == 200
        backend_clients.restaurant.ban_restaurant.assert_awaited_once_with("restaurant-2")
        backend_clients.restaurant.unban_restaurant.assert_awaited_once_with("restaurant-2")

    def test_ban_failure(self, client, backend_clients, admin_headers):
        backend_clients.user.ban_user.side_effect = UpstreamError("user", cause="user not found")

        response = client.post("/admin/users/user-2/ban", headers=admin_headers)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to ban user", "error": "user not found"}
