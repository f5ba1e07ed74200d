"""
Test helper functions and factory methods for the FoodBuddy access gateway.

Tokens are minted with PyJWT so the gateway's codec is exercised against an
independent implementation.
"""

import time
from typing import Dict, Any, Optional
from dataclasses import dataclass
import jwt


TEST_SECRET = "foodbuddy-gateway-test-secret-0123456789"


@dataclass
class TestIdentity:
    """Test caller identity."""
    __test__ = False

    entity_id: str
    role: str
    email: str
    password: str = "password123"


class TestDataFactory:
    """Factory for creating test data."""
    __test__ = False

    @staticmethod
    def create_address(**overrides) -> Dict[str, Any]:
        address = {
            "streetName": "12 MG Road",
            "locality": "Indiranagar",
            "state": "Karnataka",
            "pincode": "560038",
        }
        address.update(overrides)
        return address

    @staticmethod
    def create_user_signup(**overrides) -> Dict[str, Any]:
        payload = {
            "email": "john.doe@example.com",
            "password": "password123",
            "firstName": "John",
            "lastName": "Doe",
            "phoneNumber": 9876543210,
            "address": TestDataFactory.create_address(),
        }
        payload.update(overrides)
        return payload

    @staticmethod
    def create_restaurant_signup(**overrides) -> Dict[str, Any]:
        payload = {
            "restaurantName": "Spice Garden",
            "ownerEmail": "owner@spicegarden.com",
            "password": "password123",
            "phoneNumber": 9123456780,
            "address": TestDataFactory.create_address(),
        }
        payload.update(overrides)
        return payload

    @staticmethod
    def create_product(**overrides) -> Dict[str, Any]:
        payload = {
            "name": "Paneer Tikka",
            "description": "Grilled cottage cheese",
            "price": 249.0,
            "stock": 20,
            "category": "starters",
        }
        payload.update(overrides)
        return payload


class MockTokenGenerator:
    """Generate gateway-format tokens for testing."""

    def __init__(self, secret: str = TEST_SECRET):
        self.secret = secret

    def generate_token(self, identity: TestIdentity, expires_in: int = 86400,
                       issued_at: Optional[int] = None) -> str:
        """Generate a token for ``identity``."""
        now = issued_at if issued_at is not None else int(time.time())
        return self.generate_token_with_claims({
            "id": identity.entity_id,
            "role": identity.role,
            "created": now,
            "exp": now + expires_in,
        })

    def generate_expired_token(self, identity: TestIdentity, secret: Optional[str] = None) -> str:
        """Generate a token that expired an hour ago."""
        now = int(time.time())
        return self.generate_token_with_claims({
            "id": identity.entity_id,
            "role": identity.role,
            "created": now - 90000,
            "exp": now - 3600,
        }, secret=secret)

    def generate_token_with_claims(self, claims: Dict[str, Any], secret: Optional[str] = None,
                                   algorithm: str = "HS256") -> str:
        """Sign arbitrary claims."""
        return jwt.encode(claims, secret or self.secret, algorithm=algorithm)
