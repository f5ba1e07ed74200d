"""
HS256 bearer token issuance and validation for the gateway.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from jose import JWTError, jwt

from shared.errors import AuthError, AuthFailure, ConfigurationError
from shared.logging import get_logger


ALGORITHM = "HS256"


class Role(str, Enum):
    """Caller roles carried in the token ``role`` claim."""

    USER = "user"
    RESTAURANT = "restaurant"
    ADMIN = "admin"


@dataclass(frozen=True)
class AuthContext:
    """Authenticated request context derived from a verified token."""

    entity_id: str
    role: Role
    claims: Dict[str, Any]
    token: str


class TokenCodec:
    """Issues and validates signed bearer tokens.

    Tokens carry ``id``, ``role``, ``created`` and ``exp`` claims. Validation
    is stateless; there is no refresh or revocation.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl_hours: int = 24,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if not secret:
            raise ConfigurationError("JWT secret is not configured")
        self._secret = secret
        self.ttl_seconds = ttl_hours * 3600
        self._clock = clock or time.time
        self.logger = get_logger("gateway.auth.tokens")

    def issue(self, entity_id: str, role: Role) -> str:
        """Sign a token for ``entity_id`` with the given role."""
        now = int(self._clock())
        claims = {
            "id": entity_id,
            "role": role.value,
            "created": now,
            "exp": now + self.ttl_seconds,
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> AuthContext:
        """Return the caller identity encoded in ``token``.

        Raises ``AuthError`` with kind ``EXPIRED`` when the expiry has passed,
        whatever the signature, and ``MALFORMED`` for anything else that does
        not verify.
        """
        try:
            unverified = jwt.get_unverified_claims(token)
        except JWTError as exc:
            raise AuthError(AuthFailure.MALFORMED, "Invalid or expired token", {"error": str(exc)})

        exp = unverified.get("exp")
        if isinstance(exp, (int, float)) and exp <= self._clock():
            raise AuthError(AuthFailure.EXPIRED)

        try:
            # Expiry was checked above against the injected clock.
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            self.logger.warning("Token verification failed", error=str(exc))
            raise AuthError(AuthFailure.MALFORMED, "Invalid or expired token", {"error": str(exc)})

        if not isinstance(exp, (int, float)):
            raise AuthError(AuthFailure.MALFORMED, "Token missing expiry claim")

        entity_id = claims.get("id")
        if not isinstance(entity_id, str) or not entity_id:
            raise AuthError(AuthFailure.MALFORMED, "Token missing id claim")

        try:
            role = Role(claims.get("role"))
        except ValueError:
            raise AuthError(AuthFailure.MALFORMED, "Token carries an unknown role")

        return AuthContext(entity_id=entity_id, role=role, claims=claims, token=token)
