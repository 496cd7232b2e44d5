"""
Signed, time-bounded, role-carrying bearer tokens.

Tokens are stateless JWTs: nothing is persisted, every request re-verifies
the signature and expiry. There is no revocation list, so a token stays
valid for its whole lifetime even after the client "logs out".
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from placementlog.core.config import Settings
from placementlog.core.exceptions import (
    ConfigError,
    InvalidTokenException,
    TokenExpiredException,
    WrongRoleException,
)


class Role(str, Enum):
    """Roles a token can assert. Students and admins never share one."""

    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class TokenClaims:
    """Identity recovered from a verified token."""

    subject_id: str
    role: Role


class TokenService:
    """
    Issues and validates HMAC-signed JWTs.

    The secret is handed in at construction and never re-read from the
    environment afterwards.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
    ):
        if not secret:
            raise ConfigError("token signing secret is empty or unset")
        if not algorithm.startswith("HS"):
            raise ConfigError(f"expected a symmetric HS* algorithm, got {algorithm!r}")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            settings.secret_key,
            algorithm=settings.algorithm,
            ttl=timedelta(hours=settings.access_token_expire_hours),
        )

    def issue(
        self,
        subject_id: str,
        role: Role,
        *,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Create a token asserting ``subject_id`` and ``role``.

        Args:
            subject_id: Opaque id of the user or admin
            role: Role tag fixed by the issuing auth service
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(subject_id),
            "role": Role(role).value,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def validate(self, token: str) -> TokenClaims:
        """
        Verify signature, algorithm and expiry, then return the claims.

        Raises:
            TokenExpiredException: If the token is past its expiry
            InvalidTokenException: If malformed, badly signed, signed with a
                different algorithm, or missing the subject/role claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
            )
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError as exc:
            raise InvalidTokenException(f"unauthorized: invalid token: {exc}")

        subject_id = payload.get("sub")
        role = payload.get("role")
        if not subject_id or not role:
            raise InvalidTokenException("unauthorized: invalid token claims")
        try:
            return TokenClaims(subject_id=subject_id, role=Role(role))
        except ValueError:
            raise InvalidTokenException("unauthorized: invalid token claims")

    def require_role(self, token: str, expected_role: Role) -> str:
        """Validate ``token`` and return its subject id if it carries ``expected_role``."""
        claims = self.validate(token)
        if claims.role != expected_role:
            raise WrongRoleException(Role(expected_role).value)
        return claims.subject_id
