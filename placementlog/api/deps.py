"""
API dependencies for dependency injection.

Access guards validate the bearer token on protected routes; service
providers build each service with its store bound to the request's session.
Tests swap any of these out through ``app.dependency_overrides``.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from placementlog.core.config import settings
from placementlog.core.database import get_db
from placementlog.core.exceptions import UnauthorizedException, WrongRoleException
from placementlog.core.tokens import Role, TokenClaims, TokenService
from placementlog.repositories.admin_repository import AdminRepository
from placementlog.repositories.placement_repository import PlacementRepository
from placementlog.repositories.post_repository import PostRepository
from placementlog.repositories.user_repository import UserRepository
from placementlog.services.auth_service import AdminAuthService, UserAuthService
from placementlog.services.placement_service import PlacementService
from placementlog.services.post_service import PostService


# Security scheme
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_token_service() -> TokenService:
    """Token service built once from settings; raises ConfigError on an empty secret."""
    return TokenService.from_settings(settings)


class AccessGuard:
    """
    Bearer-token guard for protected routes.

    Per request: no or malformed ``Authorization`` header -> 401; token that
    fails validation -> 401; valid token with the wrong role -> 401;
    otherwise the verified claims are returned and stored on
    ``request.state.principal``.

    Identity comes only from the verified token. Client-supplied identity
    headers (``X-User-ID`` and friends) are never read.
    """

    def __init__(self, role: Optional[Role] = None):
        self.role = role

    async def __call__(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
        tokens: TokenService = Depends(get_token_service),
    ) -> TokenClaims:
        if not credentials or not credentials.credentials:
            raise UnauthorizedException(
                "unauthorized: missing or invalid Authorization header"
            )

        claims = tokens.validate(credentials.credentials)
        if self.role is not None and claims.role != self.role:
            raise WrongRoleException(self.role.value)

        request.state.principal = claims
        return claims


# Any valid token, user or admin
require_identity = AccessGuard()
require_user = AccessGuard(Role.USER)
require_admin = AccessGuard(Role.ADMIN)


def get_user_auth_service(
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> UserAuthService:
    return UserAuthService(UserRepository(db), tokens)


def get_admin_auth_service(
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AdminAuthService:
    return AdminAuthService(AdminRepository(db), tokens)


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(PostRepository(db))


def get_placement_service(db: AsyncSession = Depends(get_db)) -> PlacementService:
    return PlacementService(PlacementRepository(db))
