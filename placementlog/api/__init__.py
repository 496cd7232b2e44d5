"""
API package.
"""
from placementlog.api.routes import api_router
from placementlog.api.deps import (
    AccessGuard,
    require_identity,
    require_user,
    require_admin,
)

__all__ = [
    "api_router",
    "AccessGuard",
    "require_identity",
    "require_user",
    "require_admin",
]
