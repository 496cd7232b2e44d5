"""
API Routes package.
"""
from fastapi import APIRouter

from placementlog.api.routes.auth import router as auth_router
from placementlog.api.routes.admin import router as admin_router
from placementlog.api.routes.health import router as health_router
from placementlog.api.routes.posts import router as posts_router
from placementlog.api.routes.placements import router as placements_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(admin_router)
api_router.include_router(posts_router)
api_router.include_router(placements_router)

__all__ = [
    "api_router",
    "auth_router",
    "admin_router",
    "health_router",
    "posts_router",
    "placements_router",
]
