"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers. Services only see the store
protocols in ``protocols``.
"""
from placementlog.repositories.base import BaseRepository
from placementlog.repositories.protocols import (
    UserStore,
    AdminStore,
    PostStore,
    PlacementStore,
)
from placementlog.repositories.user_repository import UserRepository
from placementlog.repositories.admin_repository import AdminRepository
from placementlog.repositories.post_repository import PostRepository
from placementlog.repositories.placement_repository import PlacementRepository

__all__ = [
    "BaseRepository",
    "UserStore",
    "AdminStore",
    "PostStore",
    "PlacementStore",
    "UserRepository",
    "AdminRepository",
    "PostRepository",
    "PlacementRepository",
]
