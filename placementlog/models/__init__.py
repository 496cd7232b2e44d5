"""
Database models for PlacementLog.

Identity and post models use UUID primary keys with created_at/updated_at
timestamps; placement events use sequential integer ids.
"""
from placementlog.models.base import BaseModel, TimestampMixin, UUIDMixin
from placementlog.models.user import User
from placementlog.models.admin import Admin
from placementlog.models.post import Post
from placementlog.models.placement import PlacementCompany, PlacementBranchRecord

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "UUIDMixin",
    "User",
    "Admin",
    "Post",
    "PlacementCompany",
    "PlacementBranchRecord",
]
