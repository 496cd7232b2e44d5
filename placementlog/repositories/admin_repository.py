"""
Admin repository - data access for admin identities.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from placementlog.core.exceptions import IdentifierAlreadyExistsException
from placementlog.models.admin import Admin
from placementlog.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Admin)

    async def get_by_username(self, username: str) -> Optional[Admin]:
        """Find an admin by username."""
        result = await self._execute(
            "fetch",
            select(Admin).where(Admin.username == username),
        )
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        result = await self._execute(
            "fetch",
            select(Admin.id).where(Admin.username == username),
        )
        return result.scalar_one_or_none() is not None

    async def create(self, *, username: str, password_hash: str) -> Admin:
        return await self.add_unique(
            IdentifierAlreadyExistsException("username already registered"),
            username=username,
            password_hash=password_hash,
        )
