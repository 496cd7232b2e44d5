"""
User repository - data access for student identities.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from placementlog.core.exceptions import IdentifierAlreadyExistsException
from placementlog.models.user import User
from placementlog.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_registration_number(
        self,
        registration_number: str,
    ) -> Optional[User]:
        """Find a user by registration number (exact match, stored lowercase)."""
        result = await self._execute(
            "fetch",
            select(User).where(User.registration_number == registration_number),
        )
        return result.scalar_one_or_none()

    async def registration_number_exists(
        self,
        registration_number: str,
    ) -> bool:
        """Check if a registration number is already registered."""
        result = await self._execute(
            "fetch",
            select(User.id).where(User.registration_number == registration_number),
        )
        return result.scalar_one_or_none() is not None

    async def create(
        self,
        *,
        registration_number: str,
        password_hash: str,
        display_name: Optional[str] = None,
    ) -> User:
        return await self.add_unique(
            IdentifierAlreadyExistsException("registration number already registered"),
            registration_number=registration_number,
            password_hash=password_hash,
            display_name=display_name,
        )
