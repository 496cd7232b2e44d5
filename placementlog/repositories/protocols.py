"""
Store contracts.

Services depend on these protocols, never on a concrete repository. The
SQLAlchemy repositories in this package satisfy them for production; tests
plug in in-memory implementations.
"""
from datetime import date
from typing import List, Optional, Protocol, Sequence, Tuple
from uuid import UUID

from placementlog.models.admin import Admin
from placementlog.models.placement import PlacementCompany
from placementlog.models.post import Post
from placementlog.models.user import User


class UserStore(Protocol):
    """Student credentials."""

    async def get_by_registration_number(self, registration_number: str) -> Optional[User]: ...

    async def registration_number_exists(self, registration_number: str) -> bool: ...

    async def create(
        self,
        *,
        registration_number: str,
        password_hash: str,
        display_name: Optional[str] = None,
    ) -> User:
        """Insert a user. Raises IdentifierAlreadyExistsException on a duplicate."""
        ...


class AdminStore(Protocol):
    """Admin credentials."""

    async def get_by_username(self, username: str) -> Optional[Admin]: ...

    async def username_exists(self, username: str) -> bool: ...

    async def create(self, *, username: str, password_hash: str) -> Admin:
        """Insert an admin. Raises IdentifierAlreadyExistsException on a duplicate."""
        ...


class PostStore(Protocol):
    """Posts and their reviewed flag."""

    async def create(self, *, user_id: UUID, post_body: dict) -> Post: ...

    async def update_body(self, post_id: UUID, user_id: UUID, post_body: dict) -> Optional[Post]:
        """Replace the body and clear ``reviewed``. None if missing or not owned."""
        ...

    async def set_reviewed(self, post_id: UUID, reviewed: bool) -> bool:
        """False if no row matched."""
        ...

    async def delete_owned(self, post_id: UUID, user_id: UUID) -> bool:
        """False if missing or not owned."""
        ...

    async def delete(self, post_id: UUID) -> bool: ...

    async def list_reviewed(self) -> List[Post]: ...

    async def list_reviewed_by_user(self, user_id: UUID) -> List[Post]: ...

    async def list_all_newest_first(self) -> List[Post]: ...


# (dimension, counterpart, summed count)
GroupedTotal = Tuple[str, str, int]


class PlacementStore(Protocol):
    """Placement events and per-branch tallies."""

    async def create_with_branch_counts(
        self,
        *,
        company: str,
        ctc: float,
        placement_date: date,
        branch_counts: Sequence[Tuple[str, int]],
    ) -> PlacementCompany:
        """Persist the event and every tally atomically."""
        ...

    async def list_newest_first(self) -> List[PlacementCompany]:
        """Events ordered by placement date descending, tallies loaded."""
        ...

    async def company_branch_totals(self) -> List[GroupedTotal]:
        """(company, branch, total) ordered by company then branch."""
        ...

    async def branch_company_totals(self) -> List[GroupedTotal]:
        """(branch, company, total) ordered by branch then company."""
        ...
