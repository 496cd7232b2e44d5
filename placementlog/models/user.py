"""
User model - a student who submits placement experience posts.
"""
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from placementlog.models.base import BaseModel

if TYPE_CHECKING:
    from placementlog.models.post import Post


class User(BaseModel):
    """
    Student identity.

    Keyed by registration number (``22bcs1234`` style, stored lowercase).
    Never edited after registration.
    """

    __tablename__ = "users"

    registration_number: Mapped[str] = mapped_column(
        String(16),
        unique=True,
        nullable=False,
        index=True,
    )
    display_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    posts: Mapped[List["Post"]] = relationship(
        "Post",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User {self.registration_number}>"
