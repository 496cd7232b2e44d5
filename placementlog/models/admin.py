"""
Admin model - separate credential namespace from students.
"""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from placementlog.models.base import BaseModel


class Admin(BaseModel):
    """Administrator identity. Reviews posts and records placements."""

    __tablename__ = "admins"

    username: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Admin {self.username}>"
