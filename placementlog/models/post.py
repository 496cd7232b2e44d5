"""
Post model - a student's placement experience write-up.
"""
import uuid
from typing import TYPE_CHECKING
from sqlalchemy import JSON, Boolean, ForeignKey, Uuid, false
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from placementlog.models.base import BaseModel

if TYPE_CHECKING:
    from placementlog.models.user import User


class Post(BaseModel):
    """
    Placement experience post.

    Lifecycle: created unreviewed -> approved / rejected by an admin.
    Any edit by the owner puts it back to unreviewed. Only reviewed posts
    are publicly visible.
    """

    __tablename__ = "posts"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # {"company": ..., "role": ..., "rounds": [{"content": ...}, ...]}
    post_body: Mapped[dict] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
    )

    reviewed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
        index=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="posts")

    def __repr__(self) -> str:
        return f"<Post {self.id} reviewed={self.reviewed}>"
