"""
Post repository - data access for placement experience posts.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from placementlog.models.post import Post
from placementlog.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Post)

    async def create(self, *, user_id: UUID, post_body: dict) -> Post:
        """Insert a new post. Always starts unreviewed."""
        return await self.add(user_id=user_id, post_body=post_body, reviewed=False)

    async def update_body(
        self,
        post_id: UUID,
        user_id: UUID,
        post_body: dict,
    ) -> Optional[Post]:
        """
        Replace a post's body and send it back to review.

        The owner filter is part of the lookup, so a post owned by someone
        else is indistinguishable from a missing one. The row is reloaded
        from the database, never taken from the session's cached copy.
        """
        result = await self._execute(
            "fetch",
            select(Post)
            .where(Post.id == post_id, Post.user_id == user_id)
            .execution_options(populate_existing=True),
        )
        post = result.scalar_one_or_none()
        if post is None:
            return None

        post.post_body = post_body
        post.reviewed = False
        await self._commit("update", refresh=post)
        return post

    async def set_reviewed(self, post_id: UUID, reviewed: bool) -> bool:
        result = await self._execute(
            "update",
            update(Post).where(Post.id == post_id).values(reviewed=reviewed),
        )
        await self._commit("update")
        return result.rowcount > 0

    async def delete_owned(self, post_id: UUID, user_id: UUID) -> bool:
        result = await self._execute(
            "delete",
            delete(Post).where(Post.id == post_id, Post.user_id == user_id),
        )
        await self._commit("delete")
        return result.rowcount > 0

    async def list_reviewed(self) -> List[Post]:
        """All approved posts, newest first."""
        result = await self._execute(
            "fetch",
            select(Post).where(Post.reviewed == True).order_by(Post.created_at.desc()),
        )
        return list(result.scalars().all())

    async def list_reviewed_by_user(self, user_id: UUID) -> List[Post]:
        result = await self._execute(
            "fetch",
            select(Post)
            .where(Post.user_id == user_id, Post.reviewed == True)
            .order_by(Post.created_at.desc()),
        )
        return list(result.scalars().all())

    async def list_all_newest_first(self) -> List[Post]:
        """Every post regardless of review state (admin moderation queue)."""
        result = await self._execute(
            "fetch",
            select(Post).order_by(Post.created_at.desc()),
        )
        return list(result.scalars().all())
