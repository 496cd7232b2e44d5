"""
Post workflow service - creation, editing, moderation and deletion of posts.

A post is either unreviewed (hidden) or approved (public). Creation and any
owner edit leave it unreviewed; only an admin review approves it. Rejecting
is the same state as never reviewed.
"""
from typing import List, Union
from uuid import UUID

from placementlog.core.exceptions import (
    InvalidActionException,
    PostNotFoundException,
    PostNotFoundOrForbiddenException,
    ValidationException,
)
from placementlog.core.logging import get_logger
from placementlog.models.post import Post
from placementlog.repositories.protocols import PostStore
from placementlog.schemas.post import PostResponse

logger = get_logger(__name__)

# review action -> resulting reviewed flag
REVIEW_ACTIONS = {
    "approve": True,
    "reject": False,
}


def _owner_uuid(owner_id: Union[str, UUID, None]) -> UUID:
    if not owner_id:
        raise ValidationException("user ID is required")
    if isinstance(owner_id, UUID):
        return owner_id
    try:
        return UUID(str(owner_id))
    except ValueError:
        raise ValidationException("user ID is not a valid identifier")


class PostService:
    """Handles the post moderation workflow."""

    def __init__(self, posts: PostStore):
        self.posts = posts

    async def create(self, owner_id: Union[str, UUID], body: dict) -> PostResponse:
        """Create a post owned by ``owner_id``. Always starts unreviewed."""
        owner = _owner_uuid(owner_id)
        if body is None:
            raise ValidationException("post body is required")

        post = await self.posts.create(user_id=owner, post_body=body)
        logger.info("post_created", post_id=str(post.id), user_id=str(owner))
        return self._to_response(post)

    async def edit(
        self,
        post_id: UUID,
        owner_id: Union[str, UUID],
        body: dict,
    ) -> PostResponse:
        """
        Replace the body of an owned post and send it back to review.

        Raises:
            PostNotFoundOrForbiddenException: If the post is missing or owned
                by someone else (deliberately not distinguished).
        """
        owner = _owner_uuid(owner_id)
        if body is None:
            raise ValidationException("post body is required")

        post = await self.posts.update_body(post_id, owner, body)
        if post is None:
            raise PostNotFoundOrForbiddenException()

        logger.info("post_edited", post_id=str(post_id), user_id=str(owner))
        return self._to_response(post)

    async def review(self, post_id: UUID, action: str) -> bool:
        """
        Approve or reject a post (admin only, no ownership check).

        Returns the new reviewed flag.

        Raises:
            InvalidActionException: If ``action`` is not approve/reject.
                Nothing is written in that case.
            PostNotFoundException: If no post has that id.
        """
        if action not in REVIEW_ACTIONS:
            raise InvalidActionException(action)

        reviewed = REVIEW_ACTIONS[action]
        if not await self.posts.set_reviewed(post_id, reviewed):
            raise PostNotFoundException()

        logger.info("post_reviewed", post_id=str(post_id), action=action)
        return reviewed

    async def delete(self, post_id: UUID, owner_id: Union[str, UUID]) -> None:
        """Delete an owned post. Same ambiguous error as ``edit``."""
        owner = _owner_uuid(owner_id)
        if not await self.posts.delete_owned(post_id, owner):
            raise PostNotFoundOrForbiddenException()
        logger.info("post_deleted", post_id=str(post_id), user_id=str(owner))

    async def delete_as_admin(self, post_id: UUID) -> None:
        """Delete any post regardless of owner."""
        if not await self.posts.delete(post_id):
            raise PostNotFoundException()
        logger.info("post_deleted_by_admin", post_id=str(post_id))

    async def list_public(self) -> List[PostResponse]:
        return [self._to_response(p) for p in await self.posts.list_reviewed()]

    async def list_own(self, owner_id: Union[str, UUID]) -> List[PostResponse]:
        """
        Approved posts of one user.

        Pending posts are not included, even for their owner.
        """
        owner = _owner_uuid(owner_id)
        return [self._to_response(p) for p in await self.posts.list_reviewed_by_user(owner)]

    async def list_all_for_admin(self) -> List[PostResponse]:
        return [self._to_response(p) for p in await self.posts.list_all_newest_first()]

    def _to_response(self, post: Post) -> PostResponse:
        return PostResponse(
            id=post.id,
            user_id=post.user_id,
            post_body=post.post_body,
            reviewed=post.reviewed,
            created_at=post.created_at,
        )
