"""
Post routes.

Thin controllers - PostService owns the review state machine.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from placementlog.api.deps import get_post_service, require_user
from placementlog.core.exceptions import ForbiddenException
from placementlog.core.rate_limit import RATE_WRITE, limiter
from placementlog.core.tokens import TokenClaims
from placementlog.schemas.base import Envelope, MessageResponse, ok
from placementlog.schemas.post import PostResponse, PostWriteRequest
from placementlog.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=Envelope[List[PostResponse]])
async def list_posts(post_service: PostService = Depends(get_post_service)):
    """Public feed: approved posts only."""
    return ok(await post_service.list_public())


@router.post(
    "",
    response_model=Envelope[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(RATE_WRITE)
async def create_post(
    request: Request,
    payload: PostWriteRequest,
    principal: TokenClaims = Depends(require_user),
    post_service: PostService = Depends(get_post_service),
):
    """Submit a post. It stays hidden until an admin approves it."""
    return ok(await post_service.create(
        principal.subject_id,
        payload.post_body,
    ))


@router.put("", response_model=Envelope[PostResponse])
async def update_post(
    payload: PostWriteRequest,
    post_id: UUID = Query(..., alias="id"),
    principal: TokenClaims = Depends(require_user),
    post_service: PostService = Depends(get_post_service),
):
    """Edit an own post. The post goes back to the review queue."""
    return ok(await post_service.edit(
        post_id,
        principal.subject_id,
        payload.post_body,
    ))


@router.delete("", response_model=Envelope[MessageResponse])
async def delete_post(
    post_id: UUID = Query(..., alias="id"),
    principal: TokenClaims = Depends(require_user),
    post_service: PostService = Depends(get_post_service),
):
    """Delete an own post, reviewed or not."""
    await post_service.delete(post_id, principal.subject_id)
    return ok(MessageResponse(message="post deleted successfully"))


@router.get("/user", response_model=Envelope[List[PostResponse]])
async def list_user_posts(
    user_id: UUID = Query(...),
    principal: TokenClaims = Depends(require_user),
    post_service: PostService = Depends(get_post_service),
):
    """Approved posts of the calling user. Asking for anyone else's is 403."""
    if user_id != UUID(principal.subject_id):
        raise ForbiddenException("forbidden: can only list your own posts")
    return ok(await post_service.list_own(principal.subject_id))
