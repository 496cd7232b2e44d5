"""
Admin routes - admin authentication, post moderation and placement entry.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from placementlog.api.deps import (
    get_admin_auth_service,
    get_placement_service,
    get_post_service,
    require_admin,
)
from placementlog.core.rate_limit import RATE_AUTH, RATE_WRITE, limiter
from placementlog.core.tokens import TokenClaims
from placementlog.schemas.auth import AdminAuthResponse, AdminCredentialsRequest
from placementlog.schemas.base import Envelope, MessageResponse, ok
from placementlog.schemas.placement import PlacementCreate, PlacementCreated
from placementlog.schemas.post import PostResponse
from placementlog.services.auth_service import AdminAuthService
from placementlog.services.placement_service import PlacementService
from placementlog.services.post_service import PostService

router = APIRouter(prefix="/admin", tags=["admin"])


# ── Authentication ───────────────────────────────────────────────────────────

@router.post("/login", response_model=Envelope[AdminAuthResponse])
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    payload: AdminCredentialsRequest,
    auth_service: AdminAuthService = Depends(get_admin_auth_service),
):
    """Login with admin username and password."""
    return ok(await auth_service.login(
        username=payload.username,
        password=payload.password,
    ))


@router.post(
    "/register",
    response_model=Envelope[AdminAuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    payload: AdminCredentialsRequest,
    principal: TokenClaims = Depends(require_admin),
    auth_service: AdminAuthService = Depends(get_admin_auth_service),
):
    """
    Register another admin.

    Only an existing admin can do this; the guard runs before the body is
    validated, so an unauthenticated caller always gets 401.
    """
    return ok(await auth_service.register(
        username=payload.username,
        password=payload.password,
    ))


@router.post("/logout", response_model=Envelope[MessageResponse])
async def logout(principal: TokenClaims = Depends(require_admin)):
    """Logout current admin (client discards the token)."""
    return ok(MessageResponse(message="admin logged out successfully"))


# ── Post moderation ──────────────────────────────────────────────────────────

@router.get("/posts", response_model=Envelope[List[PostResponse]])
async def list_all_posts(
    principal: TokenClaims = Depends(require_admin),
    post_service: PostService = Depends(get_post_service),
):
    """Every post, reviewed or not, newest first."""
    return ok(await post_service.list_all_for_admin())


@router.put("/posts/review", response_model=Envelope[MessageResponse])
async def review_post(
    post_id: UUID = Query(..., alias="id"),
    action: str = Query(...),
    principal: TokenClaims = Depends(require_admin),
    post_service: PostService = Depends(get_post_service),
):
    """Approve (publish) or reject (hide) a post."""
    reviewed = await post_service.review(post_id, action)
    return ok(MessageResponse(
        message="post approved successfully" if reviewed else "post rejected successfully"
    ))


@router.delete("/posts", response_model=Envelope[MessageResponse])
async def delete_post(
    post_id: UUID = Query(..., alias="id"),
    principal: TokenClaims = Depends(require_admin),
    post_service: PostService = Depends(get_post_service),
):
    """Delete any post regardless of owner."""
    await post_service.delete_as_admin(post_id)
    return ok(MessageResponse(message="post deleted successfully"))


# ── Placements ───────────────────────────────────────────────────────────────

@router.post(
    "/placements",
    response_model=Envelope[PlacementCreated],
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(RATE_WRITE)
async def add_placement(
    request: Request,
    payload: PlacementCreate,
    principal: TokenClaims = Depends(require_admin),
    placement_service: PlacementService = Depends(get_placement_service),
):
    """Record a placement event; branch tallies are derived from the student list."""
    return ok(await placement_service.add_placement(
        company=payload.company,
        ctc=payload.ctc,
        students=payload.students,
        placement_date=payload.placement_date,
    ))
