"""
Student authentication routes.
"""
from fastapi import APIRouter, Depends, Request, status

from placementlog.api.deps import get_user_auth_service, require_identity, require_user
from placementlog.core.rate_limit import RATE_AUTH, limiter
from placementlog.core.tokens import TokenClaims
from placementlog.schemas.auth import UserAuthResponse, UserLoginRequest, UserRegisterRequest
from placementlog.schemas.base import BaseSchema, Envelope, MessageResponse, ok
from placementlog.services.auth_service import UserAuthService

router = APIRouter(prefix="/auth", tags=["auth"])


class SessionResponse(BaseSchema):
    """Who the presented token belongs to."""

    id: str
    role: str


@router.post(
    "/register",
    response_model=Envelope[UserAuthResponse],
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    payload: UserRegisterRequest,
    auth_service: UserAuthService = Depends(get_user_auth_service),
):
    """
    Register a new student.

    Returns a user token on successful registration.
    """
    return ok(await auth_service.register(
        registration_number=payload.registration_number,
        password=payload.password,
        display_name=payload.display_name,
    ))


@router.post("/login", response_model=Envelope[UserAuthResponse])
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    payload: UserLoginRequest,
    auth_service: UserAuthService = Depends(get_user_auth_service),
):
    """Login with registration number and password."""
    return ok(await auth_service.login(
        registration_number=payload.registration_number,
        password=payload.password,
    ))


@router.post("/logout", response_model=Envelope[MessageResponse])
async def logout(principal: TokenClaims = Depends(require_user)):
    """
    Logout current user.

    Note: tokens are stateless, so logout is handled client-side by
    discarding the token. The server only checks that it was valid.
    """
    return ok(MessageResponse(message="logged out successfully"))


@router.get("/session", response_model=Envelope[SessionResponse])
async def session(principal: TokenClaims = Depends(require_identity)):
    """Identity and role carried by the presented token (user or admin)."""
    return ok(SessionResponse(id=principal.subject_id, role=principal.role.value))
