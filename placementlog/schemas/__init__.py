"""
Pydantic schemas for API validation and serialization.
"""
from placementlog.schemas.base import (
    BaseSchema,
    Envelope,
    MessageResponse,
    ok,
    error_body,
)
from placementlog.schemas.auth import (
    UserLoginRequest,
    UserRegisterRequest,
    AdminCredentialsRequest,
    UserAuthResponse,
    AdminAuthResponse,
)
from placementlog.schemas.post import (
    PostWriteRequest,
    PostResponse,
)
from placementlog.schemas.placement import (
    BranchCount,
    CompanyCount,
    PlacementCreate,
    PlacementCreated,
    PlacementResponse,
    CompanyBranchMap,
    BranchCompanyMap,
)

__all__ = [
    # Base
    "BaseSchema",
    "Envelope",
    "MessageResponse",
    "ok",
    "error_body",
    # Auth
    "UserLoginRequest",
    "UserRegisterRequest",
    "AdminCredentialsRequest",
    "UserAuthResponse",
    "AdminAuthResponse",
    # Post
    "PostWriteRequest",
    "PostResponse",
    # Placement
    "BranchCount",
    "CompanyCount",
    "PlacementCreate",
    "PlacementCreated",
    "PlacementResponse",
    "CompanyBranchMap",
    "BranchCompanyMap",
]
