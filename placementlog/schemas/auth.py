"""
Authentication schemas.
"""
from typing import Optional
from uuid import UUID
from pydantic import Field
from placementlog.schemas.base import BaseSchema


class UserLoginRequest(BaseSchema):
    """Student login request body."""

    registration_number: str = Field(..., min_length=1, max_length=16)
    password: str = Field(..., min_length=1)


class UserRegisterRequest(BaseSchema):
    """Student registration request body."""

    registration_number: str = Field(..., min_length=1, max_length=16)
    display_name: Optional[str] = Field(None, max_length=255)
    password: str = Field(..., min_length=1)


class AdminCredentialsRequest(BaseSchema):
    """Admin login / registration request body."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class UserAuthResponse(BaseSchema):
    """Payload after a successful student login or registration."""

    id: UUID
    registration_number: str
    display_name: Optional[str] = None
    token: str


class AdminAuthResponse(BaseSchema):
    """Payload after a successful admin login or registration."""

    id: UUID
    username: str
    token: str
