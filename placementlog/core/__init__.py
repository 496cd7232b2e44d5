"""Core module exports."""
from placementlog.core.config import settings, get_settings
from placementlog.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from placementlog.core.security import verify_password, hash_password
from placementlog.core.tokens import Role, TokenClaims, TokenService
from placementlog.core.exceptions import (
    ConfigError,
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    ValidationException,
    StoreException,
    InvalidCredentialsException,
    AccountNotFoundException,
    TokenExpiredException,
    InvalidTokenException,
    WrongRoleException,
    IdentifierAlreadyExistsException,
    InvalidActionException,
    PostNotFoundException,
    PostNotFoundOrForbiddenException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "verify_password",
    "hash_password",
    "Role",
    "TokenClaims",
    "TokenService",
    # Exceptions
    "ConfigError",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "ValidationException",
    "StoreException",
    "InvalidCredentialsException",
    "AccountNotFoundException",
    "TokenExpiredException",
    "InvalidTokenException",
    "WrongRoleException",
    "IdentifierAlreadyExistsException",
    "InvalidActionException",
    "PostNotFoundException",
    "PostNotFoundOrForbiddenException",
]
