"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.
"""
from typing import Optional, Any


class ConfigError(RuntimeError):
    """Raised at startup when required configuration is missing or unusable."""


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


class ValidationException(APIException):
    """400 Validation Error (missing or malformed input)"""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(400, code, message, details)


class StoreException(APIException):
    """500 - the relational store rejected or failed an operation."""

    def __init__(
        self,
        message: str = "Database operation failed",
        code: str = "STORE_ERROR",
        details: Optional[Any] = None,
    ):
        super().__init__(500, code, message, details)


# Authentication specific exceptions
class InvalidCredentialsException(UnauthorizedException):
    """Password does not match the stored hash"""

    def __init__(self):
        super().__init__(
            message="invalid credentials",
            code="INVALID_CREDENTIALS",
        )


class AccountNotFoundException(UnauthorizedException):
    """No account with the given identifier"""

    def __init__(self):
        super().__init__(
            message="account not found",
            code="ACCOUNT_NOT_FOUND",
        )


class TokenExpiredException(UnauthorizedException):
    """Token has expired"""

    def __init__(self):
        super().__init__(
            message="unauthorized: token has expired",
            code="TOKEN_EXPIRED",
        )


class InvalidTokenException(UnauthorizedException):
    """Token is malformed, badly signed or uses an unexpected algorithm"""

    def __init__(self, message: str = "unauthorized: invalid token"):
        super().__init__(message=message, code="INVALID_TOKEN")


class WrongRoleException(UnauthorizedException):
    """Token is valid but carries the wrong role for this route"""

    def __init__(self, expected_role: str):
        super().__init__(
            message=f"unauthorized: {expected_role} token required",
            code="WRONG_ROLE",
        )


class IdentifierAlreadyExistsException(ConflictException):
    """Registration number or username already registered"""

    def __init__(self, message: str = "identifier already registered"):
        super().__init__(message=message, code="IDENTIFIER_EXISTS")


# Post workflow exceptions
class InvalidActionException(BadRequestException):
    """Review action other than approve/reject"""

    def __init__(self, action: str):
        super().__init__(
            message=f"invalid action {action!r}: must be 'approve' or 'reject'",
            code="INVALID_ACTION",
        )


class PostNotFoundException(NotFoundException):
    """Post not found"""

    def __init__(self):
        super().__init__(message="no post found with given ID", code="POST_NOT_FOUND")


class PostNotFoundOrForbiddenException(NotFoundException):
    """
    Post does not exist, or exists but belongs to someone else.

    Both cases share one message so callers cannot probe which posts exist.
    """

    def __init__(self):
        super().__init__(
            message="post not found or unauthorized",
            code="POST_NOT_FOUND_OR_FORBIDDEN",
        )
