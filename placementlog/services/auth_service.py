"""
Authentication services - registration and login for students and admins.

Each service issues tokens with one fixed role, so a student credential can
never yield an admin token and vice versa.
"""
import re
from typing import Optional

from placementlog.core.exceptions import (
    AccountNotFoundException,
    IdentifierAlreadyExistsException,
    InvalidCredentialsException,
    ValidationException,
)
from placementlog.core.logging import get_logger
from placementlog.core.security import hash_password, verify_password
from placementlog.core.tokens import Role, TokenService
from placementlog.repositories.protocols import AdminStore, UserStore
from placementlog.schemas.auth import AdminAuthResponse, UserAuthResponse

logger = get_logger(__name__)

# Two-digit year, three-letter branch code, four-digit roll number: 22bcs1234
REGISTRATION_NUMBER_RE = re.compile(r"^\d{2}[a-z]{3}\d{4}$")


def normalize_registration_number(registration_number: str) -> str:
    """Registration numbers are case-insensitive and stored lowercase."""
    return registration_number.strip().lower()


class UserAuthService:
    """Handles student authentication business logic."""

    role = Role.USER

    def __init__(self, users: UserStore, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    async def register(
        self,
        *,
        registration_number: str,
        password: str,
        display_name: Optional[str] = None,
    ) -> UserAuthResponse:
        """
        Register a new student and return a token.

        Raises:
            ValidationException: If the registration number is malformed.
            IdentifierAlreadyExistsException: If it is already registered.
        """
        regno = normalize_registration_number(registration_number)
        if not REGISTRATION_NUMBER_RE.match(regno):
            raise ValidationException("not a valid registration number")
        if not password:
            raise ValidationException("password is required")

        if await self.users.registration_number_exists(regno):
            raise IdentifierAlreadyExistsException("registration number already registered")

        user = await self.users.create(
            registration_number=regno,
            password_hash=hash_password(password),
            display_name=display_name,
        )
        logger.info("user_registered", user_id=str(user.id))

        return UserAuthResponse(
            id=user.id,
            registration_number=user.registration_number,
            display_name=user.display_name,
            token=self.tokens.issue(str(user.id), self.role),
        )

    async def login(
        self,
        *,
        registration_number: str,
        password: str,
    ) -> UserAuthResponse:
        """
        Authenticate a student and return a token.

        Raises:
            AccountNotFoundException: If no such registration number.
            InvalidCredentialsException: If the password is wrong.
        """
        regno = normalize_registration_number(registration_number)
        user = await self.users.get_by_registration_number(regno)

        if user is None:
            raise AccountNotFoundException()
        if not verify_password(password, user.password_hash):
            logger.info("login_failed", user_id=str(user.id))
            raise InvalidCredentialsException()

        return UserAuthResponse(
            id=user.id,
            registration_number=user.registration_number,
            display_name=user.display_name,
            token=self.tokens.issue(str(user.id), self.role),
        )


class AdminAuthService:
    """
    Handles admin authentication business logic.

    Registration is not self-service: the route in front of ``register``
    requires an admin token.
    """

    role = Role.ADMIN

    def __init__(self, admins: AdminStore, tokens: TokenService):
        self.admins = admins
        self.tokens = tokens

    async def register(self, *, username: str, password: str) -> AdminAuthResponse:
        username = username.strip()
        if not username:
            raise ValidationException("username is required")
        if not password:
            raise ValidationException("password is required")

        if await self.admins.username_exists(username):
            raise IdentifierAlreadyExistsException("username already registered")

        admin = await self.admins.create(
            username=username,
            password_hash=hash_password(password),
        )
        logger.info("admin_registered", admin_id=str(admin.id))

        return AdminAuthResponse(
            id=admin.id,
            username=admin.username,
            token=self.tokens.issue(str(admin.id), self.role),
        )

    async def login(self, *, username: str, password: str) -> AdminAuthResponse:
        admin = await self.admins.get_by_username(username.strip())

        if admin is None:
            raise AccountNotFoundException()
        if not verify_password(password, admin.password_hash):
            logger.info("admin_login_failed", admin_id=str(admin.id))
            raise InvalidCredentialsException()

        return AdminAuthResponse(
            id=admin.id,
            username=admin.username,
            token=self.tokens.issue(str(admin.id), self.role),
        )
