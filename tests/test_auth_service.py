"""Tests for student and admin registration/login."""
import pytest

from fakes import InMemoryAdminStore, InMemoryUserStore
from placementlog.core.exceptions import (
    AccountNotFoundException,
    IdentifierAlreadyExistsException,
    InvalidCredentialsException,
    ValidationException,
)
from placementlog.core.security import verify_password
from placementlog.core.tokens import Role
from placementlog.services.auth_service import (
    AdminAuthService,
    UserAuthService,
    normalize_registration_number,
)

pytestmark = pytest.mark.anyio


@pytest.fixture
def users():
    return InMemoryUserStore()


@pytest.fixture
def admins():
    return InMemoryAdminStore()


@pytest.fixture
def user_auth(users, token_service):
    return UserAuthService(users, token_service)


@pytest.fixture
def admin_auth(admins, token_service):
    return AdminAuthService(admins, token_service)


def test_normalize_registration_number():
    assert normalize_registration_number("  22BCS1234 ") == "22bcs1234"


async def test_register_issues_user_token(user_auth, users, token_service):
    result = await user_auth.register(
        registration_number="22bcs1111",
        password="pw",
        display_name="Asha",
    )

    assert result.registration_number == "22bcs1111"
    assert result.display_name == "Asha"
    claims = token_service.validate(result.token)
    assert claims.subject_id == str(result.id)
    assert claims.role is Role.USER
    stored = users.rows["22bcs1111"]
    assert stored.password_hash != "pw"
    assert verify_password("pw", stored.password_hash)


async def test_register_stores_uppercase_input_lowercased(user_auth, users):
    await user_auth.register(registration_number="22BCS1111", password="pw")

    assert "22bcs1111" in users.rows


@pytest.mark.parametrize(
    "registration_number",
    ["", "bcs1234", "22bcs123", "22bcs12345", "2xbcs1234", "22b1s1234", "22bcs-234"],
)
async def test_register_rejects_malformed_registration_number(user_auth, users, registration_number):
    with pytest.raises(ValidationException) as exc_info:
        await user_auth.register(registration_number=registration_number, password="pw")

    assert exc_info.value.message == "not a valid registration number"
    assert users.rows == {}


async def test_register_rejects_empty_password(user_auth):
    with pytest.raises(ValidationException):
        await user_auth.register(registration_number="22bcs1111", password="")


async def test_register_twice_conflicts(user_auth):
    await user_auth.register(registration_number="22bcs1111", password="pw")

    with pytest.raises(IdentifierAlreadyExistsException) as exc_info:
        await user_auth.register(registration_number="22BCS1111", password="other")
    assert exc_info.value.status_code == 409


async def test_login_with_correct_password(user_auth, token_service):
    registered = await user_auth.register(registration_number="22bcs1111", password="pw")

    result = await user_auth.login(registration_number="22BCS1111", password="pw")

    assert result.id == registered.id
    assert token_service.validate(result.token).role is Role.USER


async def test_login_unknown_account(user_auth):
    with pytest.raises(AccountNotFoundException) as exc_info:
        await user_auth.login(registration_number="22bcs9999", password="pw")
    assert exc_info.value.status_code == 401


async def test_login_wrong_password(user_auth):
    await user_auth.register(registration_number="22bcs1111", password="pw")

    with pytest.raises(InvalidCredentialsException) as exc_info:
        await user_auth.login(registration_number="22bcs1111", password="nope")
    assert exc_info.value.status_code == 401


async def test_admin_register_and_login_issue_admin_tokens(admin_auth, token_service):
    registered = await admin_auth.register(username="root", password="rootpw")
    logged_in = await admin_auth.login(username="root", password="rootpw")

    assert registered.username == "root"
    assert logged_in.id == registered.id
    assert token_service.validate(registered.token).role is Role.ADMIN
    assert token_service.validate(logged_in.token).role is Role.ADMIN


async def test_admin_register_requires_username(admin_auth):
    with pytest.raises(ValidationException):
        await admin_auth.register(username="   ", password="pw")


async def test_admin_register_twice_conflicts(admin_auth):
    await admin_auth.register(username="root", password="a")

    with pytest.raises(IdentifierAlreadyExistsException):
        await admin_auth.register(username="root", password="b")


async def test_admin_login_failures(admin_auth):
    await admin_auth.register(username="root", password="rootpw")

    with pytest.raises(AccountNotFoundException):
        await admin_auth.login(username="nobody", password="rootpw")
    with pytest.raises(InvalidCredentialsException):
        await admin_auth.login(username="root", password="wrong")


async def test_student_credentials_never_yield_admin_token(users, admins, token_service):
    user_auth = UserAuthService(users, token_service)
    admin_auth = AdminAuthService(admins, token_service)
    await user_auth.register(registration_number="22bcs1111", password="pw")

    with pytest.raises(AccountNotFoundException):
        await admin_auth.login(username="22bcs1111", password="pw")
