"""Tests for issuing and validating signed role tokens."""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from placementlog.core.exceptions import (
    ConfigError,
    InvalidTokenException,
    TokenExpiredException,
    WrongRoleException,
)
from placementlog.core.tokens import Role, TokenClaims, TokenService

SECRET = "unit-test-secret"


@pytest.fixture
def tokens():
    return TokenService(SECRET)


def test_issue_then_validate_returns_subject_and_role(tokens):
    token = tokens.issue("u-1", Role.USER)

    assert tokens.validate(token) == TokenClaims(subject_id="u-1", role=Role.USER)


def test_token_expires_after_ttl(tokens):
    issued_long_ago = datetime.now(timezone.utc) - timedelta(hours=25)
    token = tokens.issue("u-1", Role.USER, now=issued_long_ago)

    with pytest.raises(TokenExpiredException) as exc_info:
        tokens.validate(token)
    assert exc_info.value.status_code == 401


def test_token_still_valid_just_inside_ttl(tokens):
    issued = datetime.now(timezone.utc) - timedelta(hours=23)
    token = tokens.issue("a-1", Role.ADMIN, now=issued)

    assert tokens.validate(token).role is Role.ADMIN


def test_token_signed_with_other_secret_is_rejected(tokens):
    forged = TokenService("another-secret").issue("u-1", Role.ADMIN)

    with pytest.raises(InvalidTokenException):
        tokens.validate(forged)


def test_token_with_other_algorithm_is_rejected(tokens):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "u-1", "role": "user", "iat": now, "exp": now + timedelta(hours=1)},
        SECRET,
        algorithm="HS512",
    )

    with pytest.raises(InvalidTokenException):
        tokens.validate(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_token_is_rejected(tokens, token):
    with pytest.raises(InvalidTokenException):
        tokens.validate(token)


def test_token_without_role_claim_is_rejected(tokens):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"sub": "u-1", "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenException):
        tokens.validate(token)


def test_token_with_unknown_role_is_rejected(tokens):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "u-1", "role": "superuser", "exp": now + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenException):
        tokens.validate(token)


def test_require_role_returns_subject_on_match(tokens):
    token = tokens.issue("a-7", Role.ADMIN)

    assert tokens.require_role(token, Role.ADMIN) == "a-7"


def test_require_role_rejects_other_role(tokens):
    token = tokens.issue("u-1", Role.USER)

    with pytest.raises(WrongRoleException) as exc_info:
        tokens.require_role(token, Role.ADMIN)
    assert exc_info.value.message == "unauthorized: admin token required"


def test_empty_secret_refuses_to_construct():
    with pytest.raises(ConfigError):
        TokenService("")


def test_asymmetric_algorithm_refuses_to_construct():
    with pytest.raises(ConfigError):
        TokenService(SECRET, algorithm="RS256")


def test_ttl_is_configurable():
    tokens = TokenService(SECRET, ttl=timedelta(minutes=5))
    token = tokens.issue(
        "u-1",
        Role.USER,
        now=datetime.now(timezone.utc) - timedelta(minutes=6),
    )

    with pytest.raises(TokenExpiredException):
        tokens.validate(token)
