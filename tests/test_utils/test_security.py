"""Tests for password hashing and JWT handling."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from tinyblog.config import get_settings
from tinyblog.services.errors import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidInputError,
    MalformedTokenError,
    MissingTokenError,
)
from tinyblog.utils.security import (
    dummy_password_hash,
    get_current_subject,
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)


class TestPasswordHashing:
    """Tests for bcrypt helpers."""

    def test_hash_and_verify(self) -> None:
        """Test that a hashed password verifies."""
        hashed = hash_password("pw1")

        assert hashed != "pw1"
        assert verify_password("pw1", hashed)
        assert not verify_password("pw2", hashed)

    def test_hash_is_salted(self) -> None:
        """Test that the same password hashes differently each time."""
        assert hash_password("pw1") != hash_password("pw1")

    def test_hash_rejects_long_password(self) -> None:
        """Test that passwords over bcrypt's limit are rejected."""
        with pytest.raises(InvalidInputError):
            hash_password("x" * 73)

    def test_verify_long_password_fails(self) -> None:
        """Test that an over-long password never matches."""
        hashed = hash_password("x" * 72)

        assert not verify_password("x" * 73, hashed)

    def test_dummy_hash_is_cached(self) -> None:
        """Test that the unknown-user hash is computed once."""
        assert dummy_password_hash() is dummy_password_hash()


class TestIssueToken:
    """Tests for JWT token creation."""

    def test_issue_token(self) -> None:
        """Test JWT token creation embeds subject and expiry."""
        token = issue_token(42, "alice")

        settings = get_settings()
        claims = jwt.get_unverified_claims(token)
        assert claims["sub"] == "42"
        assert claims["username"] == "alice"
        expected = datetime.now(UTC) + timedelta(minutes=settings.jwt_access_token_expire_minutes)
        assert abs(claims["exp"] - expected.timestamp()) < 60

    def test_issue_token_custom_expiry(self) -> None:
        """Test JWT token creation with a custom lifetime."""
        token = issue_token(1, "alice", expires_delta=timedelta(minutes=5))

        claims = jwt.get_unverified_claims(token)
        expected = datetime.now(UTC) + timedelta(minutes=5)
        assert abs(claims["exp"] - expected.timestamp()) < 60


class TestVerifyToken:
    """Tests for JWT token validation."""

    def test_verify_valid(self) -> None:
        """Test verifying a freshly issued token."""
        subject = verify_token(issue_token(42, "alice"))

        assert subject.id == 42
        assert subject.username == "alice"

    def test_verify_just_before_expiry(self) -> None:
        """Test that a token is accepted while it has time left."""
        token = issue_token(1, "alice", expires_delta=timedelta(seconds=30))

        assert verify_token(token).id == 1

    def test_verify_expired(self) -> None:
        """Test that a token past its expiry is rejected."""
        token = issue_token(1, "alice", expires_delta=timedelta(seconds=-1))

        with pytest.raises(ExpiredTokenError):
            verify_token(token)

    @pytest.mark.parametrize("token", [None, ""])
    def test_verify_missing(self, token: str | None) -> None:
        """Test that an absent token is reported as missing."""
        with pytest.raises(MissingTokenError):
            verify_token(token)

    def test_verify_invalid(self) -> None:
        """Test decoding an invalid JWT token."""
        with pytest.raises(MalformedTokenError):
            verify_token("invalid.token.here")

    def test_verify_tampered(self) -> None:
        """Test decoding a tampered JWT token."""
        token = issue_token(1, "alice")
        # Tamper with the token by modifying it
        tampered_token = token[:-5] + "xxxxx"

        with pytest.raises(MalformedTokenError):
            verify_token(tampered_token)

    def test_verify_wrong_secret(self) -> None:
        """Test that a token signed with another key is rejected."""
        settings = get_settings()
        token = jwt.encode(
            {"sub": "1", "username": "alice", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            "some-other-secret-key-that-is-long-enough",
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(MalformedTokenError):
            verify_token(token)

    @pytest.mark.parametrize(
        "claims",
        [
            {"username": "alice", "exp": 300},
            {"sub": "1", "exp": 300},
            {"sub": "not-a-number", "username": "alice", "exp": 300},
            {"sub": "1", "username": "", "exp": 300},
            {"sub": "1", "username": "alice"},
        ],
    )
    def test_verify_incomplete_claims(self, claims: dict) -> None:
        """Test that tokens without a usable subject or an expiry are rejected."""
        settings = get_settings()
        if "exp" in claims:
            claims = {**claims, "exp": datetime.now(UTC) + timedelta(seconds=claims["exp"])}
        token = jwt.encode(
            claims,
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(MalformedTokenError):
            verify_token(token)

    def test_errors_share_authentication_base(self) -> None:
        """Test that every token failure is an authentication error."""
        for error in (MissingTokenError, MalformedTokenError, ExpiredTokenError):
            assert issubclass(error, AuthenticationError)
            assert error.status_code == 401


class TestGetCurrentSubject:
    """Tests for the request dependency."""

    async def test_returns_subject(self) -> None:
        """Test that a valid token resolves to its subject."""
        subject = await get_current_subject(issue_token(7, "carol"))

        assert subject.id == 7
        assert subject.username == "carol"

    async def test_missing_token(self) -> None:
        """Test that no token raises MissingTokenError."""
        with pytest.raises(MissingTokenError):
            await get_current_subject(None)
