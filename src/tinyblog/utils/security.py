"""Security utilities for password hashing and JWT handling."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Annotated

import bcrypt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt

from tinyblog.config import get_settings
from tinyblog.schemas.user import MAX_PASSWORD_BYTES, Subject
from tinyblog.services.errors import (
    ExpiredTokenError,
    InvalidInputError,
    MalformedTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

# OAuth2 scheme for Bearer token authentication; missing tokens are reported
# by get_current_subject so they share the error handling of bad tokens
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def hash_password(password: str) -> str:
    """Hash a plain text password using bcrypt."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        raise InvalidInputError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password."""
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        return False
    hashed_bytes = hashed_password.encode("utf-8")
    return bcrypt.checkpw(password_bytes, hashed_bytes)


@lru_cache
def dummy_password_hash() -> str:
    """Hash compared against when a login names an unknown user.

    Keeps the unknown-user path as slow as the wrong-password path.
    """
    return hash_password("tinyblog-timing-equalizer")


def issue_token(user_id: int, username: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT access token for a user.

    Args:
        user_id: ID of the authenticated user, stored in the "sub" claim.
        username: Username of the authenticated user.
        expires_delta: Optional custom lifetime. Defaults to settings value.

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    to_encode = {
        "sub": str(user_id),
        "username": username,
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def verify_token(token: str | None) -> Subject:
    """Verify a JWT access token and return the identity it carries.

    The user store is not consulted; a token stays valid until it expires.

    Args:
        token: The JWT token string to verify

    Returns:
        The subject encoded in the token

    Raises:
        MissingTokenError: If no token was supplied
        ExpiredTokenError: If the token is past its expiration time
        MalformedTokenError: If the token cannot be decoded or verified
    """
    if not token:
        raise MissingTokenError()

    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True},
        )
    except ExpiredSignatureError:
        raise ExpiredTokenError() from None
    except JWTError:
        raise MalformedTokenError() from None

    # Tokens without an expiry would never lapse
    if "exp" not in payload:
        raise MalformedTokenError()

    user_id_str = payload.get("sub")
    username = payload.get("username")
    if not isinstance(user_id_str, str) or not isinstance(username, str) or not username:
        raise MalformedTokenError()

    try:
        user_id = int(user_id_str)
    except ValueError:
        raise MalformedTokenError() from None

    return Subject(id=user_id, username=username)


async def get_current_subject(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> Subject:
    """Get the identity of the caller from the JWT token.

    This is a FastAPI dependency that validates the JWT token from the
    Authorization header. The returned subject is the only source of truth
    for who is making the request.

    Raises:
        AuthenticationError: If the token is missing, malformed, or expired
    """
    try:
        return verify_token(token)
    except (MissingTokenError, ExpiredTokenError, MalformedTokenError) as e:
        logger.info("Rejected request token: %s", type(e).__name__)
        raise


# Type alias for use in route dependencies
CurrentSubject = Annotated[Subject, Depends(get_current_subject)]
