"""Business logic for users and posts."""

from tinyblog.services.errors import (
    AuthenticationError,
    DuplicateUsernameError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidInputError,
    MalformedTokenError,
    MissingTokenError,
    NotFoundError,
    NotFoundOrUnauthorizedError,
    ServiceError,
    UnknownUserError,
)

__all__ = [
    "AuthenticationError",
    "DuplicateUsernameError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidInputError",
    "MalformedTokenError",
    "MissingTokenError",
    "NotFoundError",
    "NotFoundOrUnauthorizedError",
    "ServiceError",
    "UnknownUserError",
]
