"""Domain exceptions raised by services and translated to HTTP responses."""


class ServiceError(Exception):
    """Base exception for errors that are safe to show to the caller."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidInputError(ServiceError):
    """Raised when a required field is missing or empty."""

    status_code = 400
    default_message = "Invalid input"


class DuplicateUsernameError(ServiceError):
    """Raised when registering a username that already exists."""

    status_code = 400
    default_message = "Username already registered"


class InvalidCredentialsError(ServiceError):
    """Raised when a username/password pair does not match."""

    status_code = 401
    default_message = "Invalid username or password"


class UnknownUserError(InvalidCredentialsError):
    """Raised when logging in as a username that does not exist.

    Shares the public message and status of ``InvalidCredentialsError`` so
    callers cannot tell which half of the credentials was wrong.
    """


class AuthenticationError(ServiceError):
    """Raised when a request carries no usable bearer token."""

    status_code = 401
    default_message = "Could not validate credentials"


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token was supplied."""

    default_message = "Not authenticated"


class MalformedTokenError(AuthenticationError):
    """Raised when a token cannot be decoded or its signature is invalid."""


class ExpiredTokenError(AuthenticationError):
    """Raised when a token is past its expiration time."""

    default_message = "Token has expired"


class NotFoundError(ServiceError):
    """Raised when a resource is not found."""

    status_code = 404
    default_message = "Resource not found"


class NotFoundOrUnauthorizedError(NotFoundError):
    """Raised when a post is missing or owned by someone else.

    The two cases are reported identically so that non-owners cannot learn
    which posts exist.
    """

    default_message = "Post not found or unauthorized"
