"""Python client for the Tinyblog API."""

from tinyblog.client.api import DEFAULT_API_URL, BlogClient
from tinyblog.client.base import (
    APIError,
    AuthenticationError,
    BaseAPIClient,
    InvalidInputError,
    NotFoundError,
)
from tinyblog.client.session import ClientSession

__all__ = [
    "APIError",
    "AuthenticationError",
    "BaseAPIClient",
    "BlogClient",
    "ClientSession",
    "DEFAULT_API_URL",
    "InvalidInputError",
    "NotFoundError",
]
