"""Pydantic schemas for request/response validation."""

from tinyblog.schemas.post import (
    MessageResponse,
    PostBase,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from tinyblog.schemas.user import (
    Subject,
    Token,
    UserCreate,
    UserLogin,
    UserResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "Token",
    "Subject",
    # Post schemas
    "PostBase",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
    "MessageResponse",
]
