"""SQLAlchemy ORM models."""

from tinyblog.models.post import Post
from tinyblog.models.user import User

__all__ = [
    "Post",
    "User",
]
