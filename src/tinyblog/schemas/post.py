"""Pydantic schemas for post API endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostBase(BaseModel):
    """Base schema for post data.

    Any other fields in the request body (such as an author) are ignored;
    ownership always comes from the verified token.
    """

    title: str = Field(max_length=255, description="Post title")
    content: str = Field(description="Post body")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate the field is not empty or whitespace."""
        if not v.strip():
            msg = "Title and content are required"
            raise ValueError(msg)
        return v


class PostCreate(PostBase):
    """Schema for creating a post."""

    pass


class PostUpdate(PostBase):
    """Schema for replacing a post's title and content."""

    pass


class PostResponse(BaseModel):
    """Response schema for a post with its author's name."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Post ID")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    author_id: int = Field(description="Author user ID")
    author: str = Field(description="Author username")
    created_at: datetime = Field(description="When the post was created")
    updated_at: datetime = Field(description="When the post was last modified")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str = Field(description="Human-readable message")
