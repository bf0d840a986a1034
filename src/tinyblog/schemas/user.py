"""Pydantic schemas for user and authentication API endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(
        min_length=1,
        max_length=50,
        description="Unique username (1-50 characters)",
    )
    password: str = Field(min_length=1, description="Password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username contains only allowed characters."""
        v = v.strip()
        if not v:
            msg = "Username must not be empty"
            raise ValueError(msg)
        if not v.replace("_", "").replace("-", "").replace(".", "").isalnum():
            msg = "Username can only contain letters, numbers, dots, underscores, and hyphens"
            raise ValueError(msg)
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        """Validate password fits within bcrypt's input limit."""
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            msg = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)
        return v


class UserResponse(BaseModel):
    """Response schema for user data (excludes password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="User ID")
    username: str = Field(description="Username")
    created_at: datetime = Field(description="When the user was created")


class UserLogin(BaseModel):
    """Schema for user login request."""

    username: str = Field(min_length=1, description="Username")
    password: str = Field(min_length=1, description="Password")


class Token(BaseModel):
    """Schema for a successful login response."""

    token: str = Field(description="JWT access token")
    username: str = Field(description="Username the token was issued to")
    token_type: str = Field(default="bearer", description="Token type")


class Subject(BaseModel):
    """Identity recovered from a verified token."""

    id: int = Field(description="User ID")
    username: str = Field(description="Username")
