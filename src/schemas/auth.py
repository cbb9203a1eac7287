"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """User registration request."""

    fullname: str = Field(..., min_length=1, max_length=255)
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    fullname: str
    username: str
    email: str
    is_verified: bool
    created_at: datetime


class LoginResponse(BaseModel):
    """Login response with session token and user info."""

    message: str = "Login successful"
    token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse


class UserClaims(BaseModel):
    """Identity carried by a session token."""

    id: int
    username: str
    email: str
    iat: int | None = None
    exp: int | None = None


class MessageResponse(BaseModel):
    """Plain acknowledgment."""

    message: str
