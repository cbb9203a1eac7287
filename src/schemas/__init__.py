"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserClaims,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.movie import MovieCreate, MovieResponse, MovieUpdate
from src.schemas.upload import UploadResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "UserClaims",
    "LoginResponse",
    "MessageResponse",
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "UploadResponse",
]
