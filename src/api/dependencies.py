"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.schemas.auth import UserClaims
from src.services.auth import authenticate
from src.services.movie_service import MovieService
from src.services.upload_service import UploadService

# Raw header so malformed values reach authenticate() instead of a generic 403
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer <token>",
)


def get_current_user(
    authorization: Annotated[str | None, Depends(authorization_header)],
) -> UserClaims:
    """Get the current caller's identity from the bearer token."""
    return authenticate(authorization)


def get_movie_service(
    db: Annotated[Session, Depends(get_db)],
) -> MovieService:
    """Get movie service with dependencies."""
    return MovieService(db)


def get_upload_service() -> UploadService:
    """Get upload service configured from settings."""
    settings = get_settings()
    return UploadService(settings.upload_dir, settings.max_upload_bytes)
