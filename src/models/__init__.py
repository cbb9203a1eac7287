"""SQLAlchemy models."""

from src.models.movie import Movie
from src.models.user import User

__all__ = [
    "User",
    "Movie",
]
