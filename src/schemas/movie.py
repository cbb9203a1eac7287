"""Movie schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MovieCreate(BaseModel):
    """Create a new movie."""

    title: str = Field(..., min_length=1, max_length=255)
    director: str | None = Field(None, max_length=255)
    release_year: int | None = None


class MovieUpdate(MovieCreate):
    """Replace a movie's fields. Title stays required."""


class MovieResponse(BaseModel):
    """Movie response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    director: str | None
    release_year: int | None
    created_at: datetime
    updated_at: datetime
