"""Movie catalog API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_movie_service
from src.schemas.auth import MessageResponse, UserClaims
from src.schemas.movie import MovieCreate, MovieResponse, MovieUpdate
from src.services.movie_service import MovieService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["movies"])


@router.get("/movies", response_model=list[MovieResponse])
def list_movies(
    current_user: Annotated[UserClaims, Depends(get_current_user)],
    service: Annotated[MovieService, Depends(get_movie_service)],
    search: str | None = None,
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
    director: str | None = None,
):
    """List movies with optional title search, director filter and sort column."""
    logger.info(
        f"User {current_user.username} listing movies "
        f"(search={search!r}, sortBy={sort_by!r}, director={director!r})"
    )
    return service.list_movies(search=search, sort_by=sort_by, director=director)


@router.get("/movie/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: int,
    service: Annotated[MovieService, Depends(get_movie_service)],
):
    """Get a specific movie."""
    return service.get_movie(movie_id)


@router.post("/movie", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_data: MovieCreate,
    service: Annotated[MovieService, Depends(get_movie_service)],
):
    """Add a movie to the catalog."""
    return service.create_movie(
        title=movie_data.title,
        director=movie_data.director,
        release_year=movie_data.release_year,
    )


@router.api_route("/movie/{movie_id}", methods=["PUT", "PATCH"], response_model=MovieResponse)
def update_movie(
    movie_id: int,
    movie_data: MovieUpdate,
    service: Annotated[MovieService, Depends(get_movie_service)],
):
    """Replace a movie's title, director and release year."""
    return service.update_movie(
        movie_id,
        title=movie_data.title,
        director=movie_data.director,
        release_year=movie_data.release_year,
    )


@router.delete("/movie/{movie_id}", response_model=MessageResponse)
def delete_movie(
    movie_id: int,
    service: Annotated[MovieService, Depends(get_movie_service)],
):
    """Delete a movie."""
    return service.delete_movie(movie_id)
