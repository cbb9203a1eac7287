"""Movie catalog service."""

import logging

from sqlalchemy.orm import Session

from src.exceptions import NotFoundError
from src.models.movie import Movie

logger = logging.getLogger(__name__)

# Columns a caller may sort the catalog by
SORTABLE_COLUMNS = {
    "id": Movie.id,
    "title": Movie.title,
    "director": Movie.director,
    "release_year": Movie.release_year,
}


class MovieService:
    """Service for movie CRUD operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_movies(
        self,
        search: str | None = None,
        sort_by: str | None = None,
        director: str | None = None,
    ) -> list[Movie]:
        """List movies, optionally filtered and sorted.

        Args:
            search: substring to look for in the title
            sort_by: column to order by; ignored unless it is in SORTABLE_COLUMNS
            director: exact director name to filter on
        """
        query = self.db.query(Movie)

        if search:
            query = query.filter(Movie.title.like(f"%{search}%"))

        if director:
            query = query.filter(Movie.director == director)

        if sort_by:
            column = SORTABLE_COLUMNS.get(sort_by)
            if column is not None:
                query = query.order_by(column)
            else:
                logger.warning(f"Ignoring sort on invalid column: {sort_by}")

        return query.all()

    def get_movie(self, movie_id: int) -> Movie:
        """Get a movie by id."""
        movie = self.db.query(Movie).filter(Movie.id == movie_id).first()
        if not movie:
            raise NotFoundError("Movie not found")
        return movie

    def create_movie(
        self, title: str, director: str | None = None, release_year: int | None = None
    ) -> Movie:
        """Create a movie."""
        movie = Movie(title=title, director=director, release_year=release_year)
        self.db.add(movie)
        self.db.commit()
        self.db.refresh(movie)
        return movie

    def update_movie(
        self,
        movie_id: int,
        title: str,
        director: str | None = None,
        release_year: int | None = None,
    ) -> Movie:
        """Replace a movie's title, director and release year."""
        movie = self.get_movie(movie_id)
        movie.title = title
        movie.director = director
        movie.release_year = release_year
        self.db.commit()
        self.db.refresh(movie)
        return movie

    def delete_movie(self, movie_id: int) -> dict:
        """Delete a movie."""
        deleted = self.db.query(Movie).filter(Movie.id == movie_id).delete()
        self.db.commit()
        if deleted == 0:
            raise NotFoundError("Movie not found")
        return {"message": "Movie deleted successfully"}
