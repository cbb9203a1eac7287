"""Movie model."""

from sqlalchemy import Column, Integer, String

from src.database import Base
from src.models.mixins import TimestampMixin


class Movie(Base, TimestampMixin):
    """Catalog entry."""

    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    director = Column(String(255), nullable=True, index=True)
    release_year = Column(Integer, nullable=True)
