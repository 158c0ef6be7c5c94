"""
Movie catalog: immutable movie records, validation and loading.
"""

import logging
import math
import numbers
from dataclasses import dataclass

import pandas as pd

from .utils import CATALOG_PATH, RATING_SCALE, REQUIRED_COLUMNS

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "genre", "actor", "industry")


class InvalidMovieError(ValueError):
    """Raised when a movie record cannot be added to the catalog."""


@dataclass(frozen=True)
class Movie:
    id: int
    title: str
    genre: str
    actor: str
    rating: float
    industry: str

    def display(self):
        return f"{self.title} ({self.genre}, {self.actor}, Rating: {self.rating}, {self.industry})"


def _clean_text(record, field, index):
    value = record.get(field)
    if not isinstance(value, str) or not value.strip():
        raise InvalidMovieError(f"Record {index}: missing or blank '{field}'")
    return value.strip()


def _clean_rating(record, index):
    value = record.get("rating")
    if value is None or isinstance(value, bool):
        raise InvalidMovieError(f"Record {index}: missing 'rating'")
    try:
        rating = float(value)
    except (TypeError, ValueError):
        raise InvalidMovieError(f"Record {index}: rating {value!r} is not a number")
    if math.isnan(rating):
        raise InvalidMovieError(f"Record {index}: missing 'rating'")
    if not 0.0 <= rating <= RATING_SCALE:
        raise InvalidMovieError(f"Record {index}: rating {rating} outside [0, {RATING_SCALE:g}]")
    return rating


class Catalog:
    """
    Ordered, read-only sequence of movies.

    Identifiers are assigned sequentially from 1 in insertion order, so the
    zero-based position of a movie is always ``movie.id - 1``.
    """

    def __init__(self, records=()):
        movies = []
        for index, record in enumerate(records):
            texts = {field: _clean_text(record, field, index) for field in TEXT_FIELDS}
            movies.append(Movie(id=index + 1, rating=_clean_rating(record, index), **texts))
        self._movies = tuple(movies)
        logger.info("Catalog loaded with %d movies", len(self._movies))

    @classmethod
    def from_dataframe(cls, df):
        """Build a catalog from a DataFrame carrying the required columns."""
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise InvalidMovieError(
                f"Catalog columns missing: {missing}. "
                f"Columns found: {df.columns.tolist()}"
            )
        return cls(df[REQUIRED_COLUMNS].to_dict(orient="records"))

    @property
    def movies(self):
        return self._movies

    def get(self, movie_id):
        """Return the movie with this identifier, or None."""
        if isinstance(movie_id, bool) or not isinstance(movie_id, numbers.Integral):
            return None
        if 1 <= movie_id <= len(self._movies):
            return self._movies[int(movie_id) - 1]
        return None

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)

    def __getitem__(self, position):
        return self._movies[position]


def load_catalog(path=CATALOG_PATH):
    """
    Load a catalog from a CSV file.

    Args:
        path: CSV file with title, genre, actor, rating and industry columns

    Returns:
        Catalog
    """
    df = pd.read_csv(path, dtype={field: str for field in TEXT_FIELDS})
    return Catalog.from_dataframe(df)
