"""
Content-based recommendations from attribute buckets.

Each movie position is recorded under its genre, its actor and its industry.
Queries read those buckets and rank by catalog rating.
"""

import logging
from typing import NamedTuple

from .ranking import top_k
from .utils import DEFAULT_POPULAR_ACTORS_K, DEFAULT_TOP_K

logger = logging.getLogger(__name__)


class ActorSummary(NamedTuple):
    actor: str
    movie_count: int
    average_rating: float


class AttributeIndex:
    """Genre, actor and industry buckets over a movie sequence."""

    def __init__(self):
        self._movies = ()
        self._by_genre = {}
        self._by_actor = {}
        self._by_industry = {}

    def build(self, movies):
        """
        Index every movie by genre, actor and industry.

        Rebuilding replaces all previous state.

        Args:
            movies: Movies in catalog order

        Returns:
            self
        """
        self._movies = tuple(movies)
        self._by_genre = {}
        self._by_actor = {}
        self._by_industry = {}

        for position, movie in enumerate(self._movies):
            self._by_genre.setdefault(movie.genre, []).append(position)
            self._by_actor.setdefault(movie.actor, []).append(position)
            self._by_industry.setdefault(movie.industry, []).append(position)

        logger.info(
            "Attribute index built: %d movies, %d genres, %d actors, %d industries",
            len(self._movies), len(self._by_genre), len(self._by_actor), len(self._by_industry),
        )
        return self

    @property
    def genres(self):
        return list(self._by_genre)

    @property
    def actors(self):
        return list(self._by_actor)

    @property
    def industries(self):
        return list(self._by_industry)

    def _positions_in(self, genre, industry):
        return [
            position for position in self._by_genre.get(genre, [])
            if self._movies[position].industry == industry
        ]

    def _rank_by_rating(self, positions, k):
        scored = [(self._movies[position], self._movies[position].rating) for position in positions]
        return [movie for movie, _ in top_k(scored, k)]

    def movies_by_genre_and_industry(self, genre, industry):
        """All movies of a genre within an industry, in catalog order."""
        return [self._movies[position] for position in self._positions_in(genre, industry)]

    def top_rated_by_genre_and_industry(self, genre, industry, k=DEFAULT_TOP_K):
        """Highest-rated movies of a genre within an industry."""
        positions = self._positions_in(genre, industry)
        if not positions:
            logger.debug("No movies for genre=%r industry=%r", genre, industry)
        return self._rank_by_rating(positions, k)

    def top_rated_by_actor(self, actor, k=DEFAULT_TOP_K):
        """Highest-rated movies featuring an actor, across all genres."""
        return self._rank_by_rating(self._by_actor.get(actor, []), k)

    def genres_for_industry(self, industry):
        """Distinct genres in an industry, in order of first appearance."""
        genres = []
        for position in self._by_industry.get(industry, []):
            genre = self._movies[position].genre
            if genre not in genres:
                genres.append(genre)
        return genres

    def popular_actors(self, genre, industry, k=DEFAULT_POPULAR_ACTORS_K):
        """
        Rank the actors of a genre within an industry by average rating.

        Args:
            genre: Genre to summarize
            industry: Industry filter
            k: Number of actors to return

        Returns:
            List of ActorSummary, best average rating first; ties keep the
            order in which actors first appear in the catalog
        """
        counts = {}
        totals = {}
        for movie in self.movies_by_genre_and_industry(genre, industry):
            counts[movie.actor] = counts.get(movie.actor, 0) + 1
            totals[movie.actor] = totals.get(movie.actor, 0.0) + movie.rating

        summaries = [
            (ActorSummary(actor, count, totals[actor] / count), totals[actor] / count)
            for actor, count in counts.items()
        ]
        return [summary for summary, _ in top_k(summaries, k)]
