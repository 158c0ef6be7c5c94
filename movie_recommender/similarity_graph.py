"""
Graph-based recommendations.

Every pair of movies is scored with a weighted attribute match and pairs
above EDGE_THRESHOLD are kept as undirected weighted edges. Building the
graph compares all n*(n-1)/2 pairs and can store O(n^2) edges, which makes it
the dominant cost of the whole system. That is fine for catalogs of a few
hundred movies and nothing larger.
"""

import logging
import numbers

import numpy as np

from .ranking import top_k
from .utils import (
    COHESION_WEIGHTS, DEFAULT_SIMILAR_K, DEFAULT_TOP_K, EDGE_THRESHOLD,
    RATING_SCALE, SIMILARITY_WEIGHTS
)

logger = logging.getLogger(__name__)


def similarity(movie_a, movie_b):
    """
    Calculate the similarity between two movies.

    Genre and actor matches contribute 0.3 each, an industry match 0.2, and
    rating closeness up to 0.2 (0.2 * (1 - |rating difference| / 10)).

    Returns:
        Float between 0 and 1, symmetric in its arguments
    """
    score = 0.0
    if movie_a.genre == movie_b.genre:
        score += SIMILARITY_WEIGHTS["genre"]
    if movie_a.actor == movie_b.actor:
        score += SIMILARITY_WEIGHTS["actor"]
    if movie_a.industry == movie_b.industry:
        score += SIMILARITY_WEIGHTS["industry"]
    score += SIMILARITY_WEIGHTS["rating"] * (1.0 - abs(movie_a.rating - movie_b.rating) / RATING_SCALE)
    return score


def _pairwise_similarity(movies):
    """Full similarity matrix, term for term the same arithmetic as similarity()."""
    genres = np.array([m.genre for m in movies])
    actors = np.array([m.actor for m in movies])
    industries = np.array([m.industry for m in movies])
    ratings = np.array([m.rating for m in movies], dtype=float)

    scores = np.zeros((len(movies), len(movies)))
    scores += SIMILARITY_WEIGHTS["genre"] * (genres[:, None] == genres[None, :])
    scores += SIMILARITY_WEIGHTS["actor"] * (actors[:, None] == actors[None, :])
    scores += SIMILARITY_WEIGHTS["industry"] * (industries[:, None] == industries[None, :])
    scores += SIMILARITY_WEIGHTS["rating"] * (
        1.0 - np.abs(ratings[:, None] - ratings[None, :]) / RATING_SCALE
    )
    return scores


class SimilarityGraph:
    """Thresholded similarity graph over a movie sequence."""

    def __init__(self):
        self._movies = ()
        self._adjacency = []
        self._title_positions = {}

    def build(self, movies):
        """
        Build the similarity graph between all movies.

        Adjacency lists hold (neighbor position, similarity) pairs ordered by
        neighbor position. Rebuilding replaces all previous state.

        Args:
            movies: Movies in catalog order

        Returns:
            self
        """
        self._movies = tuple(movies)
        self._title_positions = {}
        for position, movie in enumerate(self._movies):
            # duplicate titles resolve to the first catalog occurrence
            self._title_positions.setdefault(movie.title, position)

        self._adjacency = [[] for _ in self._movies]
        if self._movies:
            scores = _pairwise_similarity(self._movies)
            edges = scores > EDGE_THRESHOLD
            np.fill_diagonal(edges, False)
            for position in range(len(self._movies)):
                self._adjacency[position] = [
                    (int(neighbor), float(scores[position, neighbor]))
                    for neighbor in np.flatnonzero(edges[position])
                ]

        logger.info(
            "Similarity graph built: %d movies, %d edges (threshold %.2f)",
            len(self._movies), self.edge_count, EDGE_THRESHOLD,
        )
        return self

    @property
    def edge_count(self):
        return sum(len(neighbors) for neighbors in self._adjacency) // 2

    def __len__(self):
        return len(self._movies)

    def position_of(self, title):
        return self._title_positions.get(title)

    def _ranked_neighbors(self, position, k):
        return [
            (self._movies[neighbor], score)
            for neighbor, score in top_k(self._adjacency[position], k)
        ]

    def neighbors_of(self, movie_id):
        """
        Directly connected movies, most similar first.

        Args:
            movie_id: Catalog identifier (1-based)

        Returns:
            List of (Movie, similarity) pairs; empty for unknown identifiers
        """
        if isinstance(movie_id, bool) or not isinstance(movie_id, numbers.Integral):
            return []
        if not 1 <= movie_id <= len(self._movies):
            return []
        position = int(movie_id) - 1
        return self._ranked_neighbors(position, len(self._adjacency[position]))

    def top_by_genre_cohesion(self, genre, industry, k=DEFAULT_TOP_K):
        """
        Rank the movies of a genre within an industry by rating and cohesion.

        For each candidate, only neighbors in the same genre and industry count
        towards its average similarity (0 when it has none). The score is
        rating * 0.6 + average similarity * 4.0.

        Returns:
            List of at most k movies, ties in catalog order
        """
        candidates = [
            position for position, movie in enumerate(self._movies)
            if movie.genre == genre and movie.industry == industry
        ]
        if not candidates:
            logger.debug("No graph candidates for genre=%r industry=%r", genre, industry)
            return []

        scored = []
        for position in candidates:
            cohesive = [
                score for neighbor, score in self._adjacency[position]
                if self._movies[neighbor].genre == genre and self._movies[neighbor].industry == industry
            ]
            average = sum(cohesive) / len(cohesive) if cohesive else 0.0
            movie = self._movies[position]
            composite = movie.rating * COHESION_WEIGHTS["rating"] + average * COHESION_WEIGHTS["similarity"]
            scored.append((movie, composite))

        return [movie for movie, _ in top_k(scored, k)]

    def find_similar_by_title(self, title, k=DEFAULT_SIMILAR_K):
        """
        Find the movies most similar to the one with this exact title.

        Returns:
            List of at most k movies; empty for unknown titles
        """
        position = self._title_positions.get(title)
        if position is None:
            logger.debug("Unknown title %r", title)
            return []
        return [movie for movie, _ in self._ranked_neighbors(position, k)]
