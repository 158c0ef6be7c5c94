"""
Recommendation facade used by the front end.

Builds the attribute index and the similarity graph once from a catalog and
exposes the recommendation modes and the movie drill-down.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .catalog import Movie
from .content_index import ActorSummary, AttributeIndex
from .similarity_graph import SimilarityGraph
from .utils import (
    DEFAULT_ACTOR_K, DEFAULT_POPULAR_ACTORS_K, DEFAULT_SIMILAR_K, DEFAULT_TOP_K,
    RECOMMENDATION_MODES
)

logger = logging.getLogger(__name__)


@dataclass
class RecommendationResult:
    genre: str
    industry: str
    mode: str
    genre_movies: List[Movie] = field(default_factory=list)
    top_rated: List[Movie] = field(default_factory=list)
    graph_based: List[Movie] = field(default_factory=list)
    popular_actors: List[ActorSummary] = field(default_factory=list)

    @property
    def displayed(self):
        """Movies offered for drill-down, top rated first as in the "all" view."""
        return self.top_rated or self.graph_based


@dataclass
class MovieDetails:
    movie: Movie
    similar: List[Movie]
    same_actor: List[Movie]


class MovieRecommender:
    """Content-based and graph-based recommenders over one catalog."""

    def __init__(self, catalog):
        self.catalog = catalog
        self.index = AttributeIndex().build(catalog.movies)
        self.graph = SimilarityGraph().build(catalog.movies)

    def industries(self):
        return self.index.industries

    def genres_for_industry(self, industry):
        return self.index.genres_for_industry(industry)

    def recommend(self, genre, industry, mode="top_rated", k=DEFAULT_TOP_K,
                  actors_k=DEFAULT_POPULAR_ACTORS_K):
        """
        Run one recommendation mode for a genre within an industry.

        Args:
            genre: Selected genre
            industry: Selected industry
            mode: One of RECOMMENDATION_MODES; anything else falls back to "top_rated"
            k: Number of movies per list
            actors_k: Number of actors for the popular-actors summary

        Returns:
            RecommendationResult with the lists the mode asks for
        """
        if mode not in RECOMMENDATION_MODES:
            logger.warning("Unknown recommendation mode %r, showing top rated", mode)
            mode = "top_rated"

        result = RecommendationResult(
            genre=genre,
            industry=industry,
            mode=mode,
            genre_movies=self.index.movies_by_genre_and_industry(genre, industry),
        )
        if mode in ("top_rated", "all"):
            result.top_rated = self.index.top_rated_by_genre_and_industry(genre, industry, k)
        if mode in ("graph", "all"):
            result.graph_based = self.graph.top_by_genre_cohesion(genre, industry, k)
        if mode in ("popular_actors", "all"):
            result.popular_actors = self.index.popular_actors(genre, industry, actors_k)
        return result

    def movie_details(self, movie_id, similar_k=DEFAULT_SIMILAR_K, actor_k=DEFAULT_ACTOR_K) -> Optional[MovieDetails]:
        """
        Drill-down for a single movie.

        The movie is looked up by identifier so that movies sharing a title
        stay distinct. The same-actor list takes the actor's top ``actor_k``
        movies and drops the selected movie and anything already listed as
        similar, so it can be shorter than ``actor_k``.

        Returns:
            MovieDetails, or None for unknown identifiers
        """
        movie = self.catalog.get(movie_id)
        if movie is None:
            return None

        similar = [m for m, _ in self.graph.neighbors_of(movie.id)[:max(similar_k, 0)]]
        shown = {m.id for m in similar}
        same_actor = [
            m for m in self.index.top_rated_by_actor(movie.actor, actor_k)
            if m.id != movie.id and m.id not in shown
        ]
        return MovieDetails(movie=movie, similar=similar, same_actor=same_actor)
