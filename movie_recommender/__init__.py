"""
Movie Recommendation System - Core Package

This package contains the core functionality for the movie recommendation system:
- catalog: Movie records, validation and CSV/DataFrame loading
- ranking: Shared top-K selection with stable tie-breaking
- content_index: Attribute index (genre, actor, industry) and top-rated lookups
- similarity_graph: Pairwise similarity graph and genre-cohesion ranking
- recommender: Facade wiring both recommenders for the front end
- utils: Configuration constants
"""

from .catalog import Catalog, InvalidMovieError, Movie, load_catalog
from .content_index import ActorSummary, AttributeIndex
from .ranking import top_k
from .recommender import MovieDetails, MovieRecommender, RecommendationResult
from .similarity_graph import SimilarityGraph, similarity

__all__ = [
    "Catalog",
    "InvalidMovieError",
    "Movie",
    "load_catalog",
    "ActorSummary",
    "AttributeIndex",
    "top_k",
    "MovieDetails",
    "MovieRecommender",
    "RecommendationResult",
    "SimilarityGraph",
    "similarity",
]
