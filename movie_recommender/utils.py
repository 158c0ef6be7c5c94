"""
Configuration constants for the movie recommendation system.
"""

import os

# Pairwise similarity weights (must sum to 1.0)
SIMILARITY_WEIGHTS = {
    "genre": 0.3,
    "actor": 0.3,
    "industry": 0.2,
    "rating": 0.2
}

# Only pairs scoring strictly above this become graph edges
EDGE_THRESHOLD = 0.2

# Genre-cohesion composite: rating * 0.6 + average similarity * 4.0
COHESION_WEIGHTS = {
    "rating": 0.6,
    "similarity": 4.0
}

RATING_SCALE = 10.0

DEFAULT_TOP_K = 5
DEFAULT_SIMILAR_K = 3
DEFAULT_ACTOR_K = 2
DEFAULT_POPULAR_ACTORS_K = 3

RECOMMENDATION_MODES = {
    "top_rated": "Top Rated in Genre",
    "graph": "Graph-Based (Similarity) Recommendations",
    "popular_actors": "Popular Actors in this Genre",
    "all": "All Recommendations"
}

REQUIRED_COLUMNS = ["title", "genre", "actor", "rating", "industry"]

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CATALOG_PATH = os.getenv("MOVIE_CATALOG_PATH", os.path.join(PROJECT_ROOT, "data", "movies.csv"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
