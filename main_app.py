"""
Movie Recommendation App - Streamlit front end
Pick an industry and a genre, choose a recommendation type, then drill into a movie
"""

import logging

import streamlit as st

from movie_recommender.catalog import InvalidMovieError, load_catalog
from movie_recommender.recommender import MovieRecommender
from movie_recommender.utils import CATALOG_PATH, DEFAULT_TOP_K, LOG_LEVEL, RECOMMENDATION_MODES

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# =============================================================================
# ENGINE SETUP
# =============================================================================

@st.cache_resource
def get_recommender(catalog_path=CATALOG_PATH):
    """Load the catalog and build both recommenders once per process."""
    catalog = load_catalog(catalog_path)
    return MovieRecommender(catalog)

# =============================================================================
# SESSION STATE MANAGEMENT
# =============================================================================

def initialize_session_state():
    """Initialize all required session state variables."""
    if "recommendations" not in st.session_state:
        st.session_state.recommendations = None

    if "selected_movie" not in st.session_state:
        st.session_state.selected_movie = None

# =============================================================================
# UI STYLING
# =============================================================================

def inject_custom_css():
    """Inject custom CSS for the movie lists."""
    st.markdown("""
    <style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}

    .app-title {
        text-align: center;
        font-size: 2.2rem;
        font-weight: bold;
        margin-bottom: 1.5rem;
        color: #e50914;
    }

    .detail-label {
        font-weight: bold;
        color: #e50914;
    }
    </style>
    """, unsafe_allow_html=True)

# =============================================================================
# UI COMPONENTS
# =============================================================================

def render_movie_list(movies, heading):
    """Render a numbered list of movies, or a notice when it is empty."""
    st.markdown(f"### {heading} (Top {DEFAULT_TOP_K})")
    if not movies:
        st.info("No recommendations found.")
        return

    for rank, movie in enumerate(movies, start=1):
        st.write(f"{rank}. **{movie.title}** (Rating: {movie.rating}, Actor: {movie.actor})")

def render_popular_actors(genre, actors):
    """Render the top actors of a genre with their average rating."""
    st.markdown(f"### Popular Actors in {genre} (Top {len(actors)})")
    if not actors:
        st.info("No actors found.")
        return

    for rank, summary in enumerate(actors, start=1):
        st.write(
            f"{rank}. **{summary.actor}** (Appears in {summary.movie_count} movies, "
            f"Avg Rating: {summary.average_rating:.2f})"
        )

def render_movie_details(recommender, movie_id):
    """Render the drill-down for a single movie."""
    details = recommender.movie_details(movie_id)
    if details is None:
        st.warning(f"Movie #{movie_id} not found.")
        return

    movie = details.movie
    st.markdown("---")
    st.markdown(f"## {movie.title}")
    st.markdown(f'<span class="detail-label">Genre:</span> {movie.genre}', unsafe_allow_html=True)
    st.markdown(f'<span class="detail-label">Actor:</span> {movie.actor}', unsafe_allow_html=True)
    st.markdown(f'<span class="detail-label">Rating:</span> {movie.rating}/10', unsafe_allow_html=True)
    st.markdown(f'<span class="detail-label">Industry:</span> {movie.industry}', unsafe_allow_html=True)

    if details.similar:
        st.markdown(f"**If you like {movie.title}, you might also like (Top {len(details.similar)}):**")
        for similar in details.similar:
            st.write(f"* {similar.title} (Rating: {similar.rating})")

    if details.same_actor:
        st.markdown(f"**Other movies with {movie.actor}:**")
        for other in details.same_actor:
            st.write(f"* {other.title} (Rating: {other.rating})")

def render_recommendations(result):
    """Render whichever lists the chosen mode produced."""
    st.write(f"Total {result.genre} movies in {result.industry}: {len(result.genre_movies)}")

    if result.mode in ("top_rated", "all"):
        render_movie_list(result.top_rated, RECOMMENDATION_MODES["top_rated"])
    if result.mode in ("graph", "all"):
        render_movie_list(result.graph_based, RECOMMENDATION_MODES["graph"])
    if result.mode in ("popular_actors", "all"):
        render_popular_actors(result.genre, result.popular_actors)

# =============================================================================
# MAIN APPLICATION
# =============================================================================

def main():
    """Main application function."""
    st.set_page_config(
        page_title="Movie Recommendation System",
        page_icon="🎬",
        layout="wide"
    )

    initialize_session_state()
    inject_custom_css()

    st.markdown('<h1 class="app-title">🎬 Movie Recommendation System</h1>', unsafe_allow_html=True)

    try:
        recommender = get_recommender()
    except (FileNotFoundError, InvalidMovieError) as e:
        logger.error("Could not load catalog: %s", e)
        st.error(f"Could not load the movie catalog: {e}")
        return

    st.caption(f"Total Movies in Database: {len(recommender.catalog)}")

    industries = recommender.industries()
    if not industries:
        st.warning("The catalog is empty.")
        return

    industry = st.sidebar.radio("Select Industry", industries)
    genres = recommender.genres_for_industry(industry)
    if not genres:
        st.warning(f"No genres found for {industry}")
        return

    genre = st.sidebar.selectbox(f"Available Genres in {industry}", genres)
    mode = st.sidebar.radio(
        "What would you like to see?",
        list(RECOMMENDATION_MODES),
        format_func=RECOMMENDATION_MODES.get
    )

    if st.sidebar.button("Recommend", type="primary"):
        st.session_state.recommendations = recommender.recommend(genre, industry, mode)
        st.session_state.selected_movie = None

    result = st.session_state.recommendations
    if result is None:
        st.info("Choose an industry, a genre and a recommendation type, then press Recommend.")
        return

    st.markdown(f"## {result.genre} ({result.industry})")
    render_recommendations(result)

    displayed = result.displayed
    if displayed:
        labels = {movie.id: f"{movie.title} ({movie.genre}, {movie.rating})" for movie in displayed}
        selected = st.selectbox("See details of a recommended movie", [None] + list(labels),
                                format_func=lambda movie_id: "Select a movie" if movie_id is None else labels[movie_id])
        if selected is not None:
            st.session_state.selected_movie = selected

    if st.session_state.selected_movie is not None:
        render_movie_details(recommender, st.session_state.selected_movie)

if __name__ == "__main__":
    main()
