"""
Shared application state and FastAPI dependency helpers.
"""

from typing import Dict

from src.moviestore.config import MovieStoreConfig
from src.moviestore.store.movie_store import MovieStore

# Filled by the app lifespan on startup
app_state: Dict = {}


def get_store() -> MovieStore:
    """Get the process-wide movie store from app state."""
    return app_state["store"]


def get_app_config() -> MovieStoreConfig:
    """Get the configuration the app was started with."""
    return app_state["config"]
