"""
Movie Store Configuration

This module provides configuration management for the service using Pydantic Settings.
All configuration values can be set via environment variables or .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class MovieStoreConfig(BaseSettings):
    """
    Movie Store Configuration

    All settings can be overridden via environment variables.
    Example: API_HOST=127.0.0.1 API_PORT=9000 python -m src.moviestore.main
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========== Service Configuration ==========
    api_host: str = Field(
        default="0.0.0.0",
        description="Service bind address"
    )
    api_port: int = Field(
        default=3000,
        description="Service port"
    )
    service_name: str = Field(
        default="Movie Store",
        description="Name reported by the root endpoint"
    )

    # ========== Logging Configuration ==========
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )


# Global configuration instance
config = MovieStoreConfig()


def get_config() -> MovieStoreConfig:
    """
    Get the global configuration instance.

    This function is used for dependency injection in FastAPI.

    Returns:
        MovieStoreConfig: The global configuration instance
    """
    return config
