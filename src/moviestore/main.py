"""
Movie Store Main Application

This is the FastAPI application entry point for the Movie Store service.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import uvicorn

from src.moviestore.config import MovieStoreConfig, get_config
from src.moviestore.dependencies import app_state, get_app_config, get_store
from src.moviestore.middleware import (
    RequestContextMiddleware,
    get_request_id,
    request_id_headers,
)
from src.moviestore.models import HealthResponse, ServiceInfo
from src.moviestore.exceptions import MovieStoreException
from src.moviestore.store.movie_store import MovieStore

# Import routers
from src.moviestore.routers import movies

VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=get_config().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI app.

    On startup the single movie store for this process is created empty;
    it lives until shutdown and is never reset in between.
    """
    config = get_config()

    logger.info("Starting Movie Store service...")
    logger.info(f"Configuration: host={config.api_host}, port={config.api_port}, "
                f"log_level={config.log_level}")

    app_state["store"] = MovieStore()
    app_state["config"] = config

    logger.info("Movie Store service started successfully")

    yield

    logger.info(f"Shutting down Movie Store service, {len(app_state['store'])} movies dropped")
    app_state.clear()
    logger.info("Movie Store service shut down complete")


# Create FastAPI app
app = FastAPI(
    title="Movie Store",
    description="In-memory movie record service",
    version=VERSION,
    lifespan=lifespan
)

# Add middleware
app.add_middleware(RequestContextMiddleware)

# Include routers
app.include_router(movies.router, prefix="", tags=["Movies"])


# Exception handlers
@app.exception_handler(MovieStoreException)
async def movie_store_exception_handler(request: Request, exc: MovieStoreException):
    """Handle custom Movie Store exceptions."""
    logger.error(
        f"Movie Store Exception: {exc.message}",
        extra={"request_id": exc.request_id, "status_code": exc.status_code}
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=request_id_headers(request),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors. The store is never reached."""
    logger.warning(
        f"Validation error: {exc.errors()}",
        extra={"request_id": get_request_id(request)}
    )
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation error",
            "details": jsonable_encoder(exc.errors())
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "details": str(exc)
        },
        headers=request_id_headers(request),
    )


# Health check endpoints
@app.get("/", response_model=ServiceInfo)
async def root(config: MovieStoreConfig = Depends(get_app_config)):
    """Root endpoint - service banner."""
    return ServiceInfo(service=config.service_name, version=VERSION)


@app.get("/health", response_model=HealthResponse)
def health(store: MovieStore = Depends(get_store)):
    """Liveness probe with the current record count."""
    return HealthResponse(movies=len(store))


def run() -> None:
    """
    CLI entrypoint.

    A failure to bind the configured address is fatal: uvicorn logs it and
    exits with status 1 before any request is served.
    """
    config = get_config()
    uvicorn.run(
        "src.moviestore.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=False,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    run()
