"""
Movies API Router

Handles creation and lookup of movie records.

Both routes are plain `def` functions, so FastAPI runs them in its worker
threadpool; the store's thread lock is never held across an await and the
request body is fully parsed before the route is entered.
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from src.moviestore.models import ErrorResponse, Movie, ValidationErrorResponse
from src.moviestore.store.movie_store import MovieStore
from src.moviestore.store.put_result import PutResult
from src.moviestore.dependencies import get_store
from src.moviestore.exceptions import MovieStoreException
from src.moviestore.middleware import get_request_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/movie",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse, "description": "Malformed movie"},
        status.HTTP_409_CONFLICT: {"description": "Movie id already stored"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
)
def create_movie(
    movie: Movie,
    request: Request,
    store: MovieStore = Depends(get_store),
):
    """Store a new movie. An existing movie with the same id is never replaced."""
    result = store.put_if_absent(movie)

    if result is PutResult.INSERTED:
        return Response(status_code=status.HTTP_201_CREATED)

    if result is PutResult.ALREADY_EXISTS:
        logger.info(
            f"Movie already exists: {movie.id}",
            extra={"request_id": get_request_id(request), "movie_id": movie.id},
        )
        return Response(status_code=status.HTTP_409_CONFLICT)

    raise MovieStoreException(
        message=f"Unhandled store outcome: {result!r}",
        request_id=get_request_id(request),
    )


@router.get(
    "/movie/{movie_id}",
    response_model=Movie,
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Movie not found"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
)
def get_movie(
    movie_id: str,
    store: MovieStore = Depends(get_store),
):
    """Query a movie by id."""
    movie = store.get(movie_id)
    if movie is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return movie
