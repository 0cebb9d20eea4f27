from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import requests

from src.moviestore.models import Movie
from src.moviestore.exceptions import (
    InvalidMovieError,
    MovieConflictError,
    MovieStoreException,
    ServiceCommunicationError,
)


class MovieClient:
    """Blocking HTTP client for the movie store service."""

    def __init__(self, base_url="http://127.0.0.1:3000", timeout=2.0, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(
                method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise ServiceCommunicationError(self.base_url, details=str(e)) from e

    @staticmethod
    def _unexpected(r: requests.Response) -> MovieStoreException:
        return MovieStoreException(
            message=f"Unexpected status {r.status_code}",
            status_code=r.status_code,
            details=r.text or None,
            request_id=r.headers.get("X-Request-Id"),
        )

    def add_movie(self, movie: Union[Movie, Dict[str, Any]]) -> None:
        payload = movie.model_dump() if isinstance(movie, Movie) else movie
        r = self._request("POST", "/movie", json=payload)
        if r.status_code == 201:
            return
        if r.status_code == 409:
            raise MovieConflictError(payload.get("id"), request_id=r.headers.get("X-Request-Id"))
        if r.status_code in (400, 422):
            raise InvalidMovieError(details=r.text, request_id=r.headers.get("X-Request-Id"))
        raise self._unexpected(r)

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        # ids are path segments; quote anything that is not URL-safe
        r = self._request("GET", f"/movie/{quote(movie_id, safe='')}")
        if r.status_code == 404:
            return None
        if r.status_code != 200:
            raise self._unexpected(r)
        return Movie(**r.json())

    def health(self) -> Dict[str, Any]:
        r = self._request("GET", "/health")
        if r.status_code != 200:
            raise self._unexpected(r)
        return r.json()

    def close(self):
        self.session.close()
