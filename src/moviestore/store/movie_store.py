import logging
from typing import Dict, Optional

from src.moviestore.models import Movie
from src.moviestore.store.put_result import PutResult
from src.moviestore.store.rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)


class MovieStore:
    """
    In-memory id -> Movie map shared by every request worker.

    Reads take the shared side of a ReadWriteLock; put_if_absent takes the
    exclusive side so that the existence check and the insert are one step.
    Movies are frozen, so get() can hand out the stored instance itself.
    """

    def __init__(self):
        self._movies: Dict[str, Movie] = {}
        self._lock = ReadWriteLock()

    def get(self, movie_id: str) -> Optional[Movie]:
        with self._lock.read_locked():
            return self._movies.get(movie_id)

    def put_if_absent(self, movie: Movie) -> PutResult:
        with self._lock.write_locked():
            if movie.id in self._movies:
                logger.debug("MovieStore.put_if_absent: conflict id=%s", movie.id)
                return PutResult.ALREADY_EXISTS
            self._movies[movie.id] = movie
            size = len(self._movies)
        logger.debug("MovieStore.put_if_absent: inserted id=%s size=%s", movie.id, size)
        return PutResult.INSERTED

    def __contains__(self, movie_id: str) -> bool:
        with self._lock.read_locked():
            return movie_id in self._movies

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._movies)
