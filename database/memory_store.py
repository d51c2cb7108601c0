"""In-process movie store"""
import logging
import threading
from dataclasses import replace

from database.errors import DuplicateMovieError

logger = logging.getLogger(__name__)


class MemoryMovieStore:
    """
    Keeps movies in a list, in insertion order.

    One lock covers the list, the imdbID index and the id counter, so two
    concurrent inserts of the same imdbID cannot both succeed.
    """

    backend = 'memory'

    def __init__(self, movies=None):
        self._lock = threading.Lock()
        self._movies = []
        self._by_imdb_id = {}
        self._next_id = 1

        for movie in movies or []:
            self.insert(movie)

    def list_all(self):
        with self._lock:
            return list(self._movies)

    def list_by_year(self, year):
        with self._lock:
            return [movie for movie in self._movies if movie.year == year]

    def find_by_imdb_id(self, imdb_id):
        with self._lock:
            return self._by_imdb_id.get(imdb_id)

    def insert(self, movie):
        with self._lock:
            if movie.imdb_id in self._by_imdb_id:
                raise DuplicateMovieError(movie.imdb_id)

            saved = replace(movie, id=self._next_id)
            self._next_id += 1

            self._movies.append(saved)
            self._by_imdb_id[saved.imdb_id] = saved

        logger.debug(f"Stored movie {saved.imdb_id} with id {saved.id}")
        return saved

    def ping(self):
        with self._lock:
            count = len(self._movies)

        return {
            'backend': self.backend,
            'movies_count': count
        }
