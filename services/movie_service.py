"""Turn movie requests into store calls and classify what comes back"""
import logging
import re

from database.errors import DuplicateMovieError, StorageError
from database.movie import Movie, PayloadError
from services.outcomes import BadRequest, Conflict, Created, InternalError, NotFound, Ok

logger = logging.getLogger(__name__)

YEAR_PATTERN = re.compile(r'[+-]?[0-9]+')


def parse_year(raw):
    """
    Parse the 'year' query value

    Returns:
        int or None: None when no filter was given (absent or empty string)

    Raises:
        ValueError: value is not a decimal integer
    """
    if raw is None or raw == '':
        return None

    if not YEAR_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid year: {raw!r}")

    return int(raw)


class MovieService:
    """Stateless; every call goes straight to the injected store"""

    def __init__(self, store):
        self.store = store

    def get_movies(self, year=None):
        try:
            year = parse_year(year)
        except ValueError:
            return BadRequest('invalid year')

        try:
            if year is None:
                movies = self.store.list_all()
            else:
                movies = self.store.list_by_year(year)
        except StorageError as e:
            logger.error(f"Listing movies failed (year={year}): {e}")
            return InternalError(str(e))

        return Ok(movies)

    def get_movie(self, imdb_id):
        try:
            movie = self.store.find_by_imdb_id(imdb_id)
        except StorageError as e:
            logger.error(f"Lookup of movie {imdb_id} failed: {e}")
            return InternalError(str(e))

        if movie is None:
            return NotFound('not found')

        return Ok(movie)

    def create_movie(self, payload):
        try:
            movie = Movie.from_payload(payload)
        except PayloadError as e:
            return BadRequest(str(e))

        try:
            saved = self.store.insert(movie)
        except DuplicateMovieError:
            logger.warning(f"Movie {movie.imdb_id} already exists")
            return Conflict('movie already exists')
        except StorageError as e:
            logger.error(f"Creating movie {movie.imdb_id} failed: {e}")
            return InternalError(str(e))

        logger.info(f"Created movie {saved.imdb_id} with id {saved.id}")
        return Created(saved)
