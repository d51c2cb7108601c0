"""Pick the movie store from configuration"""
import logging

from database.memory_store import MemoryMovieStore
from database.movies_db import PostgresMovieStore
from database.sample_movies import SAMPLE_MOVIES

logger = logging.getLogger(__name__)

BACKENDS = ('memory', 'postgres')


def create_store(config):
    backend = config.STORAGE_BACKEND

    if backend == 'memory':
        movies = SAMPLE_MOVIES if config.SEED_SAMPLE_MOVIES else []
        logger.info(f"Using in-memory movie store ({len(movies)} seeded movies)")
        return MemoryMovieStore(movies)

    if backend == 'postgres':
        logger.info(f"Using PostgreSQL movie store at {config.POSTGRES_HOST}:{config.POSTGRES_PORT}/{config.POSTGRES_DB}")
        return PostgresMovieStore.from_config(config)

    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}, expected one of {', '.join(BACKENDS)}")
