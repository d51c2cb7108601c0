"""Create the PostgreSQL movies table, optionally with sample movies"""
import argparse
import logging
import sys

import psycopg2

from config import Config
from database.errors import StorageError
from database.movies_db import PostgresMovieStore
from database.sample_movies import SAMPLE_MOVIES

logger = logging.getLogger(__name__)


def seed_movies(store, movies):
    conn = store.get_db_connection()
    cursor = None

    try:
        cursor = conn.cursor()
        cursor.executemany("""
            INSERT INTO movies (imdb_id, title, year, rating, is_super_hero)
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (imdb_id) DO NOTHING;
        """, [
            (movie.imdb_id, movie.title, movie.year, movie.rating, movie.is_super_hero)
            for movie in movies
        ])
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        raise StorageError(f"seed error: {e}") from e
    finally:
        if cursor is not None:
            cursor.close()
        conn.close()

    logger.info(f"Inserted up to {len(movies)} sample movies")


def create_tables(config=Config, seed=False):
    logger.info("=" * 50)
    logger.info("Database Initialization")
    logger.info("=" * 50)

    store = PostgresMovieStore.from_config(config)
    store.create_schema()

    if seed:
        seed_movies(store, SAMPLE_MOVIES)

    details = store.ping()
    logger.info(f"Movies table has {details['movies_count']} records")
    return store


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--seed', action='store_true', help='insert sample movies')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        create_tables(seed=args.seed)
    except StorageError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
