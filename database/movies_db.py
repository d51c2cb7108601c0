"""PostgreSQL movie store"""
import logging

import psycopg2
from psycopg2 import errors
from psycopg2.extras import RealDictCursor

from database.errors import DuplicateMovieError, StorageError
from database.movie import Movie

logger = logging.getLogger(__name__)


SCHEMA = """
    CREATE TABLE IF NOT EXISTS movies (
        id SERIAL PRIMARY KEY,
        imdb_id TEXT NOT NULL UNIQUE,
        title TEXT NOT NULL,
        year INTEGER NOT NULL,
        rating DOUBLE PRECISION NOT NULL,
        is_super_hero BOOLEAN NOT NULL
    );
"""

SELECT_MOVIES = """
    SELECT id, imdb_id, title, year, rating, is_super_hero
    FROM movies
"""


def rows_to_movies(rows):
    try:
        return [Movie.from_row(row) for row in rows]
    except (KeyError, TypeError, ValueError) as e:
        raise StorageError(f"scan: {e}") from e


class PostgresMovieStore:
    """
    Movie store backed by the 'movies' table.

    A connection is opened per call and closed before returning.
    """

    backend = 'postgres'

    def __init__(self, host, port, database, user, password,
                 sslmode='prefer', connect_timeout=5):
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.sslmode = sslmode
        self.connect_timeout = connect_timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            host=config.POSTGRES_HOST,
            port=config.POSTGRES_PORT,
            database=config.POSTGRES_DB,
            user=config.POSTGRES_USER,
            password=config.POSTGRES_PASSWORD,
            sslmode=config.POSTGRES_SSLMODE,
            connect_timeout=config.POSTGRES_CONNECT_TIMEOUT
        )

    def get_db_connection(self):
        try:
            return psycopg2.connect(
                host=self.host,
                port=self.port,
                database=self.database,
                user=self.user,
                password=self.password,
                sslmode=self.sslmode,
                connect_timeout=self.connect_timeout
            )
        except psycopg2.Error as e:
            raise StorageError(f"connection error: {e}") from e

    def _fetch_all(self, query, params=None):
        conn = self.get_db_connection()
        cursor = None

        try:
            cursor = conn.cursor(cursor_factory=RealDictCursor)
            cursor.execute(query, params)
            rows = cursor.fetchall()
        except psycopg2.Error as e:
            raise StorageError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()
            conn.close()

        return rows_to_movies(rows)

    def create_schema(self):
        conn = self.get_db_connection()
        cursor = None

        try:
            cursor = conn.cursor()
            cursor.execute(SCHEMA)
            conn.commit()
        except psycopg2.Error as e:
            conn.rollback()
            raise StorageError(f"create table error: {e}") from e
        finally:
            if cursor is not None:
                cursor.close()
            conn.close()

        logger.info("Movies table ready")

    def list_all(self):
        return self._fetch_all(SELECT_MOVIES + " ORDER BY id")

    def list_by_year(self, year):
        return self._fetch_all(SELECT_MOVIES + " WHERE year = %s ORDER BY id", (year,))

    def find_by_imdb_id(self, imdb_id):
        movies = self._fetch_all(SELECT_MOVIES + " WHERE imdb_id = %s", (imdb_id,))
        return movies[0] if movies else None

    def insert(self, movie):
        conn = self.get_db_connection()
        cursor = None

        try:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO movies (imdb_id, title, year, rating, is_super_hero)
                VALUES (%s, %s, %s, %s, %s)
                RETURNING id
            """, (
                movie.imdb_id,
                movie.title,
                movie.year,
                movie.rating,
                movie.is_super_hero
            ))

            movie_id = cursor.fetchone()[0]
            conn.commit()
        except errors.UniqueViolation as e:
            conn.rollback()
            raise DuplicateMovieError(movie.imdb_id) from e
        except psycopg2.Error as e:
            conn.rollback()
            raise StorageError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()
            conn.close()

        return Movie(
            id=movie_id,
            imdb_id=movie.imdb_id,
            title=movie.title,
            year=movie.year,
            rating=movie.rating,
            is_super_hero=movie.is_super_hero
        )

    def ping(self):
        conn = self.get_db_connection()
        cursor = None

        try:
            cursor = conn.cursor()
            cursor.execute("SELECT version();")
            version = cursor.fetchone()[0]

            cursor.execute("SELECT COUNT(*) FROM movies;")
            count = cursor.fetchone()[0]
        except psycopg2.Error as e:
            raise StorageError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()
            conn.close()

        return {
            'backend': self.backend,
            'connection': {
                'host': self.host,
                'port': self.port,
                'database': self.database
            },
            'version': version.split()[1],
            'movies_count': count
        }
