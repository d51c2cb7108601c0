"""Storage errors raised by the movie stores"""


class StorageError(Exception):
    """Storage or I/O failure not caused by client input"""


class DuplicateMovieError(StorageError):
    """A movie with the same imdbID already exists"""

    def __init__(self, imdb_id):
        super().__init__(f"movie with imdbID {imdb_id!r} already exists")
        self.imdb_id = imdb_id
