import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app
from database.memory_store import MemoryMovieStore


ENDGAME = {
    'imdbID': 'tt4154796',
    'title': 'Advanger: Endgame',
    'year': 2019,
    'rating': 8.4,
    'isSuperHero': True
}


@pytest.fixture
def endgame_payload():
    return dict(ENDGAME)


@pytest.fixture
def store():
    return MemoryMovieStore()


@pytest.fixture
def app(store):
    app = create_app(store=store)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
