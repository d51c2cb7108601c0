from decimal import Decimal

import pytest

from database.movie import Movie, PayloadError


def test_from_payload_ignores_id_and_unknown_keys(endgame_payload):
    endgame_payload['id'] = 99
    endgame_payload['director'] = 'Russo'

    movie = Movie.from_payload(endgame_payload)

    assert movie.id == 0
    assert movie.imdb_id == 'tt4154796'
    assert movie.is_super_hero is True


def test_from_payload_coerces_integer_rating(endgame_payload):
    endgame_payload['rating'] = 8

    movie = Movie.from_payload(endgame_payload)

    assert movie.rating == 8.0
    assert isinstance(movie.rating, float)


@pytest.mark.parametrize('payload, message', [
    (None, 'JSON object'),
    ([1, 2], 'JSON object'),
    ({'title': 'x', 'year': 1, 'rating': 1.0, 'isSuperHero': False}, 'missing field: imdbID'),
])
def test_from_payload_rejects_shape(payload, message):
    with pytest.raises(PayloadError, match=message):
        Movie.from_payload(payload)


@pytest.mark.parametrize('key, value', [
    ('year', '2019'),
    ('year', 2019.5),
    ('year', True),
    ('rating', 'high'),
    ('rating', False),
    ('isSuperHero', 1),
    ('imdbID', 4154796),
    ('year', 2147483648),
    ('year', -2147483649),
    ('year', 10 ** 30),
    ('rating', float('nan')),
    ('rating', float('inf')),
    ('rating', float('-inf')),
    ('rating', 10 ** 400),
])
def test_from_payload_rejects_wrong_types(endgame_payload, key, value):
    endgame_payload[key] = value

    with pytest.raises(PayloadError, match=f'invalid {key}'):
        Movie.from_payload(endgame_payload)


def test_from_row_converts_decimal_rating():
    movie = Movie.from_row({
        'id': 3,
        'imdb_id': 'tt0111161',
        'title': 'The Shawshank Redemption',
        'year': 1994,
        'rating': Decimal('9.3'),
        'is_super_hero': False
    })

    assert movie.rating == 9.3
    assert movie.id == 3


def test_to_dict_uses_wire_keys():
    movie = Movie(imdb_id='tt0133093', title='The Matrix', year=1999,
                  rating=8.7, is_super_hero=False, id=5)

    assert movie.to_dict() == {
        'id': 5,
        'imdbID': 'tt0133093',
        'title': 'The Matrix',
        'year': 1999,
        'rating': 8.7,
        'isSuperHero': False
    }


@pytest.mark.parametrize('year', [-2147483648, 0, 2147483647])
def test_from_payload_accepts_year_column_bounds(endgame_payload, year):
    endgame_payload['year'] = year

    assert Movie.from_payload(endgame_payload).year == year
