import pytest

from database.movie import Movie
from services.outcomes import BadRequest, Conflict, Created, InternalError, NotFound, Ok
from services.responses import to_response

MATRIX = Movie(imdb_id='tt0133093', title='The Matrix', year=1999,
               rating=8.7, is_super_hero=False, id=1)


def test_ok_list():
    assert to_response(Ok([MATRIX])) == (200, [MATRIX.to_dict()])
    assert to_response(Ok([])) == (200, [])


def test_ok_single():
    assert to_response(Ok(MATRIX)) == (200, MATRIX.to_dict())


@pytest.mark.parametrize('outcome, expected', [
    (Created(MATRIX), (201, MATRIX.to_dict())),
    (BadRequest('invalid year'), (400, 'invalid year')),
    (NotFound('not found'), (404, {'message': 'not found'})),
    (Conflict('movie already exists'), (409, 'movie already exists')),
    (InternalError('scan: boom'), (500, 'scan: boom')),
])
def test_error_and_created_outcomes(outcome, expected):
    assert to_response(outcome) == expected


def test_unknown_outcome():
    with pytest.raises(TypeError):
        to_response('nope')
