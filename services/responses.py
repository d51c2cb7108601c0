from database.movie import Movie
from services.outcomes import BadRequest, Conflict, Created, InternalError, NotFound, Ok


def _serialize(value):
    if isinstance(value, Movie):
        return value.to_dict()
    return [movie.to_dict() for movie in value]


def to_response(outcome):
    """Map an outcome to (status_code, JSON-serializable body)"""
    if isinstance(outcome, Ok):
        return 200, _serialize(outcome.value)

    if isinstance(outcome, Created):
        return 201, outcome.movie.to_dict()

    if isinstance(outcome, BadRequest):
        return 400, outcome.reason

    if isinstance(outcome, NotFound):
        return 404, {'message': outcome.message}

    if isinstance(outcome, Conflict):
        return 409, outcome.message

    if isinstance(outcome, InternalError):
        return 500, outcome.detail

    raise TypeError(f"Unknown outcome {outcome!r}")
