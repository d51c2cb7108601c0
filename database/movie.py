"""Movie record and its JSON / database row shapes"""
import math
from dataclasses import dataclass
from decimal import Decimal


class PayloadError(ValueError):
    """Request payload does not bind to a movie"""


# wire key -> (attribute, accepted types, kind shown in errors)
WIRE_FIELDS = {
    'imdbID': ('imdb_id', (str,), 'string'),
    'title': ('title', (str,), 'string'),
    'year': ('year', (int,), 'integer'),
    'rating': ('rating', (int, float), 'number'),
    'isSuperHero': ('is_super_hero', (bool,), 'boolean'),
}

# range of the INTEGER year column
YEAR_MIN = -2147483648
YEAR_MAX = 2147483647


@dataclass(frozen=True)
class Movie:
    imdb_id: str
    title: str
    year: int
    rating: float
    is_super_hero: bool
    id: int = 0

    @classmethod
    def from_payload(cls, payload):
        """
        Bind a decoded JSON body to an unsaved movie

        Any 'id' sent by the client is ignored, unknown keys too.

        Raises:
            PayloadError: body is not an object, a field is missing or has the wrong type
        """
        if not isinstance(payload, dict):
            raise PayloadError("request body must be a JSON object")

        values = {}
        for key, (attr, types, kind) in WIRE_FIELDS.items():
            if key not in payload:
                raise PayloadError(f"missing field: {key}")

            value = payload[key]
            # bool is an int subclass, only isSuperHero may be one
            if isinstance(value, bool) and bool not in types:
                raise PayloadError(f"invalid {key}: expected {kind}")
            if not isinstance(value, types):
                raise PayloadError(f"invalid {key}: expected {kind}")

            values[attr] = value

        if not YEAR_MIN <= values['year'] <= YEAR_MAX:
            raise PayloadError("invalid year: expected integer")

        try:
            values['rating'] = float(values['rating'])
        except OverflowError:
            raise PayloadError("invalid rating: expected number") from None
        if not math.isfinite(values['rating']):
            raise PayloadError("invalid rating: expected number")

        return cls(**values)

    @classmethod
    def from_row(cls, row):
        """Build a movie from a RealDictCursor row (or any mapping with column names)"""
        rating = row['rating']
        if isinstance(rating, Decimal):
            rating = float(rating)

        return cls(
            id=int(row['id']),
            imdb_id=str(row['imdb_id']),
            title=str(row['title']),
            year=int(row['year']),
            rating=float(rating),
            is_super_hero=bool(row['is_super_hero']),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'imdbID': self.imdb_id,
            'title': self.title,
            'year': self.year,
            'rating': self.rating,
            'isSuperHero': self.is_super_hero,
        }
