"""Results of movie operations, before they become HTTP responses"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Created:
    movie: Any


@dataclass(frozen=True)
class BadRequest:
    reason: str


@dataclass(frozen=True)
class NotFound:
    message: str = 'not found'


@dataclass(frozen=True)
class Conflict:
    message: str = 'movie already exists'


@dataclass(frozen=True)
class InternalError:
    detail: str
