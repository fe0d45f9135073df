"""Shared types for the Tolstoy API layer."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Unset:
    """Marker type of fields left out of request bodies."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset()


@dataclass
class Response(Generic[T]):
    """Status, raw body, headers and parsed result of one API call.

    ``status_code`` is an ``HTTPStatus`` for registered codes and a plain int
    otherwise.
    """

    status_code: HTTPStatus | int
    content: bytes
    headers: dict[str, Any]
    parsed: T | None = None


def to_status(code: int) -> HTTPStatus | int:
    try:
        return HTTPStatus(code)
    except ValueError:
        return code
