"""Tolstoy API client."""

from .client import Client
from .errors import UnexpectedStatus
from .types import UNSET, Response, Unset

__all__ = [
    "Client",
    "Response",
    "UNSET",
    "Unset",
    "UnexpectedStatus",
]
