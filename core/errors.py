"""Errors crossing the combination resolver boundary."""

from __future__ import annotations


class CombineError(Exception):
    """Base error for a failed combination request."""


class OracleUnavailable(CombineError):
    """The generative backend failed or timed out."""


class StorageError(CombineError):
    """The persistence layer failed."""


class DuplicateError(StorageError):
    """The canonical pair was already stored by another writer."""

    def __init__(self, a: str, b: str) -> None:
        super().__init__(f"combination already stored: {a} + {b}")
        self.a = a
        self.b = b
