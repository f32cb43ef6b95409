"""Resolver outcome models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CombinationStatus(str, Enum):
    """How a combination result was obtained."""

    STORED = "stored"
    CREATED = "created"
    RACED = "raced"
    UNDEFINED = "undefined"


class Combination(BaseModel):
    """Result of resolving one pair."""

    a: str
    b: str
    c: str
    status: CombinationStatus

    @property
    def is_new(self) -> bool:
        return self.status == CombinationStatus.CREATED

    @property
    def is_undefined(self) -> bool:
        return self.status == CombinationStatus.UNDEFINED
