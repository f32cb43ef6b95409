"""Combination fact models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Pair(BaseModel):
    """Unordered pair of element names."""

    model_config = ConfigDict(frozen=True)

    a: str
    b: str

    def canonical(self) -> Pair:
        """Return the pair with the greater name first.

        Names are compared as opaque case-sensitive strings.
        """
        if self.a < self.b:
            return Pair(a=self.b, b=self.a)
        return self


class Triple(BaseModel):
    """Stored fact: combining ``a`` and ``b`` yields ``c``."""

    model_config = ConfigDict(frozen=True)

    a: str
    b: str
    c: str

    @property
    def pair(self) -> Pair:
        return Pair(a=self.a, b=self.b)

    def as_example(self) -> str:
        return f"% {self.a} + {self.b} = {self.c}"
