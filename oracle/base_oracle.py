"""Base oracle interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from graph.types import Triple


class OracleError(Exception):
    """Transport or parse failure talking to a generative backend."""


class BaseOracle(ABC):
    """Proposes the result of combining two elements."""

    @abstractmethod
    def generate(self, a: str, b: str, examples: Sequence[Triple] = ()) -> str:
        """Return the proposed element name for ``a + b``.

        Empty or sentinel answers are returned as-is; raise ``OracleError``
        only when the backend could not be reached or its reply was unusable.
        """
