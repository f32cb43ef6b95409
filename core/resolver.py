"""Combination resolver: lookup, or generate and persist, for one pair."""

from __future__ import annotations

import logging

from core.errors import DuplicateError, OracleUnavailable, StorageError
from graph.stores.cache import PairCache
from graph.triple_store import TripleStore
from graph.types import Combination, CombinationStatus, Triple
from oracle.base_oracle import BaseOracle, OracleError
from oracle.prompt import UNDEFINED

logger = logging.getLogger("wg.resolver")


def is_non_combination(name: str) -> bool:
    """Empty, blank or the ``undefined`` sentinel in any case."""
    stripped = name.strip()
    return not stripped or stripped.lower() == UNDEFINED


class CombinationResolver:
    """Resolves unordered pairs against the store, asking the oracle on a miss.

    No lock is held while the oracle runs. Concurrent first-time requests for
    the same pair each call the oracle; the store's unique pair index keeps
    the first write and every loser returns the stored answer instead of its
    own.
    """

    def __init__(
        self,
        store: TripleStore,
        oracle: BaseOracle,
        examples_per_element: int = 5,
        cache: PairCache | None = None,
    ) -> None:
        self.store = store
        self.oracle = oracle
        self.examples_per_element = examples_per_element
        self.cache = cache

    def combine(self, a: str, b: str) -> str:
        """Return the element produced by ``a + b``.

        A non-combination comes back unchanged as whatever the oracle said.
        Raises ``OracleUnavailable`` or ``StorageError``.
        """
        return self.resolve(a, b).c

    def resolve(self, a: str, b: str) -> Combination:
        """Resolve a pair and report how the answer was obtained."""
        if self.cache is not None:
            cached = self.cache.get(a, b)
            if cached is not None:
                logger.debug("cache hit: %s + %s = %s", a, b, cached)
                return Combination(a=a, b=b, c=cached, status=CombinationStatus.STORED)

        stored = self.store.find(a, b)
        if stored is not None:
            self._remember(a, b, stored)
            return Combination(a=a, b=b, c=stored, status=CombinationStatus.STORED)

        examples = self._examples(a, b)
        try:
            proposed = self.oracle.generate(a, b, examples)
        except OracleError as exc:
            logger.error("oracle failed for %s + %s: %s", a, b, exc)
            raise OracleUnavailable(f"oracle failed for {a} + {b}: {exc}") from exc

        if is_non_combination(proposed):
            logger.info("no combination: %s + %s -> %r", a, b, proposed)
            return Combination(a=a, b=b, c=proposed, status=CombinationStatus.UNDEFINED)

        try:
            self.store.insert(a, b, proposed)
        except DuplicateError:
            winner = self.store.find(a, b)
            if winner is None:
                raise StorageError(f"{a} + {b} reported as stored but cannot be read back")
            logger.info("lost race for %s + %s: kept %s, discarded %s", a, b, winner, proposed)
            self._remember(a, b, winner)
            return Combination(a=a, b=b, c=winner, status=CombinationStatus.RACED)

        self._remember(a, b, proposed)
        return Combination(a=a, b=b, c=proposed, status=CombinationStatus.CREATED)

    def reset(self) -> int:
        """Clear every stored combination."""
        removed = self.store.clear()
        if self.cache is not None:
            self.cache.clear()
        return removed

    def _examples(self, a: str, b: str) -> list[Triple]:
        if self.examples_per_element <= 0:
            return []
        merged: list[Triple] = []
        for name in (a, b):
            for triple in self.store.related(name, limit=self.examples_per_element):
                if triple not in merged:
                    merged.append(triple)
        return merged

    def _remember(self, a: str, b: str, c: str) -> None:
        if self.cache is not None:
            self.cache.set(a, b, c)
