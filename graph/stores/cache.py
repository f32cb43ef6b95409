"""Read-through cache of resolved pairs."""

from __future__ import annotations

from graph.types import Pair


class PairCache:
    """Dictionary-backed transient cache keyed by canonical pair."""

    def __init__(self) -> None:
        self._store: dict[tuple[str, str], str] = {}

    @staticmethod
    def _key(a: str, b: str) -> tuple[str, str]:
        pair = Pair(a=a, b=b).canonical()
        return (pair.a, pair.b)

    def get(self, a: str, b: str) -> str | None:
        return self._store.get(self._key(a, b))

    def set(self, a: str, b: str, c: str) -> None:
        self._store[self._key(a, b)] = c

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
