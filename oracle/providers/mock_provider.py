"""Deterministic offline oracle."""

from __future__ import annotations

from collections.abc import Sequence

from graph.types import Pair, Triple
from oracle.base_oracle import BaseOracle
from oracle.prompt import UNDEFINED

_RECIPES: dict[tuple[str, str], str] = {
    ("Water", "Fire"): "Steam",
    ("Fire", "Earth"): "Lava",
    ("Wind", "Water"): "Wave",
    ("Wind", "Fire"): "Smoke",
    ("Water", "Earth"): "Mud",
    ("Wind", "Earth"): "Dust",
    ("Water", "Water"): "Lake",
    ("Fire", "Fire"): "Inferno",
    ("Earth", "Earth"): "Mountain",
    ("Wind", "Wind"): "Tornado",
    ("Water", "Lava"): "Stone",
    ("Steam", "Earth"): "Geyser",
    ("Wind", "Steam"): "Cloud",
    ("Water", "Cloud"): "Rain",
}


class MockOracle(BaseOracle):
    """Rule-based local oracle for offline play and tests.

    Knows a small fixed recipe table and answers ``undefined`` otherwise.
    """

    def __init__(self, recipes: dict[tuple[str, str], str] | None = None) -> None:
        table = _RECIPES if recipes is None else recipes
        self.recipes: dict[tuple[str, str], str] = {}
        for (a, b), c in table.items():
            pair = Pair(a=a, b=b).canonical()
            self.recipes[(pair.a, pair.b)] = c
        self.calls = 0

    def generate(self, a: str, b: str, examples: Sequence[Triple] = ()) -> str:
        _ = examples
        self.calls += 1
        pair = Pair(a=a, b=b).canonical()
        return self.recipes.get((pair.a, pair.b), UNDEFINED)
