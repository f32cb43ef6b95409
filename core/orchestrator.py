"""Top-level application orchestrator."""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any

from core.policy_runtime import load_effective_config, resolve_db_path
from core.resolver import CombinationResolver
from graph.exporter import GraphExporter
from graph.stores.cache import PairCache
from graph.stores.sql_store import SQLStore
from graph.triple_store import TripleStore
from oracle.base_oracle import BaseOracle
from oracle.oracle_factory import build_oracle


class RuntimeBundle:
    """Holds runtime components, building each on first use.

    Commands that only read configuration never open the database.
    """

    def __init__(self, root: Path, config: dict[str, Any]) -> None:
        self.root = root
        self.config = config

    @property
    def seed_elements(self) -> list[str]:
        return list(self.config.get("game", {}).get("seed_elements", []))

    @cached_property
    def store(self) -> TripleStore:
        return TripleStore(SQLStore(resolve_db_path(self.root, self.config)))

    @cached_property
    def oracle(self) -> BaseOracle:
        return build_oracle(self.config)

    @cached_property
    def resolver(self) -> CombinationResolver:
        resolver_cfg = self.config.get("resolver", {})
        cache = PairCache() if resolver_cfg.get("cache_enabled", False) else None
        return CombinationResolver(
            store=self.store,
            oracle=self.oracle,
            examples_per_element=int(resolver_cfg.get("examples_per_element", 5)),
            cache=cache,
        )

    @cached_property
    def exporter(self) -> GraphExporter:
        return GraphExporter(self.store)


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, config: dict[str, Any] | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self._config = config

    def build(self) -> RuntimeBundle:
        config = self._config if self._config is not None else load_effective_config(self.root)
        return RuntimeBundle(root=self.root, config=config)
