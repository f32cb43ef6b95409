"""Configuration and wiring tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.orchestrator import Orchestrator
from core.policy_runtime import load_effective_config, load_yaml, merge_dicts, resolve_db_path
from graph.stores.cache import PairCache
from oracle.providers.mock_provider import MockOracle


def write_config(root: Path, default: str, models: str = "") -> None:
    config_dir = root / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "default.yaml").write_text(default, encoding="utf-8")
    if models:
        (config_dir / "models.yaml").write_text(models, encoding="utf-8")


def test_missing_config_is_empty(tmp_path: Path) -> None:
    assert load_yaml(tmp_path / "nope.yaml") == {}
    assert load_effective_config(tmp_path, environ={}) == {}


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    write_config(tmp_path, "- just\n- a list\n")
    with pytest.raises(ValueError):
        load_effective_config(tmp_path, environ={})


def test_merge_is_recursive() -> None:
    merged = merge_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


def test_environment_overrides(tmp_path: Path) -> None:
    write_config(
        tmp_path,
        "paths:\n  db_path: data/wg.db\n",
        "oracle:\n  active_provider: ollama\n  strategy: simple\n",
    )
    config = load_effective_config(
        tmp_path,
        environ={"WORLD_GRAPH_DB": "/tmp/other.db", "WORLD_GRAPH_ORACLE": "mock"},
    )
    assert config["paths"]["db_path"] == "/tmp/other.db"
    assert config["oracle"] == {"active_provider": "mock", "strategy": "simple"}


def test_relative_db_path_resolves_under_root(tmp_path: Path) -> None:
    db_path = resolve_db_path(tmp_path, {"paths": {"db_path": "data/wg.db"}})
    assert db_path == (tmp_path / "data" / "wg.db").resolve()
    assert not db_path.parent.exists()


def test_orchestrator_wires_components(tmp_path: Path) -> None:
    write_config(
        tmp_path,
        "paths:\n  db_path: wg.db\n"
        "game:\n  seed_elements: [Fire, Earth, Wind, Water]\n"
        "resolver:\n  cache_enabled: true\n  examples_per_element: 2\n",
        "oracle:\n  active_provider: mock\n",
    )
    bundle = Orchestrator(root=tmp_path).build()

    assert isinstance(bundle.oracle, MockOracle)
    assert isinstance(bundle.resolver.cache, PairCache)
    assert bundle.resolver.examples_per_element == 2
    assert bundle.seed_elements == ["Fire", "Earth", "Wind", "Water"]

    assert bundle.resolver.combine("Fire", "Water") == "Steam"
    assert (tmp_path / "wg.db").exists()
    assert bundle.exporter.export_graph().nodes == {"Fire", "Water", "Steam"}


def test_orchestrator_accepts_explicit_config(tmp_path: Path) -> None:
    bundle = Orchestrator(root=tmp_path, config={"paths": {"db_path": "x.db"}}).build()
    assert bundle.resolver.cache is None
    assert bundle.seed_elements == []


def test_bundle_opens_database_on_first_use(tmp_path: Path) -> None:
    bundle = Orchestrator(root=tmp_path, config={"paths": {"db_path": "data/wg.db"}}).build()
    assert bundle.seed_elements == []
    assert not (tmp_path / "data").exists()

    assert bundle.store.count() == 0
    assert (tmp_path / "data" / "wg.db").exists()
    assert bundle.resolver.store is bundle.store
    assert bundle.exporter.store is bundle.store
