"""Configuration and runtime bootstrapping."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

ENV_DB_PATH = "WORLD_GRAPH_DB"
ENV_ORACLE = "WORLD_GRAPH_ORACLE"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_db_path(root: Path, config: dict[str, Any]) -> Path:
    """Resolve the SQLite path against the project root."""
    db_path = Path(config.get("paths", {}).get("db_path", "workspace/world_graph.db"))
    if not db_path.is_absolute():
        db_path = root / db_path
    return db_path.resolve()


def load_effective_config(root: Path, environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Load and merge runtime configuration files, then apply environment overrides."""
    env = os.environ if environ is None else environ
    config_dir = root / "config"
    default_cfg = load_yaml(config_dir / "default.yaml")
    models_cfg = load_yaml(config_dir / "models.yaml")

    merged = merge_dicts(default_cfg, models_cfg)
    if env.get(ENV_DB_PATH):
        merged = merge_dicts(merged, {"paths": {"db_path": env[ENV_DB_PATH]}})
    if env.get(ENV_ORACLE):
        merged = merge_dicts(merged, {"oracle": {"active_provider": env[ENV_ORACLE]}})
    return merged


def configure_logging(level: str = "INFO") -> None:
    """Install a stderr handler on the ``wg`` logger tree."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("wg").setLevel(numeric)
