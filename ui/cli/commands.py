"""Typer command handlers."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import typer

from core.errors import CombineError
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging

T = TypeVar("T")


@dataclass
class CliOptions:
    """Global options shared by every command."""

    root: Path | None = None
    log_level: str | None = None


def _runtime(options: CliOptions) -> RuntimeBundle:
    _guarded(lambda: configure_logging(options.log_level or "WARNING"))
    bundle = _guarded(lambda: Orchestrator(root=options.root).build())
    if options.log_level is None:
        level = bundle.config.get("logging", {}).get("level", "WARNING")
        _guarded(lambda: configure_logging(level))
    return bundle


def _guarded(call: Callable[[], T]) -> T:
    try:
        return call()
    except (CombineError, ValueError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def combine(a: str, b: str, options: CliOptions) -> None:
    """Combine two elements and print the outcome."""
    bundle = _runtime(options)
    result = _guarded(lambda: bundle.resolver.resolve(a, b))
    if result.is_undefined:
        typer.echo(f"{a} + {b}: nothing happened")
        return
    suffix = " (new discovery!)" if result.is_new else ""
    typer.echo(f"{a} + {b} = {result.c}{suffix}")


def export(options: CliOptions) -> None:
    """Print the node/edge graph as JSON."""
    bundle = _runtime(options)
    graph = _guarded(lambda: bundle.exporter.export_graph())
    typer.echo(json.dumps(graph.to_dict(), indent=2))


def explore(options: CliOptions) -> None:
    """Print every stored triple as JSON."""
    bundle = _runtime(options)
    triples = _guarded(lambda: bundle.exporter.explore())
    typer.echo(json.dumps([t.model_dump() for t in triples], indent=2))


def seeds(options: CliOptions) -> None:
    """Print the starting elements."""
    bundle = _runtime(options)
    for name in bundle.seed_elements:
        typer.echo(name)


def reset(options: CliOptions) -> None:
    """Delete every stored combination."""
    bundle = _runtime(options)
    removed = _guarded(lambda: bundle.resolver.reset())
    typer.echo(f"Removed {removed} combinations.")


def config_show(options: CliOptions) -> None:
    """Show effective runtime config."""
    bundle = _runtime(options)
    typer.echo(json.dumps(bundle.config, indent=2, default=str))
