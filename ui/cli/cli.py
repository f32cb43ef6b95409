"""CLI entrypoint for world-graph."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ui.cli import commands
from ui.cli.commands import CliOptions

app = typer.Typer(help="World Graph: combine elements, discover new ones")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    ctx: typer.Context,
    root: Optional[Path] = typer.Option(None, "--root", help="Project root holding config/"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override logging.level"),
) -> None:
    """Combine elements and explore what has been discovered."""
    ctx.obj = CliOptions(root=root, log_level=log_level)


def _options(ctx: typer.Context) -> CliOptions:
    return ctx.obj if isinstance(ctx.obj, CliOptions) else CliOptions()


@app.command("combine")
def combine_cmd(
    ctx: typer.Context,
    a: str = typer.Argument(..., help="First element"),
    b: str = typer.Argument(..., help="Second element"),
) -> None:
    """Combine two elements."""
    commands.combine(a=a, b=b, options=_options(ctx))


@app.command("export")
def export_cmd(ctx: typer.Context) -> None:
    """Export the combination graph as nodes and edges."""
    commands.export(options=_options(ctx))


@app.command("explore")
def explore_cmd(ctx: typer.Context) -> None:
    """List every stored combination."""
    commands.explore(options=_options(ctx))


@app.command("seeds")
def seeds_cmd(ctx: typer.Context) -> None:
    """List the starting elements."""
    commands.seeds(options=_options(ctx))


@app.command("reset")
def reset_cmd(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt"),
) -> None:
    """Delete every stored combination."""
    if not yes:
        typer.confirm("Delete every stored combination?", abort=True)
    commands.reset(options=_options(ctx))


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(options=_options(ctx))


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
