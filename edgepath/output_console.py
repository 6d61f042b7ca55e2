"""Console output — the path listing on stdout."""

from __future__ import annotations

import typer


def render_console(path: list[int] | None) -> None:
    """Print ``path found`` and one node per line, or ``no path found``."""
    if path is None:
        typer.echo("no path found")
        return
    typer.echo("path found")
    for node in path:
        typer.echo(str(node))
