"""CLI entry point and pipeline orchestration."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from edgepath.config import load_config
from edgepath.csv_adapter import read_edges
from edgepath.errors import EdgePathError
from edgepath.graph import build_graph, shortest_path
from edgepath.logger import logger
from edgepath.model import (
    U32_MAX,
    CsvConfig,
    EdgePathConfig,
    NeighborOrder,
)
from edgepath.output_console import render_console
from edgepath.output_json import build_report, render_json

app = typer.Typer(no_args_is_help=True)


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """edgepath — shortest paths over undirected edge lists."""


def _apply_overrides(
    cfg: EdgePathConfig,
    headers: bool | None,
    delimiter: str | None,
    neighbor_order: NeighborOrder | None,
) -> EdgePathConfig:
    csv_raw = cfg.csv.model_dump()
    if headers is not None:
        csv_raw["has_header"] = headers
    if delimiter is not None:
        csv_raw["delimiter"] = delimiter
    try:
        csv_cfg = CsvConfig.model_validate(csv_raw)
    except ValidationError as e:
        typer.echo(f"Error: invalid --delimiter {delimiter!r}: {e.errors()[0]['msg']}", err=True)
        raise SystemExit(2)  # noqa: B904

    search_cfg = cfg.search
    if neighbor_order is not None:
        search_cfg = search_cfg.model_copy(update={"neighbor_order": neighbor_order})
    return EdgePathConfig(csv=csv_cfg, search=search_cfg)


@app.command()
def search(
    path: Annotated[Path, typer.Argument(help="Delimited edge-list file, two node IDs per record")],
    start: Annotated[int, typer.Argument(min=0, max=U32_MAX, help="Start node ID")],
    goal: Annotated[int, typer.Argument(min=0, max=U32_MAX, help="Goal node ID")],
    headers: Annotated[
        bool | None,
        typer.Option("--headers/--no-headers", help="Whether the first record is a header"),
    ] = None,
    delimiter: Annotated[
        str | None, typer.Option("--delimiter", help="Single-character field delimiter")
    ] = None,
    neighbor_order: Annotated[
        NeighborOrder | None,
        typer.Option("--neighbor-order", help="Neighbor expansion order during BFS"),
    ] = None,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to edgepath.yml")
    ] = None,
    out: Annotated[
        Path | None, typer.Option("--out", help="Output directory for report.json")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")] = False,
) -> None:
    """Find the shortest path between two nodes of an edge list."""
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)

    cfg = _apply_overrides(load_config(config_path), headers, delimiter, neighbor_order)
    order = cfg.search.neighbor_order

    try:
        graph = build_graph(read_edges(path, cfg.csv))
        logger.debug("Built graph: %d node(s), %d edge(s)", len(graph), graph.edge_count)
        found = shortest_path(graph, start, goal, neighbor_order=order)
    except EdgePathError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904

    render_console(found)

    if out is not None:
        report = build_report(path, graph, start, goal, found, order)
        try:
            json_path = render_json(report, out)
            typer.echo(f"Wrote report (JSON): {json_path.resolve()}", err=True)
        except Exception as e:
            typer.echo(f"Error writing JSON: {e}", err=True)
            raise
