"""JSON output — the search outcome as a deterministic report.json."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from edgepath.model import NeighborOrder, SearchReport, SearchStatus

if TYPE_CHECKING:
    from pathlib import Path

    from edgepath.graph import Graph

REPORT_FILENAME = "report.json"


def build_report(
    input_path: Path,
    graph: Graph,
    start: int,
    goal: int,
    path: list[int] | None,
    neighbor_order: NeighborOrder = NeighborOrder.UNORDERED,
) -> SearchReport:
    """Summarize one query: the graph it ran on and the path it produced."""
    return SearchReport(
        input=str(input_path),
        start=start,
        goal=goal,
        status=SearchStatus.FOUND if path is not None else SearchStatus.NOT_FOUND,
        path=path or [],
        hops=len(path) - 1 if path is not None else None,
        node_count=len(graph),
        edge_count=graph.edge_count,
        neighbor_order=neighbor_order,
    )


def render_json(report: SearchReport, out_path: Path) -> Path:
    """Write report.json under *out_path* and return the written path.

    Keys are sorted, so the same query over the same file yields the same bytes.
    """
    from pathlib import Path as _Path

    out_dir = _Path(str(out_path))
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / REPORT_FILENAME
    out_file.write_text(
        json.dumps(report.model_dump(mode="json"), sort_keys=True, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_file
