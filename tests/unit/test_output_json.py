"""Tests for output_json.build_report, render_json."""

from __future__ import annotations

import json
from pathlib import Path

from edgepath.graph import build_graph, shortest_path
from edgepath.model import NeighborOrder, SearchReport, SearchStatus
from edgepath.output_json import build_report, render_json

LADDER = [(0, 1), (1, 2), (1, 3), (2, 4), (4, 5), (3, 5), (3, 6), (5, 7)]


class TestBuildReport:
    def test_found(self) -> None:
        graph = build_graph(LADDER)
        path = shortest_path(graph, 0, 7)

        report = build_report(Path("ladder.csv"), graph, 0, 7, path, NeighborOrder.ASCENDING)

        assert report.status == SearchStatus.FOUND
        assert report.path == [0, 1, 3, 5, 7]
        assert report.hops == 4
        assert report.node_count == 8
        assert report.edge_count == 8
        assert report.neighbor_order == NeighborOrder.ASCENDING
        assert report.input == "ladder.csv"

    def test_start_equals_goal_has_zero_hops(self) -> None:
        graph = build_graph(LADDER)

        report = build_report(Path("ladder.csv"), graph, 3, 3, [3])

        assert report.hops == 0
        assert report.path == [3]

    def test_not_found(self) -> None:
        graph = build_graph([(0, 1), (8, 9)])

        report = build_report(Path("islands.csv"), graph, 0, 9, None)

        assert report.status == SearchStatus.NOT_FOUND
        assert report.path == []
        assert report.hops is None
        assert report.edge_count == 2


class TestRenderJson:
    def test_creates_directory_and_sorts_keys(self, tmp_path: Path) -> None:
        graph = build_graph(LADDER)
        report = build_report(Path("ladder.csv"), graph, 0, 7, shortest_path(graph, 0, 7))

        out_file = render_json(report, tmp_path / "nested" / "out")

        assert out_file == tmp_path / "nested" / "out" / "report.json"
        text = out_file.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        data = json.loads(text)
        assert list(data) == sorted(data)
        assert SearchReport.model_validate(data) == report
