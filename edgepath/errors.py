"""Error types raised while reading edges and searching the graph."""

from __future__ import annotations


class EdgePathError(Exception):
    """Base class for all edgepath failures. Every one of them ends the run."""


class MalformedRecordError(EdgePathError):
    """Raised when an edge record is not exactly two unsigned 32-bit node IDs."""

    def __init__(self, reason: str, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        if line is None:
            super().__init__(f"malformed record: {reason}")
        else:
            super().__init__(f"malformed record on line {line}: {reason}")


class UnknownNodeError(EdgePathError):
    """Raised when the search expands a node that has no entry in the graph."""

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"no node {node}")


class InputReadError(EdgePathError):
    """Raised when the edge file cannot be opened or decoded."""
