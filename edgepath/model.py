"""Canonical model — edges, config, search report."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from edgepath.errors import MalformedRecordError

U32_MAX = 2**32 - 1


class NeighborOrder(StrEnum):
    """Order in which a node's neighbors are expanded during BFS."""

    UNORDERED = "unordered"
    ASCENDING = "ascending"


class SearchStatus(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"


class Edge(BaseModel):
    """One undirected edge between two unsigned 32-bit node IDs."""

    model_config = ConfigDict(strict=True, frozen=True)

    start: int = Field(ge=0, le=U32_MAX)
    end: int = Field(ge=0, le=U32_MAX)

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> Edge:
        """Validate a ``(start, end)`` pair, raising MalformedRecordError on any defect."""
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence):
            raise MalformedRecordError(f"expected a pair of node IDs, got {pair!r}")
        if len(pair) != 2:
            raise MalformedRecordError(f"record length {len(pair)}")
        try:
            return cls(start=pair[0], end=pair[1])
        except ValidationError as e:
            errors = e.errors()
            loc = ".".join(str(part) for part in errors[0]["loc"])
            raise MalformedRecordError(f"{loc}: {errors[0]['msg']}") from e


# The csv reader treats these as quoting or record boundaries.
RESERVED_DELIMITERS = frozenset({'"', "\r", "\n"})


class CsvConfig(BaseModel):
    delimiter: str = Field(default=",", min_length=1, max_length=1)
    has_header: bool = False
    strip_whitespace: bool = True

    @field_validator("delimiter")
    @classmethod
    def _delimiter_not_reserved(cls, value: str) -> str:
        if value in RESERVED_DELIMITERS:
            raise ValueError(f"delimiter {value!r} is reserved for quoting or line breaks")
        return value


class SearchConfig(BaseModel):
    neighbor_order: NeighborOrder = NeighborOrder.UNORDERED


class EdgePathConfig(BaseModel):
    csv: CsvConfig = Field(default_factory=CsvConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)


class SearchReport(BaseModel):
    """Assembled by the CLI after the search, written to report.json."""

    input: str
    start: int
    goal: int
    status: SearchStatus
    path: list[int] = Field(default_factory=list)
    hops: int | None = None
    node_count: int
    edge_count: int
    neighbor_order: NeighborOrder
