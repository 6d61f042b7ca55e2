"""Graph engine — build_graph, shortest_path."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from edgepath.errors import UnknownNodeError
from edgepath.model import Edge, NeighborOrder

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Graph:
    """Symmetric adjacency mapping from node ID to its neighbor IDs."""

    adjacency: dict[int, frozenset[int]] = field(default_factory=dict)

    def __getitem__(self, node: int) -> frozenset[int]:
        return self.adjacency[node]

    def __contains__(self, node: object) -> bool:
        return node in self.adjacency

    def __iter__(self) -> Iterator[int]:
        return iter(self.adjacency)

    def __len__(self) -> int:
        return len(self.adjacency)

    def neighbors(self, node: int) -> frozenset[int]:
        """Neighbors of *node*, or an empty set if it never appeared in an edge."""
        return self.adjacency.get(node, frozenset())

    @property
    def edge_count(self) -> int:
        """Distinct undirected edges; a self-loop counts once."""
        loops = sum(1 for node, nbrs in self.adjacency.items() if node in nbrs)
        total = sum(len(nbrs) for nbrs in self.adjacency.values())
        return (total - loops) // 2 + loops


def build_graph(edges: Iterable[Edge | Sequence[int]]) -> Graph:
    """Build a symmetric adjacency graph, stopping at the first bad edge.

    *edges* may be lazy. A producer reports a broken record by raising when
    the item is requested; nothing after it is consumed and no partial graph
    escapes.
    """
    adjacency: dict[int, set[int]] = {}
    for item in edges:
        edge = item if isinstance(item, Edge) else Edge.from_pair(item)
        adjacency.setdefault(edge.start, set()).add(edge.end)
        adjacency.setdefault(edge.end, set()).add(edge.start)
    return Graph(adjacency={node: frozenset(nbrs) for node, nbrs in adjacency.items()})


def shortest_path(
    graph: Graph,
    start: int,
    goal: int,
    *,
    neighbor_order: NeighborOrder = NeighborOrder.UNORDERED,
) -> list[int] | None:
    """BFS from *start* to *goal*. Returns the node path, or None if unreachable.

    The parent map doubles as the visited set: a node's parent is fixed at its
    first discovery, which lies on a shortest path. With unordered neighbors,
    ties between equally short paths follow set iteration order.
    """
    queue: deque[int] = deque([start])
    parents: dict[int, int | None] = {start: None}

    while queue:
        node = queue.popleft()
        if node == goal:
            return _reconstruct_path(parents, goal)

        if node not in graph.adjacency:
            raise UnknownNodeError(node)
        children: Iterable[int] = graph.adjacency[node]
        if neighbor_order is NeighborOrder.ASCENDING:
            children = sorted(children)

        for child in children:
            if child in parents:
                continue
            parents[child] = node
            queue.append(child)

    return None


def _reconstruct_path(parents: dict[int, int | None], goal: int) -> list[int]:
    path: list[int] = [goal]
    parent = parents[goal]
    while parent is not None:
        path.append(parent)
        parent = parents[parent]
    path.reverse()
    return path
