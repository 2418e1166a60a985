from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class ConstraintViolation(ValueError):
    """Raised when a graph breaks its vertex-range contract."""


@dataclass(frozen=True)
class Edge:
    u: int
    v: int
    weight: int

    @classmethod
    def from_line(cls, s: str) -> 'Edge':
        parts = s.split()
        if len(parts) != 3:
            raise ConstraintViolation(f'expected "u v weight", got {s!r}')
        try:
            return Edge(*[int(token) for token in parts])
        except ValueError:
            raise ConstraintViolation(f'non-integer field in {s!r}') from None

    def key(self) -> tuple[int, int, int]:
        """Undirected identity: (u, v, w) and (v, u, w) share a key."""
        return (min(self.u, self.v), max(self.u, self.v), self.weight)

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


class Graph:
    """
    Vertex count plus an ordered edge list over vertices 0..vertex_count-1.

    Parallel and duplicate edges are kept as inserted; the builders tolerate
    them. Every edge is range-checked on insertion, so a Graph handed to a
    builder never holds an out-of-range endpoint.
    """

    def __init__(self, vertex_count: int, edges: Iterable[Edge] = ()) -> None:
        if vertex_count < 0:
            raise ConstraintViolation(f'vertex count must be >= 0, got {vertex_count}')
        self.vertex_count = vertex_count
        self._edges: list[Edge] = []

        for edge in edges:
            self._append(edge)

    def _append(self, edge: Edge) -> None:
        for endpoint in (edge.u, edge.v):
            if not 0 <= endpoint < self.vertex_count:
                raise ConstraintViolation(
                    f'edge {edge} has endpoint {endpoint} outside [0, {self.vertex_count})'
                )
        self._edges.append(edge)

    def add_edge(self, u: int, v: int, weight: int) -> Edge:
        edge = Edge(u, v, weight)
        self._append(edge)
        return edge

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def is_spanning_tree(self, result: list[Edge]) -> bool:
        """True iff *result* has exactly vertex_count - 1 edges (connected case)."""
        if self.vertex_count == 0:
            return len(result) == 0
        return len(result) == self.vertex_count - 1

    def __repr__(self):
        return f'Graph(vertex_count={self.vertex_count}, edges={len(self._edges)})'


def demo_graph() -> Graph:
    """The six-vertex comparison graph, with most edges entered from both ends."""
    graph = Graph(6)
    for u, v, w in [
        (0, 1, 4), (0, 2, 4), (1, 2, 2), (1, 0, 4), (2, 0, 4),
        (2, 1, 2), (2, 3, 3), (2, 5, 2), (2, 4, 4), (3, 2, 3),
        (3, 4, 3), (4, 2, 4), (4, 3, 3), (5, 2, 2), (5, 4, 3),
    ]:
        graph.add_edge(u, v, w)
    return graph
