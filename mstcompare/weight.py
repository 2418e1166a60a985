from __future__ import annotations

from typing import Iterable

from mstcompare.graph import Edge
from mstcompare.unionfind import UnionFind


def total_weight(edges: Iterable[Edge]) -> int:
    # python ints don't wrap, so no accumulator width to pick
    return sum(e.weight for e in edges)


def is_forest(vertex_count: int, edges: Iterable[Edge]) -> bool:
    """Check that *edges* contain no cycle, using a fresh UnionFind."""
    uf = UnionFind(vertex_count)
    for edge in edges:
        if not uf.union(edge.u, edge.v):
            return False
    return True


def count_components(vertex_count: int, edges: Iterable[Edge]) -> int:
    uf = UnionFind(vertex_count)
    components = vertex_count
    for edge in edges:
        if uf.union(edge.u, edge.v):
            components -= 1
    return components
