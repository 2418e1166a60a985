from __future__ import annotations

import sys

from mstcompare.graph import Edge, Graph
from mstcompare.unionfind import UnionFind


def kruskal_mst(graph: Graph) -> list[Edge]:
    """
    Kruskal's algorithm: scan edges by ascending weight and keep every edge
    that joins two different components.

    sorted() is stable, so equal-weight edges are taken in insertion order.
    On a disconnected graph this returns a spanning forest.
    """
    mst: list[Edge] = []
    n = graph.vertex_count
    if n == 0:
        return mst

    edges = sorted(graph.edges, key=lambda e: e.weight)
    uf = UnionFind(n)

    for edge in edges:
        if not uf.same_set(edge.u, edge.v):
            mst.append(edge)
            uf.union(edge.u, edge.v)

            if len(mst) == n - 1:
                break

    return mst


if __name__ == '__main__':
    from mstcompare.gconverter import read_graph
    from mstcompare.weight import total_weight

    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <filename> [verbose]')
        sys.exit(1)

    fname = sys.argv[1]
    verbose = (len(sys.argv) > 2)

    mst = kruskal_mst(read_graph(fname))

    print('Final MST sum:', total_weight(mst))
    if verbose:
        print(mst)
