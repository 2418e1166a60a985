from __future__ import annotations

import sys
from typing import Optional

from mstcompare.graph import Edge, Graph
from mstcompare.unionfind import UnionFind


def cheapest_outgoing(graph: Graph, uf: UnionFind) -> list[Optional[Edge]]:
    """
    One scan over the edge list: for each component root, the lightest edge
    with one endpoint inside that component and the other outside it.

    Ties go to the edge seen first (strict < below). Slots for non-roots and
    for components with no outgoing edge stay None.
    """
    best: list[Optional[Edge]] = [None] * graph.vertex_count

    for edge in graph.edges:
        comp_u = uf.find(edge.u)
        comp_v = uf.find(edge.v)
        if comp_u == comp_v:
            continue

        for comp in (comp_u, comp_v):
            current = best[comp]
            if current is None or edge.weight < current.weight:
                best[comp] = edge

    return best


def boruvka_mst(graph: Graph) -> list[Edge]:
    """
    Boruvka's algorithm: in each round every component picks its cheapest
    outgoing edge, then the picks are applied in component-root order.

    A pick is skipped if an earlier pick in the same round already joined its
    endpoints. Stops when one component remains or a round adds nothing; in
    the latter case the graph is disconnected and the result is a spanning
    forest.
    """
    mst: list[Edge] = []
    n = graph.vertex_count
    uf = UnionFind(n)
    components = n

    while components > 1:
        added = 0

        for edge in cheapest_outgoing(graph, uf):
            if edge is None:
                continue
            if uf.union(edge.u, edge.v):
                mst.append(edge)
                components -= 1
                added += 1

        if added == 0:
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

    mst = boruvka_mst(read_graph(fname))

    print('Final MST sum:', total_weight(mst))
    if verbose:
        print(mst)
