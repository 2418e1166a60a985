from __future__ import annotations

import random

from typing import Any, Callable

import networkx as nx

from mstcompare.gconverter import write_graph
from mstcompare.graph import Graph


def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)


def from_nx(g: nx.Graph,
            decide_weight: Callable[[Any, Any], int] | None = None,
            nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Graph:
    """
    Convert a networkx graph to a Graph.

    Weights come from *decide_weight* when given, else from each edge's
    'weight' attribute (default 1).
    """
    graph = Graph(g.number_of_nodes())

    for a, b, data in g.edges(data=True):
        # Convert edge names to index
        u = nodename_to_idx(a)
        v = nodename_to_idx(b)
        if decide_weight is not None:
            w = decide_weight(a, b)
        else:
            w = data.get('weight', 1)
        graph.add_edge(u, v, int(w))

    return graph


def to_nx(graph: Graph) -> nx.MultiGraph:
    """Parallel edges survive the trip, so this returns a MultiGraph."""
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.vertex_count))
    for edge in graph.edges:
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g


def reference_mst_weight(graph: Graph) -> int:
    """Total weight of the minimum spanning forest as computed by networkx."""
    forest = nx.minimum_spanning_tree(to_nx(graph), weight='weight')
    return int(forest.size(weight='weight'))


def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   binary: bool=False,
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    write_graph(from_nx(g, decide_weight, nodename_to_idx), fname, binary=binary)


def hypercube_idx(node: tuple[int, ...]) -> int:
    return sum(node[-i-1] * 2**i for i in range(len(node)))


if __name__ == '__main__':
    import argparse

    # nvertices is the vertex count, except for hypercube where it is the dimension
    families = {
        'circulant': lambda n: nx.circulant_graph(n, [1, 2]),
        'hypercube': lambda d: nx.hypercube_graph(d),
        'caveman': lambda n: nx.caveman_graph(max(n // 40, 1), 40),
        'connected-caveman': lambda n: nx.connected_caveman_graph(max(n // 40, 1), 40),
        'binomial': lambda n: nx.fast_gnp_random_graph(n, 8e-5, seed=0),
    }

    parser = argparse.ArgumentParser(prog='nx_utils',
                                     description='Write networkx-generated graphs as MST test files')
    parser.add_argument('family', choices=sorted(families))
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=500, type=int)

    args = parser.parse_args()

    g = families[args.family](args.nvertices)
    to_output_file(g,
                   arbitrary_weight(args.min_weight, args.max_weight, args.seed),
                   args.outfile,
                   binary=args.binary,
                   nodename_to_idx=hypercube_idx if args.family == 'hypercube' else int)
