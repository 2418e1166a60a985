from __future__ import annotations

import argparse

import numpy as np

from mstcompare.graph import Graph


def random_graph(nvertices: int,
                 density: float=0.5,
                 min_weight: int=1,
                 max_weight: int=100,
                 seed: int | None=None) -> Graph:
    """
    Random simple graph with floor(density * n(n-1)/2) edges.

    Edges are drawn from the upper triangle of the adjacency matrix, so there
    are no self-loops or duplicates. The same seed always gives the same graph.
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f'density must be in [0, 1], got {density}')
    if min_weight > max_weight:
        raise ValueError(f'min_weight {min_weight} > max_weight {max_weight}')
    if nvertices < 0:
        raise ValueError(f'nvertices must be >= 0, got {nvertices}')

    rng = np.random.default_rng(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    # distinct upper-triangle slots, emitted in row-major order
    rows, cols = np.triu_indices(nvertices, k=1)
    chosen = np.sort(rng.choice(len(rows), size=total_edges, replace=False))
    weights = rng.integers(min_weight, max_weight, size=total_edges, endpoint=True)

    graph = Graph(nvertices)
    for i, j, w in zip(rows[chosen], cols[chosen], weights):
        graph.add_edge(int(i), int(j), int(w))

    return graph


if __name__ == '__main__':
    from mstcompare.gconverter import write_graph

    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for benchmarking')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-b', '--binary', action='store_true')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    graph = random_graph(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({graph.edge_count} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph edges:')
        print(list(graph.edges))

    write_graph(graph, args.outfile, binary=args.binary)
