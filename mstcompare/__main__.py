import argparse
import sys

from mstcompare.gconverter import read_graph
from mstcompare.graph import demo_graph
from mstcompare.graphgen import random_graph
from mstcompare.mstbench import compare, print_mst, print_stats, weights_agree


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='mstcompare',
                                     description='Build an MST with Kruskal and Boruvka and compare them')
    parser.add_argument('-f', '--file',
                        help='read the graph from this file instead of using the demo graph')
    parser.add_argument('-b', '--binary',
                        action='store_true',
                        help='the input file is in the binary format')
    parser.add_argument('-n', '--random',
                        metavar='NVERTICES',
                        type=int,
                        help='generate a random graph on this many vertices')
    parser.add_argument('-d', '--density',
                        default=0.5,
                        type=float,
                        help='edge density of random graphs')
    parser.add_argument('-s', '--seed',
                        default=0,
                        type=int,
                        help='the seed value to use for generating random graphs')
    parser.add_argument('--min-weight',
                        default=1,
                        type=int,
                        help='the minimum edge weight in random graphs')
    parser.add_argument('--max-weight',
                        default=100,
                        type=int,
                        help='the maximum edge weight in random graphs')
    parser.add_argument('-r', '--reps',
                        default=1,
                        type=int,
                        help='the number of times to repeat each builder')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if args.file and args.random is not None:
        parser.error('--file and --random are mutually exclusive')
    if args.reps < 1:
        parser.error('--reps must be at least 1')

    if args.file:
        try:
            graph = read_graph(args.file, binary=args.binary)
        except (OSError, ValueError) as e:
            parser.error(f'cannot load {args.file}: {e}')
    elif args.random is not None:
        try:
            graph = random_graph(args.random, args.density, args.min_weight, args.max_weight, args.seed)
        except ValueError as e:
            parser.error(str(e))
    else:
        graph = demo_graph()

    if not args.quiet:
        print('=== Comparing MST algorithms ===')
        print(f'  {graph.vertex_count} vertices, {graph.edge_count} edges')
        print()

    all_metrics = compare(graph, args.reps)

    # dumping every edge of a big random graph is only useful on request
    if args.verbose or (args.file is None and args.random is None):
        for (name, metrics) in all_metrics.items():
            print_mst(metrics['mst'], name)

    print_stats(all_metrics)

    for (name, metrics) in all_metrics.items():
        if not graph.is_spanning_tree(metrics['mst']) and not args.quiet:
            print(f'Note: {name} produced a spanning forest ({metrics["edges"]} edges); the graph is disconnected')

    return 0 if weights_agree(all_metrics) else 1


if __name__ == '__main__':
    sys.exit(main())
