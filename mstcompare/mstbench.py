## Timing comparison of the Kruskal and Boruvka builders

from __future__ import annotations

import time

from typing import Any, Callable

from mstcompare.boruvka import boruvka_mst
from mstcompare.graph import Edge, Graph
from mstcompare.kruskal import kruskal_mst
from mstcompare.weight import total_weight

Builder = Callable[[Graph], list[Edge]]

BUILDERS: dict[str, Builder] = {
    'Kruskal': kruskal_mst,
    'Boruvka': boruvka_mst,
}

# Which builder the speedups are measured against
BASELINE = 'Kruskal'


def print_mst(mst: list[Edge], name: str) -> None:
    print(f'MST built by {name}:')
    for edge in mst:
        print(f'{edge.u} -- {edge.v} (weight: {edge.weight})')
    print(f'Total weight: {total_weight(mst)}')
    print()


def time_builder(builder: Builder, graph: Graph, reps: int=1) -> tuple[list[Edge], list[float]]:
    """
    Run *builder* on *graph* reps times; return its result and the
    wall-clock time of each run in seconds.
    """
    if reps < 1:
        raise ValueError(f'reps must be >= 1, got {reps}')

    result = None
    compute_times = []
    for _ in range(reps):
        start = time.perf_counter()
        mst = builder(graph)
        compute_times.append(time.perf_counter() - start)

        if result is not None and mst != result:
            raise RuntimeError(f'inconsistent outputs from {builder.__name__}')
        result = mst

    return result, compute_times


def compare(graph: Graph, reps: int=1) -> dict[str, dict[str, Any]]:
    all_metrics = {}
    for (name, builder) in BUILDERS.items():
        mst, compute_times = time_builder(builder, graph, reps)
        all_metrics[name] = {
            'mst': mst,
            'weight': total_weight(mst),
            'edges': len(mst),
            'compute_times': compute_times,
            'avg_compute_time': sum(compute_times)/len(compute_times),
        }
    return all_metrics


def weights_agree(all_metrics: dict[str, dict[str, Any]]) -> bool:
    weights = [metrics['weight'] for metrics in all_metrics.values()]
    return min(weights) == max(weights)


def print_stats(all_metrics: dict[str, dict[str, Any]], baseline: str=BASELINE) -> None:
    base_time = all_metrics[baseline]['avg_compute_time']

    for (impl, metrics) in all_metrics.items():
        compute_time = metrics['avg_compute_time']
        print(f'{impl} ({len(metrics["compute_times"])} runs):')
        print(f'    Compute time = {compute_time:0.6f}s,  Edges = {metrics["edges"]},  Total weight = {metrics["weight"]}')

        if impl != baseline and compute_time > 0:
            print(f'    Speedup over {baseline} = {base_time / compute_time:0.2f}x')

    if weights_agree(all_metrics):
        print('Weights agree')
    else:
        print('!!! Error: builders disagree on total weight')
    print()
