"""Properties shared by the Kruskal and Boruvka builders."""
import random

import networkx as nx
import pytest

from mstcompare.boruvka import boruvka_mst
from mstcompare.graph import Edge, Graph, demo_graph
from mstcompare.graphgen import random_graph
from mstcompare.kruskal import kruskal_mst
from mstcompare.nx_utils import arbitrary_weight, from_nx, reference_mst_weight
from mstcompare.weight import count_components, is_forest, total_weight

BUILDERS = [kruskal_mst, boruvka_mst]


def _graphs():
    yield demo_graph()
    for seed in range(5):
        yield random_graph(30, density=0.2, min_weight=1, max_weight=10, seed=seed)
    yield from_nx(nx.circulant_graph(40, [1, 2]), arbitrary_weight(1, 5, seed=3))
    yield from_nx(nx.caveman_graph(4, 5), arbitrary_weight(1, 50, seed=1))
    yield from_nx(nx.connected_caveman_graph(4, 5), arbitrary_weight(1, 50, seed=2))


# --- degenerate cases ---

@pytest.mark.parametrize("builder", BUILDERS)
def test_empty_graph(builder):
    assert builder(Graph(0)) == []


@pytest.mark.parametrize("builder", BUILDERS)
def test_single_vertex(builder):
    assert builder(Graph(1)) == []


@pytest.mark.parametrize("builder", BUILDERS)
def test_single_edge(builder):
    g = Graph(2, [Edge(0, 1, 7)])
    assert builder(g) == [Edge(0, 1, 7)]


@pytest.mark.parametrize("builder", BUILDERS)
def test_no_edges_gives_empty_forest(builder):
    assert builder(Graph(5)) == []


@pytest.mark.parametrize("builder", BUILDERS)
def test_self_loop_ignored(builder):
    g = Graph(2, [Edge(0, 0, 1), Edge(0, 1, 3)])
    assert builder(g) == [Edge(0, 1, 3)]


@pytest.mark.parametrize("builder", BUILDERS)
def test_parallel_edges_take_lightest(builder):
    g = Graph(2, [Edge(0, 1, 9), Edge(1, 0, 2), Edge(0, 1, 5)])
    assert builder(g) == [Edge(1, 0, 2)]


# --- the six-vertex demo graph ---

@pytest.mark.parametrize("builder", BUILDERS)
def test_demo_graph_weight(builder):
    g = demo_graph()
    mst = builder(g)
    assert total_weight(mst) == 14
    assert len(mst) == 5
    assert is_forest(g.vertex_count, mst)


def test_demo_graph_kruskal_edges():
    keys = [e.key() for e in kruskal_mst(demo_graph())]
    assert keys == [(1, 2, 2), (2, 5, 2), (2, 3, 3), (3, 4, 3), (0, 1, 4)]


def test_builders_do_not_mutate_graph():
    g = demo_graph()
    before = g.edges
    kruskal_mst(g)
    boruvka_mst(g)
    assert g.edges == before


# --- properties over many graphs ---

@pytest.mark.parametrize("builder", BUILDERS)
def test_matches_networkx_weight(builder):
    for g in _graphs():
        assert total_weight(builder(g)) == reference_mst_weight(g)


def test_kruskal_and_boruvka_agree():
    for g in _graphs():
        assert total_weight(kruskal_mst(g)) == total_weight(boruvka_mst(g))


@pytest.mark.parametrize("builder", BUILDERS)
def test_forest_size_and_acyclic(builder):
    for g in _graphs():
        mst = builder(g)
        c = count_components(g.vertex_count, g.edges)
        assert len(mst) == g.vertex_count - c
        assert is_forest(g.vertex_count, mst)


@pytest.mark.parametrize("builder", BUILDERS)
def test_deterministic(builder):
    for g in _graphs():
        assert builder(g) == builder(g)


@pytest.mark.parametrize("builder", BUILDERS)
def test_disconnected_gives_forest(builder):
    # two triangles and an isolated vertex
    g = Graph(7, [
        Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 3),
        Edge(3, 4, 5), Edge(4, 5, 1), Edge(3, 5, 1),
    ])
    mst = builder(g)
    assert len(mst) == 7 - 3
    assert total_weight(mst) == 1 + 2 + 1 + 1
    assert not g.is_spanning_tree(mst)


@pytest.mark.parametrize("builder", BUILDERS)
def test_tie_permutation_keeps_weight(builder):
    rng = random.Random(11)
    base = list(random_graph(25, density=0.3, min_weight=1, max_weight=3, seed=7).edges)
    expected = total_weight(builder(Graph(25, base)))
    for _ in range(5):
        shuffled = base[:]
        rng.shuffle(shuffled)
        assert total_weight(builder(Graph(25, shuffled))) == expected


@pytest.mark.parametrize("builder", BUILDERS)
def test_all_equal_weights(builder):
    g = from_nx(nx.complete_graph(8), lambda _a, _b: 1)
    mst = builder(g)
    assert len(mst) == 7
    assert is_forest(8, mst)


# --- Kruskal specifics ---

def test_kruskal_stable_tie_break():
    g = Graph(3, [Edge(0, 1, 1), Edge(1, 2, 1), Edge(0, 2, 1)])
    assert kruskal_mst(g) == [Edge(0, 1, 1), Edge(1, 2, 1)]

    g = Graph(3, [Edge(0, 2, 1), Edge(1, 2, 1), Edge(0, 1, 1)])
    assert kruskal_mst(g) == [Edge(0, 2, 1), Edge(1, 2, 1)]


def test_kruskal_stops_after_spanning():
    # the heavy edge at the end is never looked at once the tree is complete
    g = Graph(3, [Edge(0, 1, 1), Edge(1, 2, 1), Edge(0, 2, 100)])
    assert kruskal_mst(g) == [Edge(0, 1, 1), Edge(1, 2, 1)]
