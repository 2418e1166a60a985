"""
mstcompare: minimum spanning trees by Kruskal and Boruvka over a shared
union-find, plus graph file formats, random generation and a timing harness.
"""

from .graph import ConstraintViolation, Edge, Graph, demo_graph
from .unionfind import UnionFind
from .kruskal import kruskal_mst
from .boruvka import boruvka_mst, cheapest_outgoing
from .weight import total_weight, is_forest, count_components

__all__ = [
    # Model
    "ConstraintViolation",
    "Edge",
    "Graph",
    "demo_graph",
    # Union-find
    "UnionFind",
    # Builders
    "kruskal_mst",
    "boruvka_mst",
    "cheapest_outgoing",
    # Weights
    "total_weight",
    "is_forest",
    "count_components",
]
