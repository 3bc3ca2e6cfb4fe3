"""
graphkit
========

An in-memory graph data model with attribute payloads, and the
algorithms that run unmodified over all four of its variants:
undirected, directed, undirected multigraph and directed multigraph.

Public API:
- Graph and the graph / digraph / multigraph / multidigraph factories
- depth-first traversal
- DAG queries and topological sort
- graph products and binary operators
"""

from graphkit.exceptions import (
    GraphError,
    NotFoundError,
    InvalidArgumentError,
    CycleDetectedError,
)
from graphkit.graph import Graph, graph, digraph, multigraph, multidigraph
from graphkit.traversal import (
    dfs_edges,
    dfs_tree,
    dfs_successors,
    dfs_predecessors,
    single_source_shortest_path_length,
)
from graphkit.dag import descendants, ancestors, topological_sort, iter_topological_sort
from graphkit.operators import (
    tensor_product,
    cartesian_product,
    lexicographic_product,
    strong_product,
    power,
    union,
    disjoint_union,
    compose,
    intersection,
    difference,
    symmetric_difference,
)

__all__ = [
    "GraphError",
    "NotFoundError",
    "InvalidArgumentError",
    "CycleDetectedError",
    "Graph",
    "graph",
    "digraph",
    "multigraph",
    "multidigraph",
    "dfs_edges",
    "dfs_tree",
    "dfs_successors",
    "dfs_predecessors",
    "single_source_shortest_path_length",
    "descendants",
    "ancestors",
    "topological_sort",
    "iter_topological_sort",
    "tensor_product",
    "cartesian_product",
    "lexicographic_product",
    "strong_product",
    "power",
    "union",
    "disjoint_union",
    "compose",
    "intersection",
    "difference",
    "symmetric_difference",
]

__version__ = "0.1.0"
