"""
Graph products.

Every product is a node-pair rule plus one or more edge-pair rules,
applied to a freshly allocated result graph:

- tensor:        edges x edges
- cartesian:     edges x nodes  +  nodes x edges
- lexicographic: edges x (nodes x nodes)  +  nodes x edges
- strong:        cartesian  +  tensor

Input edges are enumerated once per (parallel) edge, so a multigraph
result holds exactly one product edge per contributing edge pair.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator, Tuple

from graphkit.exceptions import InvalidArgumentError
from graphkit.graph.attributes import Attributes, attribute_product, copy_attributes
from graphkit.graph.graph_core import Graph
from graphkit.traversal.bfs import single_source_shortest_path_length

ProductEdge = Tuple[Tuple[Hashable, Hashable], Tuple[Hashable, Hashable], Attributes]


# ---------------------------------------------------------------------
# Pair generators
# ---------------------------------------------------------------------


def _edges(graph: Graph) -> Iterator[Tuple[Hashable, Hashable, Attributes]]:
    return graph.each_edge(data=True)


def _node_product(g1: Graph, g2: Graph) -> Iterator[Tuple[Tuple[Hashable, Hashable], Attributes]]:
    for u, attrs1 in g1.nodes.items():
        for x, attrs2 in g2.nodes.items():
            yield (u, x), attribute_product(attrs1, attrs2)


def _edges_cross_edges(g1: Graph, g2: Graph) -> Iterator[ProductEdge]:
    for u, v, c in _edges(g1):
        for x, y, d in _edges(g2):
            yield (u, x), (v, y), attribute_product(c, d)


def _undirected_edges_cross_edges(g1: Graph, g2: Graph) -> Iterator[ProductEdge]:
    """
    The second orientation (v, x)-(u, y) of each undirected edge pair.

    Skipped when it coincides with (u, x)-(v, y), i.e. for self-loops.
    """
    for u, v, c in _edges(g1):
        if u == v:
            continue
        for x, y, d in _edges(g2):
            if x == y:
                continue
            yield (v, x), (u, y), attribute_product(c, d)


def _edges_cross_nodes(g1: Graph, g2: Graph) -> Iterator[ProductEdge]:
    for u, v, d in _edges(g1):
        for x in g2:
            yield (u, x), (v, x), copy_attributes(d)


def _nodes_cross_edges(g1: Graph, g2: Graph) -> Iterator[ProductEdge]:
    for x in g1:
        for u, v, d in _edges(g2):
            yield (x, u), (x, v), copy_attributes(d)


def _edges_cross_nodes_and_nodes(g1: Graph, g2: Graph) -> Iterator[ProductEdge]:
    for u, v, d in _edges(g1):
        for x in g2:
            for y in g2:
                yield (u, x), (v, y), copy_attributes(d)


# ---------------------------------------------------------------------
# Result assembly
# ---------------------------------------------------------------------


def _init_product_graph(g1: Graph, g2: Graph) -> Graph:
    if not isinstance(g1, Graph) or not isinstance(g2, Graph):
        raise InvalidArgumentError("Arguments must both be graphs")
    if g1.is_directed() != g2.is_directed():
        raise InvalidArgumentError("Arguments must be both directed or undirected!")

    g = Graph(
        directed=g1.is_directed(),
        multigraph=g1.is_multigraph() or g2.is_multigraph(),
        config=g1.config,
    )
    for node, attrs in _node_product(g1, g2):
        g.add_node_with(node, attrs)
    return g


def _add_product_edges(g: Graph, edges: Iterator[ProductEdge]) -> None:
    for u, v, attrs in edges:
        g.add_edge_with(u, v, attrs)


def _log_result(name: str, g: Graph) -> Graph:
    logging.getLogger("graphkit.operators").debug(
        "%s: %s nodes, %s edges (%s)",
        name,
        g.number_of_nodes(),
        g.number_of_edges(),
        g.variant,
    )
    return g


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------


def tensor_product(g1: Graph, g2: Graph) -> Graph:
    """
    ((u, x), (v, y)) is an edge iff (u, v) is an edge of g1 and (x, y) of g2.
    """
    g = _init_product_graph(g1, g2)
    _add_product_edges(g, _edges_cross_edges(g1, g2))
    if not g.is_directed():
        _add_product_edges(g, _undirected_edges_cross_edges(g1, g2))
    return _log_result("tensor product", g)


def cartesian_product(g1: Graph, g2: Graph) -> Graph:
    """
    Edges of g1 held fixed on each node of g2, and edges of g2 held
    fixed on each node of g1.
    """
    g = _init_product_graph(g1, g2)
    _add_product_edges(g, _edges_cross_nodes(g1, g2))
    _add_product_edges(g, _nodes_cross_edges(g1, g2))
    return _log_result("cartesian product", g)


def lexicographic_product(g1: Graph, g2: Graph) -> Graph:
    """
    ((u, x), (v, y)) for every edge (u, v) of g1 and every node pair of g2,
    plus the edges of g2 held fixed on each node of g1.
    """
    g = _init_product_graph(g1, g2)
    _add_product_edges(g, _edges_cross_nodes_and_nodes(g1, g2))
    _add_product_edges(g, _nodes_cross_edges(g1, g2))
    return _log_result("lexicographic product", g)


def strong_product(g1: Graph, g2: Graph) -> Graph:
    """
    Union of the cartesian and tensor edge sets.
    """
    g = _init_product_graph(g1, g2)
    _add_product_edges(g, _nodes_cross_edges(g1, g2))
    _add_product_edges(g, _edges_cross_nodes(g1, g2))
    _add_product_edges(g, _edges_cross_edges(g1, g2))
    if not g.is_directed():
        _add_product_edges(g, _undirected_edges_cross_edges(g1, g2))
    return _log_result("strong product", g)


def power(graph: Graph, k: Any) -> Graph:
    """
    k-th power: n is joined to every other node within k hops of it.

    Hops follow graph.neighbours, so a directed input is walked along
    its successors. The result is always a simple undirected graph.
    """
    if not isinstance(graph, Graph):
        raise InvalidArgumentError("Argument must be a graph")
    if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
        raise InvalidArgumentError("Power must be a positive integer!")

    result = Graph(config=graph.config)
    for node, attrs in graph.nodes.items():
        result.add_node_with(node, attrs)

    for node in graph:
        levels = single_source_shortest_path_length(graph, node, cutoff=k)
        for other in levels:
            if other != node:
                result.add_edge(node, other)

    return _log_result(f"power {k}", result)
