"""
Binary operators over two graphs.

Both inputs must agree on directedness. Multigraph-ness may differ:
the result is a multigraph if either input is one. Edge identity is
(u, v) between simple graphs and (u, v, key) between multigraphs;
when only one side is a multigraph, edges are matched by endpoints.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator, Tuple

from graphkit.exceptions import InvalidArgumentError
from graphkit.graph.attributes import Attributes
from graphkit.graph.graph_core import Graph

KeyedEdge = Tuple[Hashable, Hashable, Any, Attributes]


# ---------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------


def _check_compatible(g1: Graph, g2: Graph, operation: str) -> None:
    if not isinstance(g1, Graph) or not isinstance(g2, Graph):
        raise InvalidArgumentError(f"{operation}: arguments must both be graphs")
    if g1.is_directed() != g2.is_directed():
        raise InvalidArgumentError(
            f"{operation}: arguments must be both directed or undirected!"
        )


def _result_graph(g1: Graph, g2: Graph) -> Graph:
    return Graph(
        directed=g1.is_directed(),
        multigraph=g1.is_multigraph() or g2.is_multigraph(),
        config=g1.config,
    )


def _keyed_edges(graph: Graph) -> Iterator[KeyedEdge]:
    if graph.is_multigraph():
        yield from graph.each_edge(data=True, keys=True)
    else:
        for u, v, attrs in graph.each_edge(data=True):
            yield u, v, None, attrs


def _contains(graph: Graph, u: Hashable, v: Hashable, key: Any) -> bool:
    if key is not None and graph.is_multigraph():
        return graph.has_edge(u, v, key)
    return graph.has_edge(u, v)


def _add(result: Graph, u: Hashable, v: Hashable, key: Any, attrs: Attributes) -> None:
    if not result.is_multigraph():
        result.add_edge_with(u, v, attrs)
        return
    if key is not None and result.has_edge(u, v, key):
        # Keep both parallel edges; the newcomer gets a fresh key.
        key = None
    result.add_edge_with(u, v, attrs, key=key)


def _merge_nodes(result: Graph, *graphs: Graph) -> None:
    for graph in graphs:
        for node, attrs in graph.nodes.items():
            result.add_node_with(node, attrs)


def _merge(g1: Graph, g2: Graph) -> Graph:
    result = _result_graph(g1, g2)
    result.graph.update(g1.graph)
    result.graph.update(g2.graph)
    _merge_nodes(result, g1, g2)
    for graph in (g1, g2):
        for u, v, key, attrs in _keyed_edges(graph):
            _add(result, u, v, key, attrs)
    return result


def _relabel(graph: Graph, index: int) -> Graph:
    relabeled = graph.fresh_copy()
    for node, attrs in graph.nodes.items():
        relabeled.add_node_with((index, node), attrs)
    for u, v, key, attrs in _keyed_edges(graph):
        relabeled.add_edge_with((index, u), (index, v), attrs, key=key)
    return relabeled


def _log_result(operation: str, result: Graph) -> Graph:
    logging.getLogger("graphkit.operators").debug(
        "%s: %s nodes, %s edges (%s)",
        operation,
        result.number_of_nodes(),
        result.number_of_edges(),
        result.variant,
    )
    return result


# ---------------------------------------------------------------------
# Union family
# ---------------------------------------------------------------------


def union(g1: Graph, g2: Graph) -> Graph:
    """
    All nodes and edges of both graphs.

    Meant for graphs with disjoint node sets; shared node ids are merged
    (second graph's attributes win) rather than renumbered.
    """
    _check_compatible(g1, g2, "union")

    shared = sum(1 for node in g2 if node in g1)
    if shared:
        logging.getLogger("graphkit.operators").warning(
            "union of graphs sharing %s node ids; use disjoint_union to keep them apart",
            shared,
        )

    return _log_result("union", _merge(g1, g2))


def disjoint_union(g1: Graph, g2: Graph) -> Graph:
    """
    Union after relabeling node n of the first graph to (0, n)
    and of the second graph to (1, n).
    """
    _check_compatible(g1, g2, "disjoint_union")
    return _log_result("disjoint_union", _merge(_relabel(g1, 0), _relabel(g2, 1)))


def compose(g1: Graph, g2: Graph) -> Graph:
    """
    Overlay g2 on g1: shared nodes merge with g2's attributes winning,
    every edge of both graphs is kept.
    """
    _check_compatible(g1, g2, "compose")
    return _log_result("compose", _merge(g1, g2))


# ---------------------------------------------------------------------
# Set algebra
# ---------------------------------------------------------------------


def intersection(g1: Graph, g2: Graph) -> Graph:
    """
    Nodes present in both graphs, and the edges of g1 also present in g2.

    Common nodes are kept even when none of their edges survive.
    """
    _check_compatible(g1, g2, "intersection")
    result = _result_graph(g1, g2)

    for node, attrs in g1.nodes.items():
        if node in g2:
            result.add_node_with(node, attrs)

    for u, v, key, attrs in _keyed_edges(g1):
        if u in result and v in result and _contains(g2, u, v, key):
            _add(result, u, v, key, attrs)

    return _log_result("intersection", result)


def difference(g1: Graph, g2: Graph) -> Graph:
    """
    Edges of g1 absent from g2, over the nodes of both graphs.
    """
    _check_compatible(g1, g2, "difference")
    result = _result_graph(g1, g2)
    _merge_nodes(result, g1, g2)

    for u, v, key, attrs in _keyed_edges(g1):
        if not _contains(g2, u, v, key):
            _add(result, u, v, key, attrs)

    return _log_result("difference", result)


def symmetric_difference(g1: Graph, g2: Graph) -> Graph:
    """
    Edges present in exactly one of the graphs, over the nodes of both.
    """
    _check_compatible(g1, g2, "symmetric_difference")
    result = _result_graph(g1, g2)
    _merge_nodes(result, g1, g2)

    for first, second in ((g1, g2), (g2, g1)):
        for u, v, key, attrs in _keyed_edges(first):
            if not _contains(second, u, v, key):
                _add(result, u, v, key, attrs)

    return _log_result("symmetric_difference", result)
