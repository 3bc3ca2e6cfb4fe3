from __future__ import annotations

from collections import deque
import logging
from typing import Hashable, Iterator, List

from graphkit.exceptions import CycleDetectedError, InvalidArgumentError, NotFoundError
from graphkit.graph.graph_core import Graph
from graphkit.traversal.bfs import single_source_shortest_path_length


def descendants(graph: Graph, source: Hashable) -> List[Hashable]:
    """
    Every node reachable from `source` along forward edges,
    in breadth-first discovery order.

    `source` itself is never included, even when a cycle leads back to it.
    """
    if source not in graph:
        raise NotFoundError(f"Source {source!r} is not present in the graph")

    levels = single_source_shortest_path_length(graph, source)
    return [node for node in levels if node != source]


def ancestors(graph: Graph, source: Hashable) -> List[Hashable]:
    """
    Every node from which `source` is reachable.

    Walks the reversed graph in breadth-first order; on undirected
    graphs this is the same list as descendants().
    """
    if source not in graph:
        raise NotFoundError(f"Source {source!r} is not present in the graph")

    reversed_graph = graph.reverse() if graph.is_directed() else graph
    levels = single_source_shortest_path_length(reversed_graph, source)
    return [node for node in levels if node != source]


def topological_sort(graph: Graph) -> List[Hashable]:
    """
    Nodes ordered so that every edge points forward (Kahn's algorithm).

    Ties are broken first-in first-out over node insertion order, so
    the result is deterministic for a given graph.
    """
    return list(iter_topological_sort(graph))


def iter_topological_sort(graph: Graph) -> Iterator[Hashable]:
    """
    Lazy form of topological_sort().

    The graph must not change while this is being consumed; a removed
    or added node is reported as CycleDetectedError.
    """
    if not graph.is_directed():
        raise InvalidArgumentError("Topological sort is not defined on undirected graphs")
    return _kahn(graph)


def _kahn(graph: Graph) -> Iterator[Hashable]:
    logger = logging.getLogger("graphkit.dag")

    snapshot = set(graph)
    indegree = {u: d for u, d in graph.in_degree().items() if d > 0}
    frontier = deque(u for u in graph if u not in indegree)

    while frontier:
        node = frontier.popleft()
        if node not in graph:
            logger.info("node %r vanished during topological sort", node)
            raise CycleDetectedError("Graph changed during iteration!")

        for child in graph.successors(node):
            if child not in snapshot or child not in indegree:
                logger.info("edge %r -> %r appeared during topological sort", node, child)
                raise CycleDetectedError("Graph changed during iteration!")
            indegree[child] -= graph.number_of_edges(node, child)
            if indegree[child] == 0:
                frontier.append(child)
                del indegree[child]

        yield node

    if indegree or len(snapshot) != len(graph):
        logger.info(
            "topological sort stopped with %s nodes left on a cycle",
            len(indegree),
        )
        raise CycleDetectedError("Graph contains cycle or graph changed during iteration!")
