"""
Depth-first traversal.

The walk uses an explicit stack, so deep graphs never hit the
interpreter's recursion limit. Each frame is
(parent, node, remaining_depth, neighbour_iterator); a node is marked
visited when it is discovered, not when its frame is exhausted.
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from graphkit.exceptions import NotFoundError
from graphkit.graph.graph_core import Graph


def dfs_edges(
    graph: Graph,
    source: Hashable,
    depth_limit: Optional[int] = None,
) -> Iterator[Tuple[Hashable, Hashable]]:
    """
    Lazily yield (parent, child) tree edges in discovery order.

    `depth_limit` bounds the number of edges between `source` and any
    yielded child; None means unbounded, 0 or less yields nothing.
    The source check is eager; the walk itself starts on first iteration.
    """
    if source not in graph:
        raise NotFoundError(f"There exists no node named {source!r} in the given graph")

    if depth_limit is None:
        depth_limit = len(graph)

    return _walk(graph, source, depth_limit)


def _walk(
    graph: Graph,
    source: Hashable,
    depth_limit: int,
) -> Iterator[Tuple[Hashable, Hashable]]:
    if depth_limit <= 0:
        return

    visited = {source}
    # The root frame has no parent edge of its own.
    stack = [(None, source, depth_limit, iter(graph.neighbours(source)))]

    while stack:
        _, node, remaining, children = stack[-1]

        for child in children:
            if child in visited:
                continue
            visited.add(child)
            yield node, child
            if remaining > 1:
                stack.append((node, child, remaining - 1, iter(graph.neighbours(child))))
            break
        else:
            stack.pop()

    logging.getLogger("graphkit.traversal").debug(
        "dfs from %r visited %s nodes", source, len(visited)
    )


def dfs_tree(
    graph: Graph,
    source: Hashable,
    depth_limit: Optional[int] = None,
) -> Graph:
    """
    Directed tree holding `source` and every edge discovered from it.
    """
    tree = Graph(directed=True, config=graph.config)
    tree.add_node(source)
    tree.add_edges(list(dfs_edges(graph, source, depth_limit)))
    return tree


def dfs_successors(
    graph: Graph,
    source: Hashable,
    depth_limit: Optional[int] = None,
) -> Dict[Hashable, List[Hashable]]:
    """
    Children discovered directly under each parent, in discovery order.
    """
    successors: Dict[Hashable, List[Hashable]] = {}
    for parent, child in dfs_edges(graph, source, depth_limit):
        successors.setdefault(parent, []).append(child)
    return successors


def dfs_predecessors(
    graph: Graph,
    source: Hashable,
    depth_limit: Optional[int] = None,
) -> Dict[Hashable, Hashable]:
    """
    Discovery parent of every node reached from `source`.
    """
    return {child: parent for parent, child in dfs_edges(graph, source, depth_limit)}
