from __future__ import annotations

from collections import deque
from typing import Dict, Hashable, Optional

from graphkit.exceptions import NotFoundError
from graphkit.graph.graph_core import Graph


def single_source_shortest_path_length(
    graph: Graph,
    source: Hashable,
    cutoff: Optional[int] = None,
) -> Dict[Hashable, int]:
    """
    Hop distance from `source` to every node reachable from it.

    Breadth-first over graph.neighbours (successors on directed graphs).
    The result is ordered by discovery and includes `source` at level 0.
    With `cutoff`, nodes further than `cutoff` hops are not expanded.
    """
    if source not in graph:
        raise NotFoundError(f"Source {source!r} is not present in the graph")

    levels: Dict[Hashable, int] = {source: 0}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        level = levels[current]

        # Avoid expanding past the cutoff
        if cutoff is not None and level >= cutoff:
            continue

        for nbr in graph.neighbours(current):
            if nbr not in levels:
                levels[nbr] = level + 1
                queue.append(nbr)

    return levels
