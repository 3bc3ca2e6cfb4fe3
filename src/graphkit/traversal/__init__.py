"""
Traversal subsystem for graphkit.

- depth-first edges, trees and successor/predecessor maps
- breadth-first hop levels, shared by the DAG queries and graph powers
"""

from graphkit.traversal.dfs import (
    dfs_edges,
    dfs_tree,
    dfs_successors,
    dfs_predecessors,
)
from graphkit.traversal.bfs import single_source_shortest_path_length

__all__ = [
    "dfs_edges",
    "dfs_tree",
    "dfs_successors",
    "dfs_predecessors",
    "single_source_shortest_path_length",
]
