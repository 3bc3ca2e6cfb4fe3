"""
DAG queries for graphkit: reachability and topological ordering.
"""

from graphkit.dag.dag import (
    descendants,
    ancestors,
    topological_sort,
    iter_topological_sort,
)

__all__ = [
    "descendants",
    "ancestors",
    "topological_sort",
    "iter_topological_sort",
]
