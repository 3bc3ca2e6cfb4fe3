"""
Utility functions for graphkit.

Low-level argument helpers shared by the graph core and the algorithms.
No graph logic should live here.
"""

from graphkit.utils.validation import as_collection, as_node_ids, as_edge_tuples

__all__ = [
    "as_collection",
    "as_node_ids",
    "as_edge_tuples",
]
