"""
Graph subsystem for graphkit.

Defines the in-memory graph data model shared by every algorithm:
- attribute stores on the graph, its nodes and its edges
- one Graph class covering the four variants
  (undirected/directed x simple/multi) by composition
"""

from graphkit.graph.attributes import Attributes, attribute_product, copy_attributes
from graphkit.graph.adjacency import (
    UndirectedAdjacency,
    DirectedAdjacency,
    SimpleEdges,
    MultiEdges,
)
from graphkit.graph.graph_core import Graph
from graphkit.graph.variants import graph, digraph, multigraph, multidigraph

__all__ = [
    "Attributes",
    "attribute_product",
    "copy_attributes",
    "UndirectedAdjacency",
    "DirectedAdjacency",
    "SimpleEdges",
    "MultiEdges",
    "Graph",
    "graph",
    "digraph",
    "multigraph",
    "multidigraph",
]
