from __future__ import annotations

from typing import Any, Optional

from graphkit.config.settings import GraphConfig
from graphkit.graph.graph_core import Graph


def graph(*, config: Optional[GraphConfig] = None, **attrs: Any) -> Graph:
    """
    Undirected graph with at most one edge per node pair.
    """
    return Graph(directed=False, multigraph=False, config=config, **attrs)


def digraph(*, config: Optional[GraphConfig] = None, **attrs: Any) -> Graph:
    """
    Directed graph with at most one edge per ordered node pair.
    """
    return Graph(directed=True, multigraph=False, config=config, **attrs)


def multigraph(*, config: Optional[GraphConfig] = None, **attrs: Any) -> Graph:
    """
    Undirected graph allowing keyed parallel edges.
    """
    return Graph(directed=False, multigraph=True, config=config, **attrs)


def multidigraph(*, config: Optional[GraphConfig] = None, **attrs: Any) -> Graph:
    """
    Directed graph allowing keyed parallel edges.
    """
    return Graph(directed=True, multigraph=True, config=config, **attrs)
