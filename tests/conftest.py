from __future__ import annotations

import networkx as nx
import pytest

from graphkit import Graph, graph


def _to_networkx(g: Graph) -> nx.Graph:
    if g.is_multigraph():
        out = nx.MultiDiGraph() if g.is_directed() else nx.MultiGraph()
    else:
        out = nx.DiGraph() if g.is_directed() else nx.Graph()
    out.add_nodes_from(g.each_node(data=True))
    out.add_edges_from(g.edges(data=True))
    return out


@pytest.fixture()
def as_networkx():
    return _to_networkx


@pytest.fixture()
def cities() -> Graph:
    g = graph(name="Cities", type="undirected")
    g.add_nodes(["Nagpur", "Mumbai"])
    g.add_edge("Nagpur", "Mumbai")
    g.add_edges([["Nagpur", "Chennai"], ["Chennai", "Bangalore"]])
    g.add_node("Kolkata")
    return g


@pytest.fixture()
def path4() -> Graph:
    g = graph()
    g.add_path([1, 2, 3, 4])
    return g
