import logging

import pytest

from graphkit import (
    InvalidArgumentError,
    compose,
    difference,
    digraph,
    disjoint_union,
    graph,
    intersection,
    multigraph,
    symmetric_difference,
    union,
)


def _make_graph(edges, nodes=(), **attrs):
    g = graph(**attrs)
    g.add_nodes(list(nodes))
    g.add_edges(edges)
    return g


def test_union_of_disjoint_graphs():
    result = union(_make_graph([(1, 2)]), _make_graph([(5, 6)]))

    assert result.adj == {1: {2: {}}, 2: {1: {}}, 5: {6: {}}, 6: {5: {}}}


def test_union_of_digraphs():
    d1 = digraph()
    d1.add_edges([(1, 2), (2, 3)])
    d2 = digraph()
    d2.add_edge(4, 5)

    result = union(d1, d2)

    assert result.is_directed()
    assert result.number_of_nodes() == 5
    assert result.number_of_edges() == 3
    assert not result.has_edge(2, 1)


def test_union_warns_about_shared_nodes(caplog):
    g1 = _make_graph([(1, 2)])
    g2 = _make_graph([(2, 3)])
    g2.add_node(2, colour="blue")

    with caplog.at_level(logging.WARNING, logger="graphkit.operators"):
        result = union(g1, g2)

    assert "sharing 1 node ids" in caplog.text
    assert result.get_node_data(2) == {"colour": "blue"}
    assert result.number_of_edges() == 2


def test_disjoint_union_relabels_nodes():
    g1 = _make_graph([(1, 2)], name="first")
    g2 = _make_graph([(1, 2)])
    g2.add_node(1, label="mine")

    result = disjoint_union(g1, g2)

    assert result.adj == {
        (0, 1): {(0, 2): {}},
        (0, 2): {(0, 1): {}},
        (1, 1): {(1, 2): {}},
        (1, 2): {(1, 1): {}},
    }
    assert result.get_node_data((1, 1)) == {"label": "mine"}
    assert result.graph == {"name": "first"}


def test_compose_prefers_second_graph():
    g1 = _make_graph([(1, 2)], name="x")
    g1.add_node(1, a=1, b=1)
    g2 = _make_graph([(2, 3)], name="y")
    g2.add_node(1, a=2)
    g2.add_edge(1, 2, w=7)

    result = compose(g1, g2)

    assert result.graph == {"name": "y"}
    assert result.get_node_data(1) == {"a": 2, "b": 1}
    assert result.get_edge_data(1, 2) == {"w": 7}
    assert result.number_of_edges() == 2


def test_compose_keeps_parallel_edges_from_both_sides():
    m1 = multigraph()
    m1.add_edge(1, 2, side="left")
    m2 = multigraph()
    m2.add_edge(1, 2, side="right")

    result = compose(m1, m2)

    assert result.get_edge_data(1, 2) == {0: {"side": "left"}, 1: {"side": "right"}}


def test_intersection_keeps_common_nodes():
    g = _make_graph([(0, 1), (0, 2), (1, 2), (1, 3)])
    h = _make_graph([(0, 1), (1, 2), (0, 3)])

    result = intersection(g, h)

    assert set(result.nodes) == {0, 1, 2, 3}
    assert {frozenset(e) for e in result.edges()} == {frozenset({0, 1}), frozenset({1, 2})}
    assert result.degree([3]) == {3: 0}


def test_intersection_drops_unshared_nodes():
    g = _make_graph([(1, 2)], nodes=[9])
    h = _make_graph([(2, 1)])
    g.add_node(1, source="g")
    h.add_node(1, source="h")

    result = intersection(g, h)

    assert list(result.nodes) == [1, 2]
    assert result.get_node_data(1) == {"source": "g"}
    assert result.edges() == [(1, 2)]


def test_intersection_of_multigraphs_matches_keys():
    m1 = multigraph()
    m1.add_edges([(1, 2), (1, 2)])
    m2 = multigraph()
    m2.add_edge(2, 1, key=0)

    result = intersection(m1, m2)

    assert result.edges(keys=True) == [(1, 2, 0)]


def test_multigraph_against_simple_graph_matches_endpoints():
    m = multigraph()
    m.add_edges([(1, 2), (1, 2), (2, 3)])
    s = _make_graph([(1, 2)])

    assert intersection(m, s).number_of_edges() == 2
    remaining = difference(m, s)
    assert remaining.is_multigraph()
    assert remaining.edges() == [(2, 3)]


def test_difference():
    g1 = _make_graph([(1, 2), (2, 3)])
    g2 = _make_graph([(2, 3)], nodes=[4])

    result = difference(g1, g2)

    assert list(result.nodes) == [1, 2, 3, 4]
    assert result.edges() == [(1, 2)]


def test_symmetric_difference():
    g1 = _make_graph([(1, 2), (2, 3)])
    g2 = _make_graph([(2, 3), (3, 4)])

    result = symmetric_difference(g1, g2)

    assert list(result.nodes) == [1, 2, 3, 4]
    assert result.edges() == [(1, 2), (3, 4)]


def test_directed_difference_respects_orientation():
    d1 = digraph()
    d1.add_edges([(1, 2), (2, 1)])
    d2 = digraph()
    d2.add_edge(1, 2)

    assert difference(d1, d2).edges() == [(2, 1)]


@pytest.mark.parametrize(
    "operator",
    [union, disjoint_union, compose, intersection, difference, symmetric_difference],
)
def test_incompatible_inputs(operator):
    with pytest.raises(InvalidArgumentError):
        operator(graph(), digraph())
    with pytest.raises(InvalidArgumentError):
        operator(graph(), {1: {2: {}}})


def test_results_do_not_alias_inputs():
    g1 = _make_graph([(1, 2, {"w": 1})])
    g1.add_node(1, tag="a")
    g2 = _make_graph([(3, 4)])

    result = union(g1, g2)
    result.get_edge_data(1, 2)["w"] = 100
    result.get_node_data(1)["tag"] = "changed"
    result.add_edge(1, 3)

    assert g1.get_edge_data(1, 2) == {"w": 1}
    assert g1.get_node_data(1) == {"tag": "a"}
    assert not g1.has_node(3)
