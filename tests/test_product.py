import networkx as nx
import pytest

from graphkit import (
    InvalidArgumentError,
    cartesian_product,
    digraph,
    graph,
    lexicographic_product,
    multigraph,
    power,
    strong_product,
    tensor_product,
)


def _k2(u, v, **attrs):
    g = graph()
    g.add_edge(u, v, **attrs)
    return g


def _edge_set(g):
    return {frozenset(e) for e in g.edges()}


def test_cartesian_with_singleton_is_isomorphic(path4, as_networkx):
    single = graph()
    single.add_node("s")

    product = cartesian_product(path4, single)

    assert product.number_of_nodes() == path4.number_of_nodes()
    assert nx.is_isomorphic(as_networkx(product), as_networkx(path4))


def test_node_attributes_are_zipped():
    g1 = graph()
    g1.add_node("a", colour="red")
    g2 = graph()
    g2.add_node("x", size=2, colour="blue")

    product = cartesian_product(g1, g2)

    assert product.nodes == {
        ("a", "x"): {"colour": ("red", "blue"), "size": (None, 2)},
    }


def test_tensor_product_of_two_edges():
    product = tensor_product(_k2(0, 1, w=1), _k2("a", "b", w=2))

    assert product.number_of_nodes() == 4
    assert _edge_set(product) == {
        frozenset({(0, "a"), (1, "b")}),
        frozenset({(1, "a"), (0, "b")}),
    }
    assert product.get_edge_data((0, "a"), (1, "b")) == {"w": (1, 2)}


def test_directed_tensor_product():
    d1 = digraph()
    d1.add_edge(0, 1)
    d2 = digraph()
    d2.add_edge("a", "b")

    product = tensor_product(d1, d2)

    assert product.is_directed()
    assert product.edges() == [((0, "a"), (1, "b"))]


def test_tensor_product_with_self_loop_adds_one_edge():
    loop = multigraph()
    loop.add_edge(0, 0)

    product = tensor_product(loop, _k2("a", "b"))
    assert product.number_of_edges() == 1


def test_cartesian_product_edges():
    product = cartesian_product(_k2(0, 1, w=5), _k2("a", "b"))

    assert _edge_set(product) == {
        frozenset({(0, "a"), (1, "a")}),
        frozenset({(0, "b"), (1, "b")}),
        frozenset({(0, "a"), (0, "b")}),
        frozenset({(1, "a"), (1, "b")}),
    }
    assert product.get_edge_data((0, "a"), (1, "a")) == {"w": 5}


def test_lexicographic_product_of_two_edges_is_complete():
    product = lexicographic_product(_k2(0, 1), _k2("a", "b"))

    assert product.number_of_nodes() == 4
    assert product.number_of_edges() == 6


def test_lexicographic_product_is_not_symmetric():
    path = graph()
    path.add_path([0, 1, 2])
    pair = graph()
    pair.add_nodes(["a", "b"])

    # Non-adjacent nodes of the second factor still get joined across g1 edges.
    assert lexicographic_product(path, pair).number_of_edges() == 8
    assert lexicographic_product(pair, path).number_of_edges() == 4


def test_strong_product_is_cartesian_plus_tensor():
    g1, g2 = _k2(0, 1), _k2("a", "b")

    strong = strong_product(g1, g2)

    assert _edge_set(strong) == _edge_set(cartesian_product(g1, g2)) | _edge_set(
        tensor_product(g1, g2)
    )
    assert strong.number_of_edges() == 6


def test_multigraph_factor_keeps_parallel_products():
    m = multigraph()
    m.add_edges([(0, 1), (0, 1)])

    product = strong_product(m, _k2("a", "b"))

    assert product.is_multigraph()
    assert product.number_of_edges() == 10
    assert product.number_of_edges((0, "a"), (1, "a")) == 2


def test_products_require_matching_direction():
    for product in (tensor_product, cartesian_product, lexicographic_product, strong_product):
        with pytest.raises(InvalidArgumentError):
            product(graph(), digraph())
        with pytest.raises(InvalidArgumentError):
            product(graph(), [(1, 2)])


def test_power_of_path(path4):
    squared = power(path4, 2)

    assert not squared.is_multigraph()
    assert _edge_set(squared) == {
        frozenset(e) for e in [(1, 2), (1, 3), (2, 3), (2, 4), (3, 4)]
    }
    assert _edge_set(power(path4, 1)) == _edge_set(path4)
    assert power(path4, 10).number_of_edges() == 6


def test_power_copies_node_attributes():
    g = graph()
    g.add_node(1, label="one")
    g.add_edge(1, 2)

    result = power(g, 1)
    result.get_node_data(1)["label"] = "changed"

    assert g.get_node_data(1) == {"label": "one"}


@pytest.mark.parametrize("k", [0, -1, 1.5, "2", True])
def test_power_rejects_non_positive_integers(path4, k):
    with pytest.raises(InvalidArgumentError):
        power(path4, k)


def test_power_of_directed_graph_is_undirected():
    d = digraph()
    d.add_path([1, 2, 3])

    result = power(d, 2)

    assert not result.is_directed()
    assert _edge_set(result) == {frozenset(e) for e in [(1, 2), (1, 3), (2, 3)]}
