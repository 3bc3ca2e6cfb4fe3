import types

import pytest

from graphkit import (
    NotFoundError,
    dfs_edges,
    dfs_predecessors,
    dfs_successors,
    dfs_tree,
    digraph,
    graph,
    single_source_shortest_path_length,
)


@pytest.fixture()
def branching():
    g = graph()
    g.add_edges([(0, 1), (0, 2), (1, 3), (2, 4)])
    return g


def test_dfs_follows_a_path():
    g = graph()
    g.add_edges([("x", "y"), ("y", "z")])

    assert list(dfs_edges(g, "x")) == [("x", "y"), ("y", "z")]


def test_dfs_discovery_order(branching):
    assert list(dfs_edges(branching, 0)) == [(0, 1), (1, 3), (0, 2), (2, 4)]


def test_dfs_successors_and_predecessors(branching):
    assert dfs_successors(branching, 0) == {0: [1, 2], 1: [3], 2: [4]}
    assert dfs_predecessors(branching, 0) == {1: 0, 3: 1, 2: 0, 4: 2}


@pytest.mark.parametrize(
    "limit, expected",
    [
        (0, []),
        (-3, []),
        (1, [(0, 1), (0, 2)]),
        (2, [(0, 1), (1, 3), (0, 2), (2, 4)]),
        (None, [(0, 1), (1, 3), (0, 2), (2, 4)]),
    ],
)
def test_dfs_depth_limit(branching, limit, expected):
    assert list(dfs_edges(branching, 0, depth_limit=limit)) == expected


def test_dfs_tree(branching):
    tree = dfs_tree(branching, 0, depth_limit=1)

    assert tree.is_directed()
    assert list(tree.nodes) == [0, 1, 2]
    assert tree.edges() == [(0, 1), (0, 2)]


def test_dfs_tree_of_isolated_source():
    g = graph()
    g.add_node("solo")

    tree = dfs_tree(g, "solo")
    assert list(tree.nodes) == ["solo"]
    assert tree.number_of_edges() == 0


def test_missing_source_fails_before_iteration(branching):
    with pytest.raises(NotFoundError):
        dfs_edges(branching, 42)
    with pytest.raises(NotFoundError):
        dfs_successors(branching, 42)


def test_dfs_is_lazy(branching):
    walk = dfs_edges(branching, 0)

    assert isinstance(walk, types.GeneratorType)
    assert next(walk) == (0, 1)


def test_dfs_on_long_path_does_not_recurse():
    g = graph()
    g.add_path(range(5000))

    edges = list(dfs_edges(g, 0))
    assert len(edges) == 4999
    assert edges[-1] == (4998, 4999)


def test_dfs_follows_edge_direction():
    d = digraph()
    d.add_edges([(1, 2), (3, 1)])

    assert list(dfs_edges(d, 1)) == [(1, 2)]
    assert list(dfs_edges(d, 3)) == [(3, 1), (1, 2)]


def test_dfs_marks_nodes_when_discovered():
    triangle = graph()
    triangle.add_edges([("a", "b"), ("a", "c"), ("b", "c")])

    # c is first reached through b, so (a, c) is not a tree edge.
    assert list(dfs_edges(triangle, "a")) == [("a", "b"), ("b", "c")]
    assert dfs_predecessors(triangle, "a") == {"b": "a", "c": "b"}


def test_dfs_handles_cycles_and_self_loops():
    d = digraph()
    d.add_edges([(1, 1), (1, 2), (2, 1)])

    assert list(dfs_edges(d, 1)) == [(1, 2)]


def test_shortest_path_length(path4):
    assert single_source_shortest_path_length(path4, 1) == {1: 0, 2: 1, 3: 2, 4: 3}
    assert single_source_shortest_path_length(path4, 1, cutoff=2) == {1: 0, 2: 1, 3: 2}
    assert single_source_shortest_path_length(path4, 3, cutoff=0) == {3: 0}

    with pytest.raises(NotFoundError):
        single_source_shortest_path_length(path4, 99)
