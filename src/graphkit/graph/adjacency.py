"""
Adjacency strategies composed into Graph.

A direction strategy owns the adjacency dicts and keeps both access
paths of an edge pointing at the same payload object.

An edge-keying strategy decides what that payload is:
- simple graphs store the edge attribute dict directly
- multigraphs store a dict of edge key -> attribute dict
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, Mapping, Optional, Tuple

from graphkit.exceptions import NotFoundError
from graphkit.graph.attributes import Attributes, copy_attributes

Adjacency = Dict[Hashable, Dict[Hashable, Any]]


# ---------------------------------------------------------------------
# Direction strategies
# ---------------------------------------------------------------------


class UndirectedAdjacency:
    """
    Symmetric adjacency: adj[u][v] and adj[v][u] hold the same payload.
    """

    directed = False

    def __init__(self) -> None:
        self.succ: Adjacency = {}

    @property
    def pred(self) -> Adjacency:
        return self.succ

    def add_node(self, node: Hashable) -> None:
        self.succ.setdefault(node, {})

    def remove_node(self, node: Hashable) -> None:
        for nbr in self.succ[node]:
            if nbr != node:
                del self.succ[nbr][node]
        del self.succ[node]

    def link(self, u: Hashable, v: Hashable, payload: Any) -> None:
        self.succ[u][v] = payload
        self.succ[v][u] = payload

    def unlink(self, u: Hashable, v: Hashable) -> None:
        del self.succ[u][v]
        if u != v:
            del self.succ[v][u]

    def clear(self) -> None:
        self.succ.clear()


class DirectedAdjacency:
    """
    Forward adjacency plus a mirrored predecessor map sharing payloads.
    """

    directed = True

    def __init__(self) -> None:
        self.succ: Adjacency = {}
        self.pred: Adjacency = {}

    def add_node(self, node: Hashable) -> None:
        if node not in self.succ:
            self.succ[node] = {}
            self.pred[node] = {}

    def remove_node(self, node: Hashable) -> None:
        for nbr in self.succ[node]:
            del self.pred[nbr][node]
        for nbr in self.pred[node]:
            del self.succ[nbr][node]
        del self.succ[node]
        del self.pred[node]

    def link(self, u: Hashable, v: Hashable, payload: Any) -> None:
        self.succ[u][v] = payload
        self.pred[v][u] = payload

    def unlink(self, u: Hashable, v: Hashable) -> None:
        del self.succ[u][v]
        del self.pred[v][u]

    def clear(self) -> None:
        self.succ.clear()
        self.pred.clear()


# ---------------------------------------------------------------------
# Edge-keying strategies
# ---------------------------------------------------------------------


def _missing(u: Hashable, v: Hashable, key: Any = None) -> NotFoundError:
    if key is None:
        return NotFoundError(f"No such edge exists! ({u!r}, {v!r})")
    return NotFoundError(f"No such edge exists! ({u!r}, {v!r}, key={key!r})")


class SimpleEdges:
    """
    At most one edge per (u, v); the slot holds its attribute dict.
    """

    multigraph = False

    def add(
        self,
        adjacency,
        u: Hashable,
        v: Hashable,
        key: Any,
        attrs: Mapping[Hashable, Any],
    ) -> None:
        existing = adjacency.succ[u].get(v)
        if existing is None:
            adjacency.link(u, v, copy_attributes(attrs))
        else:
            existing.update(attrs)
        return None

    def remove(self, adjacency, u: Hashable, v: Hashable, key: Any) -> None:
        if not self.has(adjacency, u, v, key):
            raise _missing(u, v)
        adjacency.unlink(u, v)

    def has(self, adjacency, u: Hashable, v: Hashable, key: Any) -> bool:
        return u in adjacency.succ and v in adjacency.succ[u]

    def get(self, adjacency, u: Hashable, v: Hashable, key: Any) -> Any:
        if not self.has(adjacency, u, v, key):
            raise _missing(u, v)
        return adjacency.succ[u][v]

    def items(self, slot: Attributes) -> Iterator[Tuple[Any, Attributes]]:
        yield None, slot

    def count(self, slot: Attributes) -> int:
        return 1


class MultiEdges:
    """
    Parallel edges per (u, v); the slot holds key -> attribute dict.

    Keys default to the lowest free integer counting up from len(slot),
    which yields 0, 1, 2, ... for a fresh pair.
    """

    multigraph = True

    def add(
        self,
        adjacency,
        u: Hashable,
        v: Hashable,
        key: Any,
        attrs: Mapping[Hashable, Any],
    ) -> Any:
        keydict = adjacency.succ[u].get(v)
        if keydict is None:
            keydict = {}
            adjacency.link(u, v, keydict)

        if key is None:
            key = self.new_key(keydict)

        if key in keydict:
            keydict[key].update(attrs)
        else:
            keydict[key] = copy_attributes(attrs)
        return key

    def new_key(self, keydict: Mapping[Any, Attributes]) -> int:
        key = len(keydict)
        while key in keydict:
            key += 1
        return key

    def remove(self, adjacency, u: Hashable, v: Hashable, key: Any) -> None:
        keydict = adjacency.succ.get(u, {}).get(v)
        if keydict is None:
            raise _missing(u, v)
        if key is None:
            keydict.popitem()
        elif key in keydict:
            del keydict[key]
        else:
            raise _missing(u, v, key)
        if not keydict:
            adjacency.unlink(u, v)

    def has(self, adjacency, u: Hashable, v: Hashable, key: Any) -> bool:
        keydict = adjacency.succ.get(u, {}).get(v)
        if keydict is None:
            return False
        return key is None or key in keydict

    def get(self, adjacency, u: Hashable, v: Hashable, key: Any) -> Any:
        if not self.has(adjacency, u, v, key):
            raise _missing(u, v, key)
        keydict = adjacency.succ[u][v]
        return keydict if key is None else keydict[key]

    def items(self, slot: Dict[Any, Attributes]) -> Iterator[Tuple[Any, Attributes]]:
        yield from slot.items()

    def count(self, slot: Dict[Any, Attributes]) -> int:
        return len(slot)
