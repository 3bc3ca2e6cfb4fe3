from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any, List, Tuple

from graphkit.exceptions import InvalidArgumentError


def as_collection(value: Any, *, what: str) -> List[Any]:
    """
    Materialize a batch argument, rejecting anything that is not
    an iterable of items.

    Strings and bytes are rejected: a bare string is a single id,
    never a collection of ids.
    """
    if value is None or isinstance(value, (str, bytes, Mapping)):
        raise InvalidArgumentError(f"Expected a collection of {what}, got {value!r}")
    if not isinstance(value, Iterable):
        raise InvalidArgumentError(f"Expected a collection of {what}, got {value!r}")
    return list(value)


def as_node_ids(value: Any) -> List[Hashable]:
    ids = as_collection(value, what="node ids")
    for node in ids:
        if not isinstance(node, Hashable):
            raise InvalidArgumentError(f"Node id {node!r} is not hashable")
    return ids


def as_edge_tuples(
    value: Any,
    *,
    allow_key: bool = False,
    allow_attrs: bool = True,
) -> List[Tuple[Any, ...]]:
    """
    Materialize an edge list and normalize every item to
    (u, v, key, attrs).

    Accepted item shapes:
    - (u, v)
    - (u, v, attrs)              when allow_attrs
    - (u, v, key)                when allow_key
    - (u, v, key, attrs)         when allow_key and allow_attrs
    """
    items = as_collection(value, what="edges")
    edges: List[Tuple[Any, ...]] = []

    for item in items:
        if isinstance(item, (str, bytes, Mapping)) or not isinstance(item, Iterable):
            raise InvalidArgumentError(f"Malformed edge {item!r}")
        parts = tuple(item)

        u = v = key = None
        attrs: Mapping = {}

        if len(parts) == 2:
            u, v = parts
        elif len(parts) == 3 and allow_attrs and isinstance(parts[2], Mapping):
            u, v, attrs = parts
        elif len(parts) == 3 and allow_key:
            u, v, key = parts
        elif len(parts) == 4 and allow_key and allow_attrs and isinstance(parts[3], Mapping):
            u, v, key, attrs = parts
        else:
            raise InvalidArgumentError(f"Malformed edge {item!r}")

        if not isinstance(u, Hashable) or not isinstance(v, Hashable):
            raise InvalidArgumentError(f"Edge endpoints of {item!r} are not hashable")

        edges.append((u, v, key, attrs))

    return edges
