from __future__ import annotations

from typing import Any, Dict, Hashable, Mapping, Optional, Tuple

# Attribute stores are plain insertion-ordered dicts. Values are opaque.
Attributes = Dict[Hashable, Any]


def copy_attributes(attrs: Optional[Mapping[Hashable, Any]]) -> Attributes:
    """
    Shallow copy used whenever a payload moves into a new graph.
    """
    return dict(attrs) if attrs else {}


def attribute_product(
    left: Mapping[Hashable, Any],
    right: Mapping[Hashable, Any],
) -> Dict[Hashable, Tuple[Any, Any]]:
    """
    Zip two attribute stores over the union of their keys.

    Keys of `left` come first, then keys only present in `right`.
    A key missing on one side pairs with None.
    """
    keys = list(left)
    keys.extend(k for k in right if k not in left)
    return {k: (left.get(k), right.get(k)) for k in keys}
