"""
Graph operators for graphkit.

- products: tensor, cartesian, lexicographic, strong, power
- binary operators: union, disjoint_union, compose,
  intersection, difference, symmetric_difference
"""

from graphkit.operators.product import (
    tensor_product,
    cartesian_product,
    lexicographic_product,
    strong_product,
    power,
)
from graphkit.operators.binary import (
    union,
    disjoint_union,
    compose,
    intersection,
    difference,
    symmetric_difference,
)

__all__ = [
    "tensor_product",
    "cartesian_product",
    "lexicographic_product",
    "strong_product",
    "power",
    "union",
    "disjoint_union",
    "compose",
    "intersection",
    "difference",
    "symmetric_difference",
]
