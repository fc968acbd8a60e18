"""Stern-Brocot node dataclass.

A Node represents one irreducible fraction p/q >= 1 of the tree.  Nodes are
created by NodeStore and, apart from their children map, are never mutated
after construction.

Fields and their meaning for a node [u0; u1, ..., un]:
  p, q      numerator and denominator (p >= q, gcd(p, q) = 1)
  u         last coefficient un (>= 2, except 1/1 = [1])
  k         depth, i.e. the number of coefficients n + 1
  origin    node_id of [u0, ..., u_{n-1}, 1] = [u0, ..., u_{n-1} + 1]
  children  v -> node_id of [u0, ..., un - 1, v], for v >= 2

The two roots 0/1 and 1/0 have u = k = 0 and no origin.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional

# Fixed arena slots of the always-present nodes.
ZERO_OVER_ONE = 0
ONE_OVER_ZERO = 1
ONE_OVER_ONE = 2


@dataclass
class Node:
    """One stored fraction of the Stern-Brocot tree.

    Attributes:
        node_id:  Index of the node in its store (0-indexed, append order).
        p:        Numerator (Integer type of the store).
        q:        Denominator (Integer type of the store).
        u:        Last continued-fraction coefficient (Size type).
        k:        Depth, 1 + index of the last coefficient (Size type).
        origin:   node_id of the origin node, None for the roots.
        children: Map from coefficient v >= 2 to the child's node_id.
    """

    node_id: int
    p: Any
    q: Any
    u: Any
    k: Any
    origin: Optional[int]
    children: MutableMapping[Any, int] = field(default_factory=dict, repr=False)

    def even(self) -> bool:
        return self.k % 2 == 0

    def odd(self) -> bool:
        return self.k % 2 == 1

    def is_root(self) -> bool:
        """True for 0/1 and 1/0."""
        return self.node_id in (ZERO_OVER_ONE, ONE_OVER_ZERO)
