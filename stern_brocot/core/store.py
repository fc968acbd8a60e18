"""Append-only arena of Stern-Brocot nodes.

NodeStore owns every node ever built for one (Integer, Size, Map)
configuration.  Nodes live in a list and refer to each other by index, so a
node is never relocated and an index stays valid for the lifetime of the
store.  Only fractions p/q >= 1 are stored: p/q < 1 is served as the
reciprocal of q/p by the Fraction handle.

Usage:
    store = NodeStore()
    f = store.fraction(8, 5)      # builds 2/1, 3/2, 5/3, 8/5 on first call
    f.cfrac()                     # [1, 1, 1, 2]
    f1, f2 = f.get_split()        # 3/2, 5/3

The node-level navigation primitives (child, father, ancestor, ...) work on
node ids and ignore reciprocals; Fraction maps them through its flag.
Every primitive reads fixed fields and performs at most one children-map
get-or-insert, except reduced() and cfrac_of() which walk i and k steps.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Optional

from ..config import DEFAULT_CONFIG, TreeConfig
from ..errors import ContractViolation
from .fraction import Fraction
from .node import ONE_OVER_ONE, ONE_OVER_ZERO, ZERO_OVER_ONE, Node

logger = logging.getLogger(__name__)

_INSTANCE: Optional["NodeStore"] = None


class NodeStore:
    """Lazily grown, memoized Stern-Brocot tree of fractions >= 1.

    The three nodes 0/1, 1/0 and 1/1 exist from construction.  Any other
    node is created exactly once, the first time it is reached as a child
    (directly, or on the descent path of fraction()).
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self.nodes: List[Node] = []
        zero = self.config.to_integer(0)
        one = self.config.to_integer(1)
        size0 = self.config.to_size(0)
        size1 = self.config.to_size(1)
        self._append(zero, one, size0, size0, None)               # 0/1
        self._append(one, zero, size0, size0, None)               # 1/0
        self._append(one, one, size1, size1, ONE_OVER_ZERO)       # 1/1
        logger.debug("Created Stern-Brocot store with config %s", self.config)

    # ------------------------------------------------------------------
    # Process-wide store
    # ------------------------------------------------------------------

    @classmethod
    def instance(cls) -> "NodeStore":
        """Return the process-wide store, creating it on first use."""
        global _INSTANCE
        if _INSTANCE is None:
            _INSTANCE = cls()
        return _INSTANCE

    # ------------------------------------------------------------------
    # Arena
    # ------------------------------------------------------------------

    def _append(self, p, q, u, k, origin: Optional[int]) -> int:
        node_id = len(self.nodes)
        node = Node(
            node_id=node_id,
            p=p,
            q=q,
            u=u,
            k=k,
            origin=origin,
            children=self.config.map_factory(),
        )
        self.nodes.append(node)
        return node_id

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    @property
    def nb_fractions(self) -> int:
        """Number of stored nodes, the roots and 1/1 included."""
        return len(self.nodes)

    # ------------------------------------------------------------------
    # Handles
    # ------------------------------------------------------------------

    def handle(self, node_id: int, reciprocal: bool = False) -> Fraction:
        """Build the normalized Fraction handle of a node.

        The reciprocal of 1/0 is the 0/1 node (and back), and 1/1 is its own
        reciprocal, so each value has a single (node_id, reciprocal) pair.
        """
        if reciprocal:
            if node_id == ONE_OVER_ZERO:
                return Fraction(self, ZERO_OVER_ONE, False)
            if node_id == ZERO_OVER_ONE:
                return Fraction(self, ONE_OVER_ZERO, False)
            if node_id == ONE_OVER_ONE:
                return Fraction(self, ONE_OVER_ONE, False)
        return Fraction(self, node_id, reciprocal)

    def zero_over_one(self) -> Fraction:
        return self.handle(ZERO_OVER_ONE)

    def one_over_zero(self) -> Fraction:
        return self.handle(ONE_OVER_ZERO)

    def one_over_one(self) -> Fraction:
        return self.handle(ONE_OVER_ONE)

    def fraction(self, p, q) -> Fraction:
        """Return the fraction p/q, building the missing nodes of its path.

        Requires p, q >= 0, not both zero, and gcd(p, q) = 1.  The descent
        from 1/1 does at most two child lookups per continued-fraction
        coefficient: [c0; c1, ..., cn] is reached through child(c0 + 1),
        child(c1 + 1), ..., child(cn), and each level also gets the
        convergent [c0, ..., cj] (or, at the last level, the father
        [c0, ..., cn - 1]).  Splits, reductions and cfrac() of the result
        then only read stored nodes.
        """
        p = self.config.to_integer(p)
        q = self.config.to_integer(q)
        if p < 0 or q < 0:
            raise ContractViolation(f"fraction({p}, {q}): negative term")
        if p == 0 and q == 0:
            raise ContractViolation("fraction(0, 0): the null fraction is not constructible")
        if self.config.check_coprime and math.gcd(int(p), int(q)) != 1:
            raise ContractViolation(f"fraction({p}, {q}): gcd(p, q) != 1")

        reciprocal = bool(p < q)
        if reciprocal:
            p, q = q, p
        if q == 0:
            return self.handle(ONE_OVER_ZERO, reciprocal)

        coefficients = []
        a, b = p, q
        while b != 0:
            coefficients.append(self.config.to_size(a // b))
            a, b = b, a % b

        node_id = ONE_OVER_ONE
        for c in coefficients[:-1]:
            if c >= 2:
                self.child(node_id, c)          # convergent [c0, ..., cj]
            node_id = self.child(node_id, c + 1)
        last = coefficients[-1]
        if len(coefficients) == 1 and last == 1:
            return self.handle(ONE_OVER_ONE, reciprocal)
        if last > 2:
            self.child(node_id, last - 1)       # father [c0, ..., cn - 1]
        node_id = self.child(node_id, last)
        return self.handle(node_id, reciprocal)

    # ------------------------------------------------------------------
    # Node-level navigation
    # ------------------------------------------------------------------

    def child(self, node_id: int, v) -> int:
        """Return the node [u0, ..., un - 1, v] of [u0, ..., un], v >= 2.

        Children of 1/1 = [0; 1] fold to v/1, the inverse of [0; v].
        Otherwise, with O the origin and R = (N - O) / (u - 1) the previous
        convergent, the child is v*N - (v - 1)*R.
        """
        node = self.nodes[node_id]
        if node.is_root():
            raise ContractViolation(f"{node.p}/{node.q} has no children")
        v = self.config.to_size(v)
        if v < 2:
            raise ContractViolation(f"child coefficient must be >= 2, got {v}")
        existing = node.children.get(v)
        if existing is not None:
            return existing

        to_int = self.config.to_integer
        if node_id == ONE_OVER_ONE:
            p, q, k = to_int(v), to_int(1), node.k
        else:
            origin = self.nodes[node.origin]
            step = to_int(node.u - 1)
            rp = (node.p - origin.p) // step
            rq = (node.q - origin.q) // step
            vi = to_int(v)
            p = vi * node.p - (vi - 1) * rp
            q = vi * node.q - (vi - 1) * rq
            k = node.k + 1
        child_id = self._append(p, q, v, self.config.to_size(k), node_id)
        node.children[v] = child_id
        logger.debug("New node %s/%s (u=%s, k=%s) under %s/%s", p, q, v, k, node.p, node.q)
        return child_id

    def sibling(self, node_id: int) -> int:
        """Return [u0, ..., un + 1], the same-depth Stern-Brocot child."""
        node = self.nodes[node_id]
        if node_id == ONE_OVER_ONE:
            return self.child(ONE_OVER_ONE, 2)
        return self.child(node.origin, node.u + 1)

    def father(self, node_id: int) -> int:
        """Return [u0, ..., un - 1]; the father of 1/1 = [1] is 0/1 = [0]."""
        node = self.nodes[node_id]
        if node.is_root():
            raise ContractViolation(f"{node.p}/{node.q} has no father")
        if node_id == ONE_OVER_ONE:
            return ZERO_OVER_ONE
        if node.u == 2:
            return node.origin
        return self.child(node.origin, node.u - 1)

    def father_at(self, node_id: int, m) -> int:
        """Return [u0, ..., u_{n-1}, m] for 1 <= m <= un."""
        node = self.nodes[node_id]
        if node.is_root():
            raise ContractViolation(f"{node.p}/{node.q} has no father")
        if m < 1 or m > node.u:
            raise ContractViolation(f"father({m}) requires 1 <= m <= {node.u}")
        if m == node.u:
            return node_id
        if m == 1:
            return node.origin
        return self.child(node.origin, m)

    def ancestor(self, node_id: int) -> int:
        """Return the previous convergent [u0, ..., u_{n-1}].

        Depth-1 nodes [u0] have 1/0 as ancestor.  Deeper nodes use
        ancestor = father(origin): [.., u_{n-1} + 1] - 1 = [.., u_{n-1}].
        """
        node = self.nodes[node_id]
        if node.is_root():
            raise ContractViolation(f"{node.p}/{node.q} has no ancestor")
        if node.k == 1:
            return ONE_OVER_ZERO
        return self.father(node.origin)

    def reduced(self, node_id: int, i) -> int:
        """Return the convergent of index n - i of the node [u0; ..., un].

        reduced(0) is the node itself, reduced(n + 1) is 1/0 and
        reduced(n + 2) is 0/1.  When a partial [.., u_j] ends with u_j = 1 it
        is stored as [.., u_{j-1} + 1] one level up (node.k == j); its own
        previous partial is then its father rather than its ancestor.

        Takes i steps, each O(1).  On a node returned by fraction() every
        step is a read.
        """
        node = self.nodes[node_id]
        if i < 0 or i > node.k + 1:
            raise ContractViolation(f"reduced({i}) requires 0 <= i <= {node.k + 1}")
        current = node_id
        j = int(node.k) - 1
        for _ in range(int(i)):
            if j == 0:
                current = ONE_OVER_ZERO
            elif j == -1:
                current = ZERO_OVER_ONE
            elif self.nodes[current].k == j + 1:
                current = self.ancestor(current)
            else:
                current = self.father(current)
            j -= 1
        return current

    def cfrac_of(self, node_id: int) -> list:
        """Return the coefficients [u0, ..., un] of a stored node."""
        node = self.nodes[node_id]
        if node_id == ZERO_OVER_ONE:
            return [self.config.to_size(0)]
        if node_id == ONE_OVER_ZERO:
            return []
        one = self.config.to_size(1)
        quotients = []
        current = node_id
        j = int(node.k) - 1
        while j >= 0:
            current_node = self.nodes[current]
            if current_node.k == j + 1:
                quotients.append(current_node.u)
                if j > 0:
                    current = self.ancestor(current)
            else:
                quotients.append(one)
                current = self.father(current)
            j -= 1
        quotients.reverse()
        return quotients

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Check the structural invariants of every stored node."""
        for node in self.nodes:
            if node.is_root():
                if node.origin is not None or node.children:
                    return False
                continue
            if node.p < node.q or math.gcd(int(node.p), int(node.q)) != 1:
                return False
            if node.origin is None or node.origin >= node.node_id:
                return False
            for v, child_id in node.children.items():
                child = self.nodes[child_id]
                if child.origin != node.node_id or child.u != v or v < 2:
                    return False
                expected_k = node.k if node.node_id == ONE_OVER_ONE else node.k + 1
                if child.k != expected_k:
                    return False
        return True

    def display(self, f: Fraction) -> str:
        """Render a fraction with its coefficient, depth and expansion."""
        if f.null():
            return "[Fraction f=0/0]"
        return (
            f"[Fraction f={f.p()}/{f.q()} u={f.u()} k={f.k()} "
            f"cfrac={[int(c) for c in f.cfrac()]}]"
        )
