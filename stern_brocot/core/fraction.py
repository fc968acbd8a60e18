"""Fraction handle over a Stern-Brocot store.

A Fraction is a (store, node_id, reciprocal) triple.  With reciprocal False
it denotes node.p / node.q, with reciprocal True it denotes node.q / node.p,
so that the store only holds fractions >= 1.  The handle owns no tree
memory and stays valid as long as its store lives.

Inversion mirrors the Stern-Brocot tree: every navigation of a reciprocal
handle is the navigation of its node, inverted.  Splits swap sides since
inversion reverses the order.

Fraction() with no store is the null fraction 0/0; every operation except
null(), equality and hashing raises NullFractionError on it.
"""

from __future__ import annotations

from fractions import Fraction as Rational
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..errors import ContractViolation, NullFractionError
from .node import ONE_OVER_ONE, Node

if TYPE_CHECKING:
    from .store import NodeStore


class Fraction:
    """Irreducible fraction p/q of the Stern-Brocot tree."""

    __slots__ = ("store", "node_id", "reciprocal")

    def __init__(
        self,
        store: Optional["NodeStore"] = None,
        node_id: Optional[int] = None,
        reciprocal: bool = False,
    ):
        self.store = store
        self.node_id = node_id
        self.reciprocal = reciprocal

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _node(self, operation: str) -> Node:
        if self.node_id is None:
            raise NullFractionError(operation)
        return self.store.nodes[self.node_id]

    def _wrap(self, node_id: int) -> "Fraction":
        """Handle on node_id carrying this handle's reciprocal flag."""
        return self.store.handle(node_id, self.reciprocal)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def null(self) -> bool:
        """True iff this is the null fraction 0/0."""
        return self.node_id is None

    def p(self):
        node = self._node("p")
        return node.q if self.reciprocal else node.p

    def q(self):
        node = self._node("q")
        return node.p if self.reciprocal else node.q

    def u(self):
        """Last coefficient of the continued fraction (of the node)."""
        return self._node("u").u

    def k(self):
        """Depth, i.e. number of coefficients of the node's expansion."""
        return self._node("k").k

    def even(self) -> bool:
        return self._node("even").even()

    def odd(self) -> bool:
        return self._node("odd").odd()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def left(self) -> "Fraction":
        """Left Stern-Brocot child, built if needed."""
        return self._descendant("left", want_right=False)

    def right(self) -> "Fraction":
        """Right Stern-Brocot child, built if needed."""
        return self._descendant("right", want_right=True)

    def _descendant(self, operation: str, want_right: bool) -> "Fraction":
        """One of [.., un + 1] (same depth) and [.., un - 1, 2] (depth k + 1).

        Odd depth puts the deeper one on the left; the reciprocal flag
        mirrors the sides.  1/1 has 1/2 on its left and 2/1 on its right.
        """
        node = self._node(operation)
        if node.is_root():
            raise ContractViolation(f"{operation}() called on {node.p}/{node.q}")
        store = self.store
        if self.node_id == ONE_OVER_ONE:
            return store.handle(store.child(ONE_OVER_ONE, 2), not want_right)
        deeper_on_left = node.odd() != self.reciprocal
        if want_right != deeper_on_left:
            return self._wrap(store.child(self.node_id, 2))
        return self._wrap(store.sibling(self.node_id))

    def origin(self) -> "Fraction":
        """Origin [u0, ..., u_{n-1}, 1] of the node, in O(1)."""
        node = self._node("origin")
        if node.origin is None:
            raise ContractViolation(f"{node.p}/{node.q} has no origin")
        return self._wrap(node.origin)

    def father(self, m=None) -> "Fraction":
        """Father [u0, ..., un - 1], or [u0, ..., u_{n-1}, m] when m is given."""
        self._node("father")
        if m is None:
            return self._wrap(self.store.father(self.node_id))
        return self._wrap(self.store.father_at(self.node_id, m))

    def ancestor(self) -> "Fraction":
        """Previous convergent [u0, ..., u_{n-1}], i.e. reduced(1)."""
        self._node("ancestor")
        return self._wrap(self.store.ancestor(self.node_id))

    def is_ancestor_direct(self) -> bool:
        """True iff the ancestor has depth k() - 1 (u_{n-1} != 1)."""
        return self.ancestor().k() == self.k() - 1

    def previous_partial(self) -> "Fraction":
        return self.reduced(1)

    def partial(self, kp) -> "Fraction":
        """Partial fraction with kp coefficients, -1 <= kp <= k().

        Costs k() - kp steps, see reduced().
        """
        return self.reduced(self.k() - kp)

    def reduced(self, i) -> "Fraction":
        """Partial fraction obtained by dropping the last i coefficients.

        Walks i O(1) steps down the convergents, so the cost is O(i), not
        O(1).  No node is built when self came from NodeStore.fraction().
        """
        self._node("reduced")
        return self._wrap(self.store.reduced(self.node_id, i))

    def inverse(self) -> "Fraction":
        """q/p, in O(1)."""
        self._node("inverse")
        return self.store.handle(self.node_id, not self.reciprocal)

    # ------------------------------------------------------------------
    # Splits
    # ------------------------------------------------------------------

    def get_split(self) -> Tuple["Fraction", "Fraction"]:
        """Return (f1, f2) with f1 < self < f2 and self = f1 (+) f2.

        f1 and f2 are the father and the ancestor; odd depth puts the father
        on the left.  Not defined for 0/1 and 1/0.
        """
        node = self._node("get_split")
        if node.is_root():
            raise ContractViolation(f"get_split() called on {self.p()}/{self.q()}")
        store = self.store
        father = store.father(self.node_id)
        ancestor = store.ancestor(self.node_id)
        f1, f2 = (father, ancestor) if node.odd() else (ancestor, father)
        if self.reciprocal:
            return self._wrap(f2), self._wrap(f1)
        return self._wrap(f1), self._wrap(f2)

    def get_split_berstel(self) -> Tuple["Fraction", object, "Fraction", object]:
        """Return (f1, nb1, f2, nb2) with self = nb1*f1 (+) nb2*f2.

        The patterns are the two previous convergents p_{n-2} and p_{n-1};
        p_{n-1} is repeated u() times.  For odd k() nb1 == 1, for even k()
        nb2 == 1.  Not defined for 0/1 and 1/0.
        """
        node = self._node("get_split_berstel")
        if node.is_root():
            raise ContractViolation(f"get_split_berstel() called on {self.p()}/{self.q()}")
        store = self.store
        one = store.config.to_size(1)
        last = store.reduced(self.node_id, 1)
        before_last = store.reduced(self.node_id, 2)
        if node.odd():
            split = (before_last, one, last, node.u)
        else:
            split = (last, node.u, before_last, one)
        f1, nb1, f2, nb2 = split
        if self.reciprocal:
            return self._wrap(f2), nb2, self._wrap(f1), nb1
        return self._wrap(f1), nb1, self._wrap(f2), nb2

    def cfrac(self) -> List:
        """Coefficients [u0, ..., un]; reciprocals get a leading 0."""
        self._node("cfrac")
        quotients = self.store.cfrac_of(self.node_id)
        if self.reciprocal:
            return [self.store.config.to_size(0)] + quotients
        return quotients

    def mediant(self, other: "Fraction") -> "Fraction":
        """Return (p1 + p2)/(q1 + q2) for a Stern-Brocot adjacent fraction."""
        p1, q1 = self.p(), self.q()
        p2, q2 = other.p(), other.q()
        if abs(p1 * q2 - p2 * q1) != 1:
            raise ContractViolation(f"{p1}/{q1} and {p2}/{q2} are not adjacent")
        return self.store.fraction(p1 + p2, q1 + q2)

    def as_rational(self) -> Rational:
        """Value as a fractions.Fraction; 1/0 has none."""
        p, q = self.p(), self.q()
        if q == 0:
            raise ContractViolation("1/0 has no rational value")
        return Rational(int(p), int(q))

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def equals(self, p1, q1) -> bool:
        """True iff this is the fraction p1/q1."""
        return bool(self.p() * q1 == self.q() * p1)

    def less_than(self, p1, q1) -> bool:
        return bool(self.p() * q1 < self.q() * p1)

    def more_than(self, p1, q1) -> bool:
        return bool(self.p() * q1 > self.q() * p1)

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        if self.null() or other.null():
            return self.null() and other.null()
        return self.equals(other.p(), other.q())

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.less_than(other.p(), other.q())

    def __gt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.more_than(other.p(), other.q())

    def __le__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self.more_than(other.p(), other.q())

    def __ge__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self.less_than(other.p(), other.q())

    def __hash__(self) -> int:
        if self.null():
            return hash((0, 0))
        return hash((self.p(), self.q()))

    def __repr__(self) -> str:
        if self.null():
            return "Fraction(0/0)"
        return f"Fraction({self.p()}/{self.q()}, u={self.u()}, k={self.k()})"
