"""Lighter Stern-Brocot tree.

Memoized tree of the irreducible fractions p/q >= 1, indexed by continued
fraction, with O(1) navigation between a fraction and its father, ancestor,
origin, children, inverse and splits.  Fractions below one are served as
reciprocal handles on the stored ones.
"""

__version__ = "0.1.0"

from .config import TreeConfig
from .errors import ContractViolation, NullFractionError, SternBrocotError
from .core import Fraction, Node, NodeStore


def fraction(p, q) -> Fraction:
    """p/q in the process-wide store (see NodeStore.instance)."""
    return NodeStore.instance().fraction(p, q)


__all__ = [
    "TreeConfig",
    "SternBrocotError",
    "ContractViolation",
    "NullFractionError",
    "Fraction",
    "Node",
    "NodeStore",
    "fraction",
]
