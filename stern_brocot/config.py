"""Configuration dataclass for Stern-Brocot stores.

A store is parameterized by the Integer type of numerators/denominators, the
Size type of coefficients and depths, and the Map type holding the children
of each node.  All three are given as callables so that a store can run on
plain ints, on sympy.Integer, on numpy fixed-width integers, or on any
mapping class with dict semantics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, MutableMapping


@dataclass(frozen=True)
class TreeConfig:
    """Frozen parameters of a NodeStore.

    Attributes:
        integer:       Integer constructor; values must support exact
                       comparison, +, -, * and // (e.g. int, sympy.Integer).
        size:          Size constructor for coefficients and depths
                       (e.g. int, numpy.int64).
        map_factory:   Zero-argument factory of the children mapping.
        check_coprime: Reject non-reduced (p, q) in NodeStore.fraction.
                       Costs one gcd per call.
    """

    integer: Callable[[Any], Any] = int
    size: Callable[[Any], Any] = int
    map_factory: Callable[[], MutableMapping[Any, int]] = dict
    check_coprime: bool = True

    def to_integer(self, value: Any) -> Any:
        """Convert a Python or Size-typed integer to the Integer type."""
        return self.integer(int(value))

    def to_size(self, value: Any) -> Any:
        return self.size(int(value))


DEFAULT_CONFIG = TreeConfig()
