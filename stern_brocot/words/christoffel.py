"""Christoffel words over the Stern-Brocot tree.

The lower Christoffel word of an irreducible fraction p/q is the binary word
of length p + q coding the digital straight segment from (0, 0) to (q, p):
`zero` for a horizontal step, `one` for a vertical step.  It obeys

  C(0/1) = zero,  C(1/0) = one,  C(f1 (+) f2) = C(f1) C(f2)

for every Stern-Brocot split, hence C(f) = C(f1)^nb1 C(f2)^nb2 over the
Berstel split.  Using the run-length form keeps the recursion depth at the
depth of the fraction instead of the sum of its coefficients.

Example:
  christoffel_word(store.fraction(2, 3))   ->  "00101"
  standard_factorization(store.fraction(2, 3))  ->  ("001", "01")
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from ..core import Fraction, NodeStore


def christoffel_word(f: Fraction, zero: str = "0", one: str = "1") -> str:
    """Return the lower Christoffel word of f (p letters `one`, q letters `zero`)."""
    return _word(f, zero, one, {})


def _word(f: Fraction, zero: str, one: str, memo: Dict[Tuple, str]) -> str:
    p, q = f.p(), f.q()
    if q == 0:
        return one
    if p == 0:
        return zero
    key = (p, q)
    cached = memo.get(key)
    if cached is not None:
        return cached
    f1, nb1, f2, nb2 = f.get_split_berstel()
    word = _word(f1, zero, one, memo) * int(nb1) + _word(f2, zero, one, memo) * int(nb2)
    memo[key] = word
    return word


def standard_factorization(f: Fraction, zero: str = "0", one: str = "1") -> Tuple[str, str]:
    """Split C(f) into the Christoffel words of its Stern-Brocot parents.

    Not defined for 0/1 and 1/0, whose words are single letters.
    """
    f1, f2 = f.get_split()
    memo: Dict[Tuple, str] = {}
    return _word(f1, zero, one, memo), _word(f2, zero, one, memo)


def is_christoffel_word(
    word: str,
    store: Optional[NodeStore] = None,
    zero: str = "0",
    one: str = "1",
) -> bool:
    """True iff word is the lower Christoffel word of some p/q.

    The letter counts fix p and q; word must then equal C(p/q).  Nodes
    built for the comparison stay in the store.
    """
    if not word:
        return False
    n_one = word.count(one)
    n_zero = word.count(zero)
    if n_one + n_zero != len(word):
        return False
    if math.gcd(n_one, n_zero) != 1:
        return False
    if store is None:
        store = NodeStore.instance()
    f = store.fraction(n_one, n_zero)
    return christoffel_word(f, zero, one) == word
