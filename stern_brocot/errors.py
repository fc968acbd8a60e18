"""Exceptions raised by the Stern-Brocot tree.

All of them derive from ValueError: they signal a caller error, never a
transient condition, and the tree performs no I/O.
"""


class SternBrocotError(ValueError):
    """Base class for errors raised by this package."""


class ContractViolation(SternBrocotError):
    """A precondition of a tree operation does not hold.

    Raised for non-coprime or negative arguments to ``fraction``, splits of
    0/1 or 1/0, ``father(m)`` with m outside [1, u], and the like.
    """


class NullFractionError(SternBrocotError):
    """Operation on the null fraction 0/0."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}() called on the null fraction 0/0")
        self.operation = operation
