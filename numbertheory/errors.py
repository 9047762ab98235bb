"""Exception types raised by the numbertheory package.

Every error derives from :class:`NumberTheoryError` and from the closest
builtin exception, so callers may catch either the package-specific type or
the builtin one (``ValueError``, ``IndexError``, ``OverflowError``).
"""


class NumberTheoryError(Exception):
    """Base class for all numbertheory errors."""


class DomainError(NumberTheoryError, ValueError):
    """The operation has no mathematically defined result for the input."""


class OutOfRange(NumberTheoryError, IndexError):
    """The input exceeds a structurally fixed bound, such as a sieve limit."""


class RangeError(NumberTheoryError, OverflowError):
    """A value is not representable in the requested integer dtype."""


class NumericOverflow(NumberTheoryError, OverflowError):
    """Internal arithmetic of a component would overflow its accumulator."""


class StaticOverflowViolation(NumericOverflow):
    """A Modular ring's modulus is too wide for its dtype.

    Raised when the ring class is created if addition could overflow, and by
    multiplication in a ring whose modulus is too wide to multiply.
    """
