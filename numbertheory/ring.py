"""Ring of integers modulo a fixed modulus.

A Modular *class* is bound to one modulus and one backing integer dtype, so
``Modular[10]`` and ``Modular[12]`` are unrelated types. A modulus too wide
for addition in its dtype is rejected with
:class:`~numbertheory.errors.StaticOverflowViolation` when the class is
created, before any element exists. A modulus that is safe for addition but
too wide for multiplication gives a usable additive ring whose
:meth:`Modular.multiply` raises the same error.

    >>> Mod10 = Modular[10]
    >>> Mod10(123)
    Mod10(3)
    >>> Mod10(-4) * 3
    Mod10(8)
"""

import functools
import numbers
import operator
import types

import numpy as np

from .errors import DomainError, StaticOverflowViolation
from .numeric import exgcd, gcd
from .numeric import pow as _binary_pow
from .utility import bit_length, integer_dtype, numeric_cast, value_width

__all__ = ["Modular", "RingElement", "modular"]


def _normalize(x: int, modulus: int) -> int:
    """Return the representative of ``x`` in ``[0, modulus)``."""
    if 0 <= x < modulus:
        return x
    # Python's remainder already takes the sign of the (positive) modulus.
    return x % modulus


def _binary_operator(method: str):
    """Build the forward and reflected dunder pair for a ring method."""

    def forward(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return getattr(self, method)(rhs)

    def reflected(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return getattr(lhs, method)(self)

    return forward, reflected


def _same_ring(a, b) -> bool:
    """Whether two elements belong to the same ring class or a subclass of it."""
    related = isinstance(a, type(b)) or isinstance(b, type(a))
    return related and all(
        getattr(a, attr, None) == getattr(b, attr, None)
        for attr in ("modulus", "dtype")
    )


def _comparison_operator(method: str):
    def compare(self, other):
        if isinstance(other, RingElement) and not _same_ring(self, other):
            # Elements of different rings are never equal.
            return NotImplemented
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return getattr(self, method)(rhs)

    return compare


class RingElement:
    """Operator sugar shared by ring element types.

    Subclasses provide ``add``, ``subtract``, ``multiply``, ``negate``,
    ``equal``, ``not_equal`` and ``divide`` taking an operand of their own
    type, plus ``_coerce`` which turns a foreign operand into that type (or
    returns ``NotImplemented``). The Python operators are derived from those
    methods here, once.
    """

    __slots__ = ()

    # Make NumPy scalars defer to the reflected operators below.
    __array_ufunc__ = None

    def _coerce(self, other):
        raise NotImplementedError

    __add__, __radd__ = _binary_operator("add")
    __sub__, __rsub__ = _binary_operator("subtract")
    __mul__, __rmul__ = _binary_operator("multiply")
    __truediv__, __rtruediv__ = _binary_operator("divide")

    __eq__ = _comparison_operator("equal")
    __ne__ = _comparison_operator("not_equal")

    # Elements are mutable through ``set``.
    __hash__ = None

    def __neg__(self):
        return self.negate()

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return _binary_pow(self, exponent)


class Modular(RingElement):
    """Element of the ring of integers modulo ``modulus``.

    Bind a modulus before use, with :func:`modular`, by subscription
    (``Modular[7]``, ``Modular[7, np.uint8]``) or by subclassing::

        class Mod10(Modular, modulus=10, dtype=np.int32):
            pass

    The stored value is always the canonical residue in ``[0, modulus)``.
    Integers entering the ring, through the constructor, :meth:`set` or an
    arithmetic operator, are normalized first.
    """

    __slots__ = ("_value",)

    modulus: int = None
    dtype: np.dtype = None
    _multiplication_overflow: str = None

    def __init_subclass__(cls, modulus=None, dtype=np.int64, **kwargs):
        super().__init_subclass__(**kwargs)
        if modulus is None:
            # Plain subclass of an already bound ring keeps its modulus.
            return

        dt = integer_dtype(dtype)
        if not isinstance(modulus, numbers.Integral) or modulus <= 0:
            raise DomainError(
                f"Modular requires a positive integer modulus, got {modulus!r}"
            )
        modulus = int(numeric_cast(modulus, dt))

        type_width = value_width(dt)
        modulus_width = bit_length(modulus)
        if modulus_width + 1 > type_width:
            raise StaticOverflowViolation(
                f"Modular addition may overflow: modulus {modulus} needs "
                f"{modulus_width + 1} bits, {dt} has {type_width}. "
                "Please use a larger integer dtype."
            )
        # Multiplication is checked in multiply().
        multiplication_overflow = None
        if modulus_width * 2 > type_width:
            multiplication_overflow = (
                f"Modular multiplication may overflow: modulus {modulus} "
                f"needs {modulus_width * 2} bits, {dt} has {type_width}. "
                "Please use a larger integer dtype."
            )

        cls.modulus = modulus
        cls.dtype = dt
        cls._multiplication_overflow = multiplication_overflow

    def __class_getitem__(cls, params):
        if cls.modulus is not None:
            raise TypeError(f"{cls.__name__} is already bound to a modulus")
        if isinstance(params, tuple):
            return modular(*params)
        return modular(params)

    def __init__(self, value=0):
        if type(self).modulus is None:
            raise TypeError(
                "Modular has no modulus; use modular(m) or Modular[m]"
            )
        self.set(value)

    @classmethod
    def _from_canonical(cls, value: int) -> "Modular":
        element = cls.__new__(cls)
        element._value = value
        return element

    @classmethod
    def from_int(cls, value) -> "Modular":
        """Build an element from an integer, normalizing it into the ring."""
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> "Modular":
        """Parse plain decimal text, e.g. ``"-4"``, into an element."""
        return cls(int(text.strip(), 10))

    def get(self) -> int:
        """Return the canonical residue."""
        return self._value

    to_int = get

    @property
    def value(self) -> int:
        return self._value

    def set(self, value) -> None:
        """Replace the element's value, normalizing it into the ring."""
        if isinstance(value, Modular):
            value = self._operand(value)._value
        self._value = _normalize(operator.index(value), type(self).modulus)

    def _coerce(self, other):
        cls = type(self)
        if isinstance(other, Modular) and _same_ring(self, other):
            return other
        if isinstance(other, Modular):
            raise TypeError(
                f"cannot combine {cls.__name__} with {type(other).__name__}"
            )
        if isinstance(other, numbers.Integral):
            return cls(other)
        return NotImplemented

    def _operand(self, other) -> "Modular":
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            raise TypeError(
                f"unsupported operand for {type(self).__name__}: "
                f"{type(other).__name__}"
            )
        return rhs

    def add(self, rhs) -> "Modular":
        """Addition in the ring."""
        rhs = self._operand(rhs)
        new_value = self._value + rhs._value
        if new_value >= self.modulus:
            new_value -= self.modulus
        return self._from_canonical(new_value)

    def negate(self) -> "Modular":
        """Additive inverse."""
        if self._value == 0:
            return self._from_canonical(0)
        return self._from_canonical(self.modulus - self._value)

    def subtract(self, rhs) -> "Modular":
        """Subtraction in the ring."""
        return self.add(self._operand(rhs).negate())

    def multiply(self, rhs) -> "Modular":
        """Multiplication in the ring.

        Raises:
            StaticOverflowViolation: If the modulus is too wide for
                multiplication in the ring's dtype.
        """

        if self._multiplication_overflow is not None:
            raise StaticOverflowViolation(self._multiplication_overflow)
        rhs = self._operand(rhs)
        return self._from_canonical(self._value * rhs._value % self.modulus)

    def inverse(self) -> "Modular":
        """Multiplicative inverse, from the Bézout coefficient of the value.

        Raises:
            DomainError: If the value shares a factor with the modulus.
        """

        g = gcd(self._value, self.modulus)
        if g != 1:
            raise DomainError(
                f"{self._value} has no inverse modulo {self.modulus} "
                f"(gcd is {g})"
            )
        x, _ = exgcd(self._value, self.modulus)
        return type(self)(x)

    def divide(self, rhs) -> "Modular":
        """Multiply by the inverse of ``rhs``."""
        return self.multiply(self._operand(rhs).inverse())

    def equal(self, rhs) -> bool:
        return self._value == self._operand(rhs)._value

    def not_equal(self, rhs) -> bool:
        return not self.equal(rhs)

    def increment(self) -> "Modular":
        """Advance this element by one in place and return it."""
        self._value = self.add(1)._value
        return self

    def decrement(self) -> "Modular":
        """Step this element back by one in place and return it."""
        self._value = self.subtract(1)._value
        return self

    def __pos__(self) -> "Modular":
        return self._from_canonical(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


@functools.lru_cache(maxsize=None)
def _modular_class(modulus: int, dtype: np.dtype) -> type:
    name = f"Mod{modulus}"
    if dtype != np.dtype(np.int64):
        name += f"_{dtype.name}"
    return types.new_class(
        name,
        (Modular,),
        {"modulus": modulus, "dtype": dtype},
        lambda ns: ns.update(__slots__=()),
    )


def modular(modulus, dtype=np.int64) -> type:
    """Return the Modular class for ``modulus`` backed by ``dtype``.

    Classes are cached, so ``modular(10) is modular(10)``.

    Raises:
        DomainError: If ``modulus`` is not a positive integer.
        RangeError: If ``modulus`` is not representable in ``dtype``.
        StaticOverflowViolation: If ring addition could overflow ``dtype``.
    """

    if not isinstance(modulus, numbers.Integral):
        raise DomainError(
            f"Modular requires a positive integer modulus, got {modulus!r}"
        )
    return _modular_class(int(modulus), integer_dtype(dtype))
