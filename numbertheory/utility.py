"""Small integer helpers shared by the rest of the package.

Integer "types" are described with NumPy integer dtypes. A dtype only
contributes its width and signedness: arithmetic itself is done on Python
``int`` values, and the width checks in :mod:`numbertheory.ring` and
:mod:`numbertheory.sieve` guarantee the results would also fit the dtype.
"""

import operator
from typing import Callable, TypeVar

import numpy as np

from .errors import RangeError

S = TypeVar("S")


def sign(x) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    return int(x > 0) - int(x < 0)


def unsigned_abs(x) -> int:
    """Magnitude of an integer as a non-negative Python ``int``.

    Unlike ``abs`` on a fixed-width NumPy scalar this never wraps, so
    ``unsigned_abs(np.int8(-128)) == 128``.
    """
    return abs(operator.index(x))


def bit_length(x) -> int:
    """Number of bits needed to represent ``|x|``; 0 for 0."""
    return unsigned_abs(x).bit_length()


def binary_accumulate(
    binary,
    initial_value: S,
    operation: Callable[[bool, S], S],
) -> S:
    """Fold ``operation`` over the bits of ``|binary|``, lowest bit first.

    ``operation(bit, state)`` receives each bit and the current state and
    returns the next state. With ``lambda bit, n: n + bit`` this is a
    popcount.

    Args:
        binary: Integer whose magnitude supplies the bits.
        initial_value: Starting state.
        operation: Update applied once per bit.

    Returns:
        The state after the highest set bit has been consumed.
    """

    current = unsigned_abs(binary)
    state = initial_value
    while current:
        state = operation(bool(current & 1), state)
        current >>= 1
    return state


def integer_dtype(dtype) -> np.dtype:
    """Normalize ``dtype`` and check it describes a NumPy integer type."""
    dt = np.dtype(dtype)
    if dt.kind not in "iu":
        raise TypeError(f"expected an integer dtype, got {dt}")
    return dt


def value_width(dtype) -> int:
    """Count the value bits of an integer dtype, excluding the sign bit."""
    info = np.iinfo(integer_dtype(dtype))
    return info.bits - 1 if info.min < 0 else info.bits


def signed_twin(dtype) -> np.dtype:
    """Return the signed integer dtype with the same width as ``dtype``."""
    dt = integer_dtype(dtype)
    return np.dtype(f"int{dt.itemsize * 8}")


def fits(value, dtype) -> bool:
    """Whether ``value`` is representable in ``dtype``."""
    info = np.iinfo(integer_dtype(dtype))
    return info.min <= operator.index(value) <= info.max


def numeric_cast(value, dtype):
    """Convert ``value`` to a scalar of ``dtype`` without wrapping.

    Raises:
        RangeError: If ``value`` is outside the range of ``dtype``.
        TypeError: If ``value`` is not an integer.
    """

    dt = integer_dtype(dtype)
    if not fits(value, dt):
        info = np.iinfo(dt)
        raise RangeError(
            f"{value} is out of range for {dt} [{info.min}, {info.max}]"
        )
    return dt.type(operator.index(value))
