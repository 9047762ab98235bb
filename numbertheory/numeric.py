"""Common numeric routines: extended gcd, binary exponentiation, integer roots.

``gcd`` and ``lcm`` are re-exported from :mod:`math` for the unsigned
baseline case.
"""

import math
import numbers
import operator
from math import gcd, lcm
from typing import Tuple

from .errors import DomainError, RangeError
from .utility import binary_accumulate, numeric_cast, signed_twin, unsigned_abs

__all__ = ["exgcd", "gcd", "iroot", "lcm", "pow", "ROOT_ACCUMULATOR_BITS"]

# Width of the accumulator the root search is sized for.
ROOT_ACCUMULATOR_BITS = 64
_ACCUMULATOR_MAX = (1 << ROOT_ACCUMULATOR_BITS) - 1


def exgcd(a, b, dtype=None) -> Tuple[int, int]:
    """Extended Euclidean algorithm.

    Returns ``(x, y)`` such that ``x*a + y*b == gcd(|a|, |b|)``. When both
    ``a`` and ``b`` are non-zero the coefficients are bounded by
    ``|x| <= |b|`` and ``|y| <= |a|``. ``exgcd(0, 0)`` is ``(1, 0)``.

    The Euclidean steps run on the magnitudes of the arguments and the signs
    are applied to the coefficients at the end, so the most negative value of
    a signed dtype is handled without overflow.

    Args:
        a: First integer.
        b: Second integer.
        dtype: Optional integer dtype the arguments are declared in. When set,
            the arguments must be representable in it and the coefficients
            are checked against its signed twin.

    Returns:
        The Bézout coefficients ``(x, y)``.

    Raises:
        RangeError: If ``dtype`` is given and a value does not fit.
    """

    if dtype is not None:
        numeric_cast(a, dtype)
        numeric_cast(b, dtype)

    # xa * |a| + ya * |b| == ta
    # xb * |a| + yb * |b| == tb
    ta, tb = unsigned_abs(a), unsigned_abs(b)
    xa, ya = 1, 0
    xb, yb = 0, 1

    while tb != 0:
        q = ta // tb
        ta, tb = tb, ta - q * tb
        xa, xb = xb, xa - q * xb
        ya, yb = yb, ya - q * yb

    x = -xa if a < 0 else xa
    y = -ya if b < 0 else ya

    if dtype is not None:
        twin = signed_twin(dtype)
        return int(numeric_cast(x, twin)), int(numeric_cast(y, twin))
    return x, y


def _one_like(base):
    return type(base)(1)


def _integer_reciprocal(value):
    # 1 / value in the integers, truncated toward zero.
    one = _one_like(value)
    quotient = one // value
    if quotient < 0 and quotient * value != one:
        quotient += 1
    return quotient


def pow(base, exponent):
    """Raise ``base`` to ``exponent``.

    For integer exponents this is binary exponentiation over whatever type
    ``base`` is (``int``, ``float``, a NumPy scalar, a Modular element, ...),
    using O(log |exponent|) multiplications. A negative exponent returns the
    reciprocal of the result in ``base``'s own type: the inverse for Modular
    elements and fractions, and integer division truncated toward zero for
    integers (so ``pow(2, -1) == 0`` and ``pow(-1, -3) == -1``).

    Non-integer exponents are delegated to :func:`math.pow`.
    """

    if not isinstance(exponent, numbers.Integral):
        return math.pow(base, exponent)

    def update(bit, state):
        # At bit k, power is base**(2**k) and result covers the lower k bits.
        result, power = state
        if bit:
            result = result * power
        return result, power * power

    result, _ = binary_accumulate(exponent, (_one_like(base), base), update)

    if exponent < 0:
        if isinstance(result, numbers.Integral):
            return _integer_reciprocal(result)
        return 1 / result
    return result


def _max_safe_root(n: int) -> int:
    # Largest y with y**n <= _ACCUMULATOR_MAX.
    lo, hi = 1, 1 << (ROOT_ACCUMULATOR_BITS // n + 1)
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if mid ** n <= _ACCUMULATOR_MAX:
            lo = mid
        else:
            hi = mid
    return lo


# _ROOT_BOUNDS[n] is the largest y whose n-th power fits the accumulator.
_ROOT_BOUNDS = (0,) + tuple(
    _max_safe_root(n) for n in range(1, ROOT_ACCUMULATOR_BITS)
)


def iroot(x, n) -> int:
    """Integer n-th root, truncated toward zero.

    Returns the ``y`` of largest magnitude with ``|y|**n <= |x|``, carrying
    the sign of ``x`` (only possible for odd ``n``).

    Args:
        x: Radicand; its magnitude must fit in an unsigned 64-bit integer.
        n: Root degree, at least 1.

    Returns:
        The truncated root.

    Raises:
        DomainError: If ``n <= 0``, or ``x`` is negative and ``n`` is even.
        RangeError: If ``|x|`` exceeds the 64-bit search range.
        TypeError: If ``n`` is not an integer.
    """

    n = operator.index(n)
    if n <= 0:
        raise DomainError(f"root degree must be positive, got {n}")
    if x < 0 and n % 2 == 0:
        raise DomainError(f"even root ({n}) of negative number {x}")

    magnitude = unsigned_abs(x)
    if magnitude > _ACCUMULATOR_MAX:
        raise RangeError(
            f"|{x}| exceeds the {ROOT_ACCUMULATOR_BITS}-bit root search range"
        )

    bound = _ROOT_BOUNDS[n] if n < len(_ROOT_BOUNDS) else 1

    # lo**n <= magnitude < hi**n
    lo, hi = 0, bound + 1
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if pow(mid, n) <= magnitude:
            lo = mid
        else:
            hi = mid

    return -lo if x < 0 else lo
