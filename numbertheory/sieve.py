"""Sieve of Euler: linear-time primes and minimum prime factors."""

import logging
import numbers
from typing import List, Tuple

import numpy as np

from .errors import DomainError, NumericOverflow, OutOfRange
from .utility import (
    bit_length,
    integer_dtype,
    numeric_cast,
    unsigned_abs,
    value_width,
)

logger = logging.getLogger(__name__)


class EulerSieve:
    """Primes and minimum prime factors of every integer in ``[0, limit]``.

    The limit is inclusive. Each composite is marked exactly once, by its
    smallest prime factor, so construction is linear in ``limit``.

    Numbers are stored with ``dtype``; the products ``prime * num`` formed
    while sieving are sized against ``accumulator``, and construction fails
    up front if they could overflow it.

    Args:
        limit: Largest number covered by the sieve.
        dtype: Integer dtype of the stored numbers.
        accumulator: Integer dtype the sieving products must fit.

    Raises:
        DomainError: If ``limit`` is negative.
        RangeError: If ``limit`` is not representable in ``dtype``.
        NumericOverflow: If ``accumulator`` is too narrow for ``limit``.
    """

    def __init__(self, limit, dtype=np.int64, accumulator=np.uint64):
        if not isinstance(limit, numbers.Integral):
            raise TypeError(f"sieve limit must be an integer, got {limit!r}")
        dt = integer_dtype(dtype)
        limit = int(numeric_cast(limit, dt))
        if limit < 0:
            raise DomainError(f"sieve limit must be non-negative, got {limit}")

        acc_width = value_width(accumulator)
        if bit_length(limit) * 2 > acc_width:
            raise NumericOverflow(
                f"Multiplication will overflow when sieving up to {limit}: "
                f"{np.dtype(accumulator)} has {acc_width} value bits. "
                "Please use a larger accumulator dtype."
            )

        self._limit = limit
        self._dtype = dt

        min_prime_factor = [0] * (limit + 1)
        primes: List[int] = []

        for num in range(2, limit + 1):
            if min_prime_factor[num] == 0:
                primes.append(num)
                min_prime_factor[num] = num
            smallest = min_prime_factor[num]
            for prime in primes:
                if prime > smallest:
                    break
                x = prime * num
                if x > limit:
                    break
                min_prime_factor[x] = prime

        table = np.array(min_prime_factor, dtype=dt)
        table.setflags(write=False)
        self._min_prime_factor = table
        self._primes = tuple(primes)

        logger.debug(
            "EulerSieve(limit=%d) found %d primes", limit, len(primes)
        )

    @property
    def limit(self) -> int:
        """Largest number (inclusive) covered by the sieve."""
        return self._limit

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def primes(self) -> Tuple[int, ...]:
        """All primes up to ``limit``, ascending."""
        return self._primes

    def _lookup(self, number) -> int:
        n = unsigned_abs(number)
        if n <= 1:
            raise DomainError(
                f"Minimum prime factor does not exist for {number}."
            )
        if n > self._limit:
            raise OutOfRange(
                f"{number} exceeds the limit {self._limit} of the sieve."
            )
        return n

    def min_prime_factor(self, number) -> int:
        """Smallest prime dividing ``|number|``.

        Raises:
            DomainError: If ``|number| <= 1``.
            OutOfRange: If ``|number|`` exceeds ``limit``.
        """

        return int(self._min_prime_factor[self._lookup(number)])

    def factorize(self, number) -> List[int]:
        """Prime factors of ``|number|`` with multiplicity, ascending.

        Raises:
            DomainError: If ``|number| <= 1``.
            OutOfRange: If ``|number|`` exceeds ``limit``.
        """

        n = self._lookup(number)
        factors = []
        while n > 1:
            p = int(self._min_prime_factor[n])
            factors.append(p)
            n //= p
        return factors

    def __repr__(self) -> str:
        return f"EulerSieve(limit={self._limit}, dtype={self._dtype})"
