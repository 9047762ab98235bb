"""Primality helpers: trial division, the Sieve of Eratosthenes, coprime pairs."""

import logging
import math
import numbers
import operator
from typing import List, Tuple

import numpy as np

from .errors import DomainError, OutOfRange
from .utility import integer_dtype, numeric_cast

logger = logging.getLogger(__name__)


def is_prime(number) -> bool:
    """Trial-division primality test. Numbers below 2 are not prime."""
    number = operator.index(number)
    if number < 2:
        return False
    for i in range(2, math.isqrt(number) + 1):
        if number % i == 0:
            return False
    return True


class Sieve:
    """Sieve of Eratosthenes over ``[0, limit]`` (inclusive).

    Args:
        limit: Largest number covered by the sieve.
        dtype: Integer dtype ``limit`` must be representable in.

    Raises:
        DomainError: If ``limit`` is negative.
        RangeError: If ``limit`` is not representable in ``dtype``.
    """

    def __init__(self, limit, dtype=np.int64):
        if not isinstance(limit, numbers.Integral):
            raise TypeError(f"sieve limit must be an integer, got {limit!r}")
        limit = int(numeric_cast(limit, integer_dtype(dtype)))
        if limit < 0:
            raise DomainError(f"sieve limit must be non-negative, got {limit}")

        table = np.ones(limit + 1, dtype=bool)
        table[:2] = False
        for p in range(2, math.isqrt(limit) + 1):
            if table[p]:
                table[p * p::p] = False
        table.setflags(write=False)

        self._limit = limit
        self._is_prime = table
        self._primes = tuple(np.flatnonzero(table).tolist())
        logger.debug("Sieve(limit=%d) built", limit)

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def primes(self) -> Tuple[int, ...]:
        return self._primes

    def is_prime(self, number) -> bool:
        """Look up whether ``number`` is prime.

        Raises:
            OutOfRange: If ``number`` exceeds ``limit``.
        """

        number = operator.index(number)
        if number < 2:
            return False
        if number > self._limit:
            raise OutOfRange(
                f"{number} exceeds the limit {self._limit} of the sieve."
            )
        return bool(self._is_prime[number])

    def __repr__(self) -> str:
        return f"Sieve(limit={self._limit})"


def coprime_pairs(n) -> List[Tuple[int, int]]:
    """All pairs ``(x, y)`` with ``n >= x >= y >= 0`` and ``gcd(x, y) == 1``.

    Besides ``(1, 0)`` and ``(1, 1)``, every coprime pair ``x > y >= 1`` is
    reached exactly once from the roots ``(2, 1)`` and ``(3, 1)`` by the maps
    ``(2x - y, x)``, ``(2x + y, x)`` and ``(x + 2y, y)``. Each map increases
    ``x``, so subtrees beyond ``n`` are pruned.

    Returns:
        The pairs in ascending order.
    """

    n = operator.index(n)
    if n < 1:
        return []

    pairs = [(1, 0), (1, 1)]
    stack = [root for root in ((2, 1), (3, 1)) if root[0] <= n]
    while stack:
        x, y = stack.pop()
        pairs.append((x, y))
        for child in ((2 * x - y, x), (2 * x + y, x), (x + 2 * y, y)):
            if child[0] <= n:
                stack.append(child)

    pairs.sort()
    return pairs
