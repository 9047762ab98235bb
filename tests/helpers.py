import math


def trial_division_primes(n: int) -> list[int]:
    """Primes up to and including ``n`` by trial division."""
    return [
        k for k in range(2, n + 1)
        if all(k % d for d in range(2, math.isqrt(k) + 1))
    ]


def smallest_factor(n: int) -> int:
    """Smallest divisor of ``n`` greater than one, found by scanning."""
    d = 2
    while n % d:
        d += 1
    return d


def repeated_multiply(base, exponent: int):
    """``base`` multiplied by itself ``exponent`` times, starting from 1."""
    result = type(base)(1)
    for _ in range(exponent):
        result = result * base
    return result
