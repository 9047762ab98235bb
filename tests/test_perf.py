"""Performance sanity checks for the sieves and root search.

These tests verify that runtime does not regress catastrophically.
They use generous wall-clock bounds and are marked ``perf`` so they
are excluded from the default test run.

Run with: pytest -m perf
"""

import random
import time

import pytest

from numbertheory.numeric import iroot
from numbertheory.prime import Sieve
from numbertheory.ring import modular
from numbertheory.sieve import EulerSieve


@pytest.mark.perf
class TestPerformanceSanity:
    """Wall-clock sanity checks for representative sizes."""

    # Bounds are set generously (5x measured baseline) to
    # account for CI variability and slow runners.
    SIEVE_CASES = [
        pytest.param(10**5, 2.0, id="euler-1e5"),
        pytest.param(10**6, 15.0, id="euler-1e6"),
    ]

    @pytest.mark.parametrize("limit, max_seconds", SIEVE_CASES)
    def test_euler_sieve(self, limit: int, max_seconds: float) -> None:
        t0 = time.perf_counter()
        sieve = EulerSieve(limit)
        elapsed = time.perf_counter() - t0

        assert sieve.primes[-1] <= limit
        assert elapsed < max_seconds, (
            f"EulerSieve({limit}) took {elapsed:.2f}s (limit {max_seconds}s)"
        )

    def test_eratosthenes_sieve(self) -> None:
        t0 = time.perf_counter()
        Sieve(10**7)
        elapsed = time.perf_counter() - t0
        assert elapsed < 10.0, f"Sieve(1e7) took {elapsed:.2f}s"

    def test_iroot_and_modular_pow(self) -> None:
        random.seed(42)
        Mod = modular(998244353)
        t0 = time.perf_counter()
        for _ in range(10_000):
            iroot(random.randint(0, 2**64 - 1), random.randint(1, 64))
            Mod(random.randint(1, Mod.modulus - 1)) ** random.randint(-(10**9), 10**9)
        elapsed = time.perf_counter() - t0
        assert elapsed < 20.0, f"10k iroot/pow rounds took {elapsed:.2f}s"
