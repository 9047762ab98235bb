import math

import numpy as np
import pytest

from numbertheory.errors import DomainError, OutOfRange
from numbertheory.prime import Sieve, coprime_pairs, is_prime
from numbertheory.sieve import EulerSieve
from tests.helpers import trial_division_primes

PRIMES_TO_97 = {
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
}


def test_is_prime():
    for n in range(-10, 98):
        assert is_prime(n) == (n in PRIMES_TO_97), n
    assert is_prime(np.int16(97))
    assert is_prime(2**31 - 1)
    assert not is_prime(2**32 + 1)


def test_sieve_is_prime(int_dtype):
    sieve = Sieve(97, dtype=int_dtype)
    assert sieve.limit == 97
    for n in range(0, 98):
        assert sieve.is_prime(n) == (n in PRIMES_TO_97)
    assert not sieve.is_prime(-5)
    with pytest.raises(OutOfRange):
        sieve.is_prime(100)


@pytest.mark.parametrize("limit", [0, 1, 2, 10, 30, 1000, 2500])
def test_sieves_agree(limit):
    assert Sieve(limit).primes == EulerSieve(limit).primes
    assert Sieve(limit).primes == tuple(trial_division_primes(limit))


def test_sieve_negative_limit():
    with pytest.raises(DomainError):
        Sieve(-3)


class TestCoprimePairs:
    def test_small(self):
        assert coprime_pairs(0) == []
        assert coprime_pairs(-4) == []
        assert coprime_pairs(1) == [(1, 0), (1, 1)]
        assert coprime_pairs(3) == [(1, 0), (1, 1), (2, 1), (3, 1), (3, 2)]

    def test_matches_gcd(self):
        n = 100
        pairs = coprime_pairs(n)
        assert len(pairs) == len(set(pairs))
        for x, y in pairs:
            assert n >= x >= y >= 0
        found = set(pairs)
        for x in range(n + 1):
            for y in range(x + 1):
                assert ((x, y) in found) == (math.gcd(x, y) == 1), (x, y)

    def test_sorted(self):
        pairs = coprime_pairs(50)
        assert pairs == sorted(pairs)
