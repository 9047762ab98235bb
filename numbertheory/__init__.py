from .errors import (
    DomainError,
    NumberTheoryError,
    NumericOverflow,
    OutOfRange,
    RangeError,
    StaticOverflowViolation,
)
from .numeric import exgcd, gcd, iroot, lcm, pow
from .prime import Sieve, coprime_pairs, is_prime
from .ring import Modular, RingElement, modular
from .sieve import EulerSieve

__all__ = [
    "DomainError",
    "EulerSieve",
    "Modular",
    "NumberTheoryError",
    "NumericOverflow",
    "OutOfRange",
    "RangeError",
    "RingElement",
    "Sieve",
    "StaticOverflowViolation",
    "coprime_pairs",
    "exgcd",
    "gcd",
    "iroot",
    "is_prime",
    "lcm",
    "modular",
    "pow",
]
