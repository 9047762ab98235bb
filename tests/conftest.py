"""Shared fixtures for the numbertheory test suite."""

import random

import numpy as np
import pytest

from numbertheory.ring import modular

INTEGER_DTYPES = [
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "perf: performance sanity checks (deselect with -m 'not perf')",
    )


@pytest.fixture
def seeded_rng(request: pytest.FixtureRequest) -> int:
    """Seed both stdlib random and numpy RNG.

    The seed is extracted from ``request.param`` when used with
    indirect parametrization, or defaults to 42.

    Returns the seed value for diagnostic printing.
    """
    seed = getattr(request, "param", 42)
    random.seed(seed)
    np.random.seed(seed)
    return seed


@pytest.fixture(params=INTEGER_DTYPES, ids=lambda dt: np.dtype(dt).name)
def int_dtype(request: pytest.FixtureRequest):
    return request.param


@pytest.fixture
def mod10():
    return modular(10)
