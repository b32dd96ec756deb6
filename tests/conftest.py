"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def grid_4x3():
    """4x3 matrix holding 1.0 .. 12.0 row by row."""
    return Matrix.from_shaped([
        1.0, 2.0, 3.0,
        4.0, 5.0, 6.0,
        7.0, 8.0, 9.0,
        10.0, 11.0, 12.0,
    ], 4, 3)


class ReportedLength:
    """Sized source whose len() is fixed independently of what it yields."""

    def __init__(self, reported, values):
        self._reported = reported
        self._values = list(values)

    def __len__(self):
        return self._reported

    def __iter__(self):
        return iter(self._values)


@pytest.fixture
def reported_length():
    """Factory for sized sources that misreport their length."""
    return ReportedLength
