"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.core.scalar import RATIONAL
from pylinalg.dense.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Random 4x4 float64 matrix, shifted away from singularity."""
    A = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
    return Matrix(A)


@pytest.fixture
def rational_tridiagonal():
    """Exact 3x3 rational matrix with determinant 18."""
    return Matrix(
        [[2, 1, 0],
         [1, 3, 1],
         [0, 1, 4]],
        kind=RATIONAL,
    )


@pytest.fixture
def ref_example():
    """Matrix whose echelon form needs exactly one row swap."""
    return [[1, -4, 2],
            [0, 0, 5],
            [0, 2, 0]]
