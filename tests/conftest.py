"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pymatrix.core.config import reset_config
from pymatrix.matrix import Matrix, from_numpy, rand_L1, transpose_view
from pymatrix.algorithms import mat_mul


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test starts from the environment defaults."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_problem(rng):
    """10x10 SPD matrix A = L L^T with its known factor L."""
    L = rand_L1(10, rng=rng)
    A = mat_mul(L, transpose_view(L))
    return A, L


@pytest.fixture
def wiki_spd():
    """Classic integer-valued SPD example with factor [[2,0,0],[6,1,0],[-8,5,3]]."""
    A = Matrix.from_rows([[4, 12, -16], [12, 37, -43], [-16, -43, 98]])
    L = Matrix.from_rows([[2, 0, 0], [6, 1, 0], [-8, 5, 3]])
    return A, L


@pytest.fixture
def rect_pair(rng):
    """Random A (7x5) and B (5x9) as matrices plus their ndarray sources."""
    a = rng.standard_normal((7, 5))
    b = rng.standard_normal((5, 9))
    return from_numpy(a), from_numpy(b), a, b
