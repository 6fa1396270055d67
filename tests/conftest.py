"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def symmetric_2x2():
    """[[2, 1], [1, 2]]: eigenvalues 3 and 1."""
    return np.array([[2.0, 1.0], [1.0, 2.0]])


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix with a dominant diagonal (well conditioned)."""
    n = 5
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.fixture
def spd_distinct(rng):
    """
    Symmetric 4x4 matrix with known, well-separated eigenvalues.

    Built as V diag(d) V' with V orthogonal, so the QR iteration
    converges to d (in descending order) along the diagonal.
    """
    d = np.array([10.0, 5.0, 2.0, 0.5])
    V, _ = np.linalg.qr(rng.standard_normal((4, 4)))
    return V @ np.diag(d) @ V.T, d
