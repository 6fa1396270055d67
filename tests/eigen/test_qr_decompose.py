"""
Tests for the classical Gram-Schmidt QR decomposition.

Core properties: Q R reconstructs A and Q'Q = I, in both precisions.
"""

import numpy as np
import pytest

from qreigen import qr_decompose
from qreigen.core.compute.tolerances import select_tolerance
from qreigen.core.exceptions import DimensionError, ValidationError
from qreigen.eigen import QRResult
from qreigen.eigen._gram_schmidt import gram_schmidt_qr


# ═══════════════════════════════════════════════════════════════════════
# Factorization properties
# ═══════════════════════════════════════════════════════════════════════


class TestFactorization:

    @pytest.mark.parametrize("dtype", [np.float64, np.float32])
    def test_reconstructs_matrix(self, well_conditioned, dtype):
        tol = select_tolerance(dtype)
        Q, R = qr_decompose(well_conditioned, dtype=dtype)
        np.testing.assert_allclose(
            Q @ R, well_conditioned.astype(dtype), rtol=tol.rtol, atol=tol.atol * 10
        )

    @pytest.mark.parametrize("dtype", [np.float64, np.float32])
    def test_q_orthonormal(self, well_conditioned, dtype):
        tol = select_tolerance(dtype)
        Q, _ = qr_decompose(well_conditioned, dtype=dtype)
        np.testing.assert_allclose(Q.T @ Q, np.eye(5), atol=tol.atol * 10)

    def test_r_upper_triangular(self, well_conditioned):
        _, R = qr_decompose(well_conditioned)
        np.testing.assert_allclose(np.tril(R, -1), 0.0, atol=1e-10)

    def test_random_sizes(self, rng):
        for n in (1, 2, 3, 8):
            A = rng.standard_normal((n, n)) + n * np.eye(n)
            Q, R = qr_decompose(A)
            np.testing.assert_allclose(Q @ R, A, atol=1e-9)
            np.testing.assert_allclose(Q.T @ Q, np.eye(n), atol=1e-9)

    def test_dtype_follows_request(self, well_conditioned):
        Q, R = qr_decompose(well_conditioned, dtype='float32')
        assert Q.dtype == np.float32
        assert R.dtype == np.float32


# ═══════════════════════════════════════════════════════════════════════
# Exact algorithm behaviour
# ═══════════════════════════════════════════════════════════════════════


class TestGramSchmidtSteps:

    def test_hand_computed_2x2(self):
        """[[2,1],[1,2]]: Q = [[2,-1],[1,2]]/sqrt5, R = [[5,4],[0,3]]/sqrt5."""
        A = np.array([[2.0, 1.0], [1.0, 2.0]])
        Q, R = qr_decompose(A)
        s = np.sqrt(5.0)
        np.testing.assert_allclose(Q, np.array([[2.0, -1.0], [1.0, 2.0]]) / s, rtol=1e-14)
        np.testing.assert_allclose(R, np.array([[5.0, 4.0], [0.0, 3.0]]) / s, atol=1e-14)

    def test_column_zero_only_normalized(self, well_conditioned):
        Q, _ = qr_decompose(well_conditioned)
        col = well_conditioned[:, 0]
        np.testing.assert_allclose(Q[:, 0], col / np.linalg.norm(col), rtol=1e-14)

    def test_negative_diagonal_keeps_sign_in_q(self):
        A = np.diag([3.0, -2.0])
        Q, R = qr_decompose(A)
        np.testing.assert_array_equal(Q, np.diag([1.0, -1.0]))
        np.testing.assert_array_equal(R, np.diag([3.0, 2.0]))

    def test_input_not_modified(self, well_conditioned):
        A = well_conditioned.copy()
        gram_schmidt_qr(A)
        np.testing.assert_array_equal(A, well_conditioned)

    def test_result_type(self):
        result = qr_decompose(np.eye(3))
        assert isinstance(result, QRResult)
        np.testing.assert_array_equal(result.Q, np.eye(3))
        np.testing.assert_array_equal(result.R, np.eye(3))


# ═══════════════════════════════════════════════════════════════════════
# Degenerate input (inherited, unguarded)
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerate:

    def test_zero_column_gives_nan_without_error(self, recwarn):
        A = np.array([[0.0, 1.0], [0.0, 2.0]])
        Q, R = qr_decompose(A)
        assert np.all(np.isnan(Q[:, 0]))
        assert not np.all(np.isfinite(R))
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_rejects_rectangular(self):
        with pytest.raises(DimensionError, match="square"):
            qr_decompose(np.ones((2, 3)))

    def test_rejects_nan(self):
        with pytest.raises(ValidationError, match="non-finite"):
            qr_decompose(np.array([[1.0, np.nan], [0.0, 1.0]]))
