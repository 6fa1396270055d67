"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from qreigen.core.exceptions import DimensionError, ValidationError
from qreigen.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_floating_array,
    check_index,
    check_non_negative_int,
    check_same_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "a")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "a").dtype == np.float32

    def test_float_array_not_copied(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "a") is arr

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "a")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "a")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "a")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            check_array([[1.0, 2.0], [3.0]], "A")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "a")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf, 1.0]), "a")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_1d(self):
        check_1d(np.zeros(3), "a")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 1)), "a")

    def test_check_2d(self):
        check_2d(np.zeros((2, 3)), "A")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_check_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((2, 3)), "A")

    def test_check_square_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_square(np.zeros(4), "A")

    def test_check_same_shape(self):
        check_same_shape(np.zeros(3), np.ones(3), ("a", "b"))
        with pytest.raises(DimensionError, match=r"a=\(3,\), b=\(4,\)"):
            check_same_shape(np.zeros(3), np.ones(4), ("a", "b"))


# ═══════════════════════════════════════════════════════════════════════
# Scalar checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        check_index(0, 3, "j")
        check_index(2, 3, "j")

    @pytest.mark.parametrize("j", [-1, 3])
    def test_out_of_range(self, j):
        with pytest.raises(ValidationError, match="out of range"):
            check_index(j, 3, "j")

    def test_rejects_float(self):
        with pytest.raises(ValidationError, match="integer"):
            check_index(1.0, 3, "j")

    def test_accepts_numpy_integer(self):
        check_index(np.int64(1), 3, "j")


class TestCheckNonNegativeInt:

    def test_returns_int(self):
        result = check_non_negative_int(np.int32(5), "iterations")
        assert result == 5
        assert type(result) is int

    def test_zero_allowed(self):
        assert check_non_negative_int(0, "iterations") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match=">= 0"):
            check_non_negative_int(-1, "iterations")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            check_non_negative_int(True, "iterations")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="float"):
            check_non_negative_int(10.0, "iterations")


class TestCheckFloatingArray:

    def test_float_ndarray_passes(self):
        check_floating_array(np.zeros(2, dtype=np.float32), "a")

    def test_list_rejected(self):
        with pytest.raises(ValidationError, match="ndarray"):
            check_floating_array([1.0, 2.0], "a")

    def test_int_array_rejected(self):
        with pytest.raises(ValidationError, match="floating dtype"):
            check_floating_array(np.array([1, 2]), "a")
