"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype inference, lossless integer coercion
    - warn_non_finite: NaN/Inf warnings
    - check_ndim, check_size, check_rectangular, check_non_empty_grid
    - check_index: bounds and negative-index rejection
    - check_same_size / check_same_shape / check_inner_dimensions,
      including the unchecked mode
    - check_same_dtype
"""

import numpy as np
import pytest

from mltypes.core import config
from mltypes.core.exceptions import (
    DimensionMismatch,
    IndexOutOfRange,
    ScalarTypeMismatch,
    ValidationError,
)
from mltypes.core.validation import (
    check_array,
    check_index,
    check_inner_dimensions,
    check_ndim,
    check_non_empty_grid,
    check_rectangular,
    check_same_dtype,
    check_same_shape,
    check_same_size,
    check_size,
    warn_non_finite,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to an owned ndarray and rejects non-numeric data."""

    def test_int_list_inferred_as_integer(self):
        result = check_array([1, 2, 3], "X")
        assert np.issubdtype(result.dtype, np.integer)
        np.testing.assert_array_equal(result, [1, 2, 3])

    def test_float_list_inferred_as_float64(self):
        result = check_array([1.0, 2.5], "X")
        assert result.dtype == np.float64

    def test_float32_preserved(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "X").dtype == np.float32

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "X")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_explicit_float_dtype(self):
        result = check_array([1, 2], "X", dtype="float32")
        assert result.dtype == np.float32

    def test_integral_floats_into_int(self):
        result = check_array([1.0, -2.0], "X", dtype=np.int16)
        assert result.dtype == np.int16
        np.testing.assert_array_equal(result, [1, -2])

    def test_fractional_floats_into_int_rejected(self):
        with pytest.raises(ScalarTypeMismatch, match="non-integral"):
            check_array([1.5, 2.0], "X", dtype="int32")

    def test_out_of_range_into_int_rejected(self):
        with pytest.raises(ScalarTypeMismatch, match="range of uint8"):
            check_array([0, 256], "X", dtype="uint8")

    def test_negative_into_unsigned_rejected(self):
        with pytest.raises(ScalarTypeMismatch):
            check_array([-1, 2], "X", dtype="uint32")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([1 + 2j], "X")

    def test_rejects_unsupported_dtype(self):
        with pytest.raises(ValidationError, match="unsupported element type"):
            check_array(np.array([1.0], dtype=np.float16), "X")

    def test_empty_uses_default_dtype(self):
        result = check_array([], "X")
        assert result.shape == (0,)
        assert result.dtype == np.float64

    def test_empty_respects_configured_default(self):
        with config.option_context(default_dtype="int32"):
            assert check_array([], "X").dtype == np.int32

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")

    def test_nan_input_warns(self):
        with pytest.warns(RuntimeWarning, match="1 NaN"):
            check_array([1.0, np.nan], "X")


class TestWarnNonFinite:

    def test_finite_is_silent(self, recwarn):
        warn_non_finite(np.array([1.0, 2.0]), "X")
        assert len(recwarn) == 0

    def test_inf_counted(self):
        with pytest.warns(RuntimeWarning, match="0 NaN, 2 Inf"):
            warn_non_finite(np.array([np.inf, -np.inf, 1.0]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_ndim_passes(self):
        check_ndim(np.zeros((2, 2)), 2, "X")

    def test_check_ndim_fails(self):
        with pytest.raises(DimensionMismatch, match="expected 1D"):
            check_ndim(np.zeros((2, 2)), 1, "X")

    def test_check_size_accepts_numpy_int(self):
        assert check_size(np.int64(4), "size") == 4

    def test_check_size_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_size(-1, "size")

    def test_check_size_float(self):
        with pytest.raises(ValidationError, match="integer"):
            check_size(2.0, "size")

    def test_check_size_bool(self):
        with pytest.raises(ValidationError, match="bool"):
            check_size(True, "size")

    def test_rectangular_passes(self):
        check_rectangular([[1, 2], [3, 4]], "grid")

    def test_jagged_fails(self):
        with pytest.raises(DimensionMismatch, match=r"lengths \[2, 1\]"):
            check_rectangular([[1, 2], [3]], "grid")

    def test_non_empty_grid(self):
        check_non_empty_grid(np.zeros((1, 1)), "grid")
        with pytest.raises(DimensionMismatch, match="at least 1 row"):
            check_non_empty_grid(np.zeros((0, 3)), "grid")
        with pytest.raises(DimensionMismatch):
            check_non_empty_grid(np.zeros((3, 0)), "grid")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_valid_indices(self):
        assert check_index(0, 3, "element") == 0
        assert check_index(np.int32(2), 3, "element") == 2

    def test_upper_bound_exclusive(self):
        with pytest.raises(IndexOutOfRange) as exc_info:
            check_index(3, 3, "row")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3
        assert exc_info.value.axis == "row"

    def test_negative_not_wrapped(self):
        with pytest.raises(IndexOutOfRange, match=r"-1 out of range \[0, 3\)"):
            check_index(-1, 3, "element")

    def test_non_integer_rejected(self):
        with pytest.raises(TypeError):
            check_index(1.0, 3, "element")

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            check_index(True, 3, "element")

    def test_checked_even_when_unchecked(self):
        with config.unchecked():
            with pytest.raises(IndexOutOfRange):
                check_index(5, 3, "element")


# ═══════════════════════════════════════════════════════════════════════
# Operand compatibility
# ═══════════════════════════════════════════════════════════════════════


class TestOperandChecks:

    def test_same_size(self):
        check_same_size(3, 3, "add")
        with pytest.raises(DimensionMismatch, match="add: vectors must have the same size, got 3 and 2"):
            check_same_size(3, 2, "add")

    def test_same_shape(self):
        check_same_shape((2, 3), (2, 3), "add")
        with pytest.raises(DimensionMismatch, match="2x3 and 3x2"):
            check_same_shape((2, 3), (3, 2), "add")

    def test_inner_dimensions(self):
        check_inner_dimensions(3, 3, "multiply")
        with pytest.raises(DimensionMismatch) as exc_info:
            check_inner_dimensions(3, 2, "multiply")
        assert exc_info.value.operation == "multiply"
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_skipped_when_unchecked(self):
        with config.unchecked():
            check_same_size(3, 2, "add")
            check_same_shape((1, 1), (2, 2), "add")
            check_inner_dimensions(1, 5, "multiply")

    def test_same_dtype(self):
        check_same_dtype(np.dtype("int64"), np.dtype("int64"), "add")
        with pytest.raises(ScalarTypeMismatch, match="int64 vs float64"):
            check_same_dtype(np.dtype("int64"), np.dtype("float64"), "add")

    def test_dtype_check_not_disabled_by_unchecked(self):
        with config.unchecked():
            with pytest.raises(ScalarTypeMismatch):
                check_same_dtype(np.dtype("int8"), np.dtype("int16"), "add")
