"""
Input validation utilities for mltypes.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent lossy conversion into integer element types
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation or parameter names included in all error messages
"""

from __future__ import annotations

import numbers
import operator
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from mltypes.core import config
from mltypes.core.exceptions import (
    DimensionMismatch,
    IndexOutOfRange,
    ScalarTypeMismatch,
    ValidationError,
)
from mltypes.core.scalars import ScalarType, scalar_type


def check_array(
    data: ArrayLike,
    name: str,
    dtype: DTypeLike | ScalarType | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to an owned numpy array.

    Accepts any array-like. The element type is dtype if given, otherwise
    the one numpy infers from the data. Converting into an integer type
    must be exact.

    Args:
        data: Input to validate
        name: Parameter name for error messages
        dtype: Target element type, or None to infer

    Returns:
        A fresh numpy array (never a view of data)

    Raises:
        ValidationError: If input cannot be converted to numeric array
        ScalarTypeMismatch: If conversion to dtype would change values
    """
    try:
        result = np.asarray(data)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty input carries no element type of its own.
    if result.size == 0 and dtype is None:
        dtype = config.get_options().default_dtype

    if result.size > 0 and (
        result.dtype == np.bool_
        or not np.issubdtype(result.dtype, np.number)
        or np.issubdtype(result.dtype, np.complexfloating)
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    st = scalar_type(result.dtype if dtype is None else dtype)
    if result.size == 0:
        return np.array(result, dtype=st.dtype)

    result = _convert(result, st, name)
    if np.issubdtype(result.dtype, np.floating):
        warn_non_finite(result, name)
    return result


def _convert(array: NDArray[Any], st: ScalarType, name: str) -> NDArray[Any]:
    """Copy array into st.dtype, refusing lossy integer conversions."""
    if array.dtype == st.dtype or not st.is_integer:
        return np.array(array, dtype=st.dtype)

    if np.issubdtype(array.dtype, np.floating):
        if not np.all(np.isfinite(array)) or np.any(array != np.trunc(array)):
            raise ScalarTypeMismatch(
                f"{name}: non-integral values cannot be stored as {st.name}",
                expected=st.name,
                actual=array.dtype.name,
            )

    info = np.iinfo(st.dtype)
    lo, hi = array.min().item(), array.max().item()
    if lo < info.min or hi > info.max:
        raise ScalarTypeMismatch(
            f"{name}: values in [{lo}, {hi}] exceed the range of {st.name} "
            f"[{info.min}, {info.max}]",
            expected=st.name,
            actual=array.dtype.name,
        )
    return array.astype(st.dtype)


def warn_non_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Warn if a floating array contains NaN or Inf values.

    Non-finite values are legal elements, so this never raises.
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            RuntimeWarning,
            stacklevel=4,
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionMismatch: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatch(
            f"{name}: expected {ndim}D data, got {array.ndim}D with shape {array.shape}",
            operation=name,
            expected=ndim,
            actual=array.ndim,
        )


def check_size(size: Any, name: str) -> int:
    """
    Verify a requested length is a non-negative integer.

    Returns:
        size as a plain int

    Raises:
        ValidationError: If size is not an integer or is negative
    """
    if isinstance(size, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        value = operator.index(size)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(size).__name__}"
        ) from e
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value is a single real number.

    Raises:
        ValidationError: If value is a sequence, array, bool or non-numeric
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )


def check_rectangular(rows: list[Any], name: str) -> None:
    """
    Verify every row of a nested sequence has the same length.

    Raises:
        DimensionMismatch: If the grid is jagged
    """
    lengths = [len(row) for row in rows]
    if len(set(lengths)) > 1:
        raise DimensionMismatch(
            f"{name}: rows must all have the same length, got lengths {lengths}",
            operation=name,
            expected=lengths[0],
            actual=lengths,
        )


def check_non_empty_grid(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Raises:
        DimensionMismatch: If either dimension is zero
    """
    rows, columns = array.shape
    if rows < 1 or columns < 1:
        raise DimensionMismatch(
            f"{name}: a matrix needs at least 1 row and 1 column, got {rows}x{columns}",
            operation=name,
            expected='>= 1x1',
            actual=(rows, columns),
        )


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected rather than counted from the end.

    Returns:
        index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRange: If index is outside [0, bound)
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f"{axis} index must be an integer, got bool")
    value = operator.index(index)
    if not 0 <= value < bound:
        raise IndexOutOfRange(
            f"{axis} index {value} out of range [0, {bound})",
            index=value,
            bound=bound,
            axis=axis,
        )
    return value


def check_same_size(left: int, right: int, operation: str) -> None:
    """
    Verify two vectors have equal size.

    Skipped when dimension checks are disabled.

    Raises:
        DimensionMismatch: If the sizes differ
    """
    if config.checks_enabled() and left != right:
        raise DimensionMismatch(
            f"{operation}: vectors must have the same size, got {left} and {right}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices have identical shapes.

    Skipped when dimension checks are disabled.

    Raises:
        DimensionMismatch: If rows or columns differ
    """
    if config.checks_enabled() and left != right:
        raise DimensionMismatch(
            f"{operation}: matrix dimensions must be equal, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dimensions(
    left: int,
    right: int,
    operation: str,
    left_name: str = 'left columns',
    right_name: str = 'right rows',
) -> None:
    """
    Verify the contracted dimensions of a product agree.

    Skipped when dimension checks are disabled.

    Raises:
        DimensionMismatch: If left != right
    """
    if config.checks_enabled() and left != right:
        raise DimensionMismatch(
            f"{operation}: incompatible dimensions, "
            f"{left_name}={left} but {right_name}={right}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_same_dtype(left: np.dtype, right: np.dtype, operation: str) -> None:
    """
    Verify two containers share an element type.

    Raises:
        ScalarTypeMismatch: If the dtypes differ
    """
    if left != right:
        raise ScalarTypeMismatch(
            f"{operation}: element types differ ({left.name} vs {right.name}); "
            f"convert one operand with astype() first",
            expected=left.name,
            actual=right.name,
        )
