"""
Checked API: operations that return a Checked outcome instead of raising.

Every function mirrors one in mltypes.linalg.operations. A shape or index
violation comes back as Checked.failure(DimensionMismatch | IndexOutOfRange);
type errors (wrong operand kinds, mixed element types) still raise,
because they are programming errors rather than data-dependent ones.

Usage:
    outcome = try_multiply(m, v)
    if not outcome.ok:
        log_and_skip(outcome.error)
    y = outcome.unwrap_or(fallback)
"""

from __future__ import annotations

from typing import Any

from mltypes.core.result import Checked, attempt
from mltypes.linalg import operations
from mltypes.linalg.matrix import Matrix
from mltypes.linalg.vector import Vector


def try_add(left: Vector | Matrix, right: Vector | Matrix) -> Checked[Vector | Matrix]:
    return attempt(operations.add, left, right)


def try_subtract(left: Vector | Matrix, right: Vector | Matrix) -> Checked[Vector | Matrix]:
    return attempt(operations.subtract, left, right)


def try_multiply(left: Vector | Matrix | Any, right: Vector | Matrix | Any) -> Checked[Vector | Matrix]:
    return attempt(operations.multiply, left, right)


def try_dot(left: Vector, right: Vector) -> Checked[Any]:
    return attempt(operations.dot, left, right)


def try_hadamard_product(left: Vector | Matrix, right: Vector | Matrix) -> Checked[Vector | Matrix]:
    return attempt(operations.hadamard_product, left, right)


def try_dot_row(matrix: Matrix, index: int, vector: Vector) -> Checked[Any]:
    return attempt(operations.dot_row, matrix, index, vector)


def try_row(matrix: Matrix, index: int) -> Checked[Vector]:
    return attempt(operations.row, matrix, index)


def try_column(matrix: Matrix, index: int) -> Checked[Vector]:
    return attempt(operations.column, matrix, index)


def try_get(container: Vector | Matrix, *index: int) -> Checked[Any]:
    """
    Element lookup: try_get(vector, i) or try_get(matrix, i, j).

    try_get(matrix, i) returns row i.
    """
    key = index[0] if len(index) == 1 else index
    return attempt(container.__getitem__, key)


__all__ = [
    'try_add',
    'try_subtract',
    'try_multiply',
    'try_dot',
    'try_hadamard_product',
    'try_dot_row',
    'try_row',
    'try_column',
    'try_get',
]
