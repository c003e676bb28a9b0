"""
Ordered accumulation kernels for dot and matrix products.

Every sum here starts from the additive identity and adds terms in
increasing index order, one term at a time. Floating-point results are
therefore reproducible and match a naive triple loop bit for bit; no
pairwise summation or BLAS reordering is involved.

The 2D kernels vectorize over the output positions only: each output
element still sees its terms in the same order as the scalar loop.

All kernels assume operands were validated by the caller.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def ordered_dot(left: NDArray[Any], right: NDArray[Any]) -> Any:
    """sum_i left[i] * right[i], zero-seeded, in index order."""
    acc = left.dtype.type(0)
    # Integer overflow wraps silently, as in the array kernels below.
    with np.errstate(over='ignore'):
        for a, b in zip(left, right):
            acc = acc + a * b
    return acc


def ordered_matvec(grid: NDArray[Any], vector: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix-vector product.

    result[i] = sum_j grid[i, j] * vector[j], accumulated over j in order;
    identical to calling ordered_dot on each row.
    """
    rows, columns = grid.shape
    acc = np.zeros(rows, dtype=grid.dtype)
    for j in range(columns):
        acc += grid[:, j] * vector[j]
    return acc


def ordered_vecmat(vector: NDArray[Any], grid: NDArray[Any]) -> NDArray[Any]:
    """
    Vector-matrix product.

    result[j] = sum_i vector[i] * grid[i, j], accumulated over i in order;
    identical to calling ordered_dot on each column.
    """
    rows, columns = grid.shape
    acc = np.zeros(columns, dtype=grid.dtype)
    for i in range(rows):
        acc += vector[i] * grid[i, :]
    return acc


def ordered_matmul(left: NDArray[Any], right: NDArray[Any]) -> NDArray[Any]:
    """
    Matrix-matrix product.

    result[i, j] = sum_k left[i, k] * right[k, j], accumulated over k in
    increasing order.
    """
    n_rows, inner = left.shape
    n_columns = right.shape[1]
    acc = np.zeros((n_rows, n_columns), dtype=left.dtype)
    for k in range(inner):
        acc += np.multiply.outer(left[:, k], right[k, :])
    return acc
