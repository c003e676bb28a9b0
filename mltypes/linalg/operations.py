"""
Free-function API over Vector and Matrix.

Each function dispatches on its operand types and delegates to the
corresponding method, so the same dimension rules and errors apply.

    add(a, b)               Vector + Vector or Matrix + Matrix
    subtract(a, b)          Vector - Vector or Matrix - Matrix
    multiply(a, b)          Matrix x Matrix, Matrix x Vector, Vector x Matrix,
                            or either container x scalar
    dot(a, b)               Vector . Vector
    hadamard_product(a, b)  element-wise product of equal shapes
    scale / increase / decrease(x, s)
    transpose(x)            Matrix or Vector (column form)
    map_elements(x, f)
    row(m, i), column(m, j), dot_row(m, i, v), as_row_matrix(v)
"""

from __future__ import annotations

from typing import Any, Callable

from mltypes.linalg.matrix import Matrix
from mltypes.linalg.vector import Vector, _is_scalar

Container = Vector | Matrix


def _unsupported(operation: str, *operands: Any) -> TypeError:
    names = ', '.join(type(x).__name__ for x in operands)
    return TypeError(f"{operation}: unsupported operand types ({names})")


def add(left: Container, right: Container) -> Container:
    if isinstance(left, Vector) and isinstance(right, Vector):
        return left.add(right)
    if isinstance(left, Matrix) and isinstance(right, Matrix):
        return left.add(right)
    raise _unsupported('add', left, right)


def subtract(left: Container, right: Container) -> Container:
    if isinstance(left, Vector) and isinstance(right, Vector):
        return left.subtract(right)
    if isinstance(left, Matrix) and isinstance(right, Matrix):
        return left.subtract(right)
    raise _unsupported('subtract', left, right)


def multiply(left: Container | Any, right: Container | Any) -> Container:
    """
    Product of two operands.

    Vector x Vector is deliberately not accepted here; use dot() or
    hadamard_product() to say which product is meant.
    """
    if isinstance(left, Matrix):
        return left.multiply(right)
    if isinstance(left, Vector) and isinstance(right, Matrix):
        return right.premultiply(left)
    if isinstance(left, Vector) and _is_scalar(right):
        return left.scale(right)
    if _is_scalar(left) and isinstance(right, (Vector, Matrix)):
        return right.scale(left)
    raise _unsupported('multiply', left, right)


def dot(left: Vector, right: Vector) -> Any:
    if isinstance(left, Vector) and isinstance(right, Vector):
        return left.dot(right)
    raise _unsupported('dot', left, right)


def hadamard_product(left: Container, right: Container) -> Container:
    if isinstance(left, Vector) and isinstance(right, Vector):
        return left.hadamard_product(right)
    if isinstance(left, Matrix) and isinstance(right, Matrix):
        return left.hadamard_product(right)
    raise _unsupported('hadamard_product', left, right)


def scale(container: Container, scalar: Any) -> Container:
    return container.scale(scalar)


def increase(container: Container, scalar: Any) -> Container:
    return container.increase(scalar)


def decrease(container: Container, scalar: Any) -> Container:
    return container.decrease(scalar)


def transpose(container: Container) -> Matrix:
    """Transpose a Matrix, or lift a Vector into its size x 1 column form."""
    if isinstance(container, (Vector, Matrix)):
        return container.transpose()
    raise _unsupported('transpose', container)


def map_elements(container: Container, transform: Callable[[Any], Any], dtype: Any = None) -> Container:
    return container.map(transform, dtype=dtype)


def row(matrix: Matrix, index: int) -> Vector:
    return matrix.row(index)


def column(matrix: Matrix, index: int) -> Vector:
    return matrix.column(index)


def dot_row(matrix: Matrix, index: int, vector: Vector) -> Any:
    return matrix.dot_row(index, vector)


def as_row_matrix(vector: Vector) -> Matrix:
    return vector.as_row_matrix()


__all__ = [
    'add',
    'subtract',
    'multiply',
    'dot',
    'hadamard_product',
    'scale',
    'increase',
    'decrease',
    'transpose',
    'map_elements',
    'row',
    'column',
    'dot_row',
    'as_row_matrix',
]
