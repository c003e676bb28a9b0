"""
Matrix: rectangular 2D grid of numeric scalars.

A Matrix exclusively owns a 2D numpy array of one supported element type.
Every constructor validates the grid: rows must have equal length, and a
matrix has at least one row and one column. Rows and columns are handed
out as independent Vector copies; mutating them never affects the matrix.

Construction:
    Matrix([[1, 2], [3, 4]])
    Matrix.zeros(2, 3)
    Matrix.full(2, 3, 7)
    Matrix.random(2, 3, -1.0, 1.0)
    Matrix.from_function(3, 3, lambda i, j: float(i == j))
    Matrix.from_rows([v1, v2])

Operators:
    a + b, a - b        element-wise (identical shapes)
    a * b, a @ b        matrix product (a.columns == b.rows)
    m * v, m @ v        matrix-vector product (m.columns == v.size)
    v * m, v @ m        vector-matrix product (v.size == m.rows)
    m + s, m - s, m * s increase / decrease / scale by a scalar
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from mltypes.core import config
from mltypes.core.exceptions import DimensionMismatch, ValidationError
from mltypes.core.scalars import ScalarType, scalar_type
from mltypes.core.tolerances import select_tolerance
from mltypes.core.validation import (
    check_array,
    check_index,
    check_inner_dimensions,
    check_ndim,
    check_non_empty_grid,
    check_rectangular,
    check_same_dtype,
    check_same_shape,
    check_scalar,
    check_size,
)
from mltypes.linalg._products import (
    ordered_dot,
    ordered_matmul,
    ordered_matvec,
    ordered_vecmat,
)
from mltypes.linalg.vector import Vector, _is_scalar


def _check_dimension(value: Any, name: str) -> int:
    value = check_size(value, name)
    if value < 1:
        raise ValidationError(f"{name}: a matrix needs at least 1, got {value}")
    return value


def _split_key(key: tuple[Any, ...]) -> tuple[Any, Any]:
    if len(key) != 2:
        raise TypeError(f"matrix index must be (row, column), got {len(key)} components")
    return key


class Matrix:
    """
    Rectangular grid of a numeric element type.

    Attributes:
        grid: Read-only view of the element buffer
        rows: Number of rows
        columns: Number of columns
        dtype: numpy dtype of the elements
        scalar_type: The element type's RandomizableNumeric capability
    """

    __slots__ = ('_grid',)
    __hash__ = None  # type: ignore[assignment]
    # numpy defers to the reflected operators below.
    __array_ufunc__ = None

    def __init__(self, grid: ArrayLike | Matrix, dtype: DTypeLike | ScalarType | None = None):
        if isinstance(grid, Matrix):
            grid = grid._grid
        elif not isinstance(grid, np.ndarray):
            if isinstance(grid, Iterator):
                grid = list(grid)
            grid = [row.to_numpy() if isinstance(row, Vector) else row for row in grid]
            if grid and all(isinstance(row, (Sequence, np.ndarray)) for row in grid):
                check_rectangular(grid, 'grid')
        array = check_array(grid, 'grid', dtype)
        if array.ndim == 1 and array.size == 0:
            array = array.reshape(0, 0)
        check_ndim(array, 2, 'grid')
        check_non_empty_grid(array, 'grid')
        self._grid = array

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Matrix:
        """Adopt an already validated 2D array without copying."""
        matrix = cls.__new__(cls)
        matrix._grid = array
        return matrix

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, columns: int, dtype: DTypeLike | ScalarType | None = None) -> Matrix:
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        st = scalar_type(config.get_options().default_dtype if dtype is None else dtype)
        return cls._wrap(np.zeros((rows, columns), dtype=st.dtype))

    @classmethod
    def full(
        cls,
        rows: int,
        columns: int,
        value: Any,
        dtype: DTypeLike | ScalarType | None = None,
    ) -> Matrix:
        """rows x columns Matrix filled with value; dtype inferred from value if not given."""
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        check_scalar(value, 'value')
        fill = check_array([value], 'value', dtype)
        return cls._wrap(np.full((rows, columns), fill[0], dtype=fill.dtype))

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        low: Any,
        high: Any,
        dtype: DTypeLike | ScalarType | None = None,
        rng: np.random.Generator | None = None,
    ) -> Matrix:
        """
        Matrix of independent random values within the closed range [low, high].

        Every element is drawn separately.
        """
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        st = scalar_type(config.get_options().default_dtype if dtype is None else dtype)
        return cls._wrap(st.random(low, high, (rows, columns), rng))

    @classmethod
    def from_function(
        cls,
        rows: int,
        columns: int,
        generator: Callable[[int, int], Any],
        dtype: DTypeLike | ScalarType | None = None,
    ) -> Matrix:
        """Matrix whose (i, j) element is generator(i, j)."""
        rows = _check_dimension(rows, 'rows')
        columns = _check_dimension(columns, 'columns')
        grid = [[generator(i, j) for j in range(columns)] for i in range(rows)]
        return cls(grid, dtype=dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Vector]) -> Matrix:
        """Stack Vectors of one size and element type as rows."""
        rows = list(rows)
        if not rows:
            return cls([])
        for row in rows[1:]:
            check_same_dtype(rows[0].dtype, row.dtype, 'from_rows')
        return cls(rows, dtype=rows[0].dtype)

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def columns(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    @property
    def dtype(self) -> np.dtype:
        return self._grid.dtype

    @property
    def scalar_type(self) -> ScalarType:
        return scalar_type(self._grid.dtype)

    @property
    def grid(self) -> NDArray[Any]:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[Vector]:
        for i in range(self.rows):
            yield self.row(i)

    def row(self, index: int) -> Vector:
        """Copy of row `index` as a Vector."""
        i = check_index(index, self.rows, 'row')
        return Vector._wrap(self._grid[i, :].copy())

    def column(self, index: int) -> Vector:
        """Copy of column `index` as a Vector."""
        j = check_index(index, self.columns, 'column')
        return Vector._wrap(self._grid[:, j].copy())

    def __getitem__(self, key: int | tuple[int, int]) -> Any:
        if isinstance(key, tuple):
            i, j = _split_key(key)
            return self._grid[check_index(i, self.rows, 'row'), check_index(j, self.columns, 'column')]
        return self.row(key)

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        if isinstance(key, tuple):
            i, j = _split_key(key)
            i = check_index(i, self.rows, 'row')
            j = check_index(j, self.columns, 'column')
            self._grid[i, j] = self.scalar_type.coerce(value)
            return

        i = check_index(key, self.rows, 'row')
        if not isinstance(value, Vector):
            value = Vector(value, dtype=self.dtype)
        check_same_dtype(self.dtype, value.dtype, 'row assignment')
        # Checked even in unchecked mode; numpy would broadcast a length-1 row.
        if value.size != self.columns:
            raise DimensionMismatch(
                f"row assignment: expected {self.columns} elements, got {value.size}",
                operation="row assignment",
                expected=self.columns,
                actual=value.size,
            )
        self._grid[i, :] = value._elements

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """columns x rows Matrix with result[j][i] == self[i][j]."""
        return Matrix._wrap(self._grid.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def map(self, transform: Callable[[Any], Any], dtype: DTypeLike | ScalarType | None = None) -> Matrix:
        """
        Apply transform to every element, preserving shape.

        Args:
            transform: Function of one element
            dtype: Result element type; the source dtype if None
        """
        grid = [[transform(x) for x in row] for row in self._grid]
        return Matrix(grid, dtype=self.dtype if dtype is None else dtype)

    # ------------------------------------------------------------------
    # Element-wise arithmetic
    # ------------------------------------------------------------------

    def _check_operand(self, other: Matrix, operation: str) -> None:
        check_same_dtype(self.dtype, other.dtype, operation)
        check_same_shape(self.shape, other.shape, operation)

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum; shapes must be identical."""
        self._check_operand(other, 'add')
        return Matrix._wrap(self._grid + other._grid)

    def subtract(self, other: Matrix) -> Matrix:
        """Element-wise difference; shapes must be identical."""
        self._check_operand(other, 'subtract')
        return Matrix._wrap(self._grid - other._grid)

    def hadamard_product(self, other: Matrix) -> Matrix:
        """Element-wise product; shapes must be identical."""
        self._check_operand(other, 'hadamard_product')
        return Matrix._wrap(self._grid * other._grid)

    def scale(self, scalar: Any) -> Matrix:
        return Matrix._wrap(self._grid * self.scalar_type.coerce(scalar))

    def increase(self, scalar: Any) -> Matrix:
        return Matrix._wrap(self._grid + self.scalar_type.coerce(scalar))

    def decrease(self, scalar: Any) -> Matrix:
        return Matrix._wrap(self._grid - self.scalar_type.coerce(scalar))

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def dot_row(self, index: int, vector: Vector) -> Any:
        """
        Dot product of row `index` with vector.

        Raises:
            DimensionMismatch: If vector.size != columns
            IndexOutOfRange: If index is outside [0, rows)
        """
        check_same_dtype(self.dtype, vector.dtype, 'dot_row')
        check_inner_dimensions(
            self.columns, vector.size, 'dot_row',
            left_name='matrix columns', right_name='vector size',
        )
        i = check_index(index, self.rows, 'row')
        return ordered_dot(self._grid[i, :], vector._elements)

    def multiply(self, other: Matrix | Vector | Any) -> Matrix | Vector:
        """
        Matrix product with a Matrix, Vector or scalar.

        Matrix: requires self.columns == other.rows; returns a
            self.rows x other.columns Matrix accumulated in increasing k.
        Vector: requires self.columns == other.size; returns a Vector
            whose i-th element is dot_row(i, other).
        scalar: same as scale().

        Raises:
            DimensionMismatch: If the inner dimensions disagree
        """
        if isinstance(other, Matrix):
            check_same_dtype(self.dtype, other.dtype, 'multiply')
            check_inner_dimensions(self.columns, other.rows, 'multiply')
            return Matrix._wrap(ordered_matmul(self._grid, other._grid))
        if isinstance(other, Vector):
            check_same_dtype(self.dtype, other.dtype, 'multiply')
            check_inner_dimensions(
                self.columns, other.size, 'multiply',
                left_name='matrix columns', right_name='vector size',
            )
            return Vector._wrap(ordered_matvec(self._grid, other._elements))
        if _is_scalar(other):
            return self.scale(other)
        raise TypeError(
            f"multiply: unsupported operand type {type(other).__name__}"
        )

    def premultiply(self, vector: Vector) -> Vector:
        """
        Vector-matrix product vector * self.

        Requires vector.size == rows; element j is vector.dot(column(j)).
        """
        check_same_dtype(vector.dtype, self.dtype, 'multiply')
        check_inner_dimensions(
            vector.size, self.rows, 'multiply',
            left_name='vector size', right_name='matrix rows',
        )
        return Vector._wrap(ordered_vecmat(vector._elements, self._grid))

    # ------------------------------------------------------------------
    # Conversion and comparison
    # ------------------------------------------------------------------

    def astype(self, dtype: DTypeLike | ScalarType) -> Matrix:
        """Copy converted to another element type (exact for integer targets)."""
        return Matrix(self._grid, dtype=dtype)

    def copy(self) -> Matrix:
        return Matrix._wrap(self._grid.copy())

    def to_list(self) -> list[list[Any]]:
        return self._grid.tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._grid.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        return np.array(self._grid, dtype=dtype)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._grid, other._grid))

    def allclose(self, other: Matrix, rtol: float | None = None, atol: float | None = None) -> bool:
        """
        Approximate equality.

        Tolerances default to the looser tier of the two element types.
        Matrices of different shapes are never close.
        """
        if self.shape != other.shape:
            return False
        tier = max(select_tolerance(self.dtype), select_tolerance(other.dtype), key=lambda t: t.rtol)
        return bool(np.allclose(
            self._grid,
            other._grid,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.add(other)
        if _is_scalar(other):
            return self.increase(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return self.increase(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return self.subtract(other)
        if _is_scalar(other):
            return self.decrease(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix:
        if _is_scalar(other):
            return Matrix._wrap(self.scalar_type.coerce(other) - self._grid)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, (Matrix, Vector)) or _is_scalar(other):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Vector):
            return self.premultiply(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.premultiply(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()}, dtype={self.dtype.name})"
