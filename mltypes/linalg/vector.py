"""
Vector: fixed-size sequence of numeric scalars.

A Vector exclusively owns a 1D numpy array of one supported element type
(see mltypes.core.scalars). Its length never changes after construction;
every arithmetic operation returns a new Vector and leaves its operands
untouched.

Construction:
    Vector([1, 2, 3])                        # literal, dtype inferred (int64)
    Vector([1, 2, 3], dtype='float32')       # literal, explicit dtype
    Vector.full(4, 0.5)                      # repeated value
    Vector.zeros(4)                          # default dtype from config
    Vector.random(4, -1.0, 1.0)              # closed range, fresh draw per element
    Vector.from_function(4, lambda i: i * i) # generator over [0, size)

Operators:
    v + w, v - w        element-wise (equal sizes)
    v * w, v @ w        dot product (equal sizes)
    v + s, v - s, v * s increase / decrease / scale by a scalar
    v * m, v @ m        vector-matrix product (see Matrix)
"""

from __future__ import annotations

import numbers
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from mltypes.core import config
from mltypes.core.scalars import ScalarType, scalar_type
from mltypes.core.tolerances import select_tolerance
from mltypes.core.validation import (
    check_array,
    check_index,
    check_ndim,
    check_same_dtype,
    check_same_size,
    check_scalar,
    check_size,
)
from mltypes.linalg._products import ordered_dot

if TYPE_CHECKING:
    from mltypes.linalg.matrix import Matrix


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


class Vector:
    """
    Fixed-size ordered sequence of a numeric element type.

    Attributes:
        elements: Read-only view of the element buffer
        size: Number of elements
        dtype: numpy dtype of the elements
        scalar_type: The element type's RandomizableNumeric capability
    """

    __slots__ = ('_elements',)
    __hash__ = None  # type: ignore[assignment]
    # numpy defers to the reflected operators below.
    __array_ufunc__ = None

    def __init__(self, elements: ArrayLike | Vector, dtype: DTypeLike | ScalarType | None = None):
        if isinstance(elements, Vector):
            elements = elements._elements
        elif isinstance(elements, Iterator):
            elements = list(elements)
        array = check_array(elements, 'elements', dtype)
        check_ndim(array, 1, 'elements')
        self._elements = array

    @classmethod
    def _wrap(cls, array: NDArray[Any]) -> Vector:
        """Adopt an already validated 1D array without copying."""
        vector = cls.__new__(cls)
        vector._elements = array
        return vector

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def full(cls, size: int, value: Any, dtype: DTypeLike | ScalarType | None = None) -> Vector:
        """Vector of `size` copies of `value`; dtype inferred from value if not given."""
        size = check_size(size, 'size')
        check_scalar(value, 'value')
        fill = check_array([value], 'value', dtype)
        return cls._wrap(np.full(size, fill[0], dtype=fill.dtype))

    @classmethod
    def zeros(cls, size: int, dtype: DTypeLike | ScalarType | None = None) -> Vector:
        size = check_size(size, 'size')
        st = scalar_type(config.get_options().default_dtype if dtype is None else dtype)
        return cls._wrap(np.zeros(size, dtype=st.dtype))

    @classmethod
    def random(
        cls,
        size: int,
        low: Any,
        high: Any,
        dtype: DTypeLike | ScalarType | None = None,
        rng: np.random.Generator | None = None,
    ) -> Vector:
        """
        Vector of independent random values within the closed range [low, high].

        Args:
            size: Number of elements
            low: Inclusive lower bound
            high: Inclusive upper bound
            dtype: Element type; the configured default if None
            rng: Generator to draw from; the shared default if None
        """
        size = check_size(size, 'size')
        st = scalar_type(config.get_options().default_dtype if dtype is None else dtype)
        return cls._wrap(st.random(low, high, size, rng))

    @classmethod
    def from_function(
        cls,
        size: int,
        generator: Callable[[int], Any],
        dtype: DTypeLike | ScalarType | None = None,
    ) -> Vector:
        """Vector whose i-th element is generator(i) for i in [0, size)."""
        size = check_size(size, 'size')
        values = [generator(i) for i in range(size)]
        return cls(values, dtype=dtype)

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._elements.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._elements.dtype

    @property
    def scalar_type(self) -> ScalarType:
        return scalar_type(self._elements.dtype)

    @property
    def elements(self) -> NDArray[Any]:
        view = self._elements.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> Any:
        return self._elements[check_index(index, self.size, 'element')]

    def __setitem__(self, index: int, value: Any) -> None:
        position = check_index(index, self.size, 'element')
        self._elements[position] = self.scalar_type.coerce(value)

    # ------------------------------------------------------------------
    # Vector-vector arithmetic
    # ------------------------------------------------------------------

    def _check_operand(self, other: Vector, operation: str) -> None:
        check_same_dtype(self.dtype, other.dtype, operation)
        check_same_size(self.size, other.size, operation)

    def add(self, other: Vector) -> Vector:
        """Element-wise sum; sizes must match."""
        self._check_operand(other, 'add')
        return Vector._wrap(self._elements + other._elements)

    def subtract(self, other: Vector) -> Vector:
        """Element-wise difference; sizes must match."""
        self._check_operand(other, 'subtract')
        return Vector._wrap(self._elements - other._elements)

    def hadamard_product(self, other: Vector) -> Vector:
        """Element-wise product; sizes must match."""
        self._check_operand(other, 'hadamard_product')
        return Vector._wrap(self._elements * other._elements)

    def dot(self, other: Vector) -> Any:
        """
        Dot product.

        The sum starts from the element type's zero and adds the products
        in index order, so an empty dot product is zero and floating-point
        results are reproducible.

        Raises:
            DimensionMismatch: If sizes differ
        """
        self._check_operand(other, 'dot')
        return ordered_dot(self._elements, other._elements)

    # ------------------------------------------------------------------
    # Vector-scalar arithmetic
    # ------------------------------------------------------------------

    def scale(self, scalar: Any) -> Vector:
        return Vector._wrap(self._elements * self.scalar_type.coerce(scalar))

    def increase(self, scalar: Any) -> Vector:
        return Vector._wrap(self._elements + self.scalar_type.coerce(scalar))

    def decrease(self, scalar: Any) -> Vector:
        return Vector._wrap(self._elements - self.scalar_type.coerce(scalar))

    def map(self, transform: Callable[[Any], Any], dtype: DTypeLike | ScalarType | None = None) -> Vector:
        """
        Apply transform to every element.

        Args:
            transform: Function of one element
            dtype: Result element type; the source dtype if None

        Returns:
            New Vector of the same size
        """
        values = [transform(x) for x in self._elements]
        return Vector(values, dtype=self.dtype if dtype is None else dtype)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def as_row_matrix(self) -> Matrix:
        """1 x size Matrix holding a copy of the elements."""
        from mltypes.linalg.matrix import Matrix
        return Matrix(self._elements.reshape(1, -1), dtype=self.dtype)

    def transpose(self) -> Matrix:
        """size x 1 (column) Matrix."""
        return self.as_row_matrix().transpose()

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def astype(self, dtype: DTypeLike | ScalarType) -> Vector:
        """Copy converted to another element type (exact for integer targets)."""
        return Vector(self._elements, dtype=dtype)

    def copy(self) -> Vector:
        return Vector._wrap(self._elements.copy())

    def to_list(self) -> list[Any]:
        return self._elements.tolist()

    def to_numpy(self) -> NDArray[Any]:
        return self._elements.copy()

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray[Any]:
        return np.array(self._elements, dtype=dtype)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._elements, other._elements))

    def allclose(self, other: Vector, rtol: float | None = None, atol: float | None = None) -> bool:
        """
        Approximate equality.

        Tolerances default to the looser tier of the two element types.
        Vectors of different sizes are never close.
        """
        if self.size != other.size:
            return False
        tier = max(select_tolerance(self.dtype), select_tolerance(other.dtype), key=lambda t: t.rtol)
        return bool(np.allclose(
            self._elements,
            other._elements,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.add(other)
        if _is_scalar(other):
            return self.increase(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Vector:
        if _is_scalar(other):
            return self.increase(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return self.subtract(other)
        if _is_scalar(other):
            return self.decrease(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Vector:
        if _is_scalar(other):
            return Vector._wrap(self.scalar_type.coerce(other) - self._elements)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if _is_scalar(other):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Vector({self.to_list()}, dtype={self.dtype.name})"
