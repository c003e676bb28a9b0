"""
Concrete scalar types for Vector and Matrix elements.

Each supported element type is one ScalarType instance registered on its
own, rather than a subclass in a type hierarchy. All of them satisfy the
RandomizableNumeric protocol.

Supported: float32, float64, int8, int16, int32, int64, uint8, uint16,
uint32, uint64. Complex and bool dtypes are excluded because they are not
ordered numeric scalars.

Usage:
    from mltypes.core.scalars import FLOAT64, scalar_type

    st = scalar_type('int32')
    st.zero()                      # np.int32(0)
    st.random(-5, 5, size=3)       # three ints in [-5, 5]
    st.coerce(2.0)                 # np.int32(2)
    st.coerce(2.5)                 # raises ScalarTypeMismatch
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from mltypes.core import config
from mltypes.core.exceptions import ScalarTypeMismatch, ValidationError


@dataclass(frozen=True)
class ScalarType:
    """
    Element type descriptor implementing the randomizable numeric capability.

    Attributes:
        name: Short type name, e.g. 'float64'
        dtype: numpy dtype used for storage and arithmetic
    """
    name: str
    dtype: np.dtype

    @property
    def is_integer(self) -> bool:
        return bool(np.issubdtype(self.dtype, np.integer))

    def zero(self) -> Any:
        return self.dtype.type(0)

    def coerce(self, value: Any) -> Any:
        """
        Convert a scalar to this type.

        Integer targets accept integral values inside the type's range
        only. Floating targets accept any real number and round to the
        nearest representable value.

        Raises:
            ScalarTypeMismatch: If value is not a real number, or the
                conversion would change it
        """
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise ScalarTypeMismatch(
                f"expected a real number for {self.name}, got {type(value).__name__}",
                expected=self.name,
                actual=type(value).__name__,
            )

        if not self.is_integer:
            try:
                return self.dtype.type(value)
            except OverflowError as e:
                raise ScalarTypeMismatch(
                    f"{value!r} is outside the range of {self.name}",
                    expected=self.name,
                    actual=value,
                ) from e

        if isinstance(value, numbers.Integral):
            as_int = int(value)
        else:
            as_float = float(value)
            if not as_float.is_integer():
                raise ScalarTypeMismatch(
                    f"{value!r} is not representable as {self.name}",
                    expected=self.name,
                    actual=value,
                )
            as_int = int(as_float)

        info = np.iinfo(self.dtype)
        if not info.min <= as_int <= info.max:
            raise ScalarTypeMismatch(
                f"{value!r} is outside the range of {self.name} "
                f"[{info.min}, {info.max}]",
                expected=self.name,
                actual=value,
            )
        return self.dtype.type(as_int)

    def random(
        self,
        low: Any,
        high: Any,
        size: int | tuple[int, ...],
        rng: np.random.Generator | None = None,
    ) -> NDArray[Any]:
        """
        Draw independent values within the closed range [low, high].

        Integers are drawn uniformly with both bounds attainable. Floats
        are drawn uniformly in double precision and cast to this dtype;
        the upper bound is reachable only through rounding.

        Raises:
            ValidationError: If low > high
            ScalarTypeMismatch: If a bound is not representable
        """
        lo = self.coerce(low)
        hi = self.coerce(high)
        if lo > hi:
            raise ValidationError(
                f"random range is empty: low={lo!r} > high={hi!r}"
            )

        if rng is None:
            rng = config.default_rng()

        if self.is_integer:
            return rng.integers(lo, hi, size=size, dtype=self.dtype, endpoint=True)
        draws = rng.uniform(float(lo), float(hi), size=size)
        return np.asarray(draws).astype(self.dtype)

    def __repr__(self) -> str:
        return f"ScalarType({self.name})"


FLOAT32 = ScalarType('float32', np.dtype(np.float32))
FLOAT64 = ScalarType('float64', np.dtype(np.float64))
INT8 = ScalarType('int8', np.dtype(np.int8))
INT16 = ScalarType('int16', np.dtype(np.int16))
INT32 = ScalarType('int32', np.dtype(np.int32))
INT64 = ScalarType('int64', np.dtype(np.int64))
UINT8 = ScalarType('uint8', np.dtype(np.uint8))
UINT16 = ScalarType('uint16', np.dtype(np.uint16))
UINT32 = ScalarType('uint32', np.dtype(np.uint32))
UINT64 = ScalarType('uint64', np.dtype(np.uint64))

_REGISTRY: dict[np.dtype, ScalarType] = {
    st.dtype: st
    for st in (
        FLOAT32, FLOAT64,
        INT8, INT16, INT32, INT64,
        UINT8, UINT16, UINT32, UINT64,
    )
}

SUPPORTED_DTYPES = tuple(st.name for st in _REGISTRY.values())


def scalar_type(dtype: DTypeLike | ScalarType) -> ScalarType:
    """
    Look up the ScalarType for a dtype-like value.

    Args:
        dtype: A ScalarType, numpy dtype, Python/numpy type, or dtype name

    Returns:
        The registered ScalarType

    Raises:
        ValidationError: If the dtype is not a supported element type
    """
    if isinstance(dtype, ScalarType):
        return dtype
    try:
        key = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"not a dtype: {dtype!r}") from e

    try:
        return _REGISTRY[key]
    except KeyError:
        raise ValidationError(
            f"unsupported element type {key.name!r}; "
            f"supported: {', '.join(SUPPORTED_DTYPES)}"
        ) from None


__all__ = [
    'ScalarType',
    'FLOAT32', 'FLOAT64',
    'INT8', 'INT16', 'INT32', 'INT64',
    'UINT8', 'UINT16', 'UINT32', 'UINT64',
    'SUPPORTED_DTYPES',
    'scalar_type',
]
