"""
Core protocols for mltypes.

These define structural interfaces that element types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
capability can be provided by any object with the right members, without
inheriting from a library base class.

Design Principles:
    - Minimal contracts: prescribe only what Vector and Matrix actually use
    - One capability bundle instead of a hierarchy of small protocols
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class RandomizableNumeric(Protocol):
    """
    The randomizable numeric scalar capability.

    Bundles everything Vector[T] and Matrix[T] need from their element
    type T: a concrete numpy dtype whose values are ordered and closed
    under + - *, an additive identity, bounded random generation, and a
    lossless conversion of incoming scalars.

    Implementations live in mltypes.core.scalars, one instance per
    concrete type (float32, float64, int8 ... uint64).
    """

    @property
    def name(self) -> str:
        """Short type name, e.g. 'float64'."""
        ...

    @property
    def dtype(self) -> np.dtype:
        """The numpy dtype elements are stored in."""
        ...

    def zero(self) -> Any:
        """Additive identity as a scalar of this type."""
        ...

    def random(
        self,
        low: Any,
        high: Any,
        size: int | tuple[int, ...],
        rng: np.random.Generator | None = None,
    ) -> NDArray[Any]:
        """
        Draw values within the closed range [low, high].

        Args:
            low: Inclusive lower bound
            high: Inclusive upper bound
            size: Output shape
            rng: Generator to draw from; the shared default if None

        Returns:
            Array of the requested shape in this type's dtype
        """
        ...

    def coerce(self, value: Any) -> Any:
        """Convert a scalar to this type, refusing lossy conversions."""
        ...
