"""
Value-or-error envelope for the checked API.

Checked wraps the outcome of an operation that may fail a precondition.
It lets callers branch on failure without try/except, while the raising
API stays the default everywhere else.

Design decisions:
    - Generic over the value type T for type safety
    - Immutable (frozen=True); an outcome never changes after creation
    - Exactly one of value / error is meaningful, discriminated by ok
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from mltypes.core.exceptions import DimensionMismatch

T = TypeVar('T')
D = TypeVar('D')


@dataclass(frozen=True)
class Checked(Generic[T]):
    """
    Immutable outcome of a checked operation.

    Type Parameters:
        T: The value type produced on success

    Attributes:
        value: The operation's result, or None on failure
        error: The precondition violation, or None on success

    Examples:
        >>> outcome = try_add(a, b)
        >>> if outcome.ok:
        ...     use(outcome.value)
        ... else:
        ...     print(outcome.error.expected, outcome.error.actual)
    """
    value: T | None = None
    error: DimensionMismatch | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: D) -> T | D:
        """Return the value, or default on failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> Checked[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: DimensionMismatch) -> Checked[T]:
        return cls(error=error)


def attempt(fn: Callable[..., T], *args, **kwargs) -> Checked[T]:
    """
    Run fn and capture a DimensionMismatch (or IndexOutOfRange) as a value.

    Any other exception propagates unchanged.
    """
    try:
        return Checked.success(fn(*args, **kwargs))
    except DimensionMismatch as e:
        return Checked.failure(e)
