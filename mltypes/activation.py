"""
Activation functions for neural-network layers built on mltypes.

Each activation is a stateless, immutable object with apply(x) and
derivative(x). Both accept a Python/numpy scalar (returning a Python
float) or a numpy array (returning an array of the same shape).
Derivatives take the raw input x, not the activation's output.

The Vector/Matrix core does not depend on this module; use activate()
to run an activation over a floating-point container.

Usage:
    from mltypes.activation import Sigmoid, get_activation, activate

    Sigmoid().apply(0.0)                 # 0.5
    activate(layer_output, 'relu')       # Vector or Matrix
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

from mltypes.core.exceptions import ValidationError
from mltypes.linalg.matrix import Matrix
from mltypes.linalg.vector import Vector

C = TypeVar('C', Vector, Matrix)


@runtime_checkable
class ActivationFunction(Protocol):
    """Scalar nonlinearity with its derivative."""

    def apply(self, x: Any) -> Any:
        """Value of the activation at x."""
        ...

    def derivative(self, x: Any) -> Any:
        """Derivative of the activation at input x."""
        ...


def _as_output(value: Any) -> Any:
    if np.ndim(value) == 0:
        return float(value)
    return value


@dataclass(frozen=True)
class Sigmoid:
    """Logistic sigmoid, 1 / (1 + exp(-x))."""

    def apply(self, x: Any) -> Any:
        return _as_output(1.0 / (1.0 + np.exp(-np.asarray(x, dtype=np.float64))))

    def derivative(self, x: Any) -> Any:
        s = self.apply(x)
        return _as_output(s * (1.0 - s))


@dataclass(frozen=True)
class ReLu:
    """Rectified linear unit, max(0, x)."""

    def apply(self, x: Any) -> Any:
        return _as_output(np.maximum(0.0, np.asarray(x, dtype=np.float64)))

    def derivative(self, x: Any) -> Any:
        # Taken as 0 at x == 0.
        return _as_output(np.where(np.asarray(x, dtype=np.float64) > 0, 1.0, 0.0))


@dataclass(frozen=True)
class Tanh:
    """Hyperbolic tangent."""

    def apply(self, x: Any) -> Any:
        return _as_output(np.tanh(np.asarray(x, dtype=np.float64)))

    def derivative(self, x: Any) -> Any:
        t = np.tanh(np.asarray(x, dtype=np.float64))
        return _as_output(1.0 - t * t)


ACTIVATIONS: dict[str, ActivationFunction] = {
    'sigmoid': Sigmoid(),
    'relu': ReLu(),
    'tanh': Tanh(),
}


def get_activation(name: str | ActivationFunction) -> ActivationFunction:
    """
    Look up an activation by name ('sigmoid', 'relu', 'tanh').

    An ActivationFunction instance is returned unchanged.

    Raises:
        ValidationError: If the name is unknown
    """
    if not isinstance(name, str):
        if isinstance(name, ActivationFunction):
            return name
        raise ValidationError(f"not an activation function: {name!r}")
    try:
        return ACTIVATIONS[name.lower()]
    except KeyError:
        raise ValidationError(
            f"unknown activation {name!r}; choose from {sorted(ACTIVATIONS)}"
        ) from None


def _check_floating(container: Vector | Matrix) -> None:
    if container.scalar_type.is_integer:
        raise ValidationError(
            f"activations need a floating-point container, got {container.dtype.name}; "
            f"convert with astype('float64') first"
        )


def activate(container: C, activation: str | ActivationFunction) -> C:
    """Apply an activation to every element of a floating Vector or Matrix."""
    fn = get_activation(activation)
    _check_floating(container)
    return container.map(fn.apply)


def activate_derivative(container: C, activation: str | ActivationFunction) -> C:
    """Evaluate an activation's derivative at every element of a floating container."""
    fn = get_activation(activation)
    _check_floating(container)
    return container.map(fn.derivative)


__all__ = [
    'ActivationFunction',
    'Sigmoid',
    'ReLu',
    'Tanh',
    'ACTIVATIONS',
    'get_activation',
    'activate',
    'activate_derivative',
]
