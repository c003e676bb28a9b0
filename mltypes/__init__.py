"""
mltypes: generic vectors, matrices and activation functions.

A small, correctness-focused linear algebra library for building neural
networks from first principles. Containers are generic over numeric
element types (float32/64, signed and unsigned integers) and every
operation validates operand shapes before computing.

Submodules:
    linalg: Vector and Matrix with dimension-checked arithmetic
    activation: Sigmoid, ReLu and Tanh activation functions
    core: Exceptions, scalar types, validation and configuration
"""

__version__ = "0.1.0"

from mltypes.core import config
from mltypes.core.exceptions import (
    MLTypesError,
    ValidationError,
    DimensionMismatch,
    IndexOutOfRange,
    ScalarTypeMismatch,
)
from mltypes.core.result import Checked
from mltypes.linalg import Vector, Matrix
from mltypes import linalg
from mltypes import activation
from mltypes.activation import Sigmoid, ReLu, Tanh

__all__ = [
    "__version__",
    "config",
    "linalg",
    "activation",
    "Vector",
    "Matrix",
    "Checked",
    "Sigmoid",
    "ReLu",
    "Tanh",
    "MLTypesError",
    "ValidationError",
    "DimensionMismatch",
    "IndexOutOfRange",
    "ScalarTypeMismatch",
]
