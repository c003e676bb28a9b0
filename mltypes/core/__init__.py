"""
Core infrastructure for mltypes.

This module provides shared abstractions and utilities used by the
linear algebra and activation submodules.

Key components:
    protocols: RandomizableNumeric capability protocol
    scalars: Concrete element types (float32 ... uint64)
    exceptions: Exception hierarchy
    validation: Input and dimension validators
    config: Runtime options and the shared random generator
    tolerances: Tolerance tiers for approximate comparison
    result: Checked value-or-error envelope
"""

from mltypes.core.protocols import RandomizableNumeric
from mltypes.core.scalars import ScalarType, scalar_type, SUPPORTED_DTYPES
from mltypes.core.result import Checked
from mltypes.core.exceptions import (
    MLTypesError,
    ValidationError,
    DimensionMismatch,
    IndexOutOfRange,
    ScalarTypeMismatch,
)

__all__ = [
    # Protocols
    "RandomizableNumeric",
    # Scalars
    "ScalarType",
    "scalar_type",
    "SUPPORTED_DTYPES",
    # Result
    "Checked",
    # Exceptions
    "MLTypesError",
    "ValidationError",
    "DimensionMismatch",
    "IndexOutOfRange",
    "ScalarTypeMismatch",
]
