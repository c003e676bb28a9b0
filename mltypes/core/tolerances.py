"""
Tolerance tiers for approximate comparison.

Defines precision expectations per element type:
- float64: tight, a few ulps of accumulated rounding
- float32: relaxed for single-precision arithmetic
- integers: exact

Used by Vector.allclose / Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, reordered accumulation',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, reordered accumulation',
)

EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer arithmetic, no rounding',
)


def select_tolerance(dtype: DTypeLike) -> ToleranceTier:
    """Select the tolerance tier for an element type."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        return EXACT
    if dtype == np.float32:
        return FP32
    return FP64
