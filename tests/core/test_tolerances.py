"""
Tests for tolerance tier selection.
"""

import numpy as np
import pytest

from mltypes.core.tolerances import EXACT, FP32, FP64, select_tolerance


class TestSelectTolerance:

    def test_float64(self):
        assert select_tolerance(np.float64) is FP64

    def test_float32(self):
        assert select_tolerance('float32') is FP32

    @pytest.mark.parametrize("dtype", ['int8', 'int64', 'uint32'])
    def test_integers_exact(self, dtype):
        tier = select_tolerance(dtype)
        assert tier is EXACT
        assert tier.rtol == 0.0
        assert tier.atol == 0.0

    def test_fp32_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.atol > FP64.atol
