"""
Tests for the randomizable numeric scalar capability.

Validates:
    - Registry lookup by name, dtype, type and ScalarType
    - zero() is the additive identity in the right dtype
    - coerce(): lossless for integers, rounding for floats, rejects non-reals
    - random(): closed-range bounds, dtype, reproducibility, empty range
    - Every ScalarType satisfies the RandomizableNumeric protocol
"""

import math
from fractions import Fraction

import numpy as np
import pytest

from mltypes.core.exceptions import ScalarTypeMismatch, ValidationError
from mltypes.core.protocols import RandomizableNumeric
from mltypes.core.scalars import (
    FLOAT32,
    FLOAT64,
    INT8,
    INT64,
    SUPPORTED_DTYPES,
    UINT8,
    scalar_type,
)


class TestRegistry:

    @pytest.mark.parametrize("name", SUPPORTED_DTYPES)
    def test_lookup_by_name_round_trips(self, name):
        st = scalar_type(name)
        assert st.name == name
        assert st.dtype == np.dtype(name)

    def test_lookup_by_type(self):
        assert scalar_type(np.float32) is FLOAT32
        assert scalar_type(float) is FLOAT64

    def test_lookup_passes_scalar_type_through(self):
        assert scalar_type(INT8) is INT8

    def test_unsupported(self):
        with pytest.raises(ValidationError, match="unsupported element type 'complex128'"):
            scalar_type(np.complex128)

    def test_not_a_dtype(self):
        with pytest.raises(ValidationError, match="not a dtype"):
            scalar_type("definitely-not-a-dtype")

    @pytest.mark.parametrize("name", SUPPORTED_DTYPES)
    def test_satisfies_protocol(self, name):
        assert isinstance(scalar_type(name), RandomizableNumeric)


class TestZero:

    @pytest.mark.parametrize("name", SUPPORTED_DTYPES)
    def test_zero_is_identity(self, name):
        st = scalar_type(name)
        zero = st.zero()
        assert zero == 0
        assert np.asarray(zero).dtype == st.dtype
        one = st.coerce(1)
        assert one + zero == one


class TestCoerce:

    def test_float_into_float32_rounds(self):
        value = FLOAT32.coerce(0.1)
        assert isinstance(value, np.float32)
        assert value == np.float32(0.1)

    def test_integral_float_into_int(self):
        value = INT64.coerce(3.0)
        assert isinstance(value, np.int64)
        assert value == 3

    def test_fraction_into_int(self):
        assert INT8.coerce(Fraction(10, 2)) == 5

    def test_fractional_into_int_rejected(self):
        with pytest.raises(ScalarTypeMismatch, match="not representable as int64"):
            INT64.coerce(0.5)

    def test_nan_into_int_rejected(self):
        with pytest.raises(ScalarTypeMismatch):
            INT64.coerce(math.nan)

    def test_int_out_of_range(self):
        with pytest.raises(ScalarTypeMismatch, match=r"outside the range of int8 \[-128, 127\]"):
            INT8.coerce(200)

    def test_negative_into_unsigned(self):
        with pytest.raises(ScalarTypeMismatch):
            UINT8.coerce(-1)

    def test_bool_rejected(self):
        with pytest.raises(ScalarTypeMismatch, match="got bool"):
            FLOAT64.coerce(True)

    def test_string_rejected(self):
        with pytest.raises(ScalarTypeMismatch, match="got str"):
            FLOAT64.coerce("1.0")

    def test_complex_rejected(self):
        with pytest.raises(ScalarTypeMismatch):
            FLOAT64.coerce(1 + 0j)

    def test_huge_int_into_float_rejected(self):
        with pytest.raises(ScalarTypeMismatch, match="outside the range of float64"):
            FLOAT64.coerce(10**400)


class TestRandom:

    def test_integer_bounds_inclusive(self, rng):
        values = INT64.random(0, 2, size=2000, rng=rng)
        assert values.dtype == np.int64
        assert set(np.unique(values).tolist()) == {0, 1, 2}

    def test_float_within_range(self, rng):
        values = FLOAT64.random(-1.0, 1.0, size=1000, rng=rng)
        assert values.dtype == np.float64
        assert values.min() >= -1.0
        assert values.max() <= 1.0

    def test_float32_within_range(self, rng):
        values = FLOAT32.random(0.0, 1.0, size=(10, 10), rng=rng)
        assert values.dtype == np.float32
        assert values.shape == (10, 10)
        assert values.min() >= 0.0
        assert values.max() <= 1.0

    def test_degenerate_range(self, rng):
        values = UINT8.random(7, 7, size=5, rng=rng)
        np.testing.assert_array_equal(values, [7, 7, 7, 7, 7])

    def test_elements_are_independent(self, rng):
        values = FLOAT64.random(0.0, 1.0, size=50, rng=rng)
        assert len(np.unique(values)) > 1

    def test_reproducible_with_same_seed(self):
        a = FLOAT64.random(0, 1, size=5, rng=np.random.default_rng(7))
        b = FLOAT64.random(0, 1, size=5, rng=np.random.default_rng(7))
        np.testing.assert_array_equal(a, b)

    def test_empty_range_rejected(self, rng):
        with pytest.raises(ValidationError, match="random range is empty"):
            INT64.random(5, 1, size=3, rng=rng)

    def test_bounds_must_fit_type(self, rng):
        with pytest.raises(ScalarTypeMismatch):
            UINT8.random(-5, 5, size=3, rng=rng)

    def test_uses_shared_generator_by_default(self):
        values = INT64.random(0, 10, size=4)
        assert values.shape == (4,)
