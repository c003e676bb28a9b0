"""
Tests for the Checked value-or-error envelope.
"""

import dataclasses

import pytest

from mltypes.core.exceptions import DimensionMismatch, IndexOutOfRange
from mltypes.core.result import Checked, attempt


class TestChecked:

    def test_success(self):
        outcome = Checked.success(42)
        assert outcome.ok
        assert outcome.value == 42
        assert outcome.error is None
        assert outcome.unwrap() == 42
        assert outcome.unwrap_or(0) == 42

    def test_failure(self):
        err = DimensionMismatch("bad", operation="add")
        outcome = Checked.failure(err)
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.error is err
        assert outcome.unwrap_or("fallback") == "fallback"

    def test_unwrap_reraises(self):
        outcome = Checked.failure(IndexOutOfRange("far", index=9, bound=3))
        with pytest.raises(IndexOutOfRange):
            outcome.unwrap()

    def test_immutable(self):
        outcome = Checked.success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.value = 2

    def test_success_with_none_value_is_ok(self):
        assert Checked.success(None).ok


class TestAttempt:

    def test_captures_dimension_mismatch(self):
        def fail():
            raise DimensionMismatch("nope")

        outcome = attempt(fail)
        assert not outcome.ok
        assert isinstance(outcome.error, DimensionMismatch)

    def test_passes_arguments(self):
        outcome = attempt(lambda a, b=0: a + b, 1, b=2)
        assert outcome.unwrap() == 3

    def test_other_errors_propagate(self):
        def fail():
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            attempt(fail)
