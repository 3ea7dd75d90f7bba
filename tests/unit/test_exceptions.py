"""Tests for the linsgd exception hierarchy."""

import pytest

from linsgd.core.exceptions import DimensionMismatch, InvalidConfiguration, LinsgdError


class TestLinsgdError:
    def test_message_without_context(self):
        assert str(LinsgdError("plain")) == "plain"

    def test_message_with_context(self):
        error = LinsgdError("failed", error_context={"rows": 3})
        assert str(error) == "failed (context: rows=3)"


class TestDimensionMismatch:
    def test_records_shapes(self):
        error = DimensionMismatch("bad shape", expected=5, actual=4)
        assert error.expected == 5
        assert error.actual == 4
        assert error.error_context == {"expected": 5, "actual": 4}
        assert "expected=5" in str(error)

    def test_hierarchy(self):
        error = DimensionMismatch("bad shape")
        assert isinstance(error, LinsgdError)
        assert isinstance(error, ValueError)


class TestInvalidConfiguration:
    def test_records_parameter(self):
        error = InvalidConfiguration("bad rate", parameter="learning_rate", value=-1.0)
        assert error.parameter == "learning_rate"
        assert error.value == -1.0
        assert "parameter=learning_rate" in str(error)

    def test_zero_value_kept_in_context(self):
        error = InvalidConfiguration("bad batch", parameter="batch_size", value=0)
        assert error.error_context["value"] == 0

    def test_caught_as_base_class(self):
        with pytest.raises(LinsgdError):
            raise InvalidConfiguration("bad")
