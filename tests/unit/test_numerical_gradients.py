"""Tests for finite-difference gradients and the analytic gradient check."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from linsgd.core.exceptions import DimensionMismatch
from linsgd.core.numerical_gradients import (
    DifferentiationMethod,
    GradientCheckResult,
    RELATIVE_ERROR_FLOOR,
    check_gradient,
    numerical_gradient,
)


class TestNumericalGradient:
    def test_sum_of_squares(self):
        x = np.array([1.0, -2.0, 0.5])
        gradient = numerical_gradient(lambda v: float(np.sum(v**2)), x)
        assert_allclose(gradient, 2 * x, atol=1e-8)

    def test_richardson_on_smooth_function(self):
        x = np.array([0.3, 1.1])
        gradient = numerical_gradient(
            lambda v: float(np.sum(np.sin(v))), x, method=DifferentiationMethod.RICHARDSON
        )
        assert_allclose(gradient, np.cos(x), atol=1e-8)

    def test_explicit_step_sizes(self):
        x = np.array([2.0, 3.0])
        gradient = numerical_gradient(lambda v: float(v[0] * v[1]), x, step_sizes=np.array([1e-4, 1e-4]))
        assert_allclose(gradient, [3.0, 2.0], atol=1e-8)

    def test_step_size_length_mismatch(self):
        with pytest.raises(DimensionMismatch):
            numerical_gradient(lambda v: 0.0, np.zeros(3), step_sizes=np.ones(2))

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown differentiation method"):
            numerical_gradient(lambda v: 0.0, np.zeros(2), method="forward")


class TestCheckGradient:
    def test_least_squares_gradient_agrees(self, augmented_batch):
        theta, X, y = augmented_batch
        result = check_gradient(theta, X, y)

        assert isinstance(result, GradientCheckResult)
        assert result.method == DifferentiationMethod.CENTRAL
        assert result.max_relative_error < 1e-6
        assert result.function_calls == 2 * theta.shape[0]
        assert result.warnings == []

    def test_richardson_check(self, augmented_batch):
        theta, X, y = augmented_batch
        result = check_gradient(theta, X, y, method=DifferentiationMethod.RICHARDSON)
        assert result.max_relative_error < 1e-6
        assert_allclose(result.numerical, result.analytic, atol=1e-6)

    def test_at_exact_solution(self, line_data):
        X = np.column_stack([np.ones(4), line_data.observations])
        result = check_gradient(line_data.true_parameters, X, line_data.targets)
        assert_allclose(result.analytic, np.zeros(2), atol=1e-12)
        assert result.max_relative_error < 1e-6

    def test_error_scale_has_floor_of_one(self, augmented_batch):
        theta, X, y = augmented_batch
        result = check_gradient(theta, X, y)

        scale = np.maximum(np.maximum(np.abs(result.analytic), np.abs(result.numerical)), RELATIVE_ERROR_FLOOR)
        assert RELATIVE_ERROR_FLOOR == 1.0
        assert result.max_relative_error == pytest.approx(
            np.max(np.abs(result.analytic - result.numerical) / scale)
        )
