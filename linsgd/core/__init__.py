"""Core numerics for linsgd: shape-checked linear algebra and the least-squares objective."""

from linsgd.core.exceptions import DimensionMismatch, InvalidConfiguration, LinsgdError
from linsgd.core.numerical_gradients import (
    DifferentiationMethod,
    GradientCheckResult,
    check_gradient,
    numerical_gradient,
)
from linsgd.core.objective import augment, mse_cost, mse_gradient, residuals

__all__ = [
    # Exceptions
    "LinsgdError",
    "DimensionMismatch",
    "InvalidConfiguration",
    # Objective
    "augment",
    "residuals",
    "mse_gradient",
    "mse_cost",
    # Gradient verification
    "DifferentiationMethod",
    "GradientCheckResult",
    "numerical_gradient",
    "check_gradient",
]
