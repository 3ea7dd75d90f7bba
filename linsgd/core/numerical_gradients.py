"""Finite-difference gradients for verifying analytic derivatives
=============================================================

NumPy-based numerical differentiation used to check the closed-form
least-squares gradient. Two estimators are provided:

- central differences: O(h^2) truncation error, two evaluations per parameter
- Richardson extrapolation of central differences with halving step sizes

For the quadratic least-squares cost the central difference is exact up to
round-off, which makes it a sharp check of ``mse_gradient``.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch
from linsgd.core.objective import mse_cost, mse_gradient
from linsgd.utils.logging import get_logger

logger = get_logger(__name__)

# Numerical constants for stability
EPS = np.finfo(float).eps  # Machine epsilon (~2.22e-16)
CBRT_EPS = EPS ** (1 / 3)  # Cube root of machine epsilon (~6.06e-6)
RELATIVE_ERROR_FLOOR = 1.0  # Components below this magnitude are compared in absolute terms


class DifferentiationMethod:
    """Enumeration of available differentiation methods."""

    CENTRAL = "central"
    RICHARDSON = "richardson"


@dataclass
class GradientCheckResult:
    """Comparison of an analytic gradient against a numerical estimate."""

    analytic: np.ndarray
    numerical: np.ndarray
    max_relative_error: float
    method: str
    function_calls: int = 0
    warnings: list[str] = field(default_factory=list)


def _default_steps(x: np.ndarray) -> np.ndarray:
    # Step scaled to parameter magnitude, balancing truncation and round-off
    return CBRT_EPS * np.maximum(np.abs(x), 1.0)


def _central_difference_single(
    func: Callable,
    x: np.ndarray,
    index: int,
    h: float,
) -> float:
    """Compute central difference for single parameter."""
    x_plus = x.copy()
    x_minus = x.copy()
    x_plus[index] += h
    x_minus[index] -= h

    return (func(x_plus) - func(x_minus)) / (2 * h)


def _richardson_extrapolation(
    func: Callable,
    x: np.ndarray,
    index: int,
    h: float,
    terms: int = 4,
) -> tuple[float, float]:
    """Richardson extrapolation for higher-order accuracy.

    Computes derivative with progressively smaller step sizes and
    extrapolates to h=0 limit to remove leading error terms.

    Returns:
        (derivative_estimate, error_estimate)
    """
    derivatives = [
        _central_difference_single(func, x, index, h / (2**k)) for k in range(terms)
    ]

    R = np.array(derivatives)
    for i in range(1, terms):
        for j in range(terms - i):
            R[j] = R[j + 1] + (R[j + 1] - R[j]) / (4**i - 1)

    if terms > 1:
        error_estimate = float(np.abs(derivatives[1] - derivatives[0]))
    else:
        error_estimate = np.inf

    return float(R[0]), error_estimate


def numerical_gradient(
    func: Callable[[np.ndarray], float],
    x: np.ndarray,
    method: str = DifferentiationMethod.CENTRAL,
    step_sizes: np.ndarray | None = None,
    richardson_terms: int = 4,
) -> np.ndarray:
    """Numerically differentiate a scalar function of a parameter vector.

    Args:
        func: Scalar function ``f(x)``
        x: Point at which to differentiate
        method: ``"central"`` or ``"richardson"``
        step_sizes: Per-parameter steps (auto-scaled when None)
        richardson_terms: Number of step halvings for Richardson extrapolation

    Returns:
        Gradient estimate with the same shape as ``x``
    """
    x = linalg.as_vector(x, "x")
    h = _default_steps(x) if step_sizes is None else linalg.as_vector(step_sizes, "step_sizes")
    if h.shape != x.shape:
        raise DimensionMismatch(
            "Step sizes must match parameter count", expected=x.shape, actual=h.shape
        )

    gradient = np.zeros_like(x)
    for i in range(x.shape[0]):
        if method == DifferentiationMethod.CENTRAL:
            gradient[i] = _central_difference_single(func, x, i, h[i])
        elif method == DifferentiationMethod.RICHARDSON:
            gradient[i], _ = _richardson_extrapolation(func, x, i, h[i], richardson_terms)
        else:
            raise ValueError(f"Unknown differentiation method: {method}")

    return gradient


def check_gradient(
    theta: np.ndarray,
    X: np.ndarray,
    y: np.ndarray,
    method: str = DifferentiationMethod.CENTRAL,
) -> GradientCheckResult:
    """Compare ``mse_gradient`` with a numerical gradient of ``mse_cost``.

    The error of each component is divided by
    ``max(|analytic|, |numerical|, RELATIVE_ERROR_FLOOR)``. Large components
    are therefore compared in relative terms and components with magnitude
    below 1.0 in absolute terms.
    """
    theta = linalg.as_vector(theta, "theta")
    X = linalg.as_matrix(X, "X")
    y = linalg.as_vector(y, "y")

    analytic = mse_gradient(theta, X, y)

    calls = 0

    def cost(params: np.ndarray) -> float:
        nonlocal calls
        calls += 1
        return mse_cost(params, X, y)

    numerical = numerical_gradient(cost, theta, method=method)

    scale = np.maximum(np.maximum(np.abs(analytic), np.abs(numerical)), RELATIVE_ERROR_FLOOR)
    max_relative_error = float(np.max(np.abs(analytic - numerical) / scale))

    result = GradientCheckResult(
        analytic=analytic,
        numerical=numerical,
        max_relative_error=max_relative_error,
        method=method,
        function_calls=calls,
    )
    if not np.isfinite(max_relative_error):
        result.warnings.append("Gradient check produced non-finite values")
        logger.warning(result.warnings[-1])

    logger.debug(
        f"Gradient check ({method}): max relative error {max_relative_error:.3e} "
        f"with {calls} function evaluations"
    )
    return result
