"""Least-squares objective for linear regression.

Notation: ``X`` is an augmented design matrix of shape ``(m, d + 1)`` whose
first column is the constant 1.0, ``theta`` holds ``[bias, w_1, ..., w_d]``
and ``y`` is the target vector of length ``m``.

    J(theta)      = 1/(2m) * sum((X theta - y)^2)
    grad J(theta) = 1/m * X^T (X theta - y)
"""

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch

BIAS_VALUE = 1.0


def augment(matrix: np.ndarray) -> np.ndarray:
    """Prepend a constant bias column to ``matrix``.

    Parameters
    ----------
    matrix : np.ndarray
        Observation matrix of shape ``(n, d)``

    Returns
    -------
    np.ndarray
        Augmented matrix of shape ``(n, d + 1)`` with column 0 equal to 1.0
    """
    matrix = linalg.as_matrix(matrix, "observations")
    bias = np.full(linalg.num_rows(matrix), BIAS_VALUE)
    return linalg.combine_columns(bias, matrix)


def _check_batch(theta: np.ndarray, X: np.ndarray, y: np.ndarray) -> None:
    if linalg.num_rows(X) != y.shape[0]:
        raise DimensionMismatch(
            "Batch rows must match number of targets",
            expected=linalg.num_rows(X),
            actual=y.shape[0],
        )
    if linalg.num_columns(X) != theta.shape[0]:
        raise DimensionMismatch(
            "Parameter vector length must match augmented columns",
            expected=linalg.num_columns(X),
            actual=theta.shape[0],
        )
    if linalg.num_rows(X) == 0:
        raise DimensionMismatch("Batch must contain at least one row", expected=">= 1", actual=0)


def residuals(theta: np.ndarray, X: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Prediction errors ``X theta - y``."""
    _check_batch(theta, X, y)
    return linalg.subtract(linalg.matvec(X, theta), y)


def mse_gradient(theta: np.ndarray, X: np.ndarray, y: np.ndarray) -> np.ndarray:
    """Gradient of the mean-squared-error objective over a batch.

    Pure function: ``(1/m) * X^T (X theta - y)``.
    """
    error = residuals(theta, X, y)
    m = linalg.num_rows(X)
    return linalg.scale(linalg.matvec(linalg.transpose(X), error), 1.0 / m)


def mse_cost(theta: np.ndarray, X: np.ndarray, y: np.ndarray) -> float:
    """Mean-squared-error cost ``1/(2m) * sum((X theta - y)^2)``."""
    error = residuals(theta, X, y)
    m = linalg.num_rows(X)
    return float(np.dot(error, error) / (2.0 * m))
