"""linsgd: Linear Regression by Mini-batch Stochastic Gradient Descent
===================================================================

Fits ``theta = [bias, w_1, ..., w_d]`` of a linear model by a fixed number of
gradient steps on the mean-squared-error objective, each step using a
randomly drawn, duplicate-free batch of observations.

Quick Start:
    >>> import numpy as np
    >>> from linsgd import StochasticGradientDescent
    >>>
    >>> X = np.array([[1.0], [2.0], [3.0], [4.0]])
    >>> y = np.array([3.0, 5.0, 7.0, 9.0])
    >>> sgd = StochasticGradientDescent(learning_rate=0.05, iterations=2000,
    ...                                 observations_in_each_batch=4, seed=42)
    >>> theta = sgd.optimize(X, y)   # approximately [1.0, 2.0]

Components:
- ``linsgd.optimization``: optimizer loop, batch sampler, result container
- ``linsgd.core``: augmented design matrix, MSE gradient and cost, gradient checks
- ``linsgd.learners``: indexed learner and linear prediction model
- ``linsgd.crossvalidation``: splitters, metrics, bias-variance learning curves
- ``linsgd.config``: YAML/JSON configuration
"""

__version__ = "1.0.0"

from linsgd.core import (  # noqa: E402
    DimensionMismatch,
    InvalidConfiguration,
    LinsgdError,
    augment,
    mse_cost,
    mse_gradient,
)
from linsgd.learners import LinearRegressionModel, SGDLinearRegressionLearner  # noqa: E402
from linsgd.optimization import SGDResult, StochasticGradientDescent  # noqa: E402

__all__ = [
    "__version__",
    "StochasticGradientDescent",
    "SGDResult",
    "LinearRegressionModel",
    "SGDLinearRegressionLearner",
    "augment",
    "mse_gradient",
    "mse_cost",
    "LinsgdError",
    "DimensionMismatch",
    "InvalidConfiguration",
]
