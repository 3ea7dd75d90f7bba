"""Optimization for linsgd
=======================

Fixed-iteration mini-batch stochastic gradient descent for linear
regression, its batch sampler and result container.
"""

from linsgd.optimization.result import SGDResult
from linsgd.optimization.sampling import PermutationBatchSampler
from linsgd.optimization.sgd import (
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
    DEFAULT_OBSERVATIONS_IN_EACH_BATCH,
    DEFAULT_SEED,
    StochasticGradientDescent,
)

__all__ = [
    "StochasticGradientDescent",
    "PermutationBatchSampler",
    "SGDResult",
    "DEFAULT_LEARNING_RATE",
    "DEFAULT_ITERATIONS",
    "DEFAULT_OBSERVATIONS_IN_EACH_BATCH",
    "DEFAULT_SEED",
]
