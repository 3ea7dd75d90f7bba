"""Indexed learner wrapping the stochastic gradient descent optimizer."""

from collections.abc import Sequence

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch
from linsgd.learners.linear_model import LinearRegressionModel
from linsgd.optimization.sgd import (
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
    DEFAULT_OBSERVATIONS_IN_EACH_BATCH,
    DEFAULT_SEED,
    StochasticGradientDescent,
)


class SGDLinearRegressionLearner:
    """Learns :class:`LinearRegressionModel` instances from a subset of rows.

    One optimizer instance is kept for the lifetime of the learner, so its
    random stream advances across successive :meth:`learn` calls.

    Examples
    --------
    >>> learner = SGDLinearRegressionLearner(learning_rate=0.01, iterations=500)
    >>> model = learner.learn(X, y, indices=[0, 1, 2, 3])
    >>> model.predict(X[0])
    """

    def __init__(
        self,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        iterations: int = DEFAULT_ITERATIONS,
        observations_in_each_batch: int = DEFAULT_OBSERVATIONS_IN_EACH_BATCH,
        seed: int = DEFAULT_SEED,
    ):
        self.optimizer = StochasticGradientDescent(
            learning_rate=learning_rate,
            iterations=iterations,
            observations_in_each_batch=observations_in_each_batch,
            seed=seed,
        )

    @classmethod
    def from_optimizer(cls, optimizer: StochasticGradientDescent) -> "SGDLinearRegressionLearner":
        """Wrap an already configured optimizer."""
        learner = cls.__new__(cls)
        learner.optimizer = optimizer
        return learner

    def learn(
        self,
        observations,
        targets,
        indices: Sequence[int] | np.ndarray | None = None,
    ) -> LinearRegressionModel:
        """Fit on the rows at ``indices`` (all rows when None).

        The batch size is capped at the number of selected rows so small
        learning-curve samples remain valid.
        """
        observations = linalg.as_matrix(observations, "observations")
        targets = linalg.as_vector(targets, "targets")
        if linalg.num_rows(observations) != targets.shape[0]:
            raise DimensionMismatch(
                "Number of observation rows must match number of targets",
                expected=linalg.num_rows(observations),
                actual=targets.shape[0],
            )

        if indices is not None:
            observations = linalg.gather_rows(observations, indices)
            targets = linalg.gather(targets, indices)

        configured_batch = self.optimizer.observations_in_each_batch
        n_rows = linalg.num_rows(observations)
        if n_rows and configured_batch > n_rows:
            self.optimizer.observations_in_each_batch = n_rows
        try:
            parameters = self.optimizer.optimize(observations, targets)
        finally:
            self.optimizer.observations_in_each_batch = configured_batch

        return LinearRegressionModel(parameters)
