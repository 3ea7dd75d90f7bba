"""Mini-batch Stochastic Gradient Descent for Linear Regression
============================================================

Fits ``theta = [bias, w_1, ..., w_d]`` of the linear model
``y ~ theta[0] + x @ theta[1:]`` by minimizing the mean-squared-error
objective with a fixed number of mini-batch gradient steps.

Algorithm
---------
1. Prepend a bias column of 1.0 to the observations (once per run).
2. Start from ``theta = 0``.
3. Repeat ``iterations`` times:
   a. draw ``batch_size`` unique row indices from a fresh permutation of all rows
   b. gather the batch rows and targets
   c. ``theta -= learning_rate * (1/m) X_b^T (X_b theta - y_b)``
4. Return ``theta``.

The iteration count is the only termination condition. Divergence caused by
an excessive learning rate is not detected: the parameters simply become
non-finite.

Examples
--------
>>> import numpy as np
>>> from linsgd.optimization import StochasticGradientDescent
>>> X = np.array([[1.0], [2.0], [3.0], [4.0]])
>>> y = np.array([3.0, 5.0, 7.0, 9.0])
>>> sgd = StochasticGradientDescent(learning_rate=0.05, iterations=2000,
...                                 observations_in_each_batch=4)
>>> theta = sgd.optimize(X, y)   # approximately [1.0, 2.0]
"""

import logging
import numbers
import time

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch, InvalidConfiguration
from linsgd.core.objective import augment, mse_cost, mse_gradient
from linsgd.optimization.result import SGDResult
from linsgd.optimization.sampling import PermutationBatchSampler
from linsgd.utils.logging import get_logger, log_operation

logger = get_logger(__name__)

DEFAULT_LEARNING_RATE = 0.001
DEFAULT_ITERATIONS = 4000
DEFAULT_OBSERVATIONS_IN_EACH_BATCH = 1
DEFAULT_SEED = 42


class StochasticGradientDescent:
    """Fixed-iteration mini-batch gradient descent for least squares.

    Parameters
    ----------
    learning_rate : float
        Step size of each update. Too small converges slowly, too large
        makes the cost grow from step to step.
    iterations : int
        Number of gradient steps per :meth:`optimize` call.
    observations_in_each_batch : int
        Rows used per step. ``1`` gives per-sample SGD, the number of
        observations gives full-batch gradient descent.
    seed : int
        Seed of the random stream. The stream is created once here and keeps
        advancing across calls, so repeated calls on one instance see
        different batches while two instances built with the same seed
        reproduce each other exactly.

    Notes
    -----
    Settings are validated when :meth:`optimize` is called, since the batch
    size can only be checked against the number of observations then.
    An instance is not thread safe: its random stream is mutated by every
    call.
    """

    def __init__(
        self,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        iterations: int = DEFAULT_ITERATIONS,
        observations_in_each_batch: int = DEFAULT_OBSERVATIONS_IN_EACH_BATCH,
        seed: int = DEFAULT_SEED,
    ):
        self.learning_rate = learning_rate
        self.iterations = iterations
        self.observations_in_each_batch = observations_in_each_batch
        self.seed = seed

        self.rng = np.random.default_rng(seed)
        self.sampler = PermutationBatchSampler(self.rng)

        # Tests switch this off to run with a zero learning rate
        self._validate_learning_rate = True

    def __repr__(self) -> str:
        return (
            f"StochasticGradientDescent(learning_rate={self.learning_rate}, "
            f"iterations={self.iterations}, "
            f"observations_in_each_batch={self.observations_in_each_batch}, "
            f"seed={self.seed})"
        )

    def _validate_configuration(self, n_observations: int) -> None:
        if self._validate_learning_rate and not self.learning_rate > 0:
            raise InvalidConfiguration(
                "Learning rate must be positive",
                parameter="learning_rate",
                value=self.learning_rate,
            )

        if not isinstance(self.iterations, numbers.Integral) or self.iterations < 0:
            raise InvalidConfiguration(
                "Iterations must be a non-negative integer",
                parameter="iterations",
                value=self.iterations,
            )

        batch_size = self.observations_in_each_batch
        if not isinstance(batch_size, numbers.Integral) or not 1 <= batch_size <= n_observations:
            raise InvalidConfiguration(
                f"Observations in each batch must be an integer in [1, {n_observations}]",
                parameter="observations_in_each_batch",
                value=batch_size,
            )

    def _validate_inputs(self, observations, targets) -> tuple[np.ndarray, np.ndarray]:
        observations = linalg.as_matrix(observations, "observations")
        targets = linalg.as_vector(targets, "targets")

        if linalg.num_rows(observations) != targets.shape[0]:
            raise DimensionMismatch(
                "Number of observation rows must match number of targets",
                expected=linalg.num_rows(observations),
                actual=targets.shape[0],
            )
        return observations, targets

    def optimize(self, observations, targets) -> np.ndarray:
        """Fit the linear model and return ``[bias, w_1, ..., w_d]``.

        Parameters
        ----------
        observations : array_like, shape (n, d)
            Feature matrix, one row per observation
        targets : array_like, shape (n,)
            Regression targets

        Returns
        -------
        np.ndarray
            Parameter vector of length ``d + 1``

        Raises
        ------
        DimensionMismatch
            If the number of rows differs from the number of targets
        InvalidConfiguration
            If a setting is out of range for this data
        """
        return self.run(observations, targets).parameters

    def run(self, observations, targets, record_cost: bool = False) -> SGDResult:
        """Fit the linear model and return the parameters with run diagnostics.

        Parameters
        ----------
        observations : array_like, shape (n, d)
            Feature matrix
        targets : array_like, shape (n,)
            Regression targets
        record_cost : bool
            When True, evaluate the full-data cost after every step and store
            it in ``SGDResult.cost_history``. Costs are diagnostics only and do
            not influence the updates.
        """
        observations, targets = self._validate_inputs(observations, targets)
        n_observations = linalg.num_rows(observations)
        self._validate_configuration(n_observations)

        batch_size = int(self.observations_in_each_batch)
        # Every run starts from the identity permutation of its rows
        self.sampler.reset_domain(n_observations)
        start_time = time.perf_counter()

        with log_operation(
            f"SGD fit ({n_observations}x{linalg.num_columns(observations)}, "
            f"{self.iterations} iterations, batch {batch_size})",
            logger=logger,
            level=logging.DEBUG,
        ):
            x = augment(observations)
            theta = np.zeros(linalg.num_columns(x))
            cost_history = [] if record_cost else None

            for _ in range(self.iterations):
                batch_indices = self.sampler.sample(n_observations, batch_size)
                gradient = mse_gradient(
                    theta,
                    linalg.gather_rows(x, batch_indices),
                    linalg.gather(targets, batch_indices),
                )
                theta = linalg.subtract(theta, linalg.scale(gradient, self.learning_rate))

                if record_cost:
                    cost_history.append(mse_cost(theta, x, targets))

        computation_time = time.perf_counter() - start_time

        if not np.all(np.isfinite(theta)):
            logger.debug("SGD parameters are non-finite; learning rate may be too large")

        return SGDResult(
            parameters=theta,
            n_iterations=int(self.iterations),
            batch_size=batch_size,
            learning_rate=float(self.learning_rate),
            seed=self.seed,
            n_observations=n_observations,
            computation_time=computation_time,
            cost_history=cost_history,
        )
