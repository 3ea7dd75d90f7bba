"""Linear prediction model built from a fitted parameter vector."""

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch


class LinearRegressionModel:
    """Predictor ``score(x) = theta[0] + x @ theta[1:]``.

    Parameters
    ----------
    parameters : array_like
        ``[bias, w_1, ..., w_d]`` as returned by
        :meth:`StochasticGradientDescent.optimize`
    """

    def __init__(self, parameters):
        self.parameters = linalg.as_vector(parameters, "parameters").copy()
        if self.parameters.shape[0] < 1:
            raise DimensionMismatch("Parameter vector must hold a bias term", expected=">= 1", actual=0)

    @property
    def bias(self) -> float:
        return float(self.parameters[0])

    @property
    def weights(self) -> np.ndarray:
        return self.parameters[1:]

    @property
    def n_features(self) -> int:
        return int(self.weights.shape[0])

    def predict(self, observation) -> float:
        """Score a single observation row."""
        row = linalg.as_vector(observation, "observation")
        if row.shape[0] != self.n_features:
            raise DimensionMismatch(
                "Observation length must match number of weights",
                expected=self.n_features,
                actual=row.shape[0],
            )
        return self.bias + float(np.dot(row, self.weights))

    def predict_all(self, observations) -> np.ndarray:
        """Score every row of an observation matrix."""
        matrix = linalg.as_matrix(observations, "observations")
        return self.bias + linalg.matvec(matrix, self.weights)

    def __repr__(self) -> str:
        return f"LinearRegressionModel(bias={self.bias:.6g}, weights={self.weights.tolist()})"
