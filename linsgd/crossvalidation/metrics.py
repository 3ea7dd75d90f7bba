"""Regression error metrics."""

import numpy as np

from linsgd.core import linalg


class MeanSquaredErrorRegressionMetric:
    """Mean of squared differences between targets and predictions."""

    def error(self, targets, predictions) -> float:
        targets = linalg.as_vector(targets, "targets")
        predictions = linalg.as_vector(predictions, "predictions")
        difference = linalg.subtract(targets, predictions)
        return float(np.mean(difference * difference))
