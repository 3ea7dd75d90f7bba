"""Learner and predictor wrappers around the optimizer."""

from linsgd.learners.linear_model import LinearRegressionModel
from linsgd.learners.sgd_learner import SGDLinearRegressionLearner

__all__ = [
    "LinearRegressionModel",
    "SGDLinearRegressionLearner",
]
