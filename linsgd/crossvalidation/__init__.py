"""Validation tools: splitters, metrics and bias-variance learning curves."""

from linsgd.crossvalidation.learning_curves import (
    DEFAULT_SAMPLE_PERCENTAGES,
    BiasVarianceLearningCurvePoint,
    BiasVarianceLearningCurvesCalculator,
)
from linsgd.crossvalidation.metrics import MeanSquaredErrorRegressionMetric
from linsgd.crossvalidation.splitters import (
    RandomTrainingValidationIndexSplitter,
    TrainingValidationIndices,
)

__all__ = [
    "BiasVarianceLearningCurvePoint",
    "BiasVarianceLearningCurvesCalculator",
    "DEFAULT_SAMPLE_PERCENTAGES",
    "MeanSquaredErrorRegressionMetric",
    "RandomTrainingValidationIndexSplitter",
    "TrainingValidationIndices",
]
