"""Bias-variance learning curves
=============================

Learning curves plot training and validation error against the number of
training samples and show whether a model suffers from high bias or high
variance.

High bias (both errors high and close together):
- add more features
- use a more flexible model

High variance (large gap between training and validation error):
- use fewer features
- use more training samples
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import DimensionMismatch, InvalidConfiguration
from linsgd.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SAMPLE_PERCENTAGES = (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0)


@dataclass(frozen=True)
class BiasVarianceLearningCurvePoint:
    """One point of a learning curve."""

    sample_size: int
    training_score: float
    validation_score: float


class BiasVarianceLearningCurvesCalculator:
    """Builds learning curves for any learner exposing
    ``learn(observations, targets, indices) -> model`` where the model exposes
    ``predict(row)``.

    Parameters
    ----------
    splitter
        Object with ``split(targets)`` returning training/validation indices
    metric
        Object with ``error(targets, predictions) -> float``
    sample_percentages : sequence of float
        Share of the training rows used for each point, each in (0, 1]
    """

    def __init__(self, splitter, metric, sample_percentages: Sequence[float] = DEFAULT_SAMPLE_PERCENTAGES):
        if splitter is None:
            raise InvalidConfiguration("A training/validation splitter is required", parameter="splitter")
        if metric is None:
            raise InvalidConfiguration("An error metric is required", parameter="metric")
        if sample_percentages is None or len(sample_percentages) < 1:
            raise InvalidConfiguration(
                "Sample percentages length must be at least 1",
                parameter="sample_percentages",
            )

        self.splitter = splitter
        self.metric = metric
        self.sample_percentages = list(sample_percentages)

    def calculate(
        self,
        learner,
        observations,
        targets,
        training_indices: Sequence[int] | np.ndarray | None = None,
        validation_indices: Sequence[int] | np.ndarray | None = None,
    ) -> list[BiasVarianceLearningCurvePoint]:
        """Return one learning-curve point per sample percentage.

        When no indices are given the splitter decides them. Each point trains
        on a prefix of the training indices of size
        ``max(int(percentage * len(training_indices)), 1)``.
        """
        observations = linalg.as_matrix(observations, "observations")
        targets = linalg.as_vector(targets, "targets")
        if linalg.num_rows(observations) != targets.shape[0]:
            raise DimensionMismatch(
                "Number of observation rows must match number of targets",
                expected=linalg.num_rows(observations),
                actual=targets.shape[0],
            )

        if training_indices is None or validation_indices is None:
            split = self.splitter.split(targets)
            training_indices = split.training_indices
            validation_indices = split.validation_indices

        training_indices = np.asarray(training_indices, dtype=np.intp)
        validation_indices = np.asarray(validation_indices, dtype=np.intp)

        validation_observations = linalg.gather_rows(observations, validation_indices)
        validation_targets = linalg.gather(targets, validation_indices)
        learning_curves = []

        for sample_percentage in self.sample_percentages:
            if sample_percentage <= 0.0 or sample_percentage > 1.0:
                raise InvalidConfiguration(
                    "Sample percentage must be larger than 0.0 and smaller than or equal to 1.0",
                    parameter="sample_percentages",
                    value=sample_percentage,
                )

            sample_size = max(int(sample_percentage * training_indices.shape[0]), 1)
            sample_indices = training_indices[:sample_size]

            model = learner.learn(observations, targets, sample_indices)

            training_predictions = np.array(
                [model.predict(row) for row in linalg.gather_rows(observations, sample_indices)]
            )
            validation_predictions = np.array(
                [model.predict(row) for row in validation_observations]
            )

            point = BiasVarianceLearningCurvePoint(
                sample_size=sample_size,
                training_score=self.metric.error(
                    linalg.gather(targets, sample_indices), training_predictions
                ),
                validation_score=self.metric.error(validation_targets, validation_predictions),
            )
            logger.debug(
                f"Learning curve point: size={point.sample_size}, "
                f"training={point.training_score:.6g}, validation={point.validation_score:.6g}"
            )
            learning_curves.append(point)

        return learning_curves
