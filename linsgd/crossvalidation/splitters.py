"""Training/validation index splitters."""

from dataclasses import dataclass

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import InvalidConfiguration


@dataclass(frozen=True)
class TrainingValidationIndices:
    """Disjoint row indices for training and validation."""

    training_indices: np.ndarray
    validation_indices: np.ndarray


class RandomTrainingValidationIndexSplitter:
    """Randomly assigns a fixed share of the rows to training.

    Parameters
    ----------
    training_percentage : float
        Share of rows used for training, in (0, 1)
    seed : int
        Seed of the shuffle; each :meth:`split` call builds its own generator
        so repeated splits of the same targets are identical
    """

    def __init__(self, training_percentage: float = 0.8, seed: int = 42):
        if not 0.0 < training_percentage < 1.0:
            raise InvalidConfiguration(
                "Training percentage must be in (0, 1)",
                parameter="training_percentage",
                value=training_percentage,
            )
        self.training_percentage = training_percentage
        self.seed = seed

    def split(self, targets) -> TrainingValidationIndices:
        targets = linalg.as_vector(targets, "targets")
        n = targets.shape[0]
        if n < 2:
            raise InvalidConfiguration(
                "At least two observations are needed to split",
                parameter="targets",
                value=n,
            )

        indices = np.arange(n, dtype=np.intp)
        linalg.shuffle_in_place(indices, np.random.default_rng(self.seed))

        n_training = min(max(int(self.training_percentage * n), 1), n - 1)
        return TrainingValidationIndices(
            training_indices=indices[:n_training],
            validation_indices=indices[n_training:],
        )
