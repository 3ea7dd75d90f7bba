"""Mini-batch index sampling.

The sampler owns the explicit random stream of an optimizer. Each draw
permutes the whole observation-index domain in place and slices a prefix,
so every batch is free of duplicates and the sequence of batches is fully
determined by the seed and the order of calls.
"""

from __future__ import annotations

import numpy as np

from linsgd.core import linalg
from linsgd.core.exceptions import InvalidConfiguration


class PermutationBatchSampler:
    """Draws batches as prefixes of a freshly shuffled index permutation.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random stream consumed sequentially by every call to :meth:`sample`.
        Not safe to share between concurrent optimization runs.

    Examples
    --------
    >>> sampler = PermutationBatchSampler(np.random.default_rng(42))
    >>> batch = sampler.sample(domain_size=10, batch_size=3)
    >>> len(set(batch.tolist()))
    3
    """

    def __init__(self, rng: np.random.Generator):
        self.rng = rng
        self._indices: np.ndarray | None = None

    @property
    def domain_size(self) -> int:
        return 0 if self._indices is None else int(self._indices.shape[0])

    def reset_domain(self, domain_size: int) -> None:
        """Start from the identity permutation of ``[0, domain_size)``."""
        self._indices = np.arange(domain_size, dtype=np.intp)

    def sample(self, domain_size: int, batch_size: int) -> np.ndarray:
        """Return ``batch_size`` unique indices drawn from ``[0, domain_size)``.

        The persistent index array is shuffled in place across its full
        length on every call, regardless of ``batch_size``.
        """
        if batch_size < 1 or batch_size > domain_size:
            raise InvalidConfiguration(
                f"Batch size must be in [1, {domain_size}]",
                parameter="batch_size",
                value=batch_size,
            )
        if self.domain_size != domain_size:
            self.reset_domain(domain_size)

        linalg.shuffle_in_place(self._indices, self.rng)
        return self._indices[:batch_size].copy()
