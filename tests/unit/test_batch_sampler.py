"""Tests for PermutationBatchSampler."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from linsgd.core.exceptions import InvalidConfiguration
from linsgd.optimization.sampling import PermutationBatchSampler


class TestBatchContents:
    @pytest.mark.parametrize("batch_size", [1, 3, 7, 10])
    def test_batch_is_unique_and_in_range(self, batch_size):
        sampler = PermutationBatchSampler(np.random.default_rng(42))
        for _ in range(50):
            batch = sampler.sample(domain_size=10, batch_size=batch_size)
            assert batch.shape == (batch_size,)
            assert len(np.unique(batch)) == batch_size
            assert batch.min() >= 0 and batch.max() < 10

    def test_full_batch_is_permutation(self):
        sampler = PermutationBatchSampler(np.random.default_rng(1))
        batch = sampler.sample(domain_size=8, batch_size=8)
        assert_array_equal(np.sort(batch), np.arange(8))

    def test_returned_batch_is_a_copy(self):
        sampler = PermutationBatchSampler(np.random.default_rng(1))
        first = sampler.sample(domain_size=6, batch_size=3)
        snapshot = first.copy()
        sampler.sample(domain_size=6, batch_size=3)
        assert_array_equal(first, snapshot)

    def test_every_index_is_eventually_drawn(self):
        sampler = PermutationBatchSampler(np.random.default_rng(0))
        seen = set()
        for _ in range(200):
            seen.update(sampler.sample(domain_size=12, batch_size=1).tolist())
        assert seen == set(range(12))


class TestDeterminism:
    def test_same_seed_same_sequence(self):
        a = PermutationBatchSampler(np.random.default_rng(42))
        b = PermutationBatchSampler(np.random.default_rng(42))
        for _ in range(20):
            assert_array_equal(a.sample(15, 4), b.sample(15, 4))

    def test_matches_shuffle_then_slice(self):
        sampler = PermutationBatchSampler(np.random.default_rng(9))
        rng = np.random.default_rng(9)
        indices = np.arange(10)

        for _ in range(5):
            rng.shuffle(indices)
            assert_array_equal(sampler.sample(10, 3), indices[:3])

    def test_whole_domain_shuffled_regardless_of_batch_size(self):
        # A batch of 1 consumes the same random stream as a batch of n
        small = PermutationBatchSampler(np.random.default_rng(3))
        full = PermutationBatchSampler(np.random.default_rng(3))
        for _ in range(5):
            one = small.sample(9, 1)
            everything = full.sample(9, 9)
            assert one[0] == everything[0]

    def test_domain_change_resets_index_array(self):
        sampler = PermutationBatchSampler(np.random.default_rng(0))
        sampler.sample(5, 2)
        assert sampler.domain_size == 5

        batch = sampler.sample(3, 3)
        assert sampler.domain_size == 3
        assert_array_equal(np.sort(batch), np.arange(3))

    def test_reset_domain_restores_identity(self):
        sampler = PermutationBatchSampler(np.random.default_rng(0))
        sampler.sample(6, 6)
        sampler.reset_domain(6)
        assert_array_equal(sampler._indices, np.arange(6))


class TestValidation:
    @pytest.mark.parametrize("batch_size", [0, -1, 6])
    def test_batch_size_outside_domain(self, batch_size):
        sampler = PermutationBatchSampler(np.random.default_rng(0))
        with pytest.raises(InvalidConfiguration) as exc_info:
            sampler.sample(domain_size=5, batch_size=batch_size)
        assert exc_info.value.parameter == "batch_size"
