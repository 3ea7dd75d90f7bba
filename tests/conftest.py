"""
Pytest Configuration and Fixtures for linsgd
============================================

Shared fixtures, configuration, and test utilities for the entire test suite.
"""

import numpy as np
import pytest
import yaml

from tests.factories.synthetic_data import exact_line_data, generate_linear_data

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for workflows")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "slow: Slow tests (> 5 seconds)")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)


# ============================================================================
# Test Data Fixtures
# ============================================================================


@pytest.fixture
def line_data():
    """Four exact points on y = 2x + 1."""
    return exact_line_data()


@pytest.fixture(scope="module")
def linear_dataset():
    """Noise-free three-parameter dataset with standard-normal features.

    Note: Module-scoped as the arrays are never mutated by the code under test.
    """
    return generate_linear_data(
        n_observations=200, true_parameters=(1.0, 2.0, -0.5), noise_sigma=0.0, seed=7
    )


@pytest.fixture(scope="module")
def noisy_dataset():
    """Noisy dataset used by learning-curve tests."""
    return generate_linear_data(
        n_observations=120, true_parameters=(0.5, 1.5, -1.0), noise_sigma=0.3, seed=11
    )


@pytest.fixture
def augmented_batch():
    """Small fixed augmented batch with its targets and an arbitrary theta."""
    rng = np.random.default_rng(3)
    X = np.column_stack([np.ones(6), rng.normal(size=(6, 2))])
    y = rng.normal(size=6)
    theta = np.array([0.3, -1.2, 0.8])
    return theta, X, y


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def tmp_config_file(tmp_path):
    """YAML configuration with a fast full-batch optimizer."""

    def _write(overrides=None, name="linsgd.yaml"):
        config = {
            "optimizer": {
                "learning_rate": 0.05,
                "iterations": 2000,
                "observations_in_each_batch": 4,
                "seed": 42,
            },
            "logging": {"level": "WARNING"},
        }
        for section, values in (overrides or {}).items():
            config.setdefault(section, {}).update(values)

        path = tmp_path / name
        path.write_text(yaml.safe_dump(config), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def line_csv_file(tmp_path, line_data):
    """CSV with one feature column followed by the target column."""
    path = tmp_path / "line.csv"
    table = np.column_stack([line_data.observations, line_data.targets])
    np.savetxt(path, table, delimiter=",", header="x,y", comments="")
    return path
