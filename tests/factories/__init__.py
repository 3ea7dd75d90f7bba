"""
Test Data Factories for linsgd
==============================

Generators for synthetic regression datasets with known parameters.
"""

from tests.factories.synthetic_data import (
    SyntheticRegressionData,
    exact_line_data,
    generate_linear_data,
)

__all__ = [
    "SyntheticRegressionData",
    "exact_line_data",
    "generate_linear_data",
]
