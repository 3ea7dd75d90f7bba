"""Shape-checked linear-algebra primitives.

Thin wrappers over NumPy used by the optimizer and the validation tools.
Each helper checks the shapes of its operands and raises
:class:`~linsgd.core.exceptions.DimensionMismatch` instead of letting NumPy
broadcast or truncate.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from linsgd.core.exceptions import DimensionMismatch


def as_matrix(values, name: str = "matrix") -> np.ndarray:
    """Return ``values`` as a 2D float64 array.

    Raises
    ------
    DimensionMismatch
        If the input is not two-dimensional.
    """
    matrix = np.asarray(values, dtype=np.float64)
    if matrix.ndim != 2:
        raise DimensionMismatch(
            f"{name} must be two-dimensional",
            expected="(rows, columns)",
            actual=matrix.shape,
        )
    return matrix


def as_vector(values, name: str = "vector") -> np.ndarray:
    """Return ``values`` as a 1D float64 array."""
    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1:
        raise DimensionMismatch(
            f"{name} must be one-dimensional",
            expected="(length,)",
            actual=vector.shape,
        )
    return vector


def num_rows(matrix: np.ndarray) -> int:
    return int(matrix.shape[0])


def num_columns(matrix: np.ndarray) -> int:
    return int(matrix.shape[1])


def _as_index_array(indices: Sequence[int] | np.ndarray, size: int) -> np.ndarray:
    index_array = np.asarray(indices, dtype=np.intp)
    if index_array.ndim != 1:
        raise DimensionMismatch(
            "Index list must be one-dimensional",
            expected="(k,)",
            actual=index_array.shape,
        )
    if index_array.size and (index_array.min() < 0 or index_array.max() >= size):
        raise DimensionMismatch(
            "Index out of range",
            expected=f"[0, {size})",
            actual=(int(index_array.min()), int(index_array.max())),
        )
    return index_array


def gather_rows(matrix: np.ndarray, indices: Sequence[int] | np.ndarray) -> np.ndarray:
    """Return the rows of ``matrix`` at ``indices`` in the given order."""
    return matrix[_as_index_array(indices, num_rows(matrix))]


def gather(vector: np.ndarray, indices: Sequence[int] | np.ndarray) -> np.ndarray:
    """Return the elements of ``vector`` at ``indices`` in the given order."""
    return vector[_as_index_array(indices, vector.shape[0])]


def combine_columns(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Concatenate columns: ``left`` (vector or matrix) followed by ``right``.

    A 1D ``left`` is treated as a single column.
    """
    left_matrix = left.reshape(-1, 1) if left.ndim == 1 else left
    if num_rows(left_matrix) != num_rows(right):
        raise DimensionMismatch(
            "Cannot combine columns with different row counts",
            expected=num_rows(left_matrix),
            actual=num_rows(right),
        )
    return np.hstack([left_matrix, right])


def transpose(matrix: np.ndarray) -> np.ndarray:
    return matrix.T


def matvec(matrix: np.ndarray, vector: np.ndarray) -> np.ndarray:
    """Matrix-vector product ``matrix @ vector``."""
    if num_columns(matrix) != vector.shape[0]:
        raise DimensionMismatch(
            "Matrix columns must match vector length",
            expected=num_columns(matrix),
            actual=vector.shape[0],
        )
    return matrix @ vector


def subtract(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Elementwise ``left - right`` for equal-length vectors."""
    if left.shape != right.shape:
        raise DimensionMismatch(
            "Vectors must have equal shapes",
            expected=left.shape,
            actual=right.shape,
        )
    return left - right


def scale(vector: np.ndarray, factor: float) -> np.ndarray:
    return vector * factor


def shuffle_in_place(indices: np.ndarray, rng: np.random.Generator) -> None:
    """Permute ``indices`` in place using the explicit generator ``rng``."""
    rng.shuffle(indices)
