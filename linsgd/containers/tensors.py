"""Flat tensor storage with row-major 2D indexing.

A :class:`Tensor` keeps its values in one contiguous 1D array. The
:class:`RowMajorTensorIndexer2D` maps ``(x, y)`` coordinates onto that
array with ``index = x * dim_y + y``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from operator import mul

import numpy as np

from linsgd.core.exceptions import DimensionMismatch


@dataclass(frozen=True)
class TensorShape:
    """Dimensions of a tensor, outermost first."""

    dimensions: tuple[int, ...]

    def __init__(self, *dimensions: int):
        if not dimensions or any(d < 1 for d in dimensions):
            raise DimensionMismatch(
                "Tensor dimensions must be positive", expected="> 0", actual=dimensions
            )
        object.__setattr__(self, "dimensions", tuple(int(d) for d in dimensions))

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    @property
    def number_of_elements(self) -> int:
        return reduce(mul, self.dimensions, 1)

    def __str__(self) -> str:
        return "x".join(str(d) for d in self.dimensions)


class Tensor:
    """Values stored in a flat float64 buffer with an attached shape."""

    def __init__(self, data, shape: TensorShape):
        self.data = np.asarray(data, dtype=np.float64).reshape(-1)
        if self.data.shape[0] != shape.number_of_elements:
            raise DimensionMismatch(
                f"Data length does not match tensor shape {shape}",
                expected=shape.number_of_elements,
                actual=self.data.shape[0],
            )
        self.shape = shape

    @classmethod
    def zeros(cls, *dimensions: int) -> Tensor:
        shape = TensorShape(*dimensions)
        return cls(np.zeros(shape.number_of_elements), shape)


class RowMajorTensorIndexer2D:
    """Reads and writes a rank-2 :class:`Tensor` by ``(x, y)`` coordinate."""

    def __init__(self, tensor: Tensor, dim_x: int, dim_y: int):
        if tensor is None:
            raise ValueError("tensor is required")

        self.shape = TensorShape(dim_x, dim_y)
        if self.shape != tensor.shape:
            raise DimensionMismatch(
                f"Indexer shape: {self.shape} does not match tensor shape: {tensor.shape}",
                expected=str(self.shape),
                actual=str(tensor.shape),
            )

        self.tensor = tensor
        self.dim_x = int(dim_x)
        self.dim_y = int(dim_y)

    @property
    def number_of_elements(self) -> int:
        return self.shape.number_of_elements

    def _flat_index(self, x: int, y: int) -> int:
        if not (0 <= x < self.dim_x and 0 <= y < self.dim_y):
            raise IndexError(f"Coordinate ({x}, {y}) outside {self.shape}")
        return x * self.dim_y + y

    def at(self, x: int, y: int) -> float:
        return float(self.tensor.data[self._flat_index(x, y)])

    def set(self, x: int, y: int, value: float) -> None:
        self.tensor.data[self._flat_index(x, y)] = value
