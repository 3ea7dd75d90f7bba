"""Container types."""

from linsgd.containers.tensors import RowMajorTensorIndexer2D, Tensor, TensorShape

__all__ = ["Tensor", "TensorShape", "RowMajorTensorIndexer2D"]
