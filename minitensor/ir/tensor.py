# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging
from dataclasses import dataclass
from functools import reduce
from operator import mul
from typing import Any, Sequence, Tuple

import numpy as np

from .errors import InvalidShape, ShapeMismatch, UnsupportedDataType
from .storage import FlatData, Storage, as_storage
from ..executor.register import execute


def shape_equal(shape1: Sequence[int], shape2: Sequence[int]) -> bool:
    """Returns True if the shapes have the same length and the same entries
    in the same order.
    """
    if len(shape1) != len(shape2):
        return False
    return all(n1 == n2 for n1, n2 in zip(shape1, shape2))


def _check_shape(shape: Sequence[int]) -> Tuple[int, ...]:
    shape = tuple(int(n) for n in shape)
    if len(shape) == 0:
        raise InvalidShape("Tensor shape cannot be empty", shape=shape)
    if any(n < 0 for n in shape):
        raise InvalidShape(
            f"Tensor shape entries must be non-negative, got {shape}", shape=shape
        )
    return shape


@dataclass(frozen=True, eq=False)
class Tensor:
    """An immutable tensor value: a shape and the storage holding its elements.

    The element count implied by `shape` is not checked against `data`; only
    reshape compares the two. Every op returns a new Tensor.
    """

    shape: Tuple[int, ...]
    data: Storage

    def __init__(self, shape, data):
        if not isinstance(data, Storage):
            raise UnsupportedDataType(
                f"Tensor data must be Storage, got {type(data).__name__}; "
                f"use new_tensor to convert a payload",
                payload_type=type(data).__name__,
            )
        object.__setattr__(self, "shape", _check_shape(shape))
        object.__setattr__(self, "data", data)

    def __eq__(self, other):
        if isinstance(other, Tensor):
            return shape_equal(self.shape, other.shape) and self.data == other.data
        return False

    def size(self):
        """The logical element count implied by the shape."""
        return reduce(mul, self.shape, 1)

    def flatten(self) -> np.ndarray:
        """Returns the elements as a read-only 1-D array, rows concatenated in
        order for row storage.
        """
        return execute("Flatten", self.data)

    def reshape(self, new_shape: Sequence[int]) -> "Tensor":
        """Returns a tensor with `new_shape` that shares this tensor's storage.

        The storage layout is kept as-is: reshaping row storage to a 1-D shape
        still yields row storage.
        """
        reshaped = Tensor(new_shape, self.data)
        size = len(self.flatten())
        if reshaped.size() != size:
            raise ShapeMismatch(
                f"Cannot reshape {size} elements into shape {reshaped.shape} "
                f"({reshaped.size()} elements)",
                shape=self.shape,
                new_shape=reshaped.shape,
            )
        logging.debug(f"Reshaping tensor from {self.shape} to {reshaped.shape}")
        return reshaped

    def hadamard_product(self, other: "Tensor") -> "Tensor":
        """Elementwise product of two tensors of the same shape. The result is
        always stored flat.
        """
        if not shape_equal(self.shape, other.shape):
            raise ShapeMismatch(
                f"Hadamard product requires equal shapes, got {self.shape} "
                f"and {other.shape}",
                shape=self.shape,
                other_shape=other.shape,
            )
        product = execute("Mul", self.flatten(), other.flatten())
        return Tensor(self.shape, FlatData(product))

    def index_select(self, dim: int, indices: Sequence[int]) -> "Tensor":
        """Selects entries of the storage's first axis: elements of flat
        storage, whole rows of row storage.

        `dim` is not interpreted, and the result keeps this tensor's shape.
        """
        logging.debug(
            f"IndexSelect dim={dim} on {type(self.data).__name__} "
            f"with {len(indices)} indices"
        )
        selected = execute("IndexSelect", self.data, indices=indices)
        return Tensor(self.shape, selected)


def new_tensor(shape: Sequence[int], data: Any, dtype=None) -> Tensor:
    """Creates a tensor from a shape and a flat or row-major payload.

    Raises InvalidShape if `shape` is empty or has a negative entry, and
    UnsupportedDataType if `data` is neither flat nor row-major. Without a
    `dtype`, elements must be integers and are stored as
    constants.DEFAULT_DTYPE.
    """
    shape = _check_shape(shape)
    return Tensor(shape, as_storage(data, dtype))


def ones_like(tensor: Tensor) -> Tensor:
    """A tensor with the same shape and storage layout, filled with ones."""
    return Tensor(tensor.shape, execute("OnesLike", tensor.data))
