# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Physical storage for tensor elements. A tensor's payload is exactly one of two
layouts: FlatData (a single 1-D array) or RowData (a tuple of 1-D rows, stored
row-major). Kernels are registered per layout class, so a Storage subclass that
is neither of these has no implementation for any op.

Storage is immutable: every array held here is a private, read-only copy.
"""

from dataclasses import dataclass
from numbers import Number
from typing import Any, Tuple

import numpy as np

from .errors import UnsupportedDataType
from ..utils import constants


def _readonly_array(values, dtype=None) -> np.ndarray:
    try:
        arr = np.array(values, dtype=dtype)
    except OverflowError as e:
        type_name = np.dtype(dtype).name if dtype is not None else "the element type"
        raise UnsupportedDataType(
            f"Tensor element does not fit in {type_name}: {e}", dtype=type_name
        ) from e
    arr.flags.writeable = False
    return arr


def _element_dtype(rows, dtype):
    """Without an explicit dtype, elements must be integers (or booleans) and
    are stored as DEFAULT_DTYPE. Other numbers are never truncated silently.
    """
    if dtype is not None:
        return dtype
    for row in rows:
        arr = np.asarray(row)
        if arr.size > 0 and arr.dtype.kind not in "biu":
            raise UnsupportedDataType(
                f"Tensor elements must be integers unless a dtype is given, "
                f"got {arr.dtype}",
                dtype=str(arr.dtype),
            )
    return constants.DEFAULT_DTYPE


def _is_scalar(x) -> bool:
    return isinstance(x, (Number, np.generic))


def _is_row(x) -> bool:
    if isinstance(x, np.ndarray):
        return x.ndim == 1
    return isinstance(x, (list, tuple)) and all(_is_scalar(v) for v in x)


@dataclass(frozen=True, eq=False)
class Storage:
    """Base class for the layouts a tensor payload can take."""

    def __len__(self):
        raise NotImplementedError

    def tolist(self):
        raise NotImplementedError


@dataclass(frozen=True, eq=False)
class FlatData(Storage):
    """One-dimensional storage."""

    values: np.ndarray = None

    def __init__(self, values, dtype=None):
        arr = _readonly_array(values, dtype)
        if arr.ndim != 1:
            raise UnsupportedDataType(
                f"Flat storage expects a 1-D array, got {arr.ndim}-D", ndim=arr.ndim
            )
        object.__setattr__(self, "values", arr)  # Can't assign to frozen field

    def __repr__(self):
        return f"FlatData(values={self.values.tolist()})"

    def __eq__(self, other):
        if isinstance(other, FlatData):
            return np.array_equal(self.values, other.values)
        return False

    def __len__(self):
        return len(self.values)

    def tolist(self):
        return self.values.tolist()


@dataclass(frozen=True, eq=False)
class RowData(Storage):
    """Two-dimensional row-major storage. Rows may differ in length."""

    rows: Tuple[np.ndarray, ...] = ()

    def __init__(self, rows, dtype=None):
        rows = tuple(_readonly_array(row, dtype) for row in rows)
        for i, row in enumerate(rows):
            if row.ndim != 1:
                raise UnsupportedDataType(
                    f"Row {i} of row storage is {row.ndim}-D, expected 1-D",
                    row=i,
                    ndim=row.ndim,
                )
        object.__setattr__(self, "rows", rows)

    def __repr__(self):
        return f"RowData(rows={self.tolist()})"

    def __eq__(self, other):
        if isinstance(other, RowData):
            return len(self.rows) == len(other.rows) and all(
                np.array_equal(a, b) for a, b in zip(self.rows, other.rows)
            )
        return False

    def __len__(self):
        return len(self.rows)

    def tolist(self):
        return [row.tolist() for row in self.rows]


def as_storage(data: Any, dtype=None) -> Storage:
    """Converts a tensor payload into Storage.

    Accepts an existing Storage (returned unchanged), a 1-D or 2-D numpy array,
    a flat sequence of numbers, or a sequence of rows of numbers. Anything else
    raises UnsupportedDataType.

    With `dtype` None the elements must be integers; they are stored as
    constants.DEFAULT_DTYPE. Elements that don't fit the element type raise
    UnsupportedDataType.
    """
    if isinstance(data, Storage):
        return data
    if isinstance(data, np.ndarray):
        if data.ndim == 1:
            return FlatData(data, _element_dtype([data], dtype))
        elif data.ndim == 2:
            return RowData(data, _element_dtype(data, dtype))
        raise UnsupportedDataType(
            f"Tensor payload must be 1-D or 2-D, got a {data.ndim}-D array",
            ndim=data.ndim,
        )
    if isinstance(data, (list, tuple)):
        if all(_is_scalar(x) for x in data):
            return FlatData(data, _element_dtype([data], dtype))
        elif all(_is_row(x) for x in data):
            return RowData(data, _element_dtype(data, dtype))
    raise UnsupportedDataType(
        f"Unsupported tensor payload of type {type(data).__name__}",
        payload_type=type(data).__name__,
    )
