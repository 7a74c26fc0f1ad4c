# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import numpy as np

from ..ir.errors import OutOfRange, ShapeMismatch, UnsupportedDataType
from ..ir.storage import FlatData, RowData
from ..utils import constants


def _check_indices(indices, bound):
    indices = np.asarray(indices)
    if indices.ndim != 1:
        raise UnsupportedDataType(
            f"Indices must be a 1-D sequence, got {indices.ndim}-D",
            ndim=indices.ndim,
        )
    if indices.size == 0:
        indices = indices.astype(np.int64)
    elif not np.issubdtype(indices.dtype, np.integer):
        raise UnsupportedDataType(
            f"Indices must be integers, got {indices.dtype}",
            dtype=str(indices.dtype),
        )
    out_of_range = (indices < 0) | (indices >= bound)
    if out_of_range.any():
        index = int(indices[out_of_range][0])
        raise OutOfRange(
            f"Index {index} is out of range for an axis of size {bound}",
            index=index,
            bound=bound,
        )
    return indices


def flatten_flat(x):
    return x.values


def flatten_rows(x):
    if len(x.rows) == 0:
        flat = np.empty(0, dtype=constants.DEFAULT_DTYPE)
    else:
        flat = np.concatenate(x.rows)
    flat.flags.writeable = False
    return flat


def index_select_flat(x, indices):
    indices = _check_indices(indices, len(x.values))
    return FlatData(x.values[indices])


def index_select_rows(x, indices):
    indices = _check_indices(indices, len(x.rows))
    # RowData copies each selected row
    return RowData([x.rows[i] for i in indices])


def mul(x, y):
    # Construction doesn't check element counts, so equal shapes don't imply
    # equal lengths. Never broadcast.
    if len(x) != len(y):
        raise ShapeMismatch(
            f"Hadamard product operands have {len(x)} and {len(y)} elements",
            lengths=(len(x), len(y)),
        )
    return np.multiply(x, y)


def ones_like_flat(x):
    return FlatData(np.ones_like(x.values))


def ones_like_rows(x):
    return RowData([np.ones_like(row) for row in x.rows])


NumPyRegister = {
    ("Flatten", (FlatData,)): flatten_flat,
    ("Flatten", (RowData,)): flatten_rows,
    ("IndexSelect", (FlatData,)): index_select_flat,
    ("IndexSelect", (RowData,)): index_select_rows,
    ("Mul", (np.ndarray, np.ndarray)): mul,
    ("OnesLike", (FlatData,)): ones_like_flat,
    ("OnesLike", (RowData,)): ones_like_rows,
}
