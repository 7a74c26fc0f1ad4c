from .ir import (
    FlatData,
    InvalidShape,
    OutOfRange,
    RowData,
    ShapeMismatch,
    Storage,
    Tensor,
    TensorError,
    UnsupportedDataType,
    as_storage,
    cpprint,
    new_tensor,
    ones_like,
    pformat,
    shape_equal,
)
from . import executor
