from .errors import (
    InvalidShape,
    OutOfRange,
    ShapeMismatch,
    TensorError,
    UnsupportedDataType,
)
from .storage import FlatData, RowData, Storage, as_storage
from .tensor import Tensor, new_tensor, ones_like, shape_equal
from .prettyprint import cpprint, pformat
