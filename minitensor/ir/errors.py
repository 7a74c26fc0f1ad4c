# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.


class TensorError(Exception):
    """Base class for all errors raised by tensor operations."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class InvalidShape(TensorError, ValueError):
    pass


class ShapeMismatch(TensorError, ValueError):
    pass


class UnsupportedDataType(TensorError, TypeError):
    pass


class OutOfRange(TensorError, IndexError):
    def __init__(self, message: str, index=None, bound=None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.bound = bound
