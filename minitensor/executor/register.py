# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import logging
from typing import Callable

from ..ir.errors import UnsupportedDataType
from .numpy_register import NumPyRegister


def get_implementation(op_type: str, *inputs) -> Callable:
    """Looks up the kernel for `op_type` by the exact types of `inputs`."""
    signature = tuple(type(x) for x in inputs)
    try:
        return NumPyRegister[(op_type, signature)]
    except KeyError:
        type_names = ", ".join(t.__name__ for t in signature)
        raise UnsupportedDataType(
            f"No {op_type} implementation for inputs ({type_names})",
            op_type=op_type,
            signature=signature,
        ) from None


def execute(op_type: str, *inputs, **attributes):
    """Runs `op_type` on `inputs`. Keyword `attributes` are passed to the
    kernel as-is and do not take part in dispatch.
    """
    implementation = get_implementation(op_type, *inputs)
    logging.debug(
        f"Executing {op_type} on ({', '.join(type(x).__name__ for x in inputs)})"
    )
    return implementation(*inputs, **attributes)
