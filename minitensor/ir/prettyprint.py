"""
Pretty printer for tensors. Uses the prettyprinter package, which uses a modified
Wadler-Leijen layout algorithm:
http://homepages.inf.ed.ac.uk/wadler/papers/prettier/prettier.pdf

Use cpprint on a Tensor to print pretty-printed output, pformat to get an str.
"""

# import cpprint and pformat so clients don't need to import both prettyprint and prettyprinter
from prettyprinter import (  # pylint: disable=unused-import
    register_pretty,
    cpprint,
    pformat,
    set_default_style,
    pretty_call,
)
from prettyprinter.doc import annotate
from prettyprinter.prettyprinter import Token

from .storage import FlatData, RowData
from .tensor import Tensor


# Set default style to light, as it's readable on both light/dark backgrounds
set_default_style("light")


def pp_type(s):
    return annotate(Token.NAME_BUILTIN, s)


@register_pretty(Tensor)
def _(tensor: Tensor, ctx):
    return pretty_call(
        ctx, pp_type("Tensor"), shape=tensor.shape, data=tensor.data.tolist()
    )


@register_pretty(FlatData)
def _(data: FlatData, ctx):
    return pretty_call(ctx, pp_type("FlatData"), data.tolist())


@register_pretty(RowData)
def _(data: RowData, ctx):
    return pretty_call(ctx, pp_type("RowData"), data.tolist())
