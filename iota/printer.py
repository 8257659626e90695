"""Render Iota values back into source-like text."""

from __future__ import annotations

import math

from iota import LispValue
from iota.types.builtin import Builtin
from iota.types.closure import Closure
from iota.types.lambda_fn import Lambda
from iota.types.symbol import Symbol

CLOSURE_PLACEHOLDER = "<function>"
BUILTIN_PLACEHOLDER = "<builtin-function>"


class _Text(str):
    """Literal output queued between list elements."""


_SPACE = _Text(" ")
_CLOSE = _Text(")")


def format_number(value: float) -> str:
    """Natural decimal form: integral values print without a fractional part."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_string(expr: LispValue) -> str:
    """
    Print any value the reader or evaluator can produce. Lists are walked
    with an explicit stack, so nesting depth is bounded by memory only.
    """
    out: list[str] = []
    pending: list = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, _Text):
            out.append(item)
        elif isinstance(item, list):
            out.append("(")
            pending.append(_CLOSE)
            for i in range(len(item) - 1, -1, -1):
                pending.append(item[i])
                if i:
                    pending.append(_SPACE)
        else:
            out.append(_atom_to_string(item))
    return "".join(out)


def _atom_to_string(expr: LispValue) -> str:
    match expr:
        case Symbol():
            return expr.id
        case int() | float():
            return format_number(expr)
        case Lambda():
            return str(expr)
        case Closure():
            return CLOSURE_PLACEHOLDER
        case Builtin():
            return BUILTIN_PLACEHOLDER
    return str(expr)
