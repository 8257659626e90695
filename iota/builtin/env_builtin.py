"""Built-in procedures for the Iota runtime environment.

This module defines the eager builtins (arithmetic and list processing)
and `register`, which loads them together with the special forms, the type
predicates among them, into the global environment as Builtin values.
"""
from __future__ import annotations

from iota import LispValue
from iota.evaluation.special_forms import SPECIAL_FORMS
from iota.printer import to_string
from iota.types.builtin import Builtin, BuiltinKind
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError, IotaEmptyList, IotaTypeError
from iota.types.number import is_number
from iota.types.symbol import Symbol


def _expect_count(name: str, expr: list[LispValue], count: int) -> None:
    if len(expr) != count:
        plural = "argument" if count == 1 else "arguments"
        raise IotaArgumentCountError(
            f"{name} expects exactly {count} {plural}, got {len(expr)}"
        )


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Return the sum of all arguments; (+) is 0; errors if any arg is non-numeric."""
    result = 0.0
    for x in expr:
        if not is_number(x):
            raise IotaTypeError(f"Non-numeric argument to +: {to_string(x)}")
        result += x
    return result


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments, in order."""
    return list(expr)


def _non_empty_list(name: str, expr: list[LispValue]) -> list[LispValue]:
    _expect_count(name, expr, 1)
    xs = expr[0]
    if not isinstance(xs, list):
        raise IotaTypeError(f"Argument to {name} must be a list, got {to_string(xs)}")
    if not xs:
        raise IotaEmptyList(f"Cannot take {name} of an empty list")
    return xs


def first(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a non-empty list."""
    return _non_empty_list("first", expr)[0]


def rest(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list holding all but the first element of a non-empty list."""
    return _non_empty_list("rest", expr)[1:]


EAGER_BUILTINS = {
    Symbol("+"): add,
    Symbol("list"): list_builtin,
    Symbol("first"): first,
    Symbol("rest"): rest,
}


def register(env: Environment) -> None:
    """Register all builtin procedures and special forms into the given environment."""
    env.update(
        {
            name: Builtin(name.id, BuiltinKind.EAGER, procedure)
            for name, procedure in EAGER_BUILTINS.items()
        }
    )
    env.update(
        {
            name: Builtin(name.id, BuiltinKind.SPECIAL_FORM, handler)
            for name, handler in SPECIAL_FORMS.items()
        }
    )


def global_environment() -> Environment:
    """Create a fresh root frame with every builtin registered."""
    env = Environment()
    register(env)
    return env
