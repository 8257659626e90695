"""Type predicates. They report the tag of the argument expression as
written, without evaluating it: `(number? 5)` is 1, while `(number? x)` is 0
whatever `x` is bound to, because `x` is a symbol."""

from iota import SExpression, EvaluatorFn
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError
from iota.types.number import is_number, truth
from iota.types.symbol import Symbol


def _single_argument(name: str, tail: list[SExpression]) -> SExpression:
    if len(tail) != 1:
        raise IotaArgumentCountError(f"{name} expects exactly 1 argument, got {len(tail)}")
    return tail[0]


def number_p_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> float:
    return truth(is_number(_single_argument("number?", tail)))


def symbol_p_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> float:
    return truth(isinstance(_single_argument("symbol?", tail), Symbol))
