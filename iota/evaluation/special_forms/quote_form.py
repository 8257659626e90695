from iota import SExpression, LispValue, EvaluatorFn
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise IotaArgumentCountError("quote expects exactly 1 argument")
    return tail[0]
