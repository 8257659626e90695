from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.types.number import is_number
from iota.printer import to_string
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError, IotaTypeError


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise IotaArgumentCountError("if expects exactly 3 arguments")

    cond_expr, then_expr, else_expr = tail
    cond = evaluate_fn(cond_expr, env)
    if not is_number(cond):
        raise IotaTypeError(f"Condition must be a number, got {to_string(cond)}")

    # Zero is false, every other number is true; only one branch runs.
    if cond != 0:
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
