from iota import EvaluatorFn
from iota import SExpression
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError, IotaTypeError
from iota.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Symbol:
    """
    (def name value)
    Binds in the current frame only; an ancestor's binding of `name` is
    shadowed, never overwritten. Returns the name.
    """
    if len(tail) != 2:
        raise IotaArgumentCountError("def expects exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise IotaTypeError("First argument to def must be a symbol")

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return name
