from iota import EvaluatorFn
from iota import SExpression
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError, IotaTypeError
from iota.types.lambda_fn import Lambda
from iota.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Lambda:
    """
    (fn (params...) body)
    Builds the function literal only; nothing is evaluated and no environment
    is captured here. Duplicate parameter names are accepted, the last one wins.
    """
    if len(tail) != 2:
        raise IotaArgumentCountError("fn expects exactly 2 arguments")

    params, body = tail
    if not isinstance(params, list):
        raise IotaTypeError("Function parameters must be a list")
    if not all(isinstance(p, Symbol) for p in params):
        raise IotaTypeError("Function parameters must be symbols")

    return Lambda([p.id for p in params], body)
