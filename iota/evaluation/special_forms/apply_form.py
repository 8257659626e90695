from iota import EvaluatorFn
from iota import SExpression, LispValue
from iota.evaluation.apply import apply_values
from iota.printer import to_string
from iota.types.environment import Environment
from iota.types.errors import IotaArgumentCountError, IotaTypeError


def apply_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (apply fn args)
    Evaluates `fn` to a callable and `args` to a list, then calls the callable
    with the list's elements as its arguments. The elements are values already;
    they are not evaluated again. Delegates to the central application engine
    so closures are scoped exactly as in a direct call.
    """
    if len(tail) != 2:
        raise IotaArgumentCountError(
            "apply expects exactly 2 arguments: function and argument list"
        )

    fn_expr, args_expr = tail

    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)

    if not isinstance(args_val, list):
        raise IotaTypeError(
            f"Second argument to apply must evaluate to a list, got {to_string(args_val)}"
        )

    return apply_values(fn_val, args_val, env, evaluate_fn)
