"""Application engine for Iota.

This module centralizes function application semantics for the interpreter:
- Closures get a fresh frame whose parent is the closure's captured frame
  (lexical scoping), on every call path.
- Eager builtins receive evaluated arguments, evaluated left to right.
- Special forms receive the raw argument expressions.

Both the evaluator (call forms) and the `apply` special form go through
here, so the scoping discipline cannot drift between the two.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar

from iota import SExpression, LispValue, EvaluatorFn
from iota.config import get_max_depth
from iota.types.builtin import Builtin
from iota.types.closure import Closure
from iota.types.environment import Environment
from iota.types.errors import IotaArityMismatch, IotaNotCallable, IotaStackOverflow
from iota.types.lambda_fn import Lambda
from iota.types.symbol import Symbol
from iota.printer import to_string

logger = logging.getLogger(__name__)

# Closure calls currently active in this context.
_call_depth: ContextVar[int] = ContextVar("iota_call_depth", default=0)


def call_depth() -> int:
    return _call_depth.get()


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind already-evaluated `args` to the closure's formals and run its body.

    The new frame is a child of the closure's captured environment, never of
    the caller's. Raises IotaStackOverflow once more than IOTA_MAX_DEPTH
    calls are active.
    """
    _check_arity(fn, len(args))
    depth = _call_depth.get()
    limit = get_max_depth()
    if depth >= limit:
        raise IotaStackOverflow(f"Stack overflow: function calls nested deeper than {limit} levels")
    frame = Environment.child_of(fn.env)
    for name, value in zip(fn.formals, args):
        frame.define(Symbol(name), value)
    logger.debug("call depth %d: new frame %#x binds %s", depth + 1, id(frame), fn.formals)
    token = _call_depth.set(depth + 1)
    try:
        return evaluate_fn(fn.body, frame)
    finally:
        _call_depth.reset(token)


def call_special_form(
    form: Builtin,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Invoke a special form on raw argument expressions.

    A Lambda literal handed back by the form is evaluated in `env`, so a
    `(fn ...)` form yields a closure over the frame it appeared in.
    """
    result = form.procedure(list(arg_exprs), env, evaluate_fn)
    if isinstance(result, Lambda):
        return evaluate_fn(result, env)
    return result


def apply(
    head: LispValue,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the evaluated head of a call form to its raw argument expressions."""
    if isinstance(head, Closure):
        _check_arity(head, len(arg_exprs))
        args = [evaluate_fn(arg, env) for arg in arg_exprs]
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        if head.is_special_form:
            return call_special_form(head, arg_exprs, env, evaluate_fn)
        args = [evaluate_fn(arg, env) for arg in arg_exprs]
        return head.procedure(env, args)
    raise IotaNotCallable(_not_callable_message(head))


def apply_values(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a callable to values that are already evaluated.

    Used by the `apply` special form. Values are never evaluated a second
    time; a special form receives them as its raw arguments.
    """
    if isinstance(head, Closure):
        return apply_closure(head, list(args), evaluate_fn)
    if isinstance(head, Builtin):
        if head.is_special_form:
            return call_special_form(head, args, env, evaluate_fn)
        return head.procedure(env, list(args))
    raise IotaNotCallable(_not_callable_message(head))


def _check_arity(fn: Closure, provided: int) -> None:
    if provided != fn.arity:
        raise IotaArityMismatch(
            f"Argument count does not match parameter count: "
            f"expected {fn.arity}, got {provided}"
        )


def _not_callable_message(head: LispValue) -> str:
    return f"Cannot apply non-function {to_string(head)}"
