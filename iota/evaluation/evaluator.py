"""Core evaluator for the Iota interpreter.

Implements the evaluation state machine over expression tags. Recursion
depth is bounded by IOTA_MAX_DEPTH, counted in closure calls (see
`apply_closure`); the host recursion limit is raised to fit that budget so
the configured limit is the one that trips.
"""

from __future__ import annotations

import logging
import sys

from iota import SExpression, LispValue
from iota.config import get_max_depth
from iota.types.closure import Closure
from iota.types.environment import Environment
from iota.types.errors import IotaEmptyCall, IotaStackOverflow
from iota.types.lambda_fn import Lambda
from iota.types.symbol import Symbol
from iota.evaluation.apply import apply, call_depth

logger = logging.getLogger(__name__)

# Host frames reserved per closure call, and for the caller below the evaluator.
HOST_FRAMES_PER_CALL = 40
HOST_FRAMES_RESERVED = 1000


def reserve_host_stack(max_depth: int) -> None:
    """Raise (never lower) the host recursion limit to fit `max_depth` calls."""
    needed = max_depth * HOST_FRAMES_PER_CALL + HOST_FRAMES_RESERVED
    if sys.getrecursionlimit() < needed:
        logger.debug("raising host recursion limit to %d", needed)
        sys.setrecursionlimit(needed)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`. Host stack exhaustion surfaces as
    IotaStackOverflow.
    """
    if call_depth() == 0:
        reserve_host_stack(get_max_depth())
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise IotaStackOverflow("Stack overflow: host recursion limit reached") from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """
    Single evaluation step; sub-forms are evaluated through `evaluate`.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Lambda():
            # The only point where an environment is captured.
            logger.debug("closing (fn (%s)) over frame %#x", " ".join(expr.formals), id(env))
            return Closure(expr.formals, expr.body, env)

        case []:
            raise IotaEmptyCall("Cannot evaluate an empty list")

        case [head, *tail_args]:
            fn = evaluate(head, env)
            return apply(fn, tail_args, env, evaluate)

    # --- Numbers, closures and builtins return as-is ---
    return expr
