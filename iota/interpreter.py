"""Top-level entry point: read, evaluate and print Iota source."""

from __future__ import annotations

import logging
from typing import Optional

from iota import LispValue
from iota.builtin.env_builtin import global_environment
from iota.evaluation.evaluator import evaluate
from iota.printer import to_string
from iota.reader.parser import read, read_all
from iota.types.environment import Environment
from iota.types.errors import IotaError, IotaStackOverflow, IotaSyntaxError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Iota code against one persistent global environment,
    so definitions survive across calls.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env: Environment = env if env is not None else global_environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate a single expression. Raises IotaError on failure."""
        expr = read(code)
        logger.debug("evaluating %s", to_string(expr))
        return evaluate(expr, self.env)

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every top-level expression in order; return the last value."""
        result: LispValue = None
        seen = False
        for expr in read_all(code):
            result = evaluate(expr, self.env)
            seen = True
        if not seen:
            raise IotaSyntaxError("Unexpected end of input")
        return result

    def run(self, code: str) -> str:
        """Evaluate `code` and return its printed value or an error message.

        Errors never escape: they come back as "Error: <message>".
        """
        try:
            return to_string(self.eval(code))
        except IotaError as e:
            logger.debug("%s: %s", e.kind, e)
            return f"Error: {e}"
        except RecursionError:
            e = IotaStackOverflow("Stack overflow: host recursion limit reached")
            logger.debug("%s: %s", e.kind, e)
            return f"Error: {e}"


def run(source: str, env: Optional[Environment] = None) -> str:
    """Evaluate one source string against `env` (a fresh global env by default)."""
    return Interpreter(env).run(source)
