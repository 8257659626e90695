import pytest

from iota.builtin.env_builtin import global_environment
from iota.evaluation.evaluator import evaluate
from iota.interpreter import Interpreter
from iota.reader.parser import read_all


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return global_environment()


@pytest.fixture
def interp(env):
    """Interpreter sharing the `env` fixture's global frame."""
    return Interpreter(env)


@pytest.fixture
def eval_source(env):
    """Parse and evaluate every form in a source string, returning the last result."""
    def _eval(source: str):
        last = None
        for form in read_all(source):
            last = evaluate(form, env)
        return last
    return _eval
