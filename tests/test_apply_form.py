import pytest

from iota.types.errors import (
    IotaArgumentCountError,
    IotaArityMismatch,
    IotaEmptyList,
    IotaNotCallable,
    IotaTypeError,
)
from iota.types.symbol import Symbol


# -----------------------------
# Apply form basic behaviors
# -----------------------------

def test_apply_builtin_plus_with_list(eval_source):
    assert eval_source("(apply + (list 1 2))") == 3.0
    assert eval_source("(apply + (list))") == 0.0


def test_apply_lambda_defined_via_def(eval_source):
    src = """
    (def add2 (fn (a b) (+ a b)))
    (apply add2 (list 10 20))
    """
    assert eval_source(src) == 30.0


def test_apply_inline_fn(eval_source):
    assert eval_source("(apply (fn (x y) (+ x y)) (quote (1 2)))") == 3.0


def test_apply_does_not_evaluate_list_elements_again(eval_source):
    # (list (quote (1 2))) is ((1 2)); a second evaluation would try to call 1
    assert eval_source("(apply first (list (quote (1 2))))") == 1.0
    assert eval_source("(apply list (quote (a b)))") == [Symbol("a"), Symbol("b")]


def test_apply_special_form_receives_elements_raw(eval_source):
    assert eval_source("(apply quote (list 5))") == 5.0
    assert eval_source("(apply if (list 1 2 3))") == 2.0


def test_apply_args_must_evaluate_to_list(eval_source):
    with pytest.raises(IotaTypeError) as exc:
        eval_source("(apply + 123)")
    assert "must evaluate to a list" in str(exc.value)


def test_apply_second_argument_is_evaluated(eval_source):
    assert eval_source("(def args (list 4 5)) (apply + args)") == 9.0


def test_apply_non_callable(eval_source):
    with pytest.raises(IotaNotCallable):
        eval_source("(apply 1 (list 1))")
    with pytest.raises(IotaNotCallable):
        eval_source("(apply (quote f) (list 1))")


@pytest.mark.parametrize("source", ["(apply +)", "(apply + (list 1) (list 2))", "(apply)"])
def test_apply_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


def test_apply_arity_error_from_lambda(eval_source):
    src = """
    (def id (fn (x) x))
    (apply id (list))
    """
    with pytest.raises(IotaArityMismatch):
        eval_source(src)


def test_apply_propagates_callee_errors(eval_source):
    with pytest.raises(IotaEmptyList):
        eval_source("(apply first (list (list)))")
