import pytest

from iota.types.closure import Closure
from iota.types.errors import (
    IotaArgumentCountError,
    IotaArityMismatch,
    IotaEmptyList,
    IotaTypeError,
)
from iota.types.symbol import Symbol


# ------------------ quote ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote x)", Symbol("x")),
        ("(quote 42)", 42.0),
        ("(quote ())", []),
        ("(quote (def x 42))", [Symbol("def"), Symbol("x"), 42.0]),
        ("(quote (1 (2 (3 undefined))))", [1.0, [2.0, [3.0, Symbol("undefined")]]]),
    ]
)
def test_quote_returns_argument_unevaluated(eval_source, source, expected):
    assert eval_source(source) == expected


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


# ------------------ def ------------------

def test_def_returns_symbol_and_binds(env, eval_source):
    assert eval_source("(def x 42)") == Symbol("x")
    assert eval_source("x") == 42.0
    assert env.lookup(Symbol("x")) == 42.0


def test_def_evaluates_value_once(eval_source):
    assert eval_source("(def y (+ 1 2)) y") == 3.0


def test_def_rebinds(eval_source):
    assert eval_source("(def x 1) (def x 2) x") == 2.0


@pytest.mark.parametrize("source", ["(def x)", "(def x 1 2)", "(def)"])
def test_def_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


def test_def_requires_symbol_name(eval_source):
    with pytest.raises(IotaTypeError):
        eval_source("(def 1 2)")
    with pytest.raises(IotaTypeError):
        eval_source("(def (x) 2)")


def test_def_inside_function_is_local(eval_source):
    src = """
    (def x 1)
    (def f (fn (y) (def x y)))
    (f 99)
    x
    """
    assert eval_source(src) == 1.0


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 1 42 0)", 42.0),
        ("(if 0 42 99)", 99.0),
        ("(if -1 1 2)", 1.0),
        ("(if 0.5 1 2)", 1.0),
        ("(if (+ 1 -1) 1 2)", 2.0),
        ("(if 0 (first (quote ())) 1)", 1.0),
        ("(if 1 1 (first (quote ())))", 1.0),
        ("(if 1 (quote yes) undefined-symbol)", Symbol("yes")),
    ]
)
def test_if(eval_source, source, expected):
    assert eval_source(source) == expected


@pytest.mark.parametrize("source", ["(if (quote a) 1 2)", "(if (list) 1 2)", "(if + 1 2)"])
def test_if_condition_must_be_number(eval_source, source):
    with pytest.raises(IotaTypeError):
        eval_source(source)


@pytest.mark.parametrize("source", ["(if 1 2)", "(if 1 2 3 4)", "(if)"])
def test_if_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


# ------------------ fn ------------------

def test_fn_produces_closure(env, eval_source):
    result = eval_source("(fn (x) x)")
    assert isinstance(result, Closure)
    assert result.formals == ["x"]
    assert result.body == Symbol("x")
    assert result.env is env


def test_fn_identity_call(eval_source):
    assert eval_source("((fn (x) x) 42)") == 42.0


def test_fn_zero_parameters(eval_source):
    assert eval_source("((fn () 7))") == 7.0


def test_fn_body_is_not_evaluated_at_definition(eval_source):
    assert isinstance(eval_source("(fn () (first (quote ())))"), Closure)


def test_fn_arity_mismatch(eval_source):
    with pytest.raises(IotaArityMismatch) as exc:
        eval_source("((fn (x) x) 1 2)")
    assert exc.value.kind == "ArityMismatch"
    with pytest.raises(IotaArityMismatch):
        eval_source("((fn (x y) x) 1)")


def test_fn_duplicate_parameters_last_wins(eval_source):
    assert eval_source("((fn (x x) x) 1 2)") == 2.0


@pytest.mark.parametrize("source", ["(fn (x))", "(fn (x) x x)", "(fn)"])
def test_fn_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


@pytest.mark.parametrize("source", ["(fn x x)", "(fn (1) 1)", "(fn ((x)) x)"])
def test_fn_parameters_must_be_symbol_list(eval_source, source):
    with pytest.raises(IotaTypeError):
        eval_source(source)


def test_recursive_function(eval_source):
    src = """
    (def sum-to (fn (n) (if n (+ n (sum-to (+ n -1))) 0)))
    (sum-to 10)
    """
    assert eval_source(src) == 55.0


def test_higher_order_function(eval_source):
    src = """
    (def twice (fn (f x) (f (f x))))
    (twice (fn (n) (+ n 10)) 1)
    """
    assert eval_source(src) == 21.0


# ------------------ list, first, rest ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list)", []),
        ("(list 1 2)", [1.0, 2.0]),
        ("(list (+ 1 1) (quote a) (list))", [2.0, Symbol("a"), []]),
        ("(first (quote (1 2)))", 1.0),
        ("(first (list (quote (a)) 2))", [Symbol("a")]),
        ("(rest (quote (1 2)))", [2.0]),
        ("(rest (quote (1)))", []),
        ("(rest (list 1 2 3))", [2.0, 3.0]),
    ]
)
def test_list_operations(eval_source, source, expected):
    assert eval_source(source) == expected


def test_rest_returns_new_list(env, eval_source):
    eval_source("(def xs (quote (1 2 3)))")
    tail = eval_source("(rest xs)")
    tail.append(9.0)
    assert env.lookup(Symbol("xs")) == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("name", ["first", "rest"])
def test_first_rest_on_empty_list(eval_source, name):
    with pytest.raises(IotaEmptyList) as exc:
        eval_source(f"({name} (quote ()))")
    assert exc.value.kind == "EmptyList"


@pytest.mark.parametrize("name", ["first", "rest"])
@pytest.mark.parametrize("arg", ["1", "(quote a)", "+"])
def test_first_rest_on_non_list(eval_source, name, arg):
    with pytest.raises(IotaTypeError):
        eval_source(f"({name} {arg})")


@pytest.mark.parametrize("source", ["(first)", "(rest (list 1) (list 2))"])
def test_first_rest_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


# ------------------ predicates ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(number? 1)", 1.0),
        ("(number? (+ 1 2))", 0.0),
        ("(number? (quote a))", 0.0),
        ("(number? (list))", 0.0),
        ("(symbol? (quote a))", 0.0),
        ("(symbol? a)", 1.0),
        ("(symbol? 1)", 0.0),
        ("(symbol? (quote (a)))", 0.0),
        ("(symbol? +)", 1.0),
    ]
)
def test_predicates(eval_source, source, expected):
    result = eval_source(source)
    assert result == expected
    assert isinstance(result, float)


def test_predicates_inspect_the_unevaluated_argument(eval_source):
    assert eval_source("(def n 5) (number? n)") == 0.0
    assert eval_source("(symbol? n)") == 1.0
    assert eval_source("(symbol? not-bound)") == 1.0
    assert eval_source("(number? (first (list 1)))") == 0.0


@pytest.mark.parametrize("source", ["(number?)", "(symbol? 1 2)"])
def test_predicate_argument_count(eval_source, source):
    with pytest.raises(IotaArgumentCountError):
        eval_source(source)


def test_builtins_can_be_rebound(eval_source):
    assert eval_source("(def plus +) (plus 1 2)") == 3.0
    assert eval_source("(def q quote) (q (a b))") == [Symbol("a"), Symbol("b")]
