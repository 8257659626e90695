# Core type aliases for Iota's data model.
# We use plain Python types (float for numbers, list for lists) to represent
# both code (forms) and runtime values. Symbols, function literals, closures
# and builtins have their own small classes under iota.types.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; every evaluated value is also an expression.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type: handed to special forms so they can evaluate sub-forms
EvaluatorFn = Callable[..., LispValue]
