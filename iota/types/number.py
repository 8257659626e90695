"""Numbers are Python floats; they double as the language's booleans."""

from __future__ import annotations

from iota import LispValue

TRUE = 1.0
FALSE = 0.0


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but never a language value
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def truth(flag: bool) -> float:
    return TRUE if flag else FALSE
