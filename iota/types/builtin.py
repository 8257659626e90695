"""Native procedures bound in the global environment."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from iota import LispValue


class BuiltinKind(Enum):
    """How a builtin receives its arguments.

    EAGER procedures are called as ``procedure(env, args)`` with every
    argument already evaluated, left to right. SPECIAL_FORM procedures are
    called as ``procedure(args, env, evaluate_fn)`` with the raw argument
    expressions and decide themselves what to evaluate.
    """

    EAGER = "eager"
    SPECIAL_FORM = "special-form"


class Builtin:
    """A fixed native procedure with a name and a dispatch kind."""

    __slots__ = ("name", "kind", "procedure")

    def __init__(self, name: str, kind: BuiltinKind, procedure: Callable[..., LispValue]):
        self.name = name
        self.kind = kind
        self.procedure = procedure

    @property
    def is_special_form(self) -> bool:
        return self.kind is BuiltinKind.SPECIAL_FORM

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Builtin)
            and self.name == other.name
            and self.kind is other.kind
        )

    def __hash__(self) -> int:
        return hash((self.name, self.kind))

    def __repr__(self) -> str:
        return f"<Builtin {self.name} ({self.kind.value})>"
