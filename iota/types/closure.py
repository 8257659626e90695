"""Closure: a function literal bound to the frame it was evaluated in."""

from __future__ import annotations

from iota import SExpression
from iota.types.environment import Environment


class Closure:
    """A first-class function with formal parameters, body, and captured env.

    The captured environment is held by reference, so later `def`s into that
    frame are visible to the closure, and several closures may share it.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[str], body: SExpression, env: Environment):
        self.formals: list[str] = list(formals)
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __eq__(self, other: object) -> bool:
        # Frames compare by identity: two closures are the same function only
        # if they close over the very same frame.
        return (
            isinstance(other, Closure)
            and self.formals == other.formals
            and self.body == other.body
            and self.env is other.env
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(self.formals)}) env_id={id(self.env)}>"
