"""Function literal produced by the `fn` special form."""

from __future__ import annotations

from io import StringIO

from iota import SExpression


class Lambda:
    """An unevaluated function literal: formal parameters and a body.

    A Lambda carries no environment. Evaluating it yields a Closure over the
    environment current at that point.

    The `(fn (x) body)` printed form is only seen from host code: the
    application engine turns every Lambda a special form returns into a
    Closure, so the language itself prints `<function>` instead.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: list[str], body: SExpression):
        self.formals: list[str] = list(formals)
        self.body: SExpression = body

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        from iota.printer import to_string

        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(self.formals))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.formals!r}, {self.body!r})"
