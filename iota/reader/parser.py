"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives:

    - numbers -> float
    - lists -> Python list
    - everything else -> Symbol

  Lexing rules:

    - whitespace separates tokens; '(' and ')' are tokens of their own
    - a double quote toggles verbatim mode, in which whitespace and
      parentheses are ordinary characters; the quotes are dropped
    - a backslash takes the next character verbatim
    - a token that involved quoting or escaping is always a symbol, so
      "42" reads as the symbol 42 rather than the number
"""

from __future__ import annotations

from typing import Iterator, Optional

from iota import SExpression
from iota.types.errors import IotaSyntaxError
from iota.types.symbol import Symbol


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples.

    Token types are "lparen", "rparen", "symbol" (a bare token) and
    "string" (a token built with quoting or escaping).
    """
    chars: list[str] = []
    quoted = False  # current token used '"' or '\'
    verbatim = False
    escaped = False

    def flush():
        nonlocal quoted
        if chars or quoted:
            tok_type = "string" if quoted else "symbol"
            value = "".join(chars)
            chars.clear()
            quoted = False
            return tok_type, value
        return None

    for ch in source:
        if escaped:
            chars.append(ch)
            escaped = False
        elif ch == "\\":
            escaped = True
            quoted = True
        elif ch == '"':
            verbatim = not verbatim
            quoted = True
        elif verbatim:
            chars.append(ch)
        elif ch.isspace():
            if (tok := flush()) is not None:
                yield tok
        elif ch in "()":
            if (tok := flush()) is not None:
                yield tok
            yield ("lparen" if ch == "(" else "rparen"), ch
        else:
            chars.append(ch)

    if escaped:
        raise IotaSyntaxError("Unexpected end of input after '\\'")
    if verbatim:
        raise IotaSyntaxError("Unterminated '\"' at end of input")
    if (tok := flush()) is not None:
        yield tok


def parse_number(token: str) -> Optional[float]:
    """Return the float a bare token denotes, or None if it is a symbol."""
    # float() also accepts digit separators and padding; plain tokens do not.
    if "_" in token or token != token.strip():
        return None
    try:
        return float(token)
    except ValueError:
        return None


# Deepest list nesting the reader accepts.
MAX_NESTING = 1000


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []
        self.nesting = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next expression, or return None when input is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            number = parse_number(tok_val)
            return Symbol(tok_val) if number is None else number

        if tok_type == "string":
            self.advance()
            return Symbol(tok_val)

        if tok_type == "lparen":
            self.advance()
            if self.nesting >= MAX_NESTING:
                raise IotaSyntaxError("Expression nested too deeply")
            self.nesting += 1
            items = []
            try:
                while True:
                    next_type, _ = self.peek()
                    if next_type is None:
                        raise IotaSyntaxError("Unexpected end of input")
                    if next_type == "rparen":
                        self.advance()
                        return items
                    items.append(self.parse_expr())
            finally:
                self.nesting -= 1

        if tok_type == "rparen":
            raise IotaSyntaxError("Unexpected ')'")

        raise IotaSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_top(self) -> Optional[SExpression]:
        """parse_expr for a top-level form; host stack exhaustion is a syntax error."""
        try:
            return self.parse_expr()
        except RecursionError:
            raise IotaSyntaxError("Expression nested too deeply") from None

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_top()


def read(source: str) -> SExpression:
    """Parse exactly one expression from `source`.

    Raises IotaSyntaxError on empty input, unbalanced parentheses, or tokens
    left over after the first complete expression.
    """
    stream = TokenStream(lex(source))
    expr = stream.parse_top()
    if expr is None:
        raise IotaSyntaxError("Unexpected end of input")
    if stream.peek()[0] is not None:
        raise IotaSyntaxError("Unexpected tokens at end of input")
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Lazily parse every top-level expression in `source`."""
    return TokenStream(lex(source)).parse_all()
