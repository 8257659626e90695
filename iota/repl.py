"""Interactive read-evaluate-print loop."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from iota.config import get_log_level, get_prompt
from iota.interpreter import Interpreter

EXIT_COMMAND = "exit"


def repl(
    interp: Optional[Interpreter] = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Read one line at a time until `exit` or end of input.

    Each line is evaluated against the same interpreter; the printed result or
    error message is written with `output_fn`.
    """
    interp = interp if interp is not None else Interpreter()
    prompt = get_prompt()
    while True:
        try:
            line = input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            break
        line = line.strip()
        if line == EXIT_COMMAND:
            break
        if not line:
            continue
        output_fn(interp.run(line))


def main() -> int:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    repl()
    return 0
