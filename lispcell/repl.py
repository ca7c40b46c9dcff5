"""Line-oriented read-eval-print loop.

Each line holds one expression. The loop echoes the parsed tree, prints the
value, then any diagnostics the evaluation produced.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from lispcell.errors import LispError
from lispcell.interpreter import Interpreter
from lispcell.printer import to_string


def _show_diagnostics(interp: Interpreter, out: TextIO) -> None:
    for message in interp.diagnostics:
        print(message, file=out)


def eval_line(interp: Interpreter, line: str, out: TextIO) -> None:
    """Read, evaluate and print a single line."""
    try:
        result = interp.read(line)
    except LispError as e:
        _show_diagnostics(interp, out)
        print(e, file=out)
        return
    if result.blank:
        _show_diagnostics(interp, out)
        return

    print(f'"{to_string(result.expr)}"', file=out)
    session = interp.session
    try:
        value = interp.eval_expr(result.expr, session)
    except LispError as e:
        print(e, file=out)
    else:
        print(to_string(value), file=out)
    _show_diagnostics(interp, out)
    if result.extraneous:
        print("extraneous input ignored.", file=out)


def repl(
    interp: Optional[Interpreter] = None,
    prompt: str = "L> ",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Run the loop until end of input."""
    interp = interp or Interpreter()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        eval_line(interp, line.rstrip("\n"), stdout)
