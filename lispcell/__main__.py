from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from lispcell import __version__
from lispcell.config import get_prompt, setup_logging
from lispcell.errors import LispError
from lispcell.interpreter import Interpreter
from lispcell.printer import to_string
from lispcell.repl import repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispcell", description="A minimal Lisp interpreter.")
    parser.add_argument("file", nargs="?", help="source file to evaluate")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE and print the result")
    parser.add_argument("--prompt", default=None, help="REPL prompt")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _run(interp: Interpreter, code: str) -> int:
    try:
        value = interp.eval(code)
    except LispError as e:
        for message in interp.diagnostics:
            print(message, file=sys.stderr)
        print(e, file=sys.stderr)
        return 1
    for message in interp.diagnostics:
        print(message, file=sys.stderr)
    print(to_string(value))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    interp = Interpreter()
    if args.code is not None:
        return _run(interp, args.code)
    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            return _run(interp, f.read())
    repl(interp, prompt=args.prompt if args.prompt is not None else get_prompt())
    return 0


if __name__ == "__main__":
    sys.exit(main())
