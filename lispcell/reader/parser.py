"""
  Lisp Reader, Lexer and Parser

- `lex` turns one line of text into (token_type, token_value) tuples
- `TokenStream` builds cons-cell trees with a shared cursor:

    object := NUMBER | STRING | SYMBOL | '(' tree
    tree   := object tree | ')'

   - numbers -> int (decimal or 0x hex) / float
   - "strings" -> str, quotes stripped
   - anything else -> Symbol, lower-cased
   - lists -> right-nested Pair chain ending in None; () -> None
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, NamedTuple, Optional

from lispcell import SExpression
from lispcell.errors import LispSyntaxError
from lispcell.types.integer import wrap_int
from lispcell.types.pair import from_iterable
from lispcell.types.symbol import Symbol

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<op>[\[\]{}:*/])"  # single-character operators
    r"|(?P<symbol>[A-Za-z_][A-Za-z0-9_]*)"  # identifiers
    r"|(?P<hash>\#[A-Za-z][A-Za-z0-9_]*)"  # #t, #f, ...
    r"|(?P<number>[+-]?(?:0[xX][0-9A-Fa-f]+|[0-9]+(?:\.[0-9]+)?))"  # hex, decimal, float
    r"|(?P<sign>[+-])"  # bare + or -
    r"|(?P<relop>[<>]=?)"  # < > <= >=
    r"|(?P<string>\"(?:'[^\n]|[^\"'\n]|')*(?:\"|(?=\n)|\Z))"  # "strings", '" does not close
)

ATOM_TOKENS = ("op", "symbol", "hash", "sign", "relop")


class ReadResult(NamedTuple):
    expr: SExpression
    extraneous: bool
    blank: bool = False


def _skippable(ch: str) -> bool:
    return ch.isspace() or not ch.isprintable()


def lex(source: str, session=None) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples.

    Whitespace and non-printable characters separate tokens. A character that
    starts no token is reported and skipped.
    """
    pos = 0
    n = len(source)
    while pos < n:
        if _skippable(source[pos]):
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if m is None:
            message = f"unknown character '{source[pos]}' ignored."
            if session is not None:
                session.report(message)
            else:
                logger.warning(message)
            pos += 1
            continue
        yield m.lastgroup, m.group()
        pos = m.end()


def check_balance(tokens: Iterable[tuple[str, str]]) -> None:
    """Raise LispSyntaxError unless '(' and ')' counts match."""
    depth = 0
    for tok_type, _ in tokens:
        if tok_type == "lparen":
            depth += 1
        elif tok_type == "rparen":
            depth -= 1
    if depth != 0:
        raise LispSyntaxError("Unbalanced parentheses.")


def parse_number(text: str) -> int | float:
    """Integer literals wrap into 64 bits, so 0xFFFFFFFFFFFFFFFF reads as -1."""
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    if digits[:2].lower() == "0x":
        return wrap_int(sign * int(digits[2:], 16))
    if "." in digits:
        return sign * float(digits)
    return wrap_int(sign * int(digits))


def parse_string(text: str) -> str:
    """Strip the quotes from a string token; a quote after ' is content."""
    chars = []
    i = 1
    while i < len(text):
        ch = text[i]
        if ch == '"':
            break
        chars.append(ch)
        if ch == "'" and i + 1 < len(text):
            i += 1
            chars.append(text[i])
        i += 1
    return "".join(chars)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

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

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        """Read one object; returns None when no tokens are left."""
        if self.at_end():
            return None
        return self._object()

    def _object(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise LispSyntaxError("unexpected end of input")
        if tok_type == "lparen":
            return self._tree()
        if tok_type == "rparen":
            raise LispSyntaxError("unexpected ')'")
        return _atom(tok_type, tok_val)

    def _tree(self) -> SExpression:
        # One list of collected items per open paren; nesting depth never recurses
        open_lists: list[list[SExpression]] = [[]]
        while True:
            tok_type, tok_val = self.advance()
            if tok_type is None:
                raise LispSyntaxError("unexpected end of input")
            if tok_type == "lparen":
                open_lists.append([])
            elif tok_type == "rparen":
                tree = from_iterable(open_lists.pop())
                if not open_lists:
                    return tree
                open_lists[-1].append(tree)
            else:
                open_lists[-1].append(_atom(tok_type, tok_val))

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self._object()


def _atom(tok_type: str, tok_val: str) -> SExpression:
    if tok_type == "number":
        return parse_number(tok_val)
    if tok_type == "string":
        return parse_string(tok_val)
    return Symbol(tok_val.lower())


def read(line: str, session=None) -> ReadResult:
    """Read the first tree of a line.

    Raises LispSyntaxError for unbalanced or malformed input. `extraneous`
    tells whether tokens were left after the first tree; `blank` that the
    line held no tokens at all.
    """
    tokens = list(lex(line, session))
    check_balance(tokens)
    if not tokens:
        return ReadResult(None, False, True)
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return ReadResult(expr, not stream.at_end())


def read_all(source: str, session=None) -> list[SExpression]:
    """Read every top-level tree of `source`; balance is checked up front."""
    tokens = list(lex(source, session))
    check_balance(tokens)
    return list(TokenStream(tokens).parse_all())
