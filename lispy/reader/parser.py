"""
  Lisp Reader: lexer and recursive-descent parser

- Streaming, lazy tokenizing: `lex` yields tokens on demand
- Tokens are "(", ")" or any maximal run of other non-whitespace characters
- No string literals, no escapes, no comments, no reader macros

Parsed forms use the runtime value types directly:

    - lists   -> ConsList
    - numbers -> int (optional sign; 0x hexadecimal, leading 0 octal, decimal)
    - nil     -> Nil (any case)
    - anything else -> Symbol with the raw token text

An unterminated list is not an error: the parser returns what it has read.
"""

from __future__ import annotations

import re
from typing import Iterator, Iterable, Optional

from lispy import SExpression
from lispy.types.cons import ConsList
from lispy.types.nil import Nil
from lispy.types.symbol import Symbol


TOKEN_RE = re.compile(r"[()]|[^\s()]+")

INTEGER_RE = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)"  # hexadecimal
    r"|(?P<oct>0[0-7]*)"  # octal, including a lone 0
    r"|(?P<dec>[1-9][0-9]*))"  # decimal
)

LPAREN = "("
RPAREN = ")"


def lex(source: str) -> Iterator[str]:
    """Token generator: yields parentheses and atoms, skipping whitespace."""
    for match in TOKEN_RE.finditer(source):
        yield match.group()


def parse_integer(token: str) -> Optional[int]:
    """Base-prefix aware integer parse; None if `token` is not an integer."""
    m = INTEGER_RE.fullmatch(token)
    if m is None:
        return None
    if m.group("hex") is not None:
        value = int(m.group("hex"), 16)
    elif m.group("oct") is not None:
        value = int(m.group("oct"), 8)
    else:
        value = int(m.group("dec"), 10)
    return -value if m.group("sign") == "-" else value


class TokenStream:
    def __init__(self, token_iter: Iterable[str]):
        self.tokens = iter(token_iter)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def has_next(self) -> bool:
        return self.peek() is not None

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            return Nil

        if tok == LPAREN:
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    # Unterminated: hand back the partial list
                    break
                if nxt == RPAREN:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return ConsList.from_iterable(items)

        if tok.lower() == "nil":
            return Nil
        number = parse_integer(tok)
        if number is not None:
            return number
        return Symbol(tok)

    def parse_all(self) -> Iterator[SExpression]:
        while self.has_next():
            yield self.parse_expr()


def parse_one(tokens: TokenStream) -> SExpression:
    """Parse a single form from `tokens`; Nil when no tokens remain."""
    return tokens.parse_expr()


def parse_program(source: str) -> Iterator[SExpression]:
    """Lazily parse every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
