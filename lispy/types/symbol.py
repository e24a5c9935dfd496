from __future__ import annotations
import sys


class Symbol:
    """Text value: both a bare symbol name and an opaque string.

    There is no separate string-literal syntax, so the same payload is looked
    up when evaluated and rendered as a quoted string when printed. Two Text
    values are equal when their payloads are; ordering is by payload, which
    is what `env` uses to list bindings.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = sys.intern(text)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __lt__(self, other: Symbol) -> bool:
        return self.text < other.text

    def __repr__(self):
        return f"Symbol({self.text!r})"

    def __str__(self):
        return self.text


TRUE = Symbol("#t")
FALSE = Symbol("#f")


def truth(flag: bool) -> Symbol:
    """The #t or #f literal for a host boolean."""
    return TRUE if flag else FALSE
