"""Canonical textual rendering of lispy values.

Nil prints as ``nil``, integers in decimal, text wrapped in double quotes
(no escaping), lists as parenthesized space-separated renderings. Procedures
have no readable form and print as placeholder tokens.
"""

from io import StringIO

from lispy import LispValue
from lispy.types.values import kind_of, NIL, INT, STR, LST, PRC, LAMBDA

PROC_TOKEN = "PROC"
LAMBDA_TOKEN = "<Lambda>"


def _write(value: LispValue, buffer: StringIO) -> None:
    kind = kind_of(value)
    if kind == NIL:
        buffer.write("nil")
    elif kind == INT:
        buffer.write(str(value))
    elif kind == STR:
        buffer.write(f'"{value.text}"')
    elif kind == LST:
        buffer.write("(")
        first = True
        for item in value:
            if not first:
                buffer.write(" ")
            _write(item, buffer)
            first = False
        buffer.write(")")
    elif kind == LAMBDA:
        buffer.write(LAMBDA_TOKEN)
    elif kind == PRC:
        buffer.write(PROC_TOKEN)


def to_repr(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
