"""Kind tags, checked accessors and value-semantics helpers.

Every lispy value is a plain Python object; `kind_of` recovers the variant tag
used in error messages and by the checked accessors.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.errors import LispyTypeMismatch
from lispy.types.cons import ConsList
from lispy.types.lambda_fn import Lambda
from lispy.types.nil import NilType
from lispy.types.symbol import Symbol

NIL = "NIL"
INT = "INT"
STR = "STR"
LST = "LST"
PRC = "PRC"
LAMBDA = "LAMBDA"


def kind_of(value: LispValue) -> str:
    match value:
        case NilType():
            return NIL
        case bool():
            pass
        case int():
            return INT
        case Symbol():
            return STR
        case ConsList():
            return LST
        case Lambda():
            return LAMBDA
        case _ if callable(value):
            return PRC
    raise LispyTypeMismatch(f"Not a lispy value: {value!r}")


def expect(value: LispValue, kind: str) -> None:
    actual = kind_of(value)
    if actual != kind:
        raise LispyTypeMismatch(f"Unexpected type {kind}, mine {actual}")


def as_int(value: LispValue) -> int:
    expect(value, INT)
    return value


def as_symbol(value: LispValue) -> Symbol:
    expect(value, STR)
    return value


def as_text(value: LispValue) -> str:
    return as_symbol(value).text


def as_list(value: LispValue) -> ConsList:
    expect(value, LST)
    return value


def is_callable(value: LispValue) -> bool:
    return kind_of(value) in (PRC, LAMBDA)


def copy_value(value: LispValue) -> LispValue:
    """Copy with value semantics: lists are cloned, everything else is immutable.

    Lambdas are shared; each already owns a private snapshot of its scope.
    """
    if isinstance(value, ConsList):
        return value.copy()
    return value


def value_equal(a: LispValue, b: LispValue) -> bool:
    """Same kind and same contents (structural for lists, identity for procedures)."""
    return kind_of(a) == kind_of(b) and a == b
