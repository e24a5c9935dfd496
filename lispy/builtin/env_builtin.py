"""Built-in procedures for the lispy runtime environment.

Every builtin is a native procedure `fn(env, args)` receiving the unevaluated
argument forms; each one evaluates the operands it needs, left to right.
`register` installs these together with the special forms and the literal
bindings into a root environment.
"""
from __future__ import annotations

import operator
from typing import Callable, Iterator

from lispy import LispValue
from lispy.errors import LispyArithmeticError, LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.nil import Nil
from lispy.types.symbol import Symbol, TRUE, FALSE, truth
from lispy.types.values import as_int, as_list, copy_value, value_equal
from lispy.evaluation.evaluator import evaluate
from lispy.evaluation.special_forms import SPECIAL_FORMS


def _evaluated(env: Environment, args: ConsList) -> Iterator[LispValue]:
    for form in args:
        yield evaluate(form, env)


def _integers(env: Environment, args: ConsList) -> Iterator[int]:
    for value in _evaluated(env, args):
        yield as_int(value)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: ConsList) -> LispValue:
    """Sum of all arguments; 0 when there are none."""
    result = 0
    for x in _integers(env, args):
        result += x
    return result


def mul(env: Environment, args: ConsList) -> LispValue:
    """Product of all arguments; 1 when there are none."""
    result = 1
    for x in _integers(env, args):
        result *= x
    return result


def sub(env: Environment, args: ConsList) -> LispValue:
    """Subtract all subsequent arguments from the first."""
    if args.empty():
        raise LispyArityError("- requires at least 1 argument")
    operands = _integers(env, args)
    result = next(operands)
    for x in operands:
        result -= x
    return result


def _truncating_div(n: int, d: int) -> int:
    try:
        q = abs(n) // abs(d)
    except ZeroDivisionError as e:
        raise LispyArithmeticError("Division by zero") from e
    return q if (n < 0) == (d < 0) else -q


def div(env: Environment, args: ConsList) -> LispValue:
    """Divide the first argument by each subsequent one, truncating toward zero."""
    if args.empty():
        raise LispyArityError("/ requires at least 1 argument")
    operands = _integers(env, args)
    result = next(operands)
    for x in operands:
        result = _truncating_div(result, x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _against_first(
    env: Environment,
    args: ConsList,
    fails: Callable[[int, int], bool],
    name: str,
) -> Symbol:
    """#f as soon as `fails(first, x)` for a later operand x, else #t.

    Every operand is compared with the first one, not with its neighbour.
    Operands after the first failure are not evaluated.
    """
    if args.empty():
        raise LispyArityError(f"{name} requires at least 1 argument")
    operands = _integers(env, args)
    first = next(operands)
    return truth(not any(fails(first, x) for x in operands))


def lt(env: Environment, args: ConsList) -> Symbol:
    """#t unless the first argument exceeds a later one: (< 1 3 2) => #t."""
    return _against_first(env, args, operator.gt, "<")


def gt(env: Environment, args: ConsList) -> Symbol:
    """#t unless the first argument is below a later one: (> 3 1 2) => #t."""
    return _against_first(env, args, operator.lt, ">")


def _chain(env: Environment, args: ConsList) -> Symbol:
    """#t if every adjacent pair is value-equal; stops evaluating at the first mismatch."""
    operands = _evaluated(env, args)
    prev = next(operands, None)
    if prev is None:
        return TRUE
    for value in operands:
        if not value_equal(prev, value):
            return FALSE
        prev = value
    return TRUE


def equals(env: Environment, args: ConsList) -> Symbol:
    """#t if all arguments are value-equal."""
    return _chain(env, args)


# -------------------------------
# Lists
# -------------------------------
def car(env: Environment, args: ConsList) -> LispValue:
    """First element of the evaluated list; nil for the empty list."""
    xs = as_list(evaluate(args.front(), env))
    return copy_value(xs.front())


def cdr(env: Environment, args: ConsList) -> LispValue:
    """Everything after the first element of the evaluated list."""
    xs = as_list(evaluate(args.front(), env))
    return xs.rest()


def list_builtin(env: Environment, args: ConsList) -> LispValue:
    """Construct a list from the evaluated arguments."""
    return ConsList.from_iterable(copy_value(v) for v in _evaluated(env, args))


def length(env: Environment, args: ConsList) -> LispValue:
    return as_list(evaluate(args.front(), env)).size()


def append(env: Environment, args: ConsList) -> LispValue:
    """Splice every evaluated list onto the tail of a copy of the first."""
    result = ConsList()
    for value in _evaluated(env, args):
        result.extend(as_list(value))
    return result


def cons(env: Environment, args: ConsList) -> LispValue:
    """(cons x xs) -> a new list with x in front of a copy of xs."""
    head = copy_value(evaluate(args.nth(0), env))
    result = ConsList(head)
    result.extend(as_list(evaluate(args.nth(1), env)))
    return result


def register(env: Environment) -> None:
    """Register all builtin procedures, special forms and constants into `env`."""
    env.update(
        {
            Symbol("+"): add,
            Symbol("-"): sub,
            Symbol("*"): mul,
            Symbol("/"): div,
            Symbol("<"): lt,
            Symbol(">"): gt,
            Symbol("="): equals,
            Symbol("car"): car,
            Symbol("cdr"): cdr,
            Symbol("list"): list_builtin,
            Symbol("length"): length,
            Symbol("append"): append,
            Symbol("cons"): cons,
        }
    )
    env.update(SPECIAL_FORMS)
    env.define(Symbol("nil"), Nil)
    env.define(Symbol("#t"), TRUE)
    env.define(Symbol("#f"), FALSE)
