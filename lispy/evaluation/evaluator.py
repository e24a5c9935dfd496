"""Core evaluator for the lispy interpreter.

There is no special-form table here. A non-empty list form is evaluated by
looking up its head symbol, unevaluated, and handing the resulting callable
the environment together with the unevaluated rest of the form. Each callable
decides which operands to evaluate: `quote` evaluates none, `+` evaluates all.
"""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.errors import LispyTypeMismatch
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
from lispy.types.nil import NilType
from lispy.types.symbol import Symbol
from lispy.types.values import as_symbol
from lispy.evaluation.apply import apply


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case NilType():
            return expr
        case bool():
            pass
        case int():
            return expr
        case Symbol():
            return env.lookup(expr)
        case ConsList():
            if expr.empty():
                # The empty list is self-quoting
                return expr
            head = env.lookup(as_symbol(expr.front()))
            return apply(head, env, expr.rest(), evaluate)
        case Lambda():
            return evaluate(expr.body, expr.env)
        case _ if callable(expr):
            return expr(env, ConsList())
    raise LispyTypeMismatch(f"Cannot evaluate {expr!r}")
