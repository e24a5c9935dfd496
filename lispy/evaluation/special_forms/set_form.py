from lispy import LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.values import as_symbol, copy_value
from lispy.evaluation.evaluator import evaluate


def set_form(env: Environment, args: ConsList) -> LispValue:
    if args.size() != 2:
        raise LispyArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym = as_symbol(args.nth(0))
    value = evaluate(args.nth(1), env)
    env.set(var_sym, value)
    return value


def setq_form(env: Environment, args: ConsList) -> LispValue:
    """(setq var form) binds the form itself, unevaluated."""
    if args.size() != 2:
        raise LispyArityError("setq requires exactly 2 arguments: (setq var form)")
    var_sym = as_symbol(args.nth(0))
    value = copy_value(args.nth(1))
    env.set(var_sym, value)
    return value
