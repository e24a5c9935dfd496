from lispy import LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.values import as_symbol
from lispy.evaluation.evaluator import evaluate


def define_form(env: Environment, args: ConsList) -> LispValue:
    """
    (define name value)
    Rebinds `name` in the nearest scope that already has it, else in the local
    scope. Returns the bound value.
    """
    if args.size() != 2:
        raise LispyArityError("define requires exactly 2 arguments")

    name = as_symbol(args.nth(0))
    value = evaluate(args.nth(1), env)  # normal evaluation
    env.set(name, value)
    return value
