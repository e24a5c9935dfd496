from lispy import LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.symbol import FALSE
from lispy.types.values import value_equal
from lispy.evaluation.evaluator import evaluate


def if_form(env: Environment, args: ConsList) -> LispValue:
    """
    (if cond then [else])
    Only a condition equal to #f selects the else branch; nil, 0 and () do not.
    A missing else branch evaluates to nil.
    """
    if args.size() < 2:
        raise LispyArityError("if requires a condition and a then-expression")

    cond = evaluate(args.nth(0), env)
    if value_equal(cond, FALSE):
        return evaluate(args.nth(2), env)
    return evaluate(args.nth(1), env)
