from lispy import LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.evaluation.evaluator import evaluate


def eval_form(env: Environment, args: ConsList) -> LispValue:
    """(eval x): evaluate x, then evaluate the result."""
    if args.size() != 1:
        raise LispyArityError("eval expects exactly one argument")
    expr_to_eval = evaluate(args.front(), env)
    return evaluate(expr_to_eval, env)
