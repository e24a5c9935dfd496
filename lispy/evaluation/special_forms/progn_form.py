from lispy import LispValue
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.nil import Nil
from lispy.evaluation.evaluator import evaluate


def progn_form(env: Environment, args: ConsList) -> LispValue:
    result = Nil
    for form in args:
        result = evaluate(form, env)
    return result
