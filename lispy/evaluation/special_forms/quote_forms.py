from lispy import LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.values import copy_value


def quote_form(env: Environment, args: ConsList) -> LispValue:
    if args.size() != 1:
        raise LispyArityError("quote expects exactly 1 argument")
    return copy_value(args.front())
