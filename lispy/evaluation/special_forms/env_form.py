from lispy import LispValue
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.values import copy_value


def env_form(env: Environment, args: ConsList) -> LispValue:
    """(env) -> ((name value) ...) for the innermost scope, ordered by name."""
    return ConsList.from_iterable(
        ConsList.from_iterable([name, copy_value(value)])
        for name, value in env.bindings()
    )
