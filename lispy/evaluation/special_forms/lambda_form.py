from lispy import LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
from lispy.types.values import as_list, as_symbol, copy_value


def to_lambda(form: ConsList, env: Environment) -> Lambda:
    """Build a closure from `((params...) body)`.

    The closure captures a snapshot of `env`, not a reference to it.
    """
    if form.size() != 2:
        raise LispyArityError("lambda requires a parameter list and exactly one body")

    params = as_list(form.nth(0))
    for param in params:
        as_symbol(param)
    return Lambda(params.copy(), copy_value(form.nth(1)), env.snapshot())


def lambda_form(env: Environment, args: ConsList) -> LispValue:
    return to_lambda(args, env)
