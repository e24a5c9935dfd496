"""Application engine for lispy.

Native procedures and lambdas alike receive their arguments unevaluated.
A native procedure gets the caller's environment and the raw argument list
and decides for itself what to evaluate. A lambda binds each parameter to the
corresponding argument form as supplied, in a fresh child of its captured
environment, and evaluates its body there.
"""

from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyArityError, LispyNotCallable
from lispy.types.cons import ConsList
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
from lispy.types.values import kind_of, PRC


def apply_lambda(
    fn: Lambda,
    env: Environment,
    args: ConsList,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    Parameters:
    - fn: The Lambda being applied.
    - env: The caller's environment. Unused: nothing is evaluated in it.
    - args: The argument forms, bound to the parameters without evaluation.
    - evaluate_fn: Evaluator used for the body.

    Raises LispyArityError when fewer arguments than parameters are supplied.
    Surplus arguments are ignored.
    """
    arity = fn.params.size()
    provided = args.size()
    if provided < arity:
        raise LispyArityError(
            f"Too few arguments: expected {arity}, got {provided}"
        )
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    env: Environment,
    args: ConsList,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a native procedure.

    - For Lambda, defer to apply_lambda.
    - For native procedures (special forms and builtins alike), invoke with the
      runtime env and the unevaluated argument list.
    - Otherwise, raise LispyNotCallable.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, env, args, evaluate_fn)
    if kind_of(head) == PRC:
        return head(env, args)
    raise LispyNotCallable(f"Cannot apply non-function {head!r}")
