from __future__ import annotations

from lispy import LispValue
from lispy.reader.parser import parse_program
from lispy.types.environment import Environment
from lispy.types.nil import Nil
from lispy.evaluation.evaluator import evaluate
from lispy.builtin.env_builtin import register
from lispy.logging_config import get_logger

logger = get_logger(__name__)


def make_root_environment() -> Environment:
    """A fresh root Environment populated with the standard bindings."""
    env = Environment()
    register(env)
    return env


def evaluate_program(code: str, env: Environment | None = None) -> LispValue:
    """
    Parse and evaluate every top-level form of `code` left to right, returning
    the value of the last one (nil for an empty program).

    An error aborts the remaining forms; bindings made by earlier forms stay.
    """
    if env is None:
        env = make_root_environment()
    result: LispValue = Nil
    for expr in parse_program(code):
        logger.debug("evaluating %s", expr)
        result = evaluate(expr, env)
    return result


class Interpreter:
    """
    Keeps one root Environment alive so definitions persist across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = make_root_environment()
        if prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        return evaluate_program(code, self.env)
