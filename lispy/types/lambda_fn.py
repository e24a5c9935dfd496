"""Lambda function representation and argument binding for lispy."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable

from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.cons import ConsList

if TYPE_CHECKING:
    from lispy.types.environment import Environment


class Lambda:
    """A user-defined closure: parameter list, body, and captured environment.

    `env` is a private snapshot of the defining scope, taken when the lambda
    was created. Later changes to that scope are not visible here.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: ConsList, body: SExpression, env: Environment):
        self.params: ConsList = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from lispy.printer import to_repr
        with StringIO() as buffer:
            buffer.write("(lambda ")
            buffer.write(to_repr(self.params))
            buffer.write(" ")
            buffer.write(to_repr(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: Iterable[LispValue]) -> Environment:
        """
        Bind the supplied arguments to this lambda's parameters, position by position,
        in a new Environment whose parent is the captured environment.

        Surplus arguments are ignored. Raises LispyArityError when there are
        fewer arguments than parameters.
        """
        from lispy.types.environment import Environment
        from lispy.types.values import as_symbol

        local_env = Environment(outer=self.env)
        supplied = iter(args)
        for param in self.params:
            name = as_symbol(param)
            try:
                local_env.define(name, next(supplied))
            except StopIteration:
                raise LispyArityError(
                    f"Too few arguments: expected {self.params.size()}"
                ) from None
        return local_env
