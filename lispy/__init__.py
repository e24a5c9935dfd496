# Core type aliases for lispy's data model.
# Code and runtime data share one representation: Nil, int, Symbol, ConsList,
# Lambda and native procedures (plain Python callables taking (env, args)).
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue)
SExpression = LispValue

# Evaluator function type, handed to apply() so it can evaluate lambda bodies
EvaluatorFn = Callable[..., LispValue]

# Native procedure: receives the calling environment and the unevaluated arguments
NativeProcedure = Callable[..., LispValue]
