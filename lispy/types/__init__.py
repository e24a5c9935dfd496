from lispy.types.nil import Nil, NilType
from lispy.types.symbol import Symbol, TRUE, FALSE, truth
from lispy.types.cons import ConsList
from lispy.types.lambda_fn import Lambda
from lispy.types.environment import Environment

__all__ = ["Nil", "NilType", "Symbol", "TRUE", "FALSE", "truth", "ConsList", "Lambda", "Environment"]
