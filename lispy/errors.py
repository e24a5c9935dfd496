class LispyError(Exception):
    """ Base class for all lispy errors"""
    pass


class LispyTypeMismatch(LispyError):
    """ Raised when a value is accessed as a kind it is not"""
    pass


class LispyUnboundSymbol(LispyError):
    """ Raised when a symbol is used before it is bound"""
    pass


class LispyArityError(LispyError):
    """ Raised when too few arguments are supplied, or a form has the wrong shape"""


class LispyNotCallable(LispyError):
    """ Raised when the head of a form does not resolve to a procedure or lambda"""


class LispyStructuralError(LispyError):
    """ Raised when a list cell holds a tail without a head (internal fault)"""


class LispyArithmeticError(LispyError, ArithmeticError):
    """ Raised on division by zero"""
