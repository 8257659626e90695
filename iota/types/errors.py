"""Error taxonomy for Iota.

Every error raised by the reader or evaluator derives from IotaError. The
`kind` class attribute names the taxonomy entry so callers (and tests) can
tell failures apart without depending on message text.
"""


class IotaError(Exception):
    """ Base class for all Iota errors"""
    kind = "Error"


class IotaSyntaxError(IotaError):
    """ Raised by the reader on malformed source text"""
    kind = "SyntaxError"


class IotaUndefinedSymbol(IotaError):
    """ Raised when a symbol is looked up but bound in no frame of the chain"""
    kind = "UndefinedSymbol"


class IotaNotCallable(IotaError):
    """ Raised when the head of a call form evaluates to a non-callable value"""
    kind = "NotCallable"


class IotaEmptyCall(IotaError):
    """ Raised when the empty list is evaluated"""
    kind = "EmptyCall"


class IotaArityMismatch(IotaError):
    """ Raised when a closure is called with the wrong number of arguments"""
    kind = "ArityMismatch"


class IotaTypeError(IotaError):
    """ Raised when a value has the wrong type for the position it is used in"""
    kind = "TypeError"


class IotaEmptyList(IotaError):
    """ Raised when first/rest are applied to the empty list"""
    kind = "EmptyList"


class IotaArgumentCountError(IotaError):
    """ Raised when a fixed-arity builtin or special form gets the wrong argument count"""
    kind = "ArgumentCountError"


class IotaStackOverflow(IotaError):
    """ Raised when evaluation nests deeper than the configured limit"""
    kind = "StackOverflow"
