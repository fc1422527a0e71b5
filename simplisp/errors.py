

class LispError(Exception):
    """ Base class for all simplisp errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LispSyntaxError(LispError):
    """ Raised when the input cannot be tokenized or parsed"""


class LispMalformedForm(LispError):
    """ Raised when a special form does not have the required shape"""


class LispUnboundSymbol(LispError):
    """ Raised when a symbol is evaluated before it is bound"""


class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class LispTypeError(LispError):
    """ Raised when a value of the wrong kind is used"""


class LispZeroDivisionError(LispError):
    """ Raised when a number is divided by zero"""
