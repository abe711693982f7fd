from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a liswat error, independent of the message text."""

    LEXER = "lexer error"
    SYNTAX = "syntax error"
    INVALID_NUMBER = "invalid number"
    NUMBER_RANGE = "number out of range"
    UNSUPPORTED = "unsupported feature"
    BAD_TYPE = "bad type"
    NOT_APPLICABLE = "not applicable"
    UNDEFINED_VARIABLE = "undefined variable"
    ARITY = "arity mismatch"


class LiswatError(Exception):
    """ Base class for all liswat errors"""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class LiswatLexError(LiswatError):
    """ Raised for malformed tokens or input ending inside a form"""
    kind = ErrorKind.LEXER


class LiswatSyntaxError(LiswatError):
    """ Raised when a form has the wrong shape"""
    kind = ErrorKind.SYNTAX


class LiswatInvalidNumber(LiswatError):
    """ Raised when numeric text cannot be decoded"""
    kind = ErrorKind.INVALID_NUMBER


class LiswatNumberRange(LiswatError):
    """ Raised when a numeric literal is outside the representable range"""
    kind = ErrorKind.NUMBER_RANGE


class LiswatUnsupported(LiswatError):
    """ Raised for recognized literal features that are not implemented"""
    kind = ErrorKind.UNSUPPORTED


class LiswatTypeError(LiswatError):
    """ Raised when a value of the wrong kind is used"""
    kind = ErrorKind.BAD_TYPE


class LiswatNotApplicable(LiswatError):
    """ Raised when a non-procedure is called"""
    kind = ErrorKind.NOT_APPLICABLE


class LiswatUndefinedVariable(LiswatError):
    """ Raised when a symbol is used or set before it is bound"""
    kind = ErrorKind.UNDEFINED_VARIABLE


class LiswatArityError(LiswatError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""
    kind = ErrorKind.ARITY
