"""Errors.

Exception types raised by the golox pipeline. Static errors found by the
parser unwind with :class:`LoxParseError` so the parser can synchronise;
runtime failures raise :class:`LoxRuntimeError`. Both carry the offending
token so the :class:`~loxlang.reporter.ErrorReporter` can point at a line.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.tokens import Token


class LoxParseError(Exception):
    """
    Error for malformed syntax. Raised to unwind the current declaration.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        self.message = message
        super().__init__(message)


class LoxRuntimeError(Exception):
    """
    Error raised while evaluating a well-formed program.
    """
    def __init__(self, token: Token, message: str):
        self.token = token
        self.message = message
        self.line = token.line
        super().__init__(f"{message} on line {token.line}")


class LoxInternalError(Exception):
    """
    Error for broken interpreter invariants, e.g. a resolver distance that
    does not match the environment chain. User programs cannot trigger it.
    """


class LoxNativeError(Exception):
    """
    Error raised inside a built-in function. The interpreter re-raises it as
    a :class:`LoxRuntimeError` located at the call site.
    """
