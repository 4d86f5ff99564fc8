"""Built-in functions.

These are defined in the global environment of every interpreter:

- ``clock()``: whole seconds since the Unix epoch.
- ``array(...)``: a new array holding the arguments.
- ``len(arr)``: number of elements in an array.
- ``append(arr, ...)``: append the remaining arguments to ``arr`` in place.


File: natives.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from loxlang.callables import VARIADIC, NativeFunction
from loxlang.exceptions import LoxNativeError
from loxlang.operations import stringify

if TYPE_CHECKING:
    from loxlang.environment import Environment
    from loxlang.interpreter import Interpreter


class LoxArray:
    """An ordered, mutable sequence of values."""

    def __init__(self, values: list[Any] | None = None):
        self.values: list[Any] = list(values) if values is not None else []

    def append(self, *values: Any) -> None:
        self.values.extend(values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return "[" + ", ".join(stringify(value) for value in self.values) + "]"

    __repr__ = __str__


def _clock(_interpreter: Interpreter, _arguments: list[Any]) -> int:
    return int(time.time())


def _array(_interpreter: Interpreter, arguments: list[Any]) -> LoxArray:
    return LoxArray(arguments)


def _len(_interpreter: Interpreter, arguments: list[Any]) -> int:
    target = arguments[0]
    if not isinstance(target, LoxArray):
        raise LoxNativeError("Can only call 'len' on arrays.")
    return len(target)


def _append(_interpreter: Interpreter, arguments: list[Any]) -> None:
    if not arguments or not isinstance(arguments[0], LoxArray):
        raise LoxNativeError("Can only call 'append' on arrays.")
    arguments[0].append(*arguments[1:])


NATIVES: tuple[NativeFunction, ...] = (
    NativeFunction("clock", 0, _clock),
    NativeFunction("array", VARIADIC, _array),
    NativeFunction("len", 1, _len),
    NativeFunction("append", VARIADIC, _append),
)


def define_natives(environment: Environment) -> None:
    """
    Bind every built-in function in ``environment``.
    """
    for native in NATIVES:
        environment.define(native.name, native)
