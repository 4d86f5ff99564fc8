"""Callable values.

Anything a golox program can call implements :class:`LoxCallable`:

- :class:`LoxFunction`: user functions and methods, closing over the
  environment they were declared in.
- :class:`LoxClass`: calling a class constructs a :class:`LoxInstance` and
  runs its ``init`` method, if any.
- :class:`NativeFunction`: built-ins implemented in Python.

An arity of ``-1`` marks a variadic callable; the interpreter skips the
argument count check for it.


File: callables.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from loxlang import nodes
from loxlang.environment import Environment
from loxlang.exceptions import LoxRuntimeError
from loxlang.signals import ReturnSignal
from loxlang.tokens import Token

if TYPE_CHECKING:
    from loxlang.interpreter import Interpreter


VARIADIC = -1


class LoxCallable:
    """Interface shared by every callable value."""

    def arity(self) -> int:
        raise NotImplementedError

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        raise NotImplementedError


class LoxFunction(LoxCallable):
    """Runtime representation of a function value."""

    def __init__(self, declaration: nodes.Function, closure: Environment, is_initializer: bool = False):
        self.declaration = declaration
        self.closure = closure
        self.is_initializer = is_initializer

    def bind(self, instance: LoxInstance) -> LoxFunction:
        """
        Return a copy of this function whose closure defines ``this``.
        """
        environment = Environment(self.closure)
        environment.define("this", instance)
        return LoxFunction(self.declaration, environment, self.is_initializer)

    def arity(self) -> int:
        return len(self.declaration.params)

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        environment = Environment(self.closure)
        for param, argument in zip(self.declaration.params, arguments):
            environment.define(param.lexeme, argument)

        signal = interpreter.execute_block(self.declaration.body, environment)

        # Initializers always hand back the instance, whatever path they took
        if self.is_initializer:
            return self.closure.get_at(0, "this")
        if isinstance(signal, ReturnSignal):
            return signal.value
        return None

    def __str__(self) -> str:
        return f"<fn {self.declaration.name.lexeme}>"

    __repr__ = __str__


class LoxClass(LoxCallable):
    """A class value. Calling it constructs an instance."""

    def __init__(self, name: str, methods: dict[str, LoxFunction]):
        self.name = name
        self.methods = methods

    def find_method(self, name: str) -> LoxFunction | None:
        return self.methods.get(name)

    def arity(self) -> int:
        initializer = self.find_method("init")
        if initializer is None:
            return 0
        return initializer.arity()

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        instance = LoxInstance(self)
        initializer = self.find_method("init")
        if initializer is not None:
            initializer.bind(instance).call(interpreter, arguments)
        return instance

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class LoxInstance:
    """An instance of a :class:`LoxClass` with its own field storage."""

    def __init__(self, klass: LoxClass):
        self.klass = klass
        self.fields: dict[str, Any] = {}

    def get(self, name: Token) -> Any:
        """
        Look up a field, then a method bound to this instance.

        Raises:
            LoxRuntimeError: If neither exists.
        """
        if name.lexeme in self.fields:
            return self.fields[name.lexeme]

        method = self.klass.find_method(name.lexeme)
        if method is not None:
            return method.bind(self)

        raise LoxRuntimeError(name, f"Undefined property '{name.lexeme}'.")

    def set(self, name: Token, value: Any) -> None:
        self.fields[name.lexeme] = value

    def __str__(self) -> str:
        return f"{self.klass.name} instance"

    __repr__ = __str__


class NativeFunction(LoxCallable):
    """A built-in function implemented in Python."""

    def __init__(self, name: str, arity: int, function: Callable[[Interpreter, list[Any]], Any]):
        self.name = name
        self._arity = arity
        self.function = function

    def arity(self) -> int:
        return self._arity

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        return self.function(interpreter, arguments)

    def __str__(self) -> str:
        return f"<native fn {self.name}>"

    __repr__ = __str__
