"""Environment chain.

An :class:`Environment` maps names to values and points at its enclosing
environment; the chain ends at the global environment. Blocks, function
calls and bound methods each push a fresh environment.

Lookups come in two flavours. ``get`` / ``assign`` walk outward by name and
are used for globals. ``get_at`` / ``assign_at`` jump a fixed number of scopes
computed by the resolver and are used for locals; a miss there means the
resolver and the interpreter disagree, which is an interpreter bug.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Any

from loxlang.exceptions import LoxInternalError, LoxRuntimeError
from loxlang.tokens import Token


class Environment:
    """A single lexical scope."""

    def __init__(self, enclosing: Environment | None = None):
        self.values: dict[str, Any] = {}
        self.enclosing = enclosing

    def define(self, name: str, value: Any) -> None:
        """
        Bind ``name`` in this scope, replacing any previous binding.
        """
        self.values[name] = value

    def get(self, name: Token) -> Any:
        """
        Look ``name`` up in this scope and then outward.

        Raises:
            LoxRuntimeError: If no scope in the chain defines the name.
        """
        env: Environment | None = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any) -> None:
        """
        Rebind an existing ``name`` in the nearest scope that defines it.

        Raises:
            LoxRuntimeError: If no scope in the chain defines the name.
        """
        env: Environment | None = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def ancestor(self, distance: int) -> Environment:
        """
        Return the environment exactly ``distance`` scopes out.
        """
        env: Environment | None = self
        for _ in range(distance):
            env = env.enclosing if env is not None else None
        if env is None:
            raise LoxInternalError(
                f"Environment chain is shorter than resolved distance {distance}"
            )
        return env

    def get_at(self, distance: int, name: str) -> Any:
        values = self.ancestor(distance).values
        if name not in values:
            raise LoxInternalError(f"'{name}' not found at resolved distance {distance}")
        return values[name]

    def assign_at(self, distance: int, name: Token, value: Any) -> None:
        values = self.ancestor(distance).values
        if name.lexeme not in values:
            raise LoxInternalError(
                f"'{name.lexeme}' not found at resolved distance {distance}"
            )
        values[name.lexeme] = value

    def __repr__(self) -> str:
        depth = 0
        env = self.enclosing
        while env is not None:
            depth += 1
            env = env.enclosing
        return f"Environment(depth={depth}, names={sorted(self.values)})"
