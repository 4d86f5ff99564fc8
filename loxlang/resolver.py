"""Resolver.

A static pass run between parsing and interpretation. It walks the AST once,
tracking the lexical scopes that blocks, functions and classes introduce, and
tells the interpreter how many scopes out each local variable reference lives
(its *distance*). References it cannot find in any local scope are left
unresolved and treated as globals at runtime.

The same walk enforces the static rules of the language:

- a local variable cannot be read in its own initializer;
- a local scope cannot declare the same name twice;
- ``return`` is only valid inside a function, and an initializer cannot
  return a value;
- ``this`` is only valid inside a method;
- ``break`` and ``continue`` must be inside a loop, and a label must name an
  enclosing loop and be unique among the loops it is nested in.

Errors are reported and the walk carries on, so one pass reports every
violation in the program.


File: resolver.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from loxlang import nodes
from loxlang.reporter import ErrorReporter
from loxlang.tokens import Token

if TYPE_CHECKING:
    from loxlang.interpreter import Interpreter

logger = logging.getLogger(__name__)


class FunctionType(str, Enum):
    """
    Kind of function body the resolver is currently inside.
    """
    NONE = "none"
    FUNCTION = "function"
    METHOD = "method"
    INITIALIZER = "initializer"


class ClassType(str, Enum):
    """
    Kind of class body the resolver is currently inside.
    """
    NONE = "none"
    CLASS = "class"


UNLABELED = ""


class Resolver:
    """Binds variable references to scope distances."""

    def __init__(self, interpreter: Interpreter, reporter: ErrorReporter):
        self.interpreter = interpreter
        self.reporter = reporter
        self.scopes: list[dict[str, bool]] = []
        self.current_function = FunctionType.NONE
        self.current_class = ClassType.NONE
        self.loops: list[str] = []

    def resolve(self, statements: list[nodes.Stmt]) -> None:
        """
        Resolve a whole program (or one REPL line).
        """
        for stmt in statements:
            try:
                self.resolve_stmt(stmt)
            except RecursionError:
                token = nodes.first_token(stmt)
                if token is None:
                    raise
                self.scopes = []
                self.current_function = FunctionType.NONE
                self.current_class = ClassType.NONE
                self.loops = []
                self.reporter.token_error(token, "Too much nesting.")
        logger.debug("resolved %d local references", len(self.interpreter.locals))

    def _resolve_statements(self, statements: list[nodes.Stmt]) -> None:
        for stmt in statements:
            self.resolve_stmt(stmt)

    # ------------------------------------------------------------------
    # Scope bookkeeping
    # ------------------------------------------------------------------

    def begin_scope(self) -> None:
        self.scopes.append({})

    def end_scope(self) -> None:
        self.scopes.pop()

    def declare(self, name: Token) -> None:
        """
        Add ``name`` to the innermost scope, marked as not yet initialized.
        Globals are not tracked.
        """
        if not self.scopes:
            return
        scope = self.scopes[-1]
        if name.lexeme in scope:
            self.reporter.token_error(name, "Already a variable with this name in this scope.")
        scope[name.lexeme] = False

    def define(self, name: Token) -> None:
        if not self.scopes:
            return
        self.scopes[-1][name.lexeme] = True

    def resolve_local(self, expr: nodes.Expr, name: Token) -> None:
        """
        Record the distance to the innermost scope declaring ``name``.
        """
        for distance, scope in enumerate(reversed(self.scopes)):
            if name.lexeme in scope:
                self.interpreter.resolve(expr, distance)
                return

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def resolve_stmt(self, stmt: nodes.Stmt) -> None:
        match stmt:
            case nodes.Block(statements=statements):
                self.begin_scope()
                self._resolve_statements(statements)
                self.end_scope()
            case nodes.For(body=body):
                self.resolve_stmt(body)
            case nodes.Var(name=name, initializer=initializer):
                self.declare(name)
                if initializer is not None:
                    self.resolve_expr(initializer)
                self.define(name)
            case nodes.Function(name=name):
                self.declare(name)
                self.define(name)
                self.resolve_function(stmt, FunctionType.FUNCTION)
            case nodes.Class():
                self._resolve_class(stmt)
            case nodes.Expression(expression=expression) | nodes.Print(expression=expression):
                self.resolve_expr(expression)
            case nodes.If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                self.resolve_expr(condition)
                self.resolve_stmt(then_branch)
                if else_branch is not None:
                    self.resolve_stmt(else_branch)
            case nodes.Return(keyword=keyword, value=value):
                if self.current_function == FunctionType.NONE:
                    self.reporter.token_error(keyword, "Can't return from top-level code.")
                if value is not None:
                    if self.current_function == FunctionType.INITIALIZER:
                        self.reporter.token_error(keyword, "Can't return value from an initializer.")
                    self.resolve_expr(value)
            case nodes.While():
                self._resolve_while(stmt)
            case nodes.Break(keyword=keyword, label=label) | nodes.Continue(keyword=keyword, label=label):
                self._check_jump(keyword, label)
            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")

    def resolve_function(self, function: nodes.Function, function_type: FunctionType) -> None:
        enclosing_function = self.current_function
        enclosing_loops = self.loops
        self.current_function = function_type
        # Loops outside the function are not targets for break/continue inside it
        self.loops = []

        self.begin_scope()
        for param in function.params:
            self.declare(param)
            self.define(param)
        self._resolve_statements(function.body)
        self.end_scope()

        self.loops = enclosing_loops
        self.current_function = enclosing_function

    def _resolve_class(self, stmt: nodes.Class) -> None:
        enclosing_class = self.current_class
        self.current_class = ClassType.CLASS

        self.declare(stmt.name)
        self.define(stmt.name)

        self.begin_scope()
        self.scopes[-1]["this"] = True
        for method in stmt.methods:
            function_type = FunctionType.METHOD
            if method.name.lexeme == "init":
                function_type = FunctionType.INITIALIZER
            self.resolve_function(method, function_type)
        self.end_scope()

        self.current_class = enclosing_class

    def _resolve_while(self, stmt: nodes.While) -> None:
        label = UNLABELED
        if stmt.label is not None:
            label = stmt.label.lexeme
            if label in self.loops:
                self.reporter.token_error(stmt.label, f"Label '{label}' is already in use.")

        self.resolve_expr(stmt.condition)
        self.loops.append(label)
        self.resolve_stmt(stmt.body)
        self.loops.pop()
        if stmt.increment is not None:
            self.resolve_expr(stmt.increment)

    def _check_jump(self, keyword: Token, label: Token | None) -> None:
        if not self.loops:
            self.reporter.token_error(keyword, f"Can't use '{keyword.lexeme}' outside of a loop.")
        elif label is not None and label.lexeme not in self.loops:
            self.reporter.token_error(label, f"No enclosing loop labeled '{label.lexeme}'.")

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def resolve_expr(self, expr: nodes.Expr) -> None:
        match expr:
            case nodes.Variable(name=name):
                if self.scopes and self.scopes[-1].get(name.lexeme) is False:
                    self.reporter.token_error(
                        name, "Can't read local variable in its own initializer."
                    )
                self.resolve_local(expr, name)
            case nodes.Assign(name=name, value=value):
                self.resolve_expr(value)
                self.resolve_local(expr, name)
            case nodes.This(keyword=keyword):
                if self.current_class == ClassType.NONE:
                    self.reporter.token_error(keyword, "Can't use 'this' outside of a class.")
                    return
                self.resolve_local(expr, keyword)
            case (
                nodes.Binary(left=left, right=right)
                | nodes.Logical(left=left, right=right)
                | nodes.Comma(left=left, right=right)
            ):
                self.resolve_expr(left)
                self.resolve_expr(right)
            case nodes.Call(callee=callee, arguments=arguments):
                self.resolve_expr(callee)
                for argument in arguments:
                    self.resolve_expr(argument)
            case nodes.Get(obj=obj):
                self.resolve_expr(obj)
            case nodes.Set(obj=obj, value=value):
                self.resolve_expr(value)
                self.resolve_expr(obj)
            case nodes.Grouping(expression=expression):
                self.resolve_expr(expression)
            case nodes.Unary(right=right):
                self.resolve_expr(right)
            case nodes.Ternary(condition=condition, then_branch=then_branch, else_branch=else_branch):
                self.resolve_expr(condition)
                self.resolve_expr(then_branch)
                self.resolve_expr(else_branch)
            case nodes.Literal():
                pass
            case _:
                raise TypeError(f"Invalid expression node: {expr!r}")
