"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser and
annotated by the resolver. It supports arithmetic, variables, closures, classes with
methods and initializers, conditionals, labeled loops, and output statements.

1. Execution Model
The interpreter evaluates the abstract syntax tree top-down and recursively.
Statements are executed via `execute()`, which returns either None or a control
signal; expressions are evaluated via `evaluate()`, which returns a value. Both
dispatch on the node type with a `match` statement.

2. Environment
The interpreter holds the global environment and the environment currently in
effect. Blocks and calls install a fresh environment and restore the previous one on
every exit path. Variable uses the resolver marked as local are looked up a fixed
number of scopes out (`get_at` / `assign_at`); all others are globals.

3. Control Flow
`return`, `break` and `continue` produce signal values (see `loxlang.signals`)
that propagate up through `execute()` until a function call or a matching loop
consumes them.

4. Error Handling
Runtime errors, such as type mismatches, arity mismatches or undefined variables,
are raised as `LoxRuntimeError` carrying the offending token. `interpret()` stops the
current program at the first one and hands it to the error reporter.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys
from typing import Any, TextIO

from loxlang import nodes
from loxlang.callables import VARIADIC, LoxCallable, LoxClass, LoxFunction, LoxInstance
from loxlang.environment import Environment
from loxlang.exceptions import LoxNativeError, LoxRuntimeError
from loxlang.natives import define_natives
from loxlang.operations import (
    ARITHMETIC,
    COMPARISON,
    is_equal,
    is_number,
    is_truthy,
    stringify,
)
from loxlang.reporter import ErrorReporter
from loxlang.signals import (
    BreakSignal,
    ContinueSignal,
    ReturnSignal,
    Signal,
    targets_loop,
)
from loxlang.tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Interpreter:
    """Tree-walk interpreter for golox."""

    def __init__(self, reporter: ErrorReporter, stdout: TextIO | None = None):
        """
        Initialize the interpreter.

        Parameters:
            reporter (ErrorReporter): Sink for runtime errors.
            stdout (TextIO | None): Where ``print`` writes. Defaults to the
                process' standard output at the time of writing.
        """
        self.reporter = reporter
        self._stdout = stdout
        self.globals = Environment()
        self.environment = self.globals
        self.locals: dict[nodes.Expr, int] = {}
        define_natives(self.globals)

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def interpret(self, statements: list[nodes.Stmt]) -> None:
        """
        Execute a program. A runtime error stops execution and is reported.
        """
        try:
            for stmt in statements:
                self._execute_top_level(stmt)
        except LoxRuntimeError as err:
            logger.debug("runtime error on line %d: %s", err.line, err.message)
            self.reporter.runtime_error(err)

    def _execute_top_level(self, stmt: nodes.Stmt) -> None:
        # Calls report their own overflow at the call site
        try:
            self.execute(stmt)
        except RecursionError as err:
            token = nodes.first_token(stmt)
            if token is None:
                raise
            raise LoxRuntimeError(token, "Stack overflow.") from err

    def resolve(self, expr: nodes.Expr, depth: int) -> None:
        """
        Record that ``expr`` refers to a local ``depth`` scopes out.
        Called by the resolver.
        """
        self.locals[expr] = depth

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, stmt: nodes.Stmt) -> Signal | None:
        """
        Execute one statement.

        Returns:
            None if control falls through, otherwise the signal that must
            propagate to an enclosing loop or function.
        """
        match stmt:
            case nodes.Expression(expression=expression):
                self.evaluate(expression)
            case nodes.Print(expression=expression):
                value = self.evaluate(expression)
                print(stringify(value), file=self.stdout)
            case nodes.Var(name=name, initializer=initializer):
                value = None
                if initializer is not None:
                    value = self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case nodes.Block(statements=statements):
                return self.execute_block(statements, Environment(self.environment))
            case nodes.If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                if is_truthy(self.evaluate(condition)):
                    return self.execute(then_branch)
                if else_branch is not None:
                    return self.execute(else_branch)
            case nodes.While():
                return self._execute_while(stmt)
            case nodes.For(body=body):
                return self.execute(body)
            case nodes.Function(name=name):
                self.environment.define(name.lexeme, LoxFunction(stmt, self.environment))
            case nodes.Class(name=name, methods=methods):
                functions = {
                    method.name.lexeme: LoxFunction(
                        method, self.environment, method.name.lexeme == "init"
                    )
                    for method in methods
                }
                self.environment.define(name.lexeme, LoxClass(name.lexeme, functions))
            case nodes.Return(value=value):
                return ReturnSignal(self.evaluate(value) if value is not None else None)
            case nodes.Break(label=label):
                return BreakSignal(label.lexeme if label is not None else None)
            case nodes.Continue(label=label):
                return ContinueSignal(label.lexeme if label is not None else None)
            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__}")
        return None

    def execute_block(self, statements: list[nodes.Stmt], environment: Environment) -> Signal | None:
        """
        Execute ``statements`` in ``environment``, restoring the current
        environment afterwards however the block is left.
        """
        previous = self.environment
        try:
            self.environment = environment
            for stmt in statements:
                signal = self.execute(stmt)
                if signal is not None:
                    return signal
            return None
        finally:
            self.environment = previous

    def _execute_while(self, stmt: nodes.While) -> Signal | None:
        label = stmt.label.lexeme if stmt.label is not None else None
        while is_truthy(self.evaluate(stmt.condition)):
            signal = self.execute(stmt.body)
            if isinstance(signal, BreakSignal):
                if targets_loop(signal, label):
                    break
                return signal
            if isinstance(signal, ContinueSignal) and not targets_loop(signal, label):
                return signal
            if isinstance(signal, ReturnSignal):
                return signal
            if stmt.increment is not None:
                self.evaluate(stmt.increment)
        return None

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def evaluate(self, expr: nodes.Expr) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            LoxRuntimeError: On type errors, bad calls or undefined names.
        """
        match expr:
            case nodes.Literal(value=value):
                return value
            case nodes.Grouping(expression=expression):
                return self.evaluate(expression)
            case nodes.Unary(operator=operator, right=right):
                return self._evaluate_unary(operator, self.evaluate(right))
            case nodes.Binary(left=left, operator=operator, right=right):
                return self._evaluate_binary(operator, self.evaluate(left), self.evaluate(right))
            case nodes.Comma(left=left, right=right):
                self.evaluate(left)
                return self.evaluate(right)
            case nodes.Logical(left=left, operator=operator, right=right):
                value = self.evaluate(left)
                if operator.type == TokenType.OR:
                    if is_truthy(value):
                        return value
                elif not is_truthy(value):
                    return value
                return self.evaluate(right)
            case nodes.Ternary(condition=condition, then_branch=then_branch, else_branch=else_branch):
                if is_truthy(self.evaluate(condition)):
                    return self.evaluate(then_branch)
                return self.evaluate(else_branch)
            case nodes.Variable(name=name):
                return self._look_up_variable(name, expr)
            case nodes.Assign(name=name, value=value_expr):
                value = self.evaluate(value_expr)
                distance = self.locals.get(expr)
                if distance is not None:
                    self.environment.assign_at(distance, name, value)
                else:
                    self.globals.assign(name, value)
                return value
            case nodes.This(keyword=keyword):
                return self._look_up_variable(keyword, expr)
            case nodes.Call():
                return self._evaluate_call(expr)
            case nodes.Get(obj=obj, name=name):
                target = self.evaluate(obj)
                if isinstance(target, LoxInstance):
                    return target.get(name)
                raise LoxRuntimeError(name, "Only instances have properties.")
            case nodes.Set(obj=obj, name=name, value=value_expr):
                target = self.evaluate(obj)
                if not isinstance(target, LoxInstance):
                    raise LoxRuntimeError(name, "Only instances have fields.")
                value = self.evaluate(value_expr)
                target.set(name, value)
                return value
            case _:
                raise TypeError(f"Invalid expression node: {expr!r}")

    def _look_up_variable(self, name: Token, expr: nodes.Expr) -> Any:
        distance = self.locals.get(expr)
        if distance is not None:
            return self.environment.get_at(distance, name.lexeme)
        return self.globals.get(name)

    @staticmethod
    def _evaluate_unary(operator: Token, right: Any) -> Any:
        if operator.type == TokenType.BANG:
            return not is_truthy(right)
        if not is_number(right):
            raise LoxRuntimeError(operator, "Operand must be a number.")
        return -float(right)

    @staticmethod
    def _evaluate_binary(operator: Token, left: Any, right: Any) -> Any:
        match operator.type:
            case TokenType.EQUAL_EQUAL:
                return is_equal(left, right)
            case TokenType.BANG_EQUAL:
                return not is_equal(left, right)
            case TokenType.PLUS:
                if is_number(left) and is_number(right):
                    return float(left) + float(right)
                if isinstance(left, str) and isinstance(right, str):
                    return left + right
                raise LoxRuntimeError(operator, "Operands must be either numbers or strings.")

        if not (is_number(left) and is_number(right)):
            raise LoxRuntimeError(operator, "Operands must be numbers.")
        if operator.type in ARITHMETIC:
            return ARITHMETIC[operator.type](float(left), float(right))
        if operator.type in COMPARISON:
            return COMPARISON[operator.type](float(left), float(right))
        raise LoxRuntimeError(operator, "Unknown operator.")

    def _evaluate_call(self, expr: nodes.Call) -> Any:
        callee = self.evaluate(expr.callee)
        arguments = [self.evaluate(argument) for argument in expr.arguments]

        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(expr.paren, "Can only call functions and classes.")

        arity = callee.arity()
        if arity != VARIADIC and len(arguments) != arity:
            raise LoxRuntimeError(
                expr.paren, f"Expected {arity} arguments but got {len(arguments)}."
            )

        try:
            return callee.call(self, arguments)
        except LoxNativeError as err:
            raise LoxRuntimeError(expr.paren, str(err)) from err
        except RecursionError as err:
            raise LoxRuntimeError(expr.paren, "Stack overflow.") from err
