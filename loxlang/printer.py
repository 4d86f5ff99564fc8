"""AST printer.

Renders expressions and statements as parenthesized prefix notation, e.g.
``-123 * (45.67)`` becomes ``(* (- 123) (group 45.67))``. Used by the CLI's
debug dump and handy in tests for checking the shape of a parse.


File: printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang import nodes
from loxlang.operations import stringify


class AstPrinter:
    """Converts AST nodes back to a readable string."""

    def print(self, node: nodes.Expr | nodes.Stmt) -> str:
        match node:
            # Expressions
            case (
                nodes.Binary(left=left, operator=operator, right=right)
                | nodes.Logical(left=left, operator=operator, right=right)
                | nodes.Comma(left=left, operator=operator, right=right)
            ):
                return self._paren(operator.lexeme, left, right)
            case nodes.Grouping(expression=expression):
                return self._paren("group", expression)
            case nodes.Literal(value=value):
                if isinstance(value, str):
                    return f'"{value}"'
                return stringify(value)
            case nodes.Unary(operator=operator, right=right):
                return self._paren(operator.lexeme, right)
            case nodes.Variable(name=name):
                return name.lexeme
            case nodes.Assign(name=name, value=value):
                return self._paren("=", name.lexeme, value)
            case nodes.Call(callee=callee, arguments=arguments):
                return self._paren("call", callee, *arguments)
            case nodes.Get(obj=obj, name=name):
                return self._paren(".", obj, name.lexeme)
            case nodes.Set(obj=obj, name=name, value=value):
                return self._paren("=", obj, name.lexeme, value)
            case nodes.This():
                return "this"
            case nodes.Ternary(condition=condition, then_branch=then_branch, else_branch=else_branch):
                return self._paren("?:", condition, then_branch, else_branch)

            # Statements
            case nodes.Expression(expression=expression):
                return self._paren(";", expression)
            case nodes.Print(expression=expression):
                return self._paren("print", expression)
            case nodes.Var(name=name, initializer=None):
                return self._paren("var", name.lexeme)
            case nodes.Var(name=name, initializer=initializer):
                return self._paren("var", name.lexeme, "=", initializer)
            case nodes.Block(statements=statements):
                return self._paren("block", *statements)
            case nodes.If(condition=condition, then_branch=then_branch, else_branch=None):
                return self._paren("if", condition, then_branch)
            case nodes.If(condition=condition, then_branch=then_branch, else_branch=else_branch):
                return self._paren("if-else", condition, then_branch, else_branch)
            case nodes.While(condition=condition, body=body, label=label, increment=increment):
                parts: list = []
                if label is not None:
                    parts.append(f"{label.lexeme}:")
                parts.extend([condition, body])
                if increment is not None:
                    parts.append(increment)
                return self._paren("while", *parts)
            case nodes.For(body=body):
                return self._paren("for", body)
            case nodes.Function(name=name, params=params, body=body):
                params_text = "(" + " ".join(param.lexeme for param in params) + ")"
                return self._paren("fn", name.lexeme, params_text, *body)
            case nodes.Return(value=None):
                return "(return)"
            case nodes.Return(value=value):
                return self._paren("return", value)
            case nodes.Class(name=name, methods=methods):
                return self._paren("class", name.lexeme, *methods)
            case nodes.Break(label=label) | nodes.Continue(label=label):
                keyword = "break" if isinstance(node, nodes.Break) else "continue"
                if label is None:
                    return f"({keyword})"
                return self._paren(keyword, label.lexeme)
            case _:
                raise TypeError(f"Cannot print node: {node!r}")

    def _paren(self, name: str, *parts) -> str:
        pieces = [name]
        for part in parts:
            pieces.append(part if isinstance(part, str) else self.print(part))
        return "(" + " ".join(pieces) + ")"
