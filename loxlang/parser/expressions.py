"""
Expression parsing utilities for golox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. From lowest to highest precedence:

    comma -> assignment -> ternary -> or -> and -> equality
          -> comparison -> term -> factor -> unary -> call -> primary


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import TYPE_CHECKING, Callable

from loxlang import nodes
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser

MAX_ARGUMENTS = 255


# ---- Lowest precedence ----

def parse_expression(parser: 'Parser') -> nodes.Expr:
    """Parse an expression (the comma operator)."""
    expr = parser.assignment()
    while parser.match(TokenType.COMMA):
        operator = parser.previous()
        right = parser.assignment()
        expr = nodes.Comma(expr, operator, right)
    return expr


def parse_assignment(parser: 'Parser') -> nodes.Expr:
    """
    Parse an assignment.

    The left-hand side is parsed as an ordinary expression first and then
    reinterpreted: a variable becomes ``Assign``, a property access becomes
    ``Set``. Anything else is reported without unwinding.
    """
    expr = parser.ternary()

    if parser.match(TokenType.EQUAL):
        equals = parser.previous()
        value = parser.assignment()

        if isinstance(expr, nodes.Variable):
            return nodes.Assign(expr.name, value)
        if isinstance(expr, nodes.Get):
            return nodes.Set(expr.obj, expr.name, value)

        parser.error(equals, "Invalid assignment target.")

    return expr


def parse_ternary(parser: 'Parser') -> nodes.Expr:
    """Parse ``condition ? then : else``; the else branch is right-associative."""
    expr = parser.logic_or()
    if parser.match(TokenType.QUESTION):
        question = parser.previous()
        then_branch = parser.expression()
        parser.eat(TokenType.COLON, "Expect ':' after then branch of conditional expression.")
        else_branch = parser.ternary()
        expr = nodes.Ternary(expr, question, then_branch, else_branch)
    return expr


def _logical(parser: 'Parser', operand: Callable[[], nodes.Expr], token_type: TokenType) -> nodes.Expr:
    expr = operand()
    while parser.match(token_type):
        operator = parser.previous()
        right = operand()
        expr = nodes.Logical(expr, operator, right)
    return expr


def parse_logic_or(parser: 'Parser') -> nodes.Expr:
    """Parse ``or`` expressions."""
    return _logical(parser, parser.logic_and, TokenType.OR)


def parse_logic_and(parser: 'Parser') -> nodes.Expr:
    """Parse ``and`` expressions."""
    return _logical(parser, parser.equality, TokenType.AND)


def _binary(parser: 'Parser', operand: Callable[[], nodes.Expr], *token_types: TokenType) -> nodes.Expr:
    expr = operand()
    while parser.match(*token_types):
        operator = parser.previous()
        right = operand()
        expr = nodes.Binary(expr, operator, right)
    return expr


def parse_equality(parser: 'Parser') -> nodes.Expr:
    """Parse ``==`` and ``!=``."""
    return _binary(parser, parser.comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)


def parse_comparison(parser: 'Parser') -> nodes.Expr:
    """Parse relational operators."""
    return _binary(
        parser,
        parser.term,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
    )


def parse_term(parser: 'Parser') -> nodes.Expr:
    """Parse addition and subtraction expressions."""
    return _binary(parser, parser.factor, TokenType.MINUS, TokenType.PLUS)


def parse_factor(parser: 'Parser') -> nodes.Expr:
    """Parse multiplication and division expressions."""
    return _binary(parser, parser.unary, TokenType.SLASH, TokenType.STAR)


def parse_unary(parser: 'Parser') -> nodes.Expr:
    """Parse prefix ``!`` and ``-``."""
    if parser.match(TokenType.BANG, TokenType.MINUS):
        operator = parser.previous()
        right = parser.unary()
        return nodes.Unary(operator, right)
    return parser.call()


def parse_call(parser: 'Parser') -> nodes.Expr:
    """Parse a primary followed by any number of calls or property accesses."""
    expr = parser.primary()
    while True:
        if parser.match(TokenType.LEFT_PAREN):
            expr = _finish_call(parser, expr)
        elif parser.match(TokenType.DOT):
            name = parser.eat(TokenType.IDENTIFIER, "Expect property name after '.'.")
            expr = nodes.Get(expr, name)
        else:
            break
    return expr


def _finish_call(parser: 'Parser', callee: nodes.Expr) -> nodes.Call:
    arguments: list[nodes.Expr] = []
    if not parser.check(TokenType.RIGHT_PAREN):
        while True:
            if len(arguments) >= MAX_ARGUMENTS:
                parser.error(parser.curr_token, f"Can't have more than {MAX_ARGUMENTS} arguments.")
            arguments.append(parser.assignment())
            if not parser.match(TokenType.COMMA):
                break
    paren = parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after arguments.")
    return nodes.Call(callee, paren, arguments)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> nodes.Expr:
    """Parse a literal, variable, ``this`` or parenthesized expression."""
    tok = parser.curr_token

    if parser.match(TokenType.FALSE):
        return nodes.Literal(False)
    if parser.match(TokenType.TRUE):
        return nodes.Literal(True)
    if parser.match(TokenType.NIL):
        return nodes.Literal(None)
    if parser.match(TokenType.NUMBER, TokenType.STRING):
        return nodes.Literal(tok.literal)
    if parser.match(TokenType.THIS):
        return nodes.This(tok)
    if parser.match(TokenType.IDENTIFIER):
        return nodes.Variable(tok)
    if parser.match(TokenType.LEFT_PAREN):
        expr = parser.expression()
        parser.eat(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
        return nodes.Grouping(expr)

    raise parser.error(tok, "Expect expression.")
