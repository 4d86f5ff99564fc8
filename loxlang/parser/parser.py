"""
Main parser entry point for golox.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

Syntax errors are reported to the error reporter and unwind the current
declaration with :class:`~loxlang.exceptions.LoxParseError`. The parser then
synchronises on the next statement boundary (panic-mode recovery) so a single
pass reports as many errors as possible.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging

from loxlang import nodes
from loxlang.exceptions import LoxParseError
from loxlang.reporter import ErrorReporter
from loxlang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)

STATEMENT_STARTS = (
    TokenType.CLASS,
    TokenType.FN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
)


class Parser:
    """golox parser."""

    def __init__(self, tokens: list[Token], reporter: ErrorReporter):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
            reporter (ErrorReporter): Sink for syntax errors.
        """
        self.tokens = tokens
        self.reporter = reporter
        self.position = 0
        self.curr_token = self.tokens[self.position]

    # ------------------------------------------------------------------
    # Token cursor
    # ------------------------------------------------------------------
    def is_at_end(self) -> bool:
        return self.curr_token.type == TokenType.EOF

    def previous(self) -> Token:
        return self.tokens[self.position - 1]

    def peek_next(self) -> Token:
        """
        Return the token after the current one without consuming anything.
        """
        if self.position + 1 >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.position + 1]

    def check(self, *token_types: TokenType) -> bool:
        return self.curr_token.type in token_types

    def advance(self) -> Token:
        """
        Consume the current token and return it.
        """
        token = self.curr_token
        if not self.is_at_end():
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return token

    def match(self, *token_types: TokenType) -> bool:
        """
        Consume the current token if it is one of ``token_types``.
        """
        if self.check(*token_types):
            self.advance()
            return True
        return False

    def eat(self, token_type: TokenType, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            message (str): Error message if the token does not match.

        Raises:
            LoxParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.curr_token, message)

    def error(self, token: Token, message: str) -> LoxParseError:
        """
        Report a syntax error and return the exception so callers can decide
        whether to raise it.
        """
        self.reporter.token_error(token, message)
        return LoxParseError(token, message)

    def synchronize(self) -> None:
        """
        Discard tokens until a statement boundary.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.curr_token.type in STATEMENT_STARTS:
                return
            self.advance()

    # Expression wrappers
    def expression(self) -> nodes.Expr:
        """
        Parse a full expression, including the comma operator.
        """
        return _expr.parse_expression(self)

    def assignment(self) -> nodes.Expr:
        """
        Parse an assignment or anything of higher precedence.
        """
        return _expr.parse_assignment(self)

    def ternary(self) -> nodes.Expr:
        """
        Parse a conditional ``c ? t : e`` expression.
        """
        return _expr.parse_ternary(self)

    def logic_or(self) -> nodes.Expr:
        return _expr.parse_logic_or(self)

    def logic_and(self) -> nodes.Expr:
        return _expr.parse_logic_and(self)

    def equality(self) -> nodes.Expr:
        return _expr.parse_equality(self)

    def comparison(self) -> nodes.Expr:
        return _expr.parse_comparison(self)

    def term(self) -> nodes.Expr:
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self) -> nodes.Expr:
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self) -> nodes.Expr:
        return _expr.parse_unary(self)

    def call(self) -> nodes.Expr:
        """
        Parse calls and property accesses chained on a primary expression.
        """
        return _expr.parse_call(self)

    def primary(self) -> nodes.Expr:
        return _expr.parse_primary(self)

    # Statement wrappers
    def declaration(self) -> nodes.Stmt | None:
        """
        Parse a declaration, recovering from syntax errors.
        """
        return _stmt.parse_declaration(self)

    def statement(self) -> nodes.Stmt:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> nodes.Block:
        """
        Parse a mandatory ``{ ... }`` body.
        """
        return _stmt.parse_block(self)

    def block_statements(self) -> list[nodes.Stmt]:
        """
        Parse statements up to and including the closing brace.
        """
        return _stmt.parse_block_statements(self)

    def function(self, kind: str) -> nodes.Function:
        """
        Parse a function or method definition after its introducer.
        """
        return _stmt.parse_function(self, kind)

    def parse(self) -> list[nodes.Stmt]:
        """
        Parse the full input into a list of statements.

        Statements that failed to parse are dropped; the reporter records why.
        Input nested too deeply for the Python stack stops the parse with a
        ``Too much nesting.`` error.
        """
        statements = []
        try:
            while not self.is_at_end():
                stmt = self.declaration()
                if stmt is not None:
                    statements.append(stmt)
        except RecursionError:
            self.error(self.curr_token, "Too much nesting.")
        logger.debug("parsed %d top-level statements", len(statements))
        return statements
