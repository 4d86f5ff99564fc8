"""Lexer for golox.

The scanner performs a single pass over the source code using a combined
regular expression of named groups. Each match yields at most one
:class:`~loxlang.tokens.Token` carrying its type, lexeme, decoded literal and
source position.

White space and ``//`` line comments are skipped, newlines advance the line
counter. Malformed input (unexpected characters, unterminated strings,
numbers with more than one ``.``) is reported to the error reporter and
scanning continues with the next lexeme, so one pass reports every lexical
error in the source.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
import re

from loxlang.reporter import ErrorReporter
from loxlang.tokens import KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Skipped
    ('COMMENT',       r'//[^\n]*'),
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t\r]+'),

    # Literals
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*\Z'),
    ('NUMBER',        r'\d+(?:\.\d+)*'),
    ('IDENTIFIER',    r'[A-Za-z_][A-Za-z0-9_]*'),

    # One or two character tokens
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    # Single-character tokens
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SEMICOLON',     r';'),
    ('SLASH',         r'/'),
    ('STAR',          r'\*'),
    ('QUESTION',      r'\?'),
    ('COLON',         r':'),

    # Anything else
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


class Scanner:
    """
    Turns golox source text into a list of tokens terminated by ``EOF``.
    """

    def __init__(self, source: str | bytes, reporter: ErrorReporter):
        """
        Initialize the scanner.

        Parameters:
            source (str | bytes): The program text. Bytes are decoded as UTF-8.
            reporter (ErrorReporter): Sink for lexical errors.
        """
        if isinstance(source, bytes):
            source = source.decode('utf-8')
        self.source = source
        self.reporter = reporter
        self.tokens: list[Token] = []
        self.line = 1
        self.line_start = 0

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            list[Token]: Every recognised token followed by a single EOF token.
        """
        for match_obj in TOKEN_REGEX.finditer(self.source):
            self._scan_lexeme(match_obj)

        self.tokens.append(
            Token(TokenType.EOF, '', None, self.line, len(self.source) - self.line_start)
        )
        logger.debug("scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def _scan_lexeme(self, match_obj: re.Match) -> None:
        kind = match_obj.lastgroup
        lexeme = match_obj.group()
        column = match_obj.start() - self.line_start

        if kind == 'NEWLINE':
            self._newline(match_obj.end())
            return
        if kind in ('SKIP', 'COMMENT'):
            return
        if kind == 'MISMATCH':
            self.reporter.error(self.line, 'Unexpected character.', f" at '{lexeme}'")
            return
        if kind == 'UNTERMINATED':
            self.reporter.error(self.line, 'Unterminated string.')
            self._advance_lines(match_obj)
            return

        if kind == 'STRING':
            token = Token(TokenType.STRING, lexeme, lexeme[1:-1], self.line, column)
            self.tokens.append(token)
            self._advance_lines(match_obj)
            return

        if kind == 'NUMBER':
            dots = lexeme.count('.')
            if dots > 1:
                self.reporter.error(self.line, 'Invalid number.', f" at '{lexeme}'")
                return
            literal = float(lexeme) if dots else int(lexeme)
            self.tokens.append(Token(TokenType.NUMBER, lexeme, literal, self.line, column))
            return

        if kind == 'IDENTIFIER':
            type_ = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
            self.tokens.append(Token(type_, lexeme, None, self.line, column))
            return

        self.tokens.append(Token(TokenType[kind], lexeme, None, self.line, column))

    def _newline(self, next_start: int) -> None:
        self.line += 1
        self.line_start = next_start

    def _advance_lines(self, match_obj: re.Match) -> None:
        # Multi-line strings move the line counter past their embedded newlines
        lexeme = match_obj.group()
        newlines = lexeme.count('\n')
        if newlines:
            self.line += newlines
            self.line_start = match_obj.start() + lexeme.rindex('\n') + 1


def tokenize(source: str | bytes, reporter: ErrorReporter) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str | bytes): The source code to tokenize.
        reporter (ErrorReporter): Sink for lexical errors.

    Returns:
        list[Token]: A list of Token instances ending with EOF.
    """
    return Scanner(source, reporter).scan_tokens()
