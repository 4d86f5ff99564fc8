"""Error reporter.

The reporter is the single sink every pipeline stage writes diagnostics to.
One instance is created per session and handed to the scanner, parser,
resolver and interpreter; the driver inspects its flags to decide whether to
run later stages and which exit code to use.


File: reporter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from typing import TextIO

from loxlang.exceptions import LoxRuntimeError
from loxlang.tokens import Token, TokenType


class ErrorReporter:
    """Collects and prints static and runtime errors."""

    def __init__(self, stream: TextIO | None = None):
        """
        Initialize the reporter.

        Parameters:
            stream (TextIO | None): Where to write messages. Defaults to the
                process' standard error at the time of writing.
        """
        self._stream = stream
        self.had_error = False
        self.had_runtime_error = False
        self.messages: list[str] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def error(self, line: int, message: str, where: str = "") -> None:
        """
        Record a static error found at ``line``.
        """
        self._write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def token_error(self, token: Token, message: str) -> None:
        """
        Record a static error located at ``token``.
        """
        self.error(token.line, message, self._where(token))

    def runtime_error(self, err: LoxRuntimeError) -> None:
        """
        Record a runtime error raised by the interpreter.
        """
        self._write(f"[line {err.token.line}] Error{self._where(err.token)}: {err.message}")
        self.had_runtime_error = True

    def reset(self) -> None:
        """
        Clear both error flags and the recorded messages, e.g. between REPL lines.
        """
        self.had_error = False
        self.had_runtime_error = False
        self.messages.clear()

    @staticmethod
    def _where(token: Token) -> str:
        if token.type == TokenType.EOF:
            return " at end"
        return f" at '{token.lexeme}'"

    def _write(self, text: str) -> None:
        self.messages.append(text)
        print(text, file=self.stream)
