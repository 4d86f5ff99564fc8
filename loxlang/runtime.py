"""Runtime.

Drives the pipeline for one session: source text is scanned, parsed, resolved
and interpreted, stopping after the first stage that reports an error. One
:class:`Runtime` owns a single interpreter, so global state survives from one
REPL line to the next.

Exit codes follow the Lox convention:

- ``0``  success
- ``2``  the script could not be opened or read
- ``64`` bad command line usage
- ``65`` static (lexical, syntax or resolution) error
- ``70`` runtime error


File: runtime.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys
from typing import TextIO

from loxlang import nodes
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser
from loxlang.printer import AstPrinter
from loxlang.reporter import ErrorReporter
from loxlang.resolver import Resolver
from loxlang.tokens import Token

logger = logging.getLogger(__name__)

VERSION = "0.02"
BANNER = f"Golox {VERSION}"
PROMPT = ">> "

EXIT_OK = 0
EXIT_NO_INPUT = 2
EXIT_USAGE = 64
EXIT_STATIC_ERROR = 65
EXIT_RUNTIME_ERROR = 70

# Every golox call or nesting level costs several Python frames
RECURSION_LIMIT = 10_000


def raise_recursion_limit(limit: int = RECURSION_LIMIT) -> None:
    """
    Make room on the Python stack for deeply nested and recursive programs.
    An existing higher limit is left alone.
    """
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)


def debug_print_tokens_ast(tokens: list[Token], statements: list[nodes.Stmt], stream: TextIO) -> None:
    """
    Print tokenized source and AST
    """
    printer = AstPrinter()
    print("\nTokens:\n", file=stream)
    print(tokens, file=stream)
    print("\nAST:\n", file=stream)
    for stmt in statements:
        print(printer.print(stmt), file=stream)
    print(" ", file=stream)


class Runtime:
    """Runs golox source through every stage of the pipeline."""

    def __init__(
        self,
        reporter: ErrorReporter | None = None,
        stdout: TextIO | None = None,
        debug: bool = False,
    ):
        """
        Initialize the runtime.

        Parameters:
            reporter (ErrorReporter | None): Error sink; a fresh one writing
                to standard error by default.
            stdout (TextIO | None): Where program output goes.
            debug (bool): Dump tokens and the AST before running.
        """
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._stdout = stdout
        self.debug = debug
        self.interpreter = Interpreter(self.reporter, stdout)
        raise_recursion_limit()

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def run(self, source: str | bytes) -> None:
        """
        Run one chunk of source code. Errors end up in the reporter.
        """
        tokens = tokenize(source, self.reporter)
        if self.reporter.had_error:
            logger.debug("lexical errors, skipping parse")
            return

        statements = Parser(tokens, self.reporter).parse()
        if self.debug:
            debug_print_tokens_ast(tokens, statements, self.stdout)
        if self.reporter.had_error:
            logger.debug("syntax errors, skipping resolution")
            return

        Resolver(self.interpreter, self.reporter).resolve(statements)
        if self.reporter.had_error:
            logger.debug("resolution errors, skipping execution")
            return

        self.interpreter.interpret(statements)

    def run_file(self, path: str) -> int:
        """
        Run a script file.

        Returns:
            int: The process exit code.
        """
        try:
            with open(path, "rb") as f:
                source = f.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as err:
            reason = err.strerror if isinstance(err, OSError) else str(err)
            print(f"can't open file '{path}': {reason}", file=sys.stderr)
            return EXIT_NO_INPUT

        self.run(source)
        if self.reporter.had_error:
            return EXIT_STATIC_ERROR
        if self.reporter.had_runtime_error:
            return EXIT_RUNTIME_ERROR
        return EXIT_OK

    def run_prompt(self) -> int:
        """
        Run the interactive REPL until end of input.

        Returns:
            int: The process exit code.
        """
        print(BANNER, file=self.stdout)
        while True:
            try:
                line = input(PROMPT)
            except KeyboardInterrupt:
                print("\nInterrupted.", file=self.stdout)
                break
            except EOFError:
                print(file=self.stdout)
                break
            if line.strip() in {"exit", "quit"}:
                break
            self.run(line)
            self.reporter.reset()
        return EXIT_OK
