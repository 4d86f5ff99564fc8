"""
Utility functions shared across golox tests.
"""
import io

from loxlang.lexer import tokenize
from loxlang.parser import Parser
from loxlang.reporter import ErrorReporter
from loxlang.runtime import Runtime
from loxlang.tokens import Token


def make_reporter() -> ErrorReporter:
    """
    Create a reporter writing to an in-memory stream.
    """
    return ErrorReporter(io.StringIO())


def scan(source: str) -> tuple[list[Token], ErrorReporter]:
    """
    Tokenize source code and return the tokens with the reporter used.
    """
    reporter = make_reporter()
    return tokenize(source, reporter), reporter


def parse_source(source: str):
    """
    Parse source code and return the AST with the reporter used.
    """
    reporter = make_reporter()
    tokens = tokenize(source, reporter)
    return Parser(tokens, reporter).parse(), reporter


def run_source(source: str) -> tuple[list[str], ErrorReporter]:
    """
    Run source code through the whole pipeline.

    Returns:
        The lines printed by the program and the reporter used.
    """
    stdout = io.StringIO()
    reporter = make_reporter()
    Runtime(reporter, stdout=stdout).run(source)
    return stdout.getvalue().splitlines(), reporter
