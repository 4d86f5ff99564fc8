"""
golox - Lox Language Interpreter

This is the main entry point for the golox interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Scanner tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Resolver binds every local variable use to its declaring scope.
5. The Interpreter walks the AST, evaluating expressions and executing statements.

Set the ``GOLOXDEBUG`` environment variable to dump tokens and the AST before
execution and to enable debug logging on standard error.


File: golox.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import logging
import os
import sys

from loxlang.runtime import EXIT_OK, EXIT_USAGE, Runtime


def print_usage():
    """
    Print usage.
    """
    print()
    print("golox - Lox Language Interpreter")
    print()
    print("Usage:")
    print("    golox [script]")
    print()
    print("Arguments:")
    print("    [script]")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    golox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def configure_logging(debug: bool) -> None:
    """
    Send debug logging to standard error when debugging is enabled.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print a usage line and return exit code 64.
    """
    debug = bool(os.environ.get('GOLOXDEBUG'))
    configure_logging(debug)

    args = argv[1:]
    if len(args) > 1:
        print("Usage: golox [script]", file=sys.stderr)
        return EXIT_USAGE
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return EXIT_OK

    runtime = Runtime(debug=debug)
    if args:
        return runtime.run_file(args[0])
    return runtime.run_prompt()


def run() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
