"""golox: a tree-walking interpreter for the Lox language.

The pipeline lives in one module per stage: ``lexer`` (source to tokens),
``parser`` (tokens to AST), ``resolver`` (static scope analysis) and
``interpreter`` (evaluation). ``runtime`` wires them together for the CLI.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
