"""AST node definitions for golox.

Expressions and statements are plain dataclasses forming two tagged unions,
:data:`Expr` and :data:`Stmt`. The parser builds them; the resolver and the
interpreter consume them with ``match`` statements.

Nodes compare and hash by identity (``eq=False``): the resolver's side table
is keyed by node, and two textually identical ``x`` references must resolve
independently.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Union

from loxlang.tokens import Token


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass(eq=False)
class Binary:
    left: Expr
    operator: Token
    right: Expr


@dataclass(eq=False)
class Logical:
    """Short-circuiting ``and`` / ``or``."""
    left: Expr
    operator: Token
    right: Expr


@dataclass(eq=False)
class Unary:
    operator: Token
    right: Expr


@dataclass(eq=False)
class Grouping:
    expression: Expr


@dataclass(eq=False)
class Literal:
    value: Any


@dataclass(eq=False)
class Variable:
    name: Token


@dataclass(eq=False)
class Assign:
    name: Token
    value: Expr


@dataclass(eq=False)
class Call:
    callee: Expr
    paren: Token
    arguments: list[Expr]


@dataclass(eq=False)
class Get:
    obj: Expr
    name: Token


@dataclass(eq=False)
class Set:
    obj: Expr
    name: Token
    value: Expr


@dataclass(eq=False)
class This:
    keyword: Token


@dataclass(eq=False)
class Ternary:
    condition: Expr
    question: Token
    then_branch: Expr
    else_branch: Expr


@dataclass(eq=False)
class Comma:
    """``left, right``: evaluates both, yields ``right``."""
    left: Expr
    operator: Token
    right: Expr


Expr = Union[
    Binary, Logical, Unary, Grouping, Literal, Variable, Assign,
    Call, Get, Set, This, Ternary, Comma,
]


# ----------------------------------------------------------------------
# Statements
# ----------------------------------------------------------------------

@dataclass(eq=False)
class Expression:
    expression: Expr


@dataclass(eq=False)
class Print:
    expression: Expr


@dataclass(eq=False)
class Var:
    name: Token
    initializer: Expr | None = None


@dataclass(eq=False)
class Block:
    statements: list[Stmt] = field(default_factory=list)


@dataclass(eq=False)
class If:
    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None = None


@dataclass(eq=False)
class While:
    """
    A loop. ``increment`` is the desugared third clause of a ``for`` header;
    it runs after the body and after ``continue``.
    """
    keyword: Token
    condition: Expr
    body: Block
    label: Token | None = None
    increment: Expr | None = None


@dataclass(eq=False)
class For:
    """Scope container for a desugared ``for`` loop."""
    keyword: Token
    body: Block


@dataclass(eq=False)
class Function:
    name: Token
    params: list[Token]
    body: list[Stmt]


@dataclass(eq=False)
class Return:
    keyword: Token
    value: Expr | None = None


@dataclass(eq=False)
class Class:
    name: Token
    methods: list[Function] = field(default_factory=list)


@dataclass(eq=False)
class Break:
    keyword: Token
    label: Token | None = None


@dataclass(eq=False)
class Continue:
    keyword: Token
    label: Token | None = None


Stmt = Union[
    Expression, Print, Var, Block, If, While, For,
    Function, Return, Class, Break, Continue,
]


def first_token(node: Expr | Stmt) -> Token | None:
    """
    Return a token held by ``node`` or one of its descendants, searching
    breadth first with an explicit queue so arbitrarily deep trees are safe.
    Returns None for trees made only of literals and groupings.
    """
    pending: deque[Any] = deque([node])
    while pending:
        current = pending.popleft()
        for item in fields(current):
            value = getattr(current, item.name)
            children = value if isinstance(value, list) else [value]
            for child in children:
                if isinstance(child, Token):
                    return child
                if is_dataclass(child):
                    pending.append(child)
    return None
