"""Shared value operations.

Truthiness, equality, numeric coercion and stringification live here so the
interpreter and the built-ins agree on them. Arithmetic is keyed by operator
token type in :data:`ARITHMETIC` and :data:`COMPARISON`.

Numbers are Python ``int`` (integer literals) or ``float``. Every arithmetic
operation and comparison widens its operands to ``float``; only the printed
form distinguishes the two.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import operator
from typing import Any, Callable

from loxlang.tokens import TokenType


def is_number(value: Any) -> bool:
    # bool is an int subclass but not a golox number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: Any) -> bool:
    """
    ``nil`` and ``false`` are falsey, everything else is truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: Any, right: Any) -> bool:
    """
    Two values are equal iff they are the same kind with equal payloads.
    Numbers compare by mathematical value, so ``1 == 1.0``.
    """
    if left is None or right is None:
        return left is None and right is None
    if is_number(left) and is_number(right):
        return float(left) == float(right)
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right
    return left is right


def divide(left: float, right: float) -> float:
    """
    IEEE-754 division: dividing by zero yields an infinity or NaN.
    """
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


ARITHMETIC: dict[TokenType, Callable[[float, float], float]] = {
    TokenType.MINUS: operator.sub,
    TokenType.PLUS: operator.add,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: divide,
}

COMPARISON: dict[TokenType, Callable[[float, float], bool]] = {
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


def format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def stringify(value: Any) -> str:
    """
    Render a value the way ``print`` shows it.
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    return str(value)
