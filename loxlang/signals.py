"""Control flow signals.

``return``, ``break`` and ``continue`` are not errors, so they do not travel
as exceptions. Executing a statement returns ``None`` when control falls
through, or one of the signal values below when it must leave early. Loops
consume break/continue signals addressed to them; function calls consume
return signals.


File: signals.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ReturnSignal:
    """A ``return`` unwinding to the enclosing function call."""
    value: Any = None


@dataclass(frozen=True)
class BreakSignal:
    """A ``break``; ``label`` is None for the innermost loop."""
    label: str | None = None


@dataclass(frozen=True)
class ContinueSignal:
    """A ``continue``; ``label`` is None for the innermost loop."""
    label: str | None = None


Signal = Union[ReturnSignal, BreakSignal, ContinueSignal]


def targets_loop(signal: BreakSignal | ContinueSignal, label: str | None) -> bool:
    """
    Whether a loop carrying ``label`` should consume ``signal``.
    """
    return signal.label is None or signal.label == label
