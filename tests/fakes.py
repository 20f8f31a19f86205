from __future__ import annotations

import operator
from typing import Any

from monoidal import Monoid

# Not associative: (a - b) - c != a - (b - c)
SUBTRACT: Monoid[int] = Monoid(operator.sub, 0, name="subtract")

# Associative, but 1 is not an identity for +
OFF_BY_ONE: Monoid[int] = Monoid(operator.add, 1, name="off_by_one")

# Escapes the int type: combine returns a string
STRINGIFY: Monoid[Any] = Monoid(lambda a, b: f"{a}{b}", 0, name="stringify")

INTS = [-3, 0, 1, 2, 7]
WORDS = ["", "I", "love", "x"]


class CallLog:
    """Wraps a combine function and records the operand pairs it sees."""

    def __init__(self, monoid: Monoid[Any]) -> None:
        self.calls: list[tuple[Any, Any]] = []
        inner = monoid.combine

        def combine(a: Any, b: Any) -> Any:
            self.calls.append((a, b))
            return inner(a, b)

        self.monoid = Monoid(combine, monoid.identity, name=monoid.name)
