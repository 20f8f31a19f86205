"""Stock monoids for builtin types."""

from __future__ import annotations

import math
import operator
from typing import Any

from monoidal.kernel.monoid import Monoid


def _concat_lists(a: list[Any], b: list[Any]) -> list[Any]:
    # Always a new list; operands are never extended in place
    return [*a, *b]


def _logical_and(a: bool, b: bool) -> bool:
    return a and b


def _logical_or(a: bool, b: bool) -> bool:
    return a or b


def _first(a: Any, b: Any) -> Any:
    return b if a is None else a


def _last(a: Any, b: Any) -> Any:
    return a if b is None else b


SUM: Monoid[Any] = Monoid(operator.add, 0, name="sum")
PRODUCT: Monoid[Any] = Monoid(operator.mul, 1, name="product")

STRING: Monoid[str] = Monoid(operator.add, "", name="string")
LIST: Monoid[list[Any]] = Monoid(_concat_lists, [], name="list")
TUPLE: Monoid[tuple[Any, ...]] = Monoid(operator.add, (), name="tuple")

ALL: Monoid[bool] = Monoid(_logical_and, True, name="all")
ANY: Monoid[bool] = Monoid(_logical_or, False, name="any")

MAX: Monoid[float] = Monoid(max, -math.inf, name="max")
MIN: Monoid[float] = Monoid(min, math.inf, name="min")

UNION: Monoid[frozenset[Any]] = Monoid(operator.or_, frozenset(), name="union")

# Keep the first / last non-None value
FIRST: Monoid[Any] = Monoid(_first, None, name="first")
LAST: Monoid[Any] = Monoid(_last, None, name="last")

__all__ = [
    "SUM",
    "PRODUCT",
    "STRING",
    "LIST",
    "TUPLE",
    "ALL",
    "ANY",
    "MAX",
    "MIN",
    "UNION",
    "FIRST",
    "LAST",
]
