"""Sequential reductions over a Monoid.

Every function here returns a fresh copy of the monoid's identity for
empty input and, for a lawful monoid, the same value as a plain left
fold: only the grouping of the combine calls differs.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from monoidal.kernel.errors import InvalidArgumentError
from monoidal.kernel.monoid import Monoid

A = TypeVar("A")
T = TypeVar("T")


def require_items(items: object) -> None:
    if items is None:
        raise InvalidArgumentError("items must be an iterable, got None", raw_value=items)


def fold(items: Iterable[T], monoid: Monoid[T]) -> T:
    """Reduce items left to right, seeded with the identity.

    Args:
        items: Finite iterable of values; read once, never mutated
        monoid: Capability supplying combine and identity

    Returns:
        A fresh copy of monoid.identity when items is empty, else the
        combined value

    Raises:
        InvalidArgumentError: If items is None
    """
    require_items(items)
    combine = monoid.combine
    acc = monoid.empty()
    for item in items:
        acc = combine(acc, item)
    return acc


def fold_map(items: Iterable[A], fn: Callable[[A], T], monoid: Monoid[T]) -> T:
    """Transform each element with fn and reduce, in a single pass.

    Equivalent to fold([fn(a) for a in items], monoid).

    Raises:
        InvalidArgumentError: If items is None or fn is not callable
    """
    require_items(items)
    if not callable(fn):
        raise InvalidArgumentError(f"fn must be callable, got {type(fn).__name__}", raw_value=fn)
    combine = monoid.combine
    acc = monoid.empty()
    for item in items:
        acc = combine(acc, fn(item))
    return acc


def fold_right(items: Iterable[T], monoid: Monoid[T]) -> T:
    """Reduce with right-nested grouping: a1 + (a2 + (... + identity))."""
    require_items(items)
    combine = monoid.combine
    acc = monoid.empty()
    for item in reversed(_as_sequence(items)):
        acc = combine(item, acc)
    return acc


def fold_tree(items: Iterable[T], monoid: Monoid[T]) -> T:
    """Reduce by balanced divide and conquer.

    Pairs neighbours level by level, so the combine depth is O(log n).
    """
    require_items(items)
    level = list(items)
    if not level:
        return monoid.empty()
    combine = monoid.combine
    while len(level) > 1:
        paired = [combine(level[i], level[i + 1]) for i in range(0, len(level) - 1, 2)]
        if len(level) % 2:
            paired.append(level[-1])
        level = paired
    return level[0]


def fold_chunked(items: Iterable[T], monoid: Monoid[T], chunk_size: int) -> T:
    """Reduce contiguous chunks independently, then combine the partials in order.

    This is the sequential form of the split used by concurrent_fold.

    Raises:
        InvalidArgumentError: If items is None or chunk_size is not positive
    """
    require_items(items)
    partials = [fold(chunk, monoid) for chunk in chunked(_as_sequence(items), chunk_size)]
    return fold(partials, monoid)


def chunked(items: Sequence[T], chunk_size: int) -> list[Sequence[T]]:
    """Split items into contiguous slices of at most chunk_size elements."""
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be a positive int, got {chunk_size!r}", raw_value=chunk_size)
    return [items[i : i + chunk_size] for i in range(0, len(items), chunk_size)]


def _as_sequence(items: Iterable[T]) -> Sequence[T]:
    if isinstance(items, Sequence):
        return items
    return list(items)
