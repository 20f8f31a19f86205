"""Monoid - the combining capability every reduction is parameterized by."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


Combine = Callable[[T, T], T]


@dataclass(frozen=True)
class Monoid(Generic[T]):
    """A type's associative combining operation plus its identity element.

    Instances are plain values: pass them to the reduction functions or to
    the combinators to derive new ones. Nothing is checked on construction;
    the laws below are a contract on the caller:

    - Closure: combine(a, b) is again a T
    - Associativity: combine(combine(a, b), c) == combine(a, combine(b, c))
    - Identity: combine(identity, a) == a == combine(a, identity)

    An unlawful monoid does not raise, it just aggregates to the wrong value.
    Reductions seed from empty(), never from identity itself, so a caller
    mutating a result cannot change the monoid.
    Use monoidal.combinators.laws.check_laws to test an instance on samples.

    Attributes:
        combine: Pure, associative binary operation
        identity: Neutral element for combine
        name: Label used in reprs, logs and law reports
    """

    combine: Combine[T]
    identity: T
    name: str = field(default="", compare=False)

    def empty(self) -> T:
        """A fresh copy of the identity, safe for the caller to mutate."""
        return copy.deepcopy(self.identity)

    def concat(self, items: Iterable[T]) -> T:
        """Reduce items with this monoid (same as fold(items, self))."""
        from monoidal.fold import fold

        return fold(items, self)

    def combine_all(self, *values: T) -> T:
        """Combine any number of values left to right."""
        return self.concat(values)

    def is_identity(self, value: T) -> bool:
        return value == self.identity

    def __repr__(self) -> str:
        label = self.name or getattr(self.combine, "__name__", "combine")
        return f"Monoid({label}, identity={self.identity!r})"
