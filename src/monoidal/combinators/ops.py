"""Combinator primitives: product, tuple_of, mapping, dual, optional.

Every combinator takes Monoid values and returns a new Monoid. The result
holds references to its inputs and nothing else, so combinators nest
freely, e.g. mapping(mapping(SUM)) or product(mapping(SUM), MAX).
"""

# Derived monoids satisfy the following laws whenever their inputs do:
#
# 1. product / tuple_of: closure, associativity and identity hold
#    component-wise, so they hold for the tuple.
#
# 2. mapping: for every key the merged value is
#    combine_V(a.get(k, identity_V), b.get(k, identity_V)); a key absent
#    from all operands contributes identity_V, so associativity and identity
#    reduce to those of the value monoid.
#
# 3. dual: flipping arguments preserves associativity and identity.
#
# 4. optional: None is a fresh identity adjoined to the value monoid.

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from monoidal.kernel.monoid import Monoid

A = TypeVar("A")
B = TypeVar("B")
T = TypeVar("T")
V = TypeVar("V")


def product(first: Monoid[A], second: Monoid[B]) -> Monoid[tuple[A, B]]:
    """Derive a monoid over pairs from a monoid for each component.

    Semantics:
        - identity is (first.identity, second.identity)
        - combine((a1, b1), (a2, b2)) == (first.combine(a1, a2), second.combine(b1, b2))

    Lets a single fold aggregate two independent metrics in one traversal.

    Args:
        first: Monoid for the left component
        second: Monoid for the right component

    Returns:
        Monoid[tuple[A, B]]
    """
    combine_a = first.combine
    combine_b = second.combine

    def combine(x: tuple[A, B], y: tuple[A, B]) -> tuple[A, B]:
        return (combine_a(x[0], y[0]), combine_b(x[1], y[1]))

    return Monoid(
        combine,
        (first.identity, second.identity),
        name=f"product({_label(first)}, {_label(second)})",
    )


def tuple_of(*monoids: Monoid[Any]) -> Monoid[tuple[Any, ...]]:
    """Derive a monoid over fixed-length tuples, one component monoid per slot.

    tuple_of() is the unit monoid over the empty tuple.
    """
    combines = tuple(m.combine for m in monoids)

    def combine(x: tuple[Any, ...], y: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(c(a, b) for c, a, b in zip(combines, x, y, strict=True))

    return Monoid(
        combine,
        tuple(m.identity for m in monoids),
        name=f"tuple_of({', '.join(_label(m) for m in monoids)})",
    )


def mapping(values: Monoid[V]) -> Monoid[dict[Any, V]]:
    """Derive a monoid over key -> value mappings that merges per key.

    Semantics:
        - identity is the empty dict
        - combine(a, b) holds every key of a or b; a key missing on one side
          counts as values.identity on that side
        - operands are never mutated; a new dict is returned
        - key order of the result carries no meaning

    The result is itself a Monoid, so mapping(mapping(m)) aggregates by two
    key dimensions with no extra code.
    """
    combine_v = values.combine

    def side(m: Mapping[Any, V], key: Any) -> V:
        return m[key] if key in m else values.empty()

    def combine(a: Mapping[Any, V], b: Mapping[Any, V]) -> dict[Any, V]:
        keys = [*a, *(key for key in b if key not in a)]
        return {key: combine_v(side(a, key), side(b, key)) for key in keys}

    return Monoid(combine, {}, name=f"mapping({_label(values)})")


def dual(monoid: Monoid[T]) -> Monoid[T]:
    """Same identity, arguments flipped: combine(a, b) == monoid.combine(b, a)."""
    inner = monoid.combine

    def combine(a: T, b: T) -> T:
        return inner(b, a)

    return Monoid(combine, monoid.identity, name=f"dual({_label(monoid)})")


def optional(monoid: Monoid[T]) -> Monoid[T | None]:
    """Lift a monoid to T | None with None as the identity.

    None on either side yields the other side; two values combine with
    monoid.combine. Useful when "no data" must stay distinguishable from
    the value monoid's own identity.
    """
    inner = monoid.combine

    def combine(a: T | None, b: T | None) -> T | None:
        if a is None:
            return b
        if b is None:
            return a
        return inner(a, b)

    return Monoid(combine, None, name=f"optional({_label(monoid)})")


def _label(monoid: Monoid[Any]) -> str:
    return monoid.name or getattr(monoid.combine, "__name__", "?")
