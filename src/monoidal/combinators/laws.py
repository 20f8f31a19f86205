"""Sample-based checking of the monoid laws.

The laws cannot be verified in general (that would quantify over every
value of the type), so the checker exercises them exhaustively over a
finite list of samples:

1. Closure: combine(a, b) is an instance of value_type (skipped when no
   value_type is given)
2. Associativity: combine(combine(a, b), c) == combine(a, combine(b, c))
   for every ordered triple of samples
3. Identity: combine(identity, a) == a == combine(a, identity) for every sample
"""

from __future__ import annotations

import itertools
import logging
import operator
from collections.abc import Callable, Sequence
from typing import Any, Literal

from pydantic import BaseModel, Field

from monoidal.kernel.errors import InvalidArgumentError, LawViolationError
from monoidal.kernel.monoid import Monoid

logger = logging.getLogger(__name__)

Law = Literal["closure", "associativity", "left_identity", "right_identity"]


class LawViolation(BaseModel):
    """One counterexample to a law."""
    law: Law
    operands: tuple[str, ...]
    expected: str
    actual: str


class LawReport(BaseModel):
    """Outcome of checking a monoid against a list of samples."""
    monoid: str
    checked: dict[str, int] = Field(default_factory=dict)
    violations: list[LawViolation] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def failed_laws(self) -> set[str]:
        return {v.law for v in self.violations}

    def summary(self) -> str:
        total = sum(self.checked.values())
        if self.ok:
            return f"{self.monoid}: all laws hold ({total} checks)"
        laws = ", ".join(sorted(self.failed_laws()))
        return f"{self.monoid}: {len(self.violations)} violation(s) of {laws} ({total} checks)"


def check_laws(
    monoid: Monoid[Any],
    samples: Sequence[Any],
    *,
    value_type: type | tuple[type, ...] | None = None,
    eq: Callable[[Any, Any], bool] = operator.eq,
    max_violations: int = 10,
) -> LawReport:
    """Check closure, associativity and identity of monoid over samples.

    Args:
        monoid: The monoid under test
        samples: Values of the monoid's type
        value_type: If given, every combined value must be an instance of it
        eq: Equality used to compare results
        max_violations: Stop recording counterexamples after this many

    Returns:
        LawReport with check counts and counterexamples; never raises for
        a failing law
    """
    if samples is None:
        raise InvalidArgumentError("samples must be a sequence, got None", raw_value=samples)

    combine = monoid.combine
    identity = monoid.identity
    report = LawReport(monoid=repr(monoid))
    checked = {"closure": 0, "associativity": 0, "left_identity": 0, "right_identity": 0}

    def violate(law: Law, operands: tuple[Any, ...], expected: str, actual: str) -> None:
        if len(report.violations) < max_violations:
            report.violations.append(
                LawViolation(
                    law=law,
                    operands=tuple(repr(o) for o in operands),
                    expected=expected,
                    actual=actual,
                )
            )

    if value_type is not None:
        for a, b in itertools.product(samples, repeat=2):
            checked["closure"] += 1
            result = combine(a, b)
            if not isinstance(result, value_type):
                violate("closure", (a, b), _type_name(value_type), type(result).__name__)

    for a, b, c in itertools.product(samples, repeat=3):
        checked["associativity"] += 1
        left = combine(combine(a, b), c)
        right = combine(a, combine(b, c))
        if not eq(left, right):
            violate("associativity", (a, b, c), repr(left), repr(right))

    for a in samples:
        checked["left_identity"] += 1
        result = combine(identity, a)
        if not eq(result, a):
            violate("left_identity", (identity, a), repr(a), repr(result))

        checked["right_identity"] += 1
        result = combine(a, identity)
        if not eq(result, a):
            violate("right_identity", (a, identity), repr(a), repr(result))

    report.checked = checked
    if not report.ok:
        logger.debug("Law check failed: %s", report.summary())
    return report


def assert_laws(
    monoid: Monoid[Any],
    samples: Sequence[Any],
    *,
    value_type: type | tuple[type, ...] | None = None,
    eq: Callable[[Any, Any], bool] = operator.eq,
    max_violations: int = 10,
) -> LawReport:
    """Like check_laws, but raise LawViolationError if any law fails."""
    report = check_laws(monoid, samples, value_type=value_type, eq=eq, max_violations=max_violations)
    if not report.ok:
        raise LawViolationError(report)
    return report


def _type_name(tp: type | tuple[type, ...]) -> str:
    if isinstance(tp, tuple):
        return " | ".join(t.__name__ for t in tp)
    return tp.__name__
