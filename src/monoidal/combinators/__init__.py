"""Combinators - build new monoids from existing ones, and check their laws."""

from monoidal.combinators.laws import LawReport, LawViolation, assert_laws, check_laws
from monoidal.combinators.ops import dual, mapping, optional, product, tuple_of

__all__ = [
    "product",
    "tuple_of",
    "mapping",
    "dual",
    "optional",
    # Laws
    "check_laws",
    "assert_laws",
    "LawReport",
    "LawViolation",
]
