"""Law and behaviour tests for the stock monoids."""

import math

from monoidal import (
    ALL,
    ANY,
    FIRST,
    LAST,
    LIST,
    MAX,
    MIN,
    PRODUCT,
    STRING,
    SUM,
    TUPLE,
    UNION,
    check_laws,
    fold,
)
from fakes import INTS, WORDS


def test_numeric_monoids_are_lawful() -> None:
    for monoid in (SUM, PRODUCT, MAX, MIN):
        report = check_laws(monoid, INTS)
        assert report.ok, report.summary()


def test_sum_and_product_are_closed_over_int() -> None:
    assert check_laws(SUM, INTS, value_type=int).ok
    assert check_laws(PRODUCT, INTS, value_type=int).ok


def test_sequence_monoids_are_lawful() -> None:
    assert check_laws(STRING, WORDS, value_type=str).ok
    assert check_laws(LIST, [[], [1], [2, 3]], value_type=list).ok
    assert check_laws(TUPLE, [(), (1,), ("a", "b")], value_type=tuple).ok


def test_boolean_monoids_are_lawful() -> None:
    assert check_laws(ALL, [True, False], value_type=bool).ok
    assert check_laws(ANY, [True, False], value_type=bool).ok


def test_union_is_lawful() -> None:
    samples = [frozenset(), frozenset({1}), frozenset({1, 2}), frozenset({3})]
    assert check_laws(UNION, samples, value_type=frozenset).ok


def test_first_and_last_are_lawful() -> None:
    samples = [None, 1, 2, "x"]
    assert check_laws(FIRST, samples).ok
    assert check_laws(LAST, samples).ok


def test_list_combine_returns_a_new_list() -> None:
    a, b = [1], [2]
    combined = LIST.combine(a, b)
    assert combined == [1, 2]
    assert a == [1] and b == [2]
    assert LIST.combine(a, LIST.identity) is not a


def test_max_min_of_empty_are_infinities() -> None:
    assert fold([], MAX) == -math.inf
    assert fold([], MIN) == math.inf
    assert fold([3, 9, -1], MAX) == 9
    assert fold([3, 9, -1], MIN) == -1


def test_all_any() -> None:
    assert fold([], ALL) is True
    assert fold([], ANY) is False
    assert fold([True, False, True], ALL) is False
    assert fold([False, False, True], ANY) is True


def test_first_last_skip_none() -> None:
    assert fold([None, "a", None, "b", None], FIRST) == "a"
    assert fold([None, "a", None, "b", None], LAST) == "b"
    assert fold([None, None], FIRST) is None


def test_repr_uses_name() -> None:
    assert repr(SUM) == "Monoid(sum, identity=0)"
