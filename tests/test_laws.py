"""Tests for the sample-based law checker."""

import pytest

from monoidal import (
    SUM,
    InvalidArgumentError,
    LawReport,
    LawViolationError,
    Monoid,
    assert_laws,
    check_laws,
)
from fakes import INTS, OFF_BY_ONE, STRINGIFY, SUBTRACT


def test_lawful_monoid_reports_ok() -> None:
    report = check_laws(SUM, INTS, value_type=int)
    assert report.ok
    assert report.violations == []
    assert report.checked["associativity"] == len(INTS) ** 3
    assert report.checked["closure"] == len(INTS) ** 2
    assert report.checked["left_identity"] == len(INTS)
    assert report.checked["right_identity"] == len(INTS)


def test_closure_skipped_without_value_type() -> None:
    report = check_laws(SUM, INTS)
    assert report.checked["closure"] == 0


def test_detects_non_associative_combine() -> None:
    report = check_laws(SUBTRACT, [1, 2, 3])
    assert not report.ok
    assert "associativity" in report.failed_laws()
    violation = next(v for v in report.violations if v.law == "associativity")
    assert len(violation.operands) == 3


def test_subtraction_has_only_a_right_identity() -> None:
    report = check_laws(SUBTRACT, [1, 2])
    assert "left_identity" in report.failed_laws()
    assert "right_identity" not in report.failed_laws()


def test_detects_bad_identity() -> None:
    report = check_laws(OFF_BY_ONE, [0, 5])
    assert report.failed_laws() == {"left_identity", "right_identity"}


def test_detects_closure_violation() -> None:
    report = check_laws(STRINGIFY, [1, 2], value_type=int)
    assert "closure" in report.failed_laws()
    closure = next(v for v in report.violations if v.law == "closure")
    assert closure.expected == "int"
    assert closure.actual == "str"


def test_max_violations_caps_counterexamples() -> None:
    report = check_laws(SUBTRACT, INTS, max_violations=3)
    assert len(report.violations) == 3
    assert not report.ok


def test_custom_equality() -> None:
    # Float addition is only approximately associative
    fsum = Monoid(lambda a, b: a + b, 0.0, name="fsum")
    samples = [0.1, 0.2, 0.3]
    assert not check_laws(fsum, samples).ok
    assert check_laws(fsum, samples, eq=lambda a, b: abs(a - b) < 1e-9).ok


def test_summary_mentions_failed_laws() -> None:
    report = check_laws(OFF_BY_ONE, [0])
    assert "off_by_one" in report.summary()
    assert "left_identity" in report.summary()
    assert "all laws hold" in check_laws(SUM, [1]).summary()


def test_report_is_a_pydantic_model() -> None:
    report = check_laws(SUM, [1, 2])
    restored = LawReport.model_validate(report.model_dump())
    assert restored == report


def test_assert_laws_passes_for_lawful_monoid() -> None:
    assert assert_laws(SUM, INTS).ok


def test_assert_laws_raises_with_report() -> None:
    with pytest.raises(LawViolationError) as excinfo:
        assert_laws(SUBTRACT, [1, 2])
    assert excinfo.value.report.failed_laws()
    assert isinstance(excinfo.value, AssertionError)


def test_assert_laws_honours_max_violations() -> None:
    with pytest.raises(LawViolationError) as excinfo:
        assert_laws(SUBTRACT, INTS, max_violations=2)
    assert len(excinfo.value.report.violations) == 2


def test_check_laws_rejects_none_samples() -> None:
    with pytest.raises(InvalidArgumentError):
        check_laws(SUM, None)  # type: ignore[arg-type]


def test_empty_samples_check_nothing() -> None:
    report = check_laws(SUBTRACT, [])
    assert report.ok
    assert sum(report.checked.values()) == 0
