"""Error types raised by monoidal."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monoidal.combinators.laws import LawReport


class MonoidError(Exception):
    """Base error for monoidal.

    Preserves the offending value (if any) for debugging.
    """

    def __init__(self, message: str, raw_value: object = None) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        message = self.args[0] if self.args else ""
        return f"{type(self).__name__}({message!r}, raw_value={self.raw_value!r})"


class InvalidArgumentError(MonoidError, TypeError):
    """A reduction was called with malformed input (e.g. a None sequence)."""


class MonoidNotFoundError(MonoidError, KeyError):
    """No monoid is registered for the requested type."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class LawViolationError(MonoidError, AssertionError):
    """A monoid failed one of its laws on the supplied samples."""

    def __init__(self, report: LawReport) -> None:
        self.report = report
        super().__init__(report.summary(), raw_value=report.monoid)
