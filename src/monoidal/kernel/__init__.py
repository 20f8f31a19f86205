"""Kernel layer - the monoid value, its errors and the runtime trace."""

from monoidal.kernel.errors import (
    InvalidArgumentError,
    LawViolationError,
    MonoidError,
    MonoidNotFoundError,
)
from monoidal.kernel.monoid import Combine, Monoid
from monoidal.kernel.trace import Trace, TraceEvent

__all__ = [
    "Monoid",
    "Combine",
    # Errors
    "MonoidError",
    "InvalidArgumentError",
    "MonoidNotFoundError",
    "LawViolationError",
    # Tracing
    "Trace",
    "TraceEvent",
]
