"""Type -> Monoid lookup table."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from monoidal import instances
from monoidal.fold import fold
from monoidal.kernel.errors import MonoidNotFoundError
from monoidal.kernel.monoid import Monoid

logger = logging.getLogger(__name__)


class MonoidRegistry:
    """Registry for looking up a monoid by the Python type it combines.

    Lookup is by exact type: registering int does not cover bool. Callers
    hold a registry and pass it explicitly; there is no global instance.
    """

    def __init__(self, monoids: dict[type, Monoid[Any]] | None = None) -> None:
        self._monoids: dict[type, Monoid[Any]] = dict(monoids or {})

    def register(self, tp: type, monoid: Monoid[Any]) -> None:
        """Register (or replace) the monoid for tp."""
        if tp in self._monoids:
            logger.debug("Replacing monoid for %s: %r -> %r", tp.__name__, self._monoids[tp], monoid)
        self._monoids[tp] = monoid

    def get(self, tp: type) -> Monoid[Any]:
        """Get the monoid registered for tp."""
        try:
            return self._monoids[tp]
        except KeyError:
            logger.debug("No monoid registered for %r", tp)
            raise MonoidNotFoundError(f"No monoid registered for type '{_type_name(tp)}'", raw_value=tp) from None

    def for_value(self, value: object) -> Monoid[Any]:
        """Get the monoid registered for type(value)."""
        return self.get(type(value))

    def fold(self, items: Iterable[Any], tp: type) -> Any:
        """Reduce items with the monoid registered for tp."""
        return fold(items, self.get(tp))

    def __getitem__(self, tp: type) -> Monoid[Any]:
        return self.get(tp)

    def __setitem__(self, tp: type, monoid: Monoid[Any]) -> None:
        self.register(tp, monoid)

    def __contains__(self, tp: object) -> bool:
        return tp in self._monoids

    def __iter__(self) -> Iterator[type]:
        return iter(self._monoids)

    def __len__(self) -> int:
        return len(self._monoids)


def default_registry() -> MonoidRegistry:
    """Create a fresh registry holding the stock monoids for builtin types."""
    return MonoidRegistry(
        {
            int: instances.SUM,
            float: instances.SUM,
            str: instances.STRING,
            list: instances.LIST,
            tuple: instances.TUPLE,
            frozenset: instances.UNION,
            bool: instances.ALL,
        }
    )


def _type_name(tp: object) -> str:
    return getattr(tp, "__name__", repr(tp))
