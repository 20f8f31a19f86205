"""Runtime trace of concurrent reductions.

A trace never participates in the values being combined. Each
concurrent_fold records one "fold_begin" event, one "chunk_<i>" child per
chunk and a closing "fold_end" child.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

CHUNK_PREFIX = "chunk_"


@dataclass(frozen=True)
class TraceEvent:
    """A single recorded event (e.g. "fold_begin", "chunk_0", "fold_end")."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None

    @property
    def is_chunk(self) -> bool:
        return self.action.startswith(CHUNK_PREFIX)

    def __str__(self) -> str:
        duration = f" took {self.duration_ms:.3f}ms" if self.duration_ms is not None else ""
        return f"{self.action}{duration}"


class Trace:
    """Append-only event log shared by any number of concurrent folds.

    Events are recorded from the event loop thread only, so no locking is
    done. A disabled trace records nothing.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[TraceEvent] = []

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event and return its id, or None when disabled."""
        if not self.enabled:
            return None

        event_id = len(self._events)
        self._events.append(
            TraceEvent(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[TraceEvent]:
        return list(self._events)

    def find(self, action: str) -> list[TraceEvent]:
        """Events whose action is exactly the given one."""
        return [ev for ev in self._events if ev.action == action]

    def folds(self) -> list[TraceEvent]:
        """The "fold_begin" event of every traced reduction."""
        return self.find("fold_begin")

    def children(self, parent_id: int) -> list[TraceEvent]:
        return [ev for ev in self._events if ev.parent_id == parent_id]

    def chunks(self, fold_id: int) -> list[TraceEvent]:
        """Chunk events of one reduction, ordered by chunk index."""
        chunk_events = [ev for ev in self.children(fold_id) if ev.is_chunk]
        return sorted(chunk_events, key=lambda ev: int(ev.action[len(CHUNK_PREFIX):]))

    def __len__(self) -> int:
        return len(self._events)
