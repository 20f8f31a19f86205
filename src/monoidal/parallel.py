"""Concurrent tree reduction.

The input is split into contiguous chunks, every chunk is reduced on its
own (optionally in a worker thread), and the partial results are combined
in chunk order. Associativity makes the result identical to fold().
"""

from __future__ import annotations

import asyncio
import logging
import os
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from monoidal.fold import chunked, fold, fold_map, require_items
from monoidal.kernel.errors import InvalidArgumentError
from monoidal.kernel.monoid import Monoid
from monoidal.kernel.trace import CHUNK_PREFIX, Trace

logger = logging.getLogger(__name__)

A = TypeVar("A")
T = TypeVar("T")

_FALSY = {"0", "false", "no", "off"}


class FoldConfig(BaseModel):
    """Tuning for concurrent_fold.

    Attributes:
        chunk_size: Maximum number of elements reduced per chunk
        max_concurrency: Maximum number of chunks reduced at once
        offload: Reduce chunks in worker threads instead of on the event loop
    """
    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(default=1024, gt=0)
    max_concurrency: int = Field(default=4, gt=0)
    offload: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FoldConfig:
        """Build a config from MONOIDAL_* environment variables.

        Unset variables keep their defaults. Values are validated by pydantic.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if "MONOIDAL_CHUNK_SIZE" in env:
            values["chunk_size"] = env["MONOIDAL_CHUNK_SIZE"]
        if "MONOIDAL_MAX_CONCURRENCY" in env:
            values["max_concurrency"] = env["MONOIDAL_MAX_CONCURRENCY"]
        if "MONOIDAL_OFFLOAD" in env:
            values["offload"] = env["MONOIDAL_OFFLOAD"].strip().lower() not in _FALSY
        return cls.model_validate(values)


async def concurrent_fold(
    items: Iterable[T],
    monoid: Monoid[T],
    config: FoldConfig | None = None,
    trace: Trace | None = None,
) -> T:
    """Reduce items chunk-wise and concurrently.

    Semantics:
        - Materialize items and split them into contiguous chunks
        - Reduce every chunk with fold(), at most config.max_concurrency at once
        - Gather partial results in chunk order and fold them
        - If a chunk raises, pending chunks are cancelled and its exception
          propagates
        - Empty input yields a fresh copy of monoid.identity

    Trace behavior:
        - Records "fold_begin"
        - Records each chunk as a child event "chunk_<i>"
        - Records "fold_end" with the number of chunks and the duration

    Args:
        items: Finite iterable of values
        monoid: Lawful monoid; an unlawful one may give a different result
            than fold()
        config: Chunking and concurrency settings, defaults to FoldConfig()
        trace: Optional trace to record into

    Returns:
        The same value as fold(items, monoid)
    """
    require_items(items)
    return await _reduce_chunks(_as_list(items), monoid, fold, config, trace)


async def concurrent_fold_map(
    items: Iterable[A],
    fn: Callable[[A], T],
    monoid: Monoid[T],
    config: FoldConfig | None = None,
    trace: Trace | None = None,
) -> T:
    """concurrent_fold with a per-element transform, fused per chunk."""
    require_items(items)
    if not callable(fn):
        raise InvalidArgumentError(f"fn must be callable, got {type(fn).__name__}", raw_value=fn)

    def reduce_chunk(chunk: Sequence[A], m: Monoid[T]) -> T:
        return fold_map(chunk, fn, m)

    return await _reduce_chunks(_as_list(items), monoid, reduce_chunk, config, trace)


async def _reduce_chunks(
    items: list[Any],
    monoid: Monoid[T],
    reduce_chunk: Callable[[Sequence[Any], Monoid[T]], T],
    config: FoldConfig | None,
    trace: Trace | None,
) -> T:
    cfg = config or FoldConfig()
    chunks = chunked(items, cfg.chunk_size)
    logger.debug(
        "Reducing %d item(s) in %d chunk(s) with %r (max_concurrency=%d, offload=%s)",
        len(items), len(chunks), monoid, cfg.max_concurrency, cfg.offload,
    )

    begin_id: int | None = None
    if trace is not None:
        begin_id = trace.record("fold_begin", info={"items": len(items), "monoid": repr(monoid)})

    start_time = time.perf_counter()
    semaphore = asyncio.Semaphore(cfg.max_concurrency)

    async def run_chunk(index: int, chunk: Sequence[Any]) -> T:
        async with semaphore:
            chunk_start = time.perf_counter()
            if cfg.offload:
                partial = await asyncio.to_thread(reduce_chunk, chunk, monoid)
            else:
                partial = reduce_chunk(chunk, monoid)
            if trace is not None:
                trace.record(
                    f"{CHUNK_PREFIX}{index}",
                    info={"size": len(chunk)},
                    parent_id=begin_id,
                    duration_ms=(time.perf_counter() - chunk_start) * 1000,
                )
            return partial

    # A failing chunk cancels the rest; its own exception is re-raised as is
    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(run_chunk(i, c)) for i, c in enumerate(chunks)]
    except ExceptionGroup as failed:
        if len(failed.exceptions) == 1:
            raise failed.exceptions[0] from None
        raise
    partials = [task.result() for task in tasks]
    result = fold(partials, monoid)

    duration_ms = (time.perf_counter() - start_time) * 1000
    if trace is not None:
        trace.record(
            "fold_end",
            info={"chunks": len(chunks)},
            parent_id=begin_id,
            duration_ms=duration_ms,
        )
    logger.debug("Reduced %d chunk(s) in %.3fms", len(chunks), duration_ms)
    return result


def _as_list(items: Iterable[Any]) -> list[Any]:
    return items if isinstance(items, list) else list(items)
