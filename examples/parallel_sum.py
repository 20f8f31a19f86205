"""Concurrent chunked reduction with tracing.

Usage:
    MONOIDAL_CHUNK_SIZE=250 python examples/parallel_sum.py
"""

from __future__ import annotations

import asyncio
import logging

from monoidal import SUM, FoldConfig, Trace, concurrent_fold, fold, mapping

logging.basicConfig(level=logging.INFO)
logging.getLogger("monoidal").setLevel(logging.DEBUG)


async def main() -> None:
    config = FoldConfig.from_env()
    trace = Trace()

    numbers = list(range(10_000))
    total = await concurrent_fold(numbers, SUM, config, trace=trace)
    assert total == fold(numbers, SUM)
    print(f"sum={total}")

    buckets = [{n % 7: n} for n in numbers]
    by_residue = await concurrent_fold(buckets, mapping(SUM), config)
    print(f"by residue mod 7: {by_residue}")

    for event in trace.get_events():
        print(f"  {event}")


if __name__ == "__main__":
    asyncio.run(main())
