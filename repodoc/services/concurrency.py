"""Bounded fan-out / fan-in for independent async work items."""

import asyncio
from typing import Awaitable, Callable, List, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def bounded_gather(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    limit: int,
) -> List[R]:
    """
    Run ``worker`` over ``items`` with at most ``limit`` in flight.

    Results come back in input order. Workers are expected to handle their
    own failures; an exception escaping a worker propagates.
    """
    if not items:
        return []

    semaphore = asyncio.Semaphore(max(1, limit))

    async def run(item: T) -> R:
        async with semaphore:
            return await worker(item)

    return list(await asyncio.gather(*(run(item) for item in items)))
