import asyncio
import logging
import math
import time
from typing import Any, Awaitable, Callable, List, Sequence, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Outcome = Union[R, BaseException]


async def run_in_batches(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    batch_size: int,
    delay: float,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> List[Outcome]:
    """
    Run ``worker`` over ``items`` in consecutive fixed-size batches.

    Every call in a batch is dispatched before any is awaited, and the whole
    batch settles before the next one starts. ``delay`` seconds pass between
    batches, never after the last. The result holds one outcome per item in
    input order: the worker's return value, or the exception it raised.
    Cancellation is not captured and aborts the run.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")
    if delay < 0:
        raise ValueError("delay must not be negative")

    outcomes: List[Outcome] = []
    total_batches = math.ceil(len(items) / batch_size)
    started = time.monotonic()

    for start in range(0, len(items), batch_size):
        batch = items[start:start + batch_size]
        batch_number = start // batch_size + 1
        logger.info("Processing batch %d/%d with %d items", batch_number, total_batches, len(batch))
        batch_started = time.monotonic()

        results = await asyncio.gather(*(worker(item) for item in batch), return_exceptions=True)
        for result in results:
            if isinstance(result, asyncio.CancelledError):
                raise result
        outcomes.extend(results)

        logger.info("Batch %d completed in %.2f seconds", batch_number, time.monotonic() - batch_started)

        if start + batch_size < len(items):
            logger.debug("Waiting %.2f seconds before next batch", delay)
            await sleep(delay)

    logger.info("All %d items processed in %.2f seconds", len(items), time.monotonic() - started)
    return outcomes
