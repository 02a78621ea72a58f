"""Concurrent fan-out of independent sub-queries.

This module provides the FanOutAggregator that runs one sub-query per
parent item concurrently and returns either every result or the first
failure, never a partial collection.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Generic, TypeVar

from ..core.exceptions import SubQueryError
from .telemetry import log_fanout_complete, log_subquery_error

T = TypeVar("T")


@dataclass(frozen=True)
class SubQueryRequest(Generic[T]):
    """One unit of fan-out work.

    Attributes:
        key: Identifier of the parent item (e.g. a location name)
        run: Zero-argument factory returning the sub-query coroutine
    """

    key: str
    run: Callable[[], Awaitable[T]]


@dataclass(frozen=True)
class SubQueryResult(Generic[T]):
    """Successful outcome of one sub-query.

    Attributes:
        key: Identifier of the parent item
        index: Position of the originating request
        value: Sub-query result
    """

    key: str
    index: int
    value: T


def _consume_outcome(task: asyncio.Task) -> None:
    # Abandoned tasks are never awaited; read their outcome so asyncio does
    # not report "exception was never retrieved".
    if not task.cancelled():
        task.exception()


class FanOutAggregator:
    """Runs sub-queries concurrently with first-failure short-circuit."""

    def __init__(self, *, max_concurrency: int | None = None) -> None:
        """Initialize aggregator.

        Args:
            max_concurrency: Optional bound on in-flight sub-queries
        """
        if max_concurrency is not None and max_concurrency <= 0:
            raise ValueError("max_concurrency must be None or a positive integer")
        self._max_concurrency = max_concurrency

    async def run(
        self,
        requests: Sequence[SubQueryRequest[T]],
        *,
        operation: str = "fanout",
        ordered: bool = False,
    ) -> list[SubQueryResult[T]]:
        """Run every request and collect the results.

        Results arrive in completion order unless ``ordered`` is set, in
        which case they are re-sorted into request order.

        Args:
            requests: Sub-queries to schedule
            operation: Name used in log events
            ordered: Return results in request order

        Returns:
            Exactly one SubQueryResult per request

        Raises:
            SubQueryError: The first sub-query failure, chained to its cause
        """
        if not requests:
            return []

        start = perf_counter()
        semaphore = asyncio.Semaphore(self._max_concurrency) if self._max_concurrency else None
        failed = asyncio.Event()

        async def _run_one(index: int, request: SubQueryRequest[T]) -> SubQueryResult[T] | None:
            if semaphore is None:
                value = await request.run()
            else:
                async with semaphore:
                    # A failing sub-query sets this before releasing its slot;
                    # None marks work dropped after that failure.
                    if failed.is_set():
                        return None
                    try:
                        value = await request.run()
                    except Exception:
                        failed.set()
                        raise
            return SubQueryResult(key=request.key, index=index, value=value)

        tasks: dict[asyncio.Task, SubQueryRequest[T]] = {}
        for index, request in enumerate(requests):
            task = asyncio.create_task(_run_one(index, request))
            tasks[task] = request

        results: list[SubQueryResult[T]] = []
        pending: set[asyncio.Task] = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    request = tasks[task]
                    if task.cancelled():
                        # Never cancelled by this loop, so the cancellation came from elsewhere
                        log_subquery_error(
                            operation=operation,
                            key=request.key,
                            error_type="CancelledError",
                            error_message="sub-query was cancelled",
                        )
                        raise SubQueryError(
                            f"{operation}: sub-query for {request.key} was cancelled",
                            key=request.key,
                        )
                    error = task.exception()
                    if error is None:
                        outcome = task.result()
                        if outcome is not None:
                            results.append(outcome)
                        continue
                    log_subquery_error(
                        operation=operation,
                        key=request.key,
                        error_type=type(error).__name__,
                        error_message=str(error),
                    )
                    raise SubQueryError(
                        f"{operation}: sub-query for {request.key} failed: {error}",
                        key=request.key,
                    ) from error
        finally:
            # Advisory only: stop work nobody will look at, but do not wait for it
            for task in tasks:
                if task in pending:
                    task.cancel()
                    task.add_done_callback(_consume_outcome)
                elif task.done():
                    _consume_outcome(task)

        log_fanout_complete(
            operation=operation,
            sub_queries=len(results),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        if ordered:
            results.sort(key=lambda r: r.index)
        return results


async def fan_out(
    requests: Sequence[SubQueryRequest[Any]],
    *,
    max_concurrency: int | None = None,
    operation: str = "fanout",
    ordered: bool = False,
) -> list[SubQueryResult[Any]]:
    """Convenience wrapper around FanOutAggregator.run."""
    aggregator = FanOutAggregator(max_concurrency=max_concurrency)
    return await aggregator.run(requests, operation=operation, ordered=ordered)
