"""Unit tests for the concurrent fan-out aggregator."""

from __future__ import annotations

import asyncio
import logging

import pytest

from cloudkit.business.core import SubQueryError, TransportError
from cloudkit.business.runtime import FanOutAggregator, SubQueryRequest, fan_out


def _request(key: str, value=None, *, delay: float = 0.0, error: Exception | None = None):
    async def _run():
        await asyncio.sleep(delay)
        if error is not None:
            raise error
        return value if value is not None else key

    return SubQueryRequest(key=key, run=_run)


class TestFanOutAggregator:
    """Test FanOutAggregator.run."""

    @pytest.mark.asyncio
    async def test_all_succeed(self):
        """Test K sub-queries give exactly K results."""
        requests = [_request(f"loc-{i}", delay=0.001 * (5 - i)) for i in range(5)]

        results = await FanOutAggregator().run(requests)

        assert len(results) == 5
        assert {r.key for r in results} == {f"loc-{i}" for i in range(5)}
        assert {r.value for r in results} == {f"loc-{i}" for i in range(5)}

    @pytest.mark.asyncio
    async def test_completion_order(self):
        """Test results arrive in completion order by default."""
        requests = [_request("slow", delay=0.05), _request("fast", delay=0.0)]

        results = await FanOutAggregator().run(requests)

        assert [r.key for r in results] == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_ordered_restores_request_order(self):
        """Test ordered=True re-sorts by request index."""
        requests = [_request("slow", delay=0.05), _request("fast", delay=0.0)]

        results = await FanOutAggregator().run(requests, ordered=True)

        assert [r.key for r in results] == ["slow", "fast"]
        assert [r.index for r in results] == [0, 1]

    @pytest.mark.asyncio
    async def test_empty_requests(self):
        assert await FanOutAggregator().run([]) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failing", [0, 1, 2])
    async def test_one_failure_fails_batch(self, failing):
        """Test any single failure yields one error and no partial list."""
        cause = TransportError("timed out")
        requests = [
            _request(f"loc-{i}", error=cause if i == failing else None) for i in range(3)
        ]

        with pytest.raises(SubQueryError) as exc_info:
            await FanOutAggregator().run(requests, operation="admins")

        assert exc_info.value.key == f"loc-{failing}"
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_does_not_wait_for_remaining(self):
        """Test early failure returns while other sub-queries are still running."""
        never = asyncio.Event()
        started = asyncio.Event()

        async def _blocked():
            started.set()
            await never.wait()
            return "never"

        requests = [
            SubQueryRequest(key="blocked", run=_blocked),
            _request("broken", error=RuntimeError("boom"), delay=0.01),
        ]

        with pytest.raises(SubQueryError, match="broken"):
            await asyncio.wait_for(FanOutAggregator().run(requests), timeout=1.0)

        assert started.is_set()
        assert not never.is_set()

    @pytest.mark.asyncio
    async def test_remaining_sub_queries_cancelled(self):
        """Test abandoned sub-queries are cancelled, not left running."""
        cancelled = asyncio.Event()

        async def _slow():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return "slow"

        requests = [
            SubQueryRequest(key="slow", run=_slow),
            _request("broken", error=RuntimeError("boom")),
        ]

        with pytest.raises(SubQueryError):
            await FanOutAggregator().run(requests)

        await asyncio.wait_for(cancelled.wait(), timeout=1.0)

    @pytest.mark.asyncio
    async def test_runs_concurrently(self):
        """Test sub-queries overlap instead of running one after another."""
        requests = [_request(f"loc-{i}", delay=0.1) for i in range(10)]
        loop = asyncio.get_running_loop()

        start = loop.time()
        results = await FanOutAggregator().run(requests)
        elapsed = loop.time() - start

        assert len(results) == 10
        assert elapsed < 0.5

    @pytest.mark.asyncio
    async def test_max_concurrency_bounds_in_flight(self):
        """Test the optional bound on in-flight sub-queries."""
        in_flight = 0
        peak = 0

        async def _tracked():
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return "ok"

        requests = [SubQueryRequest(key=f"loc-{i}", run=_tracked) for i in range(8)]

        results = await FanOutAggregator(max_concurrency=2).run(requests)

        assert len(results) == 8
        assert peak == 2

    @pytest.mark.asyncio
    async def test_bounded_failure_stops_queued_work(self):
        """Test queued sub-queries never start once the batch has failed."""
        started: list[str] = []

        def _tracked(key: str, error: Exception | None = None):
            async def _run():
                started.append(key)
                await asyncio.sleep(0.01)
                if error:
                    raise error
                return key

            return SubQueryRequest(key=key, run=_run)

        requests = [_tracked("first", RuntimeError("boom"))] + [
            _tracked(f"queued-{i}") for i in range(5)
        ]

        with pytest.raises(SubQueryError):
            await FanOutAggregator(max_concurrency=1).run(requests)
        await asyncio.sleep(0.05)

        assert started == ["first"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("max_concurrency", [None, 1, 3])
    async def test_cancelled_sub_query_fails_batch(self, max_concurrency):
        """Test a sub-query ending in CancelledError is a failure, not a skip."""

        async def _cancelled():
            raise asyncio.CancelledError()

        requests = [
            _request("loc-0"),
            _request("loc-1"),
            SubQueryRequest(key="loc-2", run=_cancelled),
        ]

        with pytest.raises(SubQueryError) as exc_info:
            await FanOutAggregator(max_concurrency=max_concurrency).run(requests)

        assert exc_info.value.key == "loc-2"

    def test_rejects_invalid_max_concurrency(self):
        with pytest.raises(ValueError):
            FanOutAggregator(max_concurrency=0)

    @pytest.mark.asyncio
    async def test_fan_out_helper(self):
        results = await fan_out([_request("a"), _request("b")], ordered=True)
        assert [r.value for r in results] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_logs_completion(self, caplog):
        with caplog.at_level(logging.INFO, logger="cloudkit.business.runtime.telemetry"):
            await FanOutAggregator().run([_request("a"), _request("b")], operation="admins")

        (record,) = [r for r in caplog.records if r.getMessage() == "fanout_complete"]
        assert record.operation == "admins"
        assert record.sub_queries == 2

    @pytest.mark.asyncio
    async def test_logs_subquery_error(self, caplog):
        requests = [_request("a"), _request("b", error=TransportError("timed out"))]

        with caplog.at_level(logging.ERROR, logger="cloudkit.business.runtime.telemetry"):
            with pytest.raises(SubQueryError):
                await FanOutAggregator().run(requests, operation="admins")

        (record,) = [r for r in caplog.records if r.getMessage() == "subquery_error"]
        assert record.key == "b"
        assert record.error_type == "TransportError"
        assert not [r for r in caplog.records if r.getMessage() == "fanout_complete"]
