"""Tests for PageFetchExecutor."""

import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

from neo_fetch.core.exceptions import EventLoopRequiredError, FetchCycleError, ResponseShapeError
from neo_fetch.features.pagination import DefaultResponseShaper, IdentityParamsShaper, PageFetchExecutor
from neo_fetch.features.reactive import Ref, Subscription


def build_executor(request, params=None, **kwargs):
    """Executor wired to fresh cells, as a controller would build it."""
    return PageFetchExecutor(
        request=request,
        params=Ref(params if params is not None else {}),
        params_shaper=IdentityParamsShaper(),
        response_shaper=DefaultResponseShaper(),
        is_loading=Ref(False),
        last_error=Ref(None),
        errors=Subscription(),
        **kwargs
    )


class TestExecutorCycle:
    """Single-cycle behavior."""
    
    @pytest.mark.asyncio
    async def test_successful_cycle_merges_result(self, paged_request):
        """Test the merge strategy receives the cycle context and page."""
        executor = build_executor(paged_request)
        merge = MagicMock()
        
        outcome = await executor.execute(3, 10, merge)
        
        merge.assert_called_once()
        context, result = merge.call_args.args
        assert context.page_num == 3
        assert context.page_size == 10
        assert result.items == list(range(20, 30))
        assert result.total == 100
        assert outcome.applied is True
    
    @pytest.mark.asyncio
    async def test_loading_flag_follows_cycle(self, paged_request):
        """Test is_loading is true synchronously and false after settling."""
        executor = build_executor(paged_request)
        seen = []
        executor.is_loading.watch(lambda new, old: seen.append(new))
        
        task = executor.execute(1, 20, MagicMock())
        assert executor.is_loading.value is True
        assert executor.in_flight == 1
        await task
        
        assert executor.is_loading.value is False
        assert executor.in_flight == 0
        assert seen == [True, False]
    
    @pytest.mark.asyncio
    async def test_overlapping_cycles_keep_loading_until_last(self, make_paged_request):
        """Test is_loading stays true until every cycle in flight settles."""
        executor = build_executor(make_paged_request(delays={1: 0.01, 2: 0.05}))
        
        fast = executor.execute(1, 20, MagicMock())
        slow = executor.execute(2, 20, MagicMock())
        await fast
        
        assert executor.is_loading.value is True
        await slow
        assert executor.is_loading.value is False
    
    @pytest.mark.asyncio
    async def test_failure_is_contained(self, failing_request):
        """Test a failed request is logged, recorded and published."""
        executor = build_executor(failing_request)
        observer = MagicMock()
        executor.errors.subscribe(observer)
        merge = MagicMock()
        
        outcome = await executor.execute(2, 20, merge)
        
        merge.assert_not_called()
        assert isinstance(outcome.error, FetchCycleError)
        assert str(outcome.error.__cause__) == "backend unavailable"
        assert outcome.error.details["params"] == {"num": 2, "size": 20}
        assert executor.last_error.value is outcome.error
        assert executor.is_loading.value is False
        observer.assert_called_once_with(outcome.error)
    
    @pytest.mark.asyncio
    async def test_shape_error_is_contained(self):
        """Test a response missing the envelope fails the cycle."""
        executor = build_executor(AsyncMock(return_value={"data": {"rows": []}}))
        
        outcome = await executor.execute(1, 20, MagicMock())
        
        assert isinstance(outcome.error.__cause__, ResponseShapeError)
    
    @pytest.mark.asyncio
    async def test_failing_merge_is_contained(self, paged_request):
        """Test an exception raised by the merge strategy is reported too."""
        executor = build_executor(paged_request)
        
        outcome = await executor.execute(1, 20, MagicMock(side_effect=KeyError("items")))
        
        assert not outcome.succeeded
        assert executor.is_loading.value is False
    
    def test_execute_requires_running_loop(self, paged_request):
        """Test execute outside an event loop raises before any state changes."""
        executor = build_executor(paged_request)
        
        with pytest.raises(EventLoopRequiredError):
            executor.execute(1, 20, MagicMock())
        
        assert executor.is_loading.value is False
        assert executor.in_flight == 0


class TestExecutorParams:
    """Parameter snapshots."""
    
    def test_snapshot_merges_page_keys(self):
        """Test page keys are merged over the external params."""
        executor = build_executor(AsyncMock(), params={"keyword": "neo", "num": 9})
        
        assert executor.snapshot_params(2, 30) == {"keyword": "neo", "num": 2, "size": 30}
    
    def test_snapshot_uses_custom_keys(self):
        """Test renamed page keys."""
        executor = build_executor(AsyncMock(), page_num_key="page", page_size_key="limit")
        
        assert executor.snapshot_params(1, 10) == {"page": 1, "limit": 10}
    
    def test_snapshot_is_deep(self):
        """Test nested params are copied, not shared."""
        source = {"filters": {"tags": ["a"]}}
        executor = build_executor(AsyncMock(), params=source)
        
        snapshot = executor.snapshot_params(1, 10)
        snapshot["filters"]["tags"].append("b")
        
        assert source == {"filters": {"tags": ["a"]}}
    
    @pytest.mark.asyncio
    async def test_request_sees_params_from_cycle_start(self):
        """Test writes to the params Ref after execute do not reach the request."""
        received = []
        
        async def request(params):
            await asyncio.sleep(0)
            received.append(params)
            return {"data": {"data": [], "total": 0}}
        
        executor = build_executor(request, params={"q": "first"})
        task = executor.execute(1, 20, MagicMock())
        executor._params.value = {"q": "second"}
        await task
        
        assert received == [{"q": "first", "num": 1, "size": 20}]


class TestExecutorOrdering:
    """Completion order across overlapping cycles."""
    
    @pytest.mark.asyncio
    async def test_last_completion_wins_by_default(self, make_paged_request):
        """Test an older, slower response overwrites a newer one."""
        executor = build_executor(make_paged_request(delays={1: 0.05, 2: 0.01}))
        applied = []
        merge = lambda context, result: applied.append(context.page_num)
        
        await asyncio.gather(executor.execute(1, 20, merge), executor.execute(2, 20, merge))
        
        assert applied == [2, 1]
    
    @pytest.mark.asyncio
    async def test_stale_responses_can_be_discarded(self, make_paged_request):
        """Test discard_stale_responses drops results older than the last applied."""
        executor = build_executor(
            make_paged_request(delays={1: 0.05, 2: 0.01}),
            discard_stale_responses=True
        )
        applied = []
        merge = lambda context, result: applied.append(context.page_num)
        
        older, newer = await asyncio.gather(
            executor.execute(1, 20, merge),
            executor.execute(2, 20, merge)
        )
        
        assert applied == [2]
        assert older.applied is False
        assert older.succeeded
        assert newer.applied is True
        assert executor.is_loading.value is False
    
    @pytest.mark.asyncio
    async def test_discard_in_flight_marks_started_cycles_stale(self, paged_request):
        """Test cycles started before discard_in_flight are not merged."""
        executor = build_executor(paged_request, discard_stale_responses=True)
        merge = MagicMock()
        
        task = executor.execute(1, 20, merge)
        executor.discard_in_flight()
        later = executor.execute(2, 20, merge)
        
        assert (await task).applied is False
        assert (await later).applied is True
        merge.assert_called_once()
    
    @pytest.mark.asyncio
    async def test_cancel_before_start_settles_cycle(self, paged_request):
        """Test a cycle cancelled before its first step still leaves the loading state."""
        executor = build_executor(paged_request)
        
        task = executor.execute(1, 20, MagicMock())
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        
        assert executor.in_flight == 0
        assert executor.is_loading.value is False
        paged_request.assert_not_called()
