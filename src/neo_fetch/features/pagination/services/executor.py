"""Page fetch executor: the single fetch cycle shared by every controller.

A cycle snapshots the parameters, calls the request function, shapes the
response and hands the page to the controller's merge strategy. Failures
are logged, recorded and published, never raised to the trigger caller.
"""

import asyncio
import copy
import logging
from typing import Any, Callable, Dict, Mapping

from ..entities import FetchContext, FetchOutcome, PageResult
from ..protocols import ParamsShaper, RequestFunction, ResponseShaper
from ...reactive import Ref, Subscription
from ....core.exceptions import EventLoopRequiredError, FetchCycleError

logger = logging.getLogger(__name__)

MergeStrategy = Callable[[FetchContext, PageResult], None]


class PageFetchExecutor:
    """Runs fetch cycles against one request function.

    ``is_loading`` is true from the synchronous start of a cycle until the
    last cycle in flight has settled. Results are applied in completion
    order; with ``discard_stale_responses`` a result older than the most
    recently applied one is dropped instead.
    """

    def __init__(
        self,
        request: RequestFunction,
        params: Ref,
        params_shaper: ParamsShaper,
        response_shaper: ResponseShaper,
        is_loading: Ref,
        last_error: Ref,
        errors: Subscription,
        page_num_key: str = "num",
        page_size_key: str = "size",
        discard_stale_responses: bool = False,
        name: str = "pagination"
    ):
        self._request = request
        self._params = params
        self._params_shaper = params_shaper
        self._response_shaper = response_shaper
        self.is_loading = is_loading
        self.last_error = last_error
        self.errors = errors
        self.page_num_key = page_num_key
        self.page_size_key = page_size_key
        self.discard_stale_responses = discard_stale_responses
        self.name = name

        self._sequence = 0
        self._applied_sequence = 0
        self._stale_through = 0
        self._in_flight = 0

    @property
    def in_flight(self) -> int:
        """Number of cycles started and not yet settled."""
        return self._in_flight

    def snapshot_params(self, page_num: int, page_size: int) -> Dict[str, Any]:
        """Copy the current external params and merge the page keys.

        The copy is deep, so mutating the source afterwards cannot reach a
        request that is already in flight.
        """
        source = self._params.value
        merged: Dict[str, Any] = copy.deepcopy(dict(source)) if source else {}
        merged[self.page_num_key] = page_num
        merged[self.page_size_key] = page_size
        return merged

    def execute(self, page_num: int, page_size: int, merge: MergeStrategy) -> "asyncio.Task[FetchOutcome]":
        """Start a fetch cycle and return the task that completes it.

        Loading state and the parameter snapshot are set up before this
        method returns; the request itself runs in the returned task.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise EventLoopRequiredError(
                f"{self.name}: fetch cycles must be started from a running event loop"
            ) from e

        self._sequence += 1
        context = FetchContext(page_num=page_num, page_size=page_size, sequence=self._sequence)
        snapshot = self.snapshot_params(page_num, page_size)

        self._in_flight += 1
        self.is_loading.value = True
        logger.debug(f"{self.name}: cycle {context.sequence} started for page {page_num} (size {page_size})")

        task = loop.create_task(self._run(context, snapshot, merge))
        # Runs on every outcome, including a cancel before the first step
        task.add_done_callback(self._settle)
        return task

    async def _run(
        self,
        context: FetchContext,
        snapshot: Dict[str, Any],
        merge: MergeStrategy
    ) -> FetchOutcome:
        params: Mapping[str, Any] = snapshot
        try:
            params = self._params_shaper.shape(snapshot)
            response = await self._request(params)
            result = self._response_shaper.extract(response)
            applied = self._apply(context, result, merge)
            return FetchOutcome(context=context, params=params, result=result, applied=applied)
        except Exception as e:
            error = self._report(context, params, e)
            return FetchOutcome(context=context, params=params, error=error)

    def _settle(self, task: "asyncio.Task[FetchOutcome]") -> None:
        self._in_flight -= 1
        if self._in_flight == 0:
            self.is_loading.value = False

    def discard_in_flight(self) -> None:
        """Mark every cycle started so far as stale.

        Only takes effect with ``discard_stale_responses``; otherwise late
        results are still merged.
        """
        self._stale_through = self._sequence

    def _apply(self, context: FetchContext, result: PageResult, merge: MergeStrategy) -> bool:
        if self.discard_stale_responses and (
            context.sequence < self._applied_sequence
            or context.sequence <= self._stale_through
        ):
            logger.debug(
                f"{self.name}: dropping stale cycle {context.sequence} "
                f"(last applied {self._applied_sequence})"
            )
            return False

        merge(context, result)
        self._applied_sequence = max(self._applied_sequence, context.sequence)
        self.last_error.value = None
        logger.debug(
            f"{self.name}: cycle {context.sequence} applied "
            f"{result.count} items (total {result.total})"
        )
        return True

    def _report(self, context: FetchContext, params: Any, cause: Exception) -> FetchCycleError:
        logger.error(
            f"{self.name}: fetch for page {context.page_num} "
            f"(size {context.page_size}) failed: {cause}"
        )
        error = FetchCycleError(
            f"Fetch for page {context.page_num} failed: {cause}",
            page_num=context.page_num,
            page_size=context.page_size,
            params=dict(params) if isinstance(params, Mapping) else None
        )
        error.__cause__ = cause
        self.last_error.value = error
        self.errors.publish(error)
        return error
