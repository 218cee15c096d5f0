"""Base pagination controller with the state shared by both modes."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Callable, List, Optional, Set

from .executor import PageFetchExecutor
from ..entities import FetchContext, FetchOutcome, PageResult, PaginationOptions, PaginationState
from ..protocols import RequestFunction, as_params_shaper, as_response_shaper
from ...reactive import Computed, Ref, Subscription, to_ref
from ....config.settings import FetchSettings, get_settings
from ....core.exceptions import InvalidPageNumberError, InvalidPageSizeError, ValidationError

logger = logging.getLogger(__name__)


class BasePaginationController(ABC):
    """Reactive pagination state driven by a PageFetchExecutor.

    Exposed state (all ``Ref`` unless noted):
    - params: external request parameters (a mapping)
    - page_num, page_size, total, items, is_loading, last_error
    - is_last (``Computed``): no further pages exist

    Subclasses decide how a fetched page merges into ``items`` and what
    an external write to ``page_num`` triggers.
    """

    def __init__(
        self,
        request: RequestFunction,
        options: Optional[PaginationOptions] = None,
        settings: Optional[FetchSettings] = None,
        **overrides: Any
    ):
        """Initialize the controller.

        Args:
            request: Async function called with the request parameters
            options: Controller options; unset fields use settings
            settings: Defaults source, ``get_settings()`` when omitted
            **overrides: Individual PaginationOptions fields
        """
        unknown = set(overrides) - PaginationOptions.field_names()
        if unknown:
            raise ValidationError(f"Unknown pagination options: {', '.join(sorted(unknown))}")

        options = replace(options or PaginationOptions(), **overrides)
        self.options = options.with_defaults(settings or get_settings())
        self.name = self.options.name or self.__class__.__name__

        self.params: Ref = to_ref(self.options.params if self.options.params is not None else {}, name="params")
        self.page_num: Ref[int] = Ref(1, name="page_num")
        self.page_size: Ref[int] = Ref(self.options.page_size, name="page_size")
        self.total: Ref[int] = Ref(0, name="total")
        self.items: Ref[List[Any]] = Ref([], name="items")
        self.is_loading: Ref[bool] = Ref(False, name="is_loading")
        self.last_error: Ref[Optional[Exception]] = Ref(None, name="last_error")
        self.is_last: Computed[bool] = Computed(self._compute_is_last, name="is_last")
        self.errors = Subscription(name=f"{self.name}.errors")

        self._executor = PageFetchExecutor(
            request=request,
            params=self.params,
            params_shaper=as_params_shaper(self.options.get_params),
            response_shaper=as_response_shaper(self.options.get_response),
            is_loading=self.is_loading,
            last_error=self.last_error,
            errors=self.errors,
            page_num_key=self.options.page_num_key,
            page_size_key=self.options.page_size_key,
            discard_stale_responses=self.options.discard_stale_responses,
            name=self.name
        )

        self._tasks: Set[asyncio.Task] = set()
        self._writing_page = False
        self._stop_page_watch: Optional[Callable[[], None]] = None

        if self.options.watch_page:
            self._stop_page_watch = self.page_num.watch(self._on_page_num_written)

        if self.options.immediate:
            self.search()

    # Triggers

    @abstractmethod
    def search(self) -> "asyncio.Task[FetchOutcome]":
        """Fetch from the first page."""

    @abstractmethod
    def refresh(self) -> "asyncio.Task[FetchOutcome]":
        """Fetch again without moving to another page."""

    @abstractmethod
    def _merge(self, context: FetchContext, result: PageResult) -> None:
        """Merge a fetched page into ``items`` and ``total``."""

    @abstractmethod
    def _follow_page_num(self, page_num: int) -> "asyncio.Task[FetchOutcome]":
        """Fetch in response to an external write to ``page_num``."""

    def reset(self) -> None:
        """Clear items and total and go back to page 1 without fetching.

        With ``discard_stale_responses`` the results of cycles still in
        flight are dropped when they arrive.
        """
        self.items.value = []
        self.total.value = 0
        self._set_page_num(1)
        self._executor.discard_in_flight()

    def on_error(self, callback: Callable[[Exception], Any]) -> Callable[[], None]:
        """Observe failed cycles; returns a function that stops observing."""
        return self.errors.subscribe(callback)

    async def wait_idle(self) -> None:
        """Wait until every cycle started by this controller has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Detach the page watcher and drop error observers."""
        if self._stop_page_watch is not None:
            self._stop_page_watch()
            self._stop_page_watch = None
        self.errors.clear()

    # State

    @property
    def state(self) -> PaginationState:
        """Snapshot of the current state."""
        return PaginationState(
            page_num=self.page_num.value,
            page_size=self.page_size.value,
            total=self.total.value,
            items=tuple(self.items.value),
            is_loading=self.is_loading.value,
            is_last=self.is_last.value,
        )

    def _compute_is_last(self) -> bool:
        total = self.total.value
        return bool(
            total > 0
            and total <= self.page_num.value * self.page_size.value
            and not self.is_loading.value
        )

    # Internals

    def _fetch(self, page_num: Optional[int] = None, page_size: Optional[int] = None) -> "asyncio.Task[FetchOutcome]":
        task = self._executor.execute(
            page_num if page_num is not None else self.page_num.value,
            page_size if page_size is not None else self.page_size.value,
            self._merge
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _set_page_num(self, page_num: int) -> None:
        """Write ``page_num`` without triggering the page watcher."""
        self._writing_page = True
        try:
            self.page_num.value = page_num
        finally:
            self._writing_page = False

    def _on_page_num_written(self, new_value: int, old_value: int) -> None:
        if self._writing_page:
            return
        logger.debug(f"{self.name}: page_num changed externally {old_value} -> {new_value}")
        try:
            self._validate_page_num(new_value)
        except InvalidPageNumberError as e:
            # The Ref already holds the rejected value
            self._set_page_num(old_value)
            logger.warning(f"{self.name}: rejected page_num {new_value!r}, kept {old_value}")
            self.last_error.value = e
            self.errors.publish(e)
            return
        self._follow_page_num(new_value)

    @staticmethod
    def _validate_page_num(page_num: int) -> int:
        if not isinstance(page_num, int) or page_num < 1:
            raise InvalidPageNumberError(f"Page number must be an integer >= 1, got {page_num!r}")
        return page_num

    @staticmethod
    def _validate_page_size(page_size: int) -> int:
        if not isinstance(page_size, int) or page_size < 1:
            raise InvalidPageSizeError(f"Page size must be an integer > 0, got {page_size!r}")
        return page_size

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(page_num={self.page_num.value}, "
            f"page_size={self.page_size.value}, total={self.total.value}, "
            f"items={len(self.items.value)}, is_loading={self.is_loading.value})"
        )
