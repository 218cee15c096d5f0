"""Continuous (infinite scroll) pagination: later pages accumulate."""

import asyncio

from .base_controller import BasePaginationController
from ..entities import FetchContext, FetchOutcome, PageResult


class ContinuousPaginationController(BasePaginationController):
    """Pagination for feeds and infinite lists.

    A cycle requested for page 1 replaces ``items`` and ``total``; a cycle
    for any later page appends its items and updates ``total``. The page a
    cycle was requested for decides, not the page number current when the
    response arrives. A later page still in flight during ``reset()`` is
    appended to the emptied list unless ``discard_stale_responses`` is on.

    Example:
        feed = ContinuousPaginationController(api.list_posts, page_size=10)
        await feed.search()
        while not feed.is_last.value:
            await feed.load_next(feed.page_num.value + 1)
    """

    def load_next(self, page_num: int) -> "asyncio.Task[FetchOutcome]":
        """Go to ``page_num`` and fetch it, appending unless it is page 1."""
        self._set_page_num(self._validate_page_num(page_num))
        return self._fetch()

    def search(self) -> "asyncio.Task[FetchOutcome]":
        """Start over from page 1."""
        return self.load_next(1)

    def refresh(self) -> "asyncio.Task[FetchOutcome]":
        """Reload everything accumulated so far in one request.

        Requests page 1 with a size of ``page_num * page_size`` and replaces
        ``items`` and ``total`` with the result; ``page_num`` and
        ``page_size`` keep their values.
        """
        return self._fetch(page_num=1, page_size=self.page_num.value * self.page_size.value)

    def _merge(self, context: FetchContext, result: PageResult) -> None:
        if context.page_num == 1:
            self.items.value = list(result.items)
        else:
            self.items.value = [*self.items.value, *result.items]
        self.total.value = result.total

    def _follow_page_num(self, page_num: int) -> "asyncio.Task[FetchOutcome]":
        return self.load_next(page_num)
