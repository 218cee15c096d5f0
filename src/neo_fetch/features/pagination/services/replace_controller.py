"""Page-at-a-time pagination: each fetched page replaces the visible items."""

import asyncio

from .base_controller import BasePaginationController
from ..entities import FetchContext, FetchOutcome, PageResult


class ReplacePaginationController(BasePaginationController):
    """Pagination for tables and pagers.

    Every cycle replaces ``items`` and ``total`` wholesale. When
    ``watch_page`` is on, writing ``page_num`` from outside behaves like
    ``on_page_change``.

    Example:
        pager = ReplacePaginationController(api.list_users, page_size=20)
        await pager.search()
        await pager.on_page_change(2)
    """

    def search(self) -> "asyncio.Task[FetchOutcome]":
        """Go to page 1 and fetch it."""
        self._set_page_num(1)
        return self._fetch()

    def on_page_change(self, page_num: int) -> "asyncio.Task[FetchOutcome]":
        """Go to ``page_num`` and fetch it."""
        self._set_page_num(self._validate_page_num(page_num))
        return self._fetch()

    def on_size_change(self, page_size: int) -> "asyncio.Task[FetchOutcome]":
        """Change the page size and search again from page 1."""
        self.page_size.value = self._validate_page_size(page_size)
        return self.search()

    def refresh(self) -> "asyncio.Task[FetchOutcome]":
        """Fetch the current page again at the current size."""
        return self._fetch()

    def _merge(self, context: FetchContext, result: PageResult) -> None:
        self.items.value = list(result.items)
        self.total.value = result.total

    def _follow_page_num(self, page_num: int) -> "asyncio.Task[FetchOutcome]":
        return self.on_page_change(page_num)
