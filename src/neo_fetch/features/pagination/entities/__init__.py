"""Pagination entities for page results, state snapshots and fetch cycles."""

from .page import PageResult, PaginationState
from .fetch import FetchContext, FetchOutcome
from .options import PaginationOptions

__all__ = [
    "PageResult",
    "PaginationState",
    "FetchContext",
    "FetchOutcome",
    "PaginationOptions",
]
