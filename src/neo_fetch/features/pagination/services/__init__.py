"""Pagination services: the fetch executor and both controller modes."""

from .executor import PageFetchExecutor, MergeStrategy
from .base_controller import BasePaginationController
from .replace_controller import ReplacePaginationController
from .continuous_controller import ContinuousPaginationController

__all__ = [
    "PageFetchExecutor",
    "MergeStrategy",
    "BasePaginationController",
    "ReplacePaginationController",
    "ContinuousPaginationController",
]
