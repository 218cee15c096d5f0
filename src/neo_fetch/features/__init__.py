"""Features module for neo-fetch.

- cache: keyed async cache (in-flight deduplication with TTL)
- pagination: replace and continuous pagination controllers
- reactive: observable cells and pub/sub used by the controllers
"""

from .cache import KeyedAsyncCache, wrap, async_cache
from .pagination import ReplacePaginationController, ContinuousPaginationController
from .reactive import Ref, Computed, Subscription

__all__ = [
    # Cache
    "KeyedAsyncCache",
    "wrap",
    "async_cache",
    
    # Pagination
    "ReplacePaginationController",
    "ContinuousPaginationController",
    
    # Reactive
    "Ref",
    "Computed",
    "Subscription",
]
