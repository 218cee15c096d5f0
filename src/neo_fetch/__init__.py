"""Neo-Fetch - request orchestration for NeoMultiTenant clients.

This library provides a deduplicating async cache and reactive pagination
controllers (page-at-a-time and infinite scroll) on top of any async
request function.
"""

from .__version__ import __version__

from .config import (
    FetchSettings,
    get_settings,
    setup_logging,
)

from .core.exceptions import (
    NeoFetchError,
    ConfigurationError,
    EventLoopRequiredError,
    ValidationError,
    InvalidPageNumberError,
    InvalidPageSizeError,
    CacheError,
    CacheKeyError,
    FetchError,
    FetchCycleError,
    ResponseShapeError,
)

from .features.cache import KeyedAsyncCache, wrap, async_cache

from .features.pagination import (
    PageResult,
    PaginationState,
    PaginationOptions,
    FetchOutcome,
    ParamsShaper,
    ResponseShaper,
    PageFetchExecutor,
    ReplacePaginationController,
    ContinuousPaginationController,
)

from .features.reactive import Ref, Computed, Subscription

__all__ = [
    "__version__",
    
    # Configuration
    "FetchSettings",
    "get_settings",
    "setup_logging",
    
    # Exceptions
    "NeoFetchError",
    "ConfigurationError",
    "EventLoopRequiredError",
    "ValidationError",
    "InvalidPageNumberError",
    "InvalidPageSizeError",
    "CacheError",
    "CacheKeyError",
    "FetchError",
    "FetchCycleError",
    "ResponseShapeError",
    
    # Cache
    "KeyedAsyncCache",
    "wrap",
    "async_cache",
    
    # Pagination
    "PageResult",
    "PaginationState",
    "PaginationOptions",
    "FetchOutcome",
    "ParamsShaper",
    "ResponseShaper",
    "PageFetchExecutor",
    "ReplacePaginationController",
    "ContinuousPaginationController",
    
    # Reactive
    "Ref",
    "Computed",
    "Subscription",
]
