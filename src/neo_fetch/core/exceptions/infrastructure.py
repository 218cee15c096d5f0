"""Infrastructure-specific exceptions for neo-fetch.

This module defines exceptions related to the request function,
the keyed cache and response shaping.
"""

from typing import Any, Dict, Optional

from .base import NeoFetchError


# Cache Errors
class CacheError(NeoFetchError):
    """Base class for cache-related errors."""
    pass


class CacheKeyError(CacheError):
    """Raised when a derived cache key is not hashable."""
    pass


# Fetch Errors
class FetchError(NeoFetchError):
    """Base class for pagination fetch errors."""
    pass


class FetchCycleError(FetchError):
    """Raised (and published) when one fetch cycle fails.
    
    The original exception is chained as ``__cause__``.
    """
    
    def __init__(
        self,
        message: str,
        page_num: int,
        page_size: int,
        params: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        details = {"page_num": page_num, "page_size": page_size}
        if params is not None:
            details["params"] = params
        super().__init__(message, details=details, **kwargs)
        self.page_num = page_num
        self.page_size = page_size
        self.params = params


class ResponseShapeError(FetchError):
    """Raised when a response cannot be turned into items and a total."""
    pass
