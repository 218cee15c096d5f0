"""Pagination feature for neo-fetch.

Client-side pagination controllers with reactive state:
- Replace mode (page at a time) and continuous mode (infinite scroll)
- One shared fetch cycle with loading state and contained failures
- Pluggable request/response shaping
- Optional stale-response protection via cycle sequence numbers
"""

# Core entities
from .entities import (
    PageResult,
    PaginationState,
    FetchContext,
    FetchOutcome,
    PaginationOptions,
)

# Protocols
from .protocols import (
    RequestFunction,
    ParamsShaper,
    ResponseShaper,
    IdentityParamsShaper,
    DefaultResponseShaper,
)

# Services
from .services import (
    PageFetchExecutor,
    BasePaginationController,
    ReplacePaginationController,
    ContinuousPaginationController,
)

__all__ = [
    # Entities
    "PageResult",
    "PaginationState",
    "FetchContext",
    "FetchOutcome",
    "PaginationOptions",
    
    # Protocols
    "RequestFunction",
    "ParamsShaper",
    "ResponseShaper",
    "IdentityParamsShaper",
    "DefaultResponseShaper",
    
    # Services
    "PageFetchExecutor",
    "BasePaginationController",
    "ReplacePaginationController",
    "ContinuousPaginationController",
]
