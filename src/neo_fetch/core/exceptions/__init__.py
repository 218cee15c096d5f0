"""Exceptions module for neo-fetch.

This module provides the complete exception hierarchy for neo-fetch,
organized by domain concerns and infrastructure concerns.
"""

from .base import (
    NeoFetchError,
    create_error_report,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    EventLoopRequiredError,
    
    # Validation Errors
    ValidationError,
    InvalidPageNumberError,
    InvalidPageSizeError,
)

from .infrastructure import (
    # Cache Errors
    CacheError,
    CacheKeyError,
    
    # Fetch Errors
    FetchError,
    FetchCycleError,
    ResponseShapeError,
)

__all__ = [
    # Base
    "NeoFetchError",
    "create_error_report",
    
    # Configuration Errors
    "ConfigurationError",
    "EventLoopRequiredError",
    
    # Validation Errors
    "ValidationError",
    "InvalidPageNumberError",
    "InvalidPageSizeError",
    
    # Cache Errors
    "CacheError",
    "CacheKeyError",
    
    # Fetch Errors
    "FetchError",
    "FetchCycleError",
    "ResponseShapeError",
]
