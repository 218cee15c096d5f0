"""Cache feature for neo-fetch.

Feature-First architecture:
- entities/: Cache entry and callable protocols
- services/: KeyedAsyncCache (in-flight deduplication with TTL)
"""

# Entities
from .entities import CacheEntry, AsyncFunction, KeyFunction

# Services
from .services import KeyedAsyncCache, wrap, async_cache

__all__ = [
    # Entities
    "CacheEntry",
    "AsyncFunction",
    "KeyFunction",
    
    # Services
    "KeyedAsyncCache",
    "wrap",
    "async_cache",
]
