"""Cache services."""

from .keyed_async_cache import KeyedAsyncCache, wrap, async_cache

__all__ = [
    "KeyedAsyncCache",
    "wrap",
    "async_cache",
]
