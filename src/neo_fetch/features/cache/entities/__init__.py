"""Cache entities and callable protocols."""

from .entry import CacheEntry
from .protocols import AsyncFunction, KeyFunction

__all__ = [
    "CacheEntry",
    "AsyncFunction",
    "KeyFunction",
]
