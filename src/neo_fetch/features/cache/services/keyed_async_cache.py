"""Keyed async cache: in-flight deduplication with fixed-window TTL.

Calls whose derived keys are equal share one ``asyncio.Future`` for as long
as the entry lives. An entry lives from the first call until its TTL fires,
until the underlying call fails, or until it is invalidated explicitly.
"""

import asyncio
import functools
import logging
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from ..entities import AsyncFunction, CacheEntry, KeyFunction
from ....config.settings import get_settings
from ....core.exceptions import CacheKeyError, EventLoopRequiredError

logger = logging.getLogger(__name__)
R = TypeVar('R')


class KeyedAsyncCache(Generic[R]):
    """Deduplicating wrapper around an async function.

    Features:
    - Concurrent equal-key calls coalesce into one invocation of ``fn``
    - Fixed-window expiry measured from entry creation (``ttl_seconds > 0``)
    - Entries never expire when ``ttl_seconds <= 0``
    - A failed invocation is evicted before any caller sees the exception
    """

    def __init__(
        self,
        fn: AsyncFunction[R],
        key_fn: KeyFunction,
        ttl_seconds: Optional[float] = None,
        name: Optional[str] = None
    ):
        """Initialize the cache.

        Args:
            fn: Underlying async function
            key_fn: Derives the coalescing key from the call arguments
            ttl_seconds: Entry lifetime; None uses the configured default
            name: Label used in log messages
        """
        self._fn = fn
        self._key_fn = key_fn
        self.ttl_seconds = get_settings().cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self.name = name or getattr(fn, "__qualname__", repr(fn))

        self._entries: Dict[Hashable, CacheEntry[R]] = {}
        self._invocations = 0

    def __call__(self, *args: Any, **kwargs: Any) -> "asyncio.Future[R]":
        """Return the shared future for these arguments.

        Must be called while an event loop is running.
        """
        key = self._key_fn(*args, **kwargs)
        try:
            entry = self._entries.get(key)
        except TypeError as e:
            raise CacheKeyError(
                f"Cache key {key!r} for {self.name} is not hashable",
                details={"cache": self.name}
            ) from e

        if entry is not None:
            logger.debug(f"Cache {self.name}: reusing entry for key {key!r}")
            return entry.future

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise EventLoopRequiredError(
                f"Cache {self.name} must be called from a running event loop"
            ) from e

        entry = CacheEntry(key=key, created_at=loop.time())
        # The entry is stored before the task first runs, so equal keys
        # issued in the same tick already see it.
        entry.future = loop.create_task(self._invoke(entry, args, kwargs))
        entry.future.add_done_callback(functools.partial(self._on_done, entry))
        if self.ttl_seconds > 0:
            entry.timer = loop.call_later(self.ttl_seconds, self._expire, entry)
        self._entries[key] = entry

        logger.debug(f"Cache {self.name}: created entry for key {key!r}")
        return entry.future

    async def _invoke(self, entry: CacheEntry[R], args: tuple, kwargs: dict) -> R:
        self._invocations += 1
        try:
            return await self._fn(*args, **kwargs)
        except (Exception, asyncio.CancelledError) as e:
            self._remove(entry)
            logger.debug(f"Cache {self.name}: evicted key {entry.key!r} after failure: {e!r}")
            raise

    def _on_done(self, entry: CacheEntry[R], future: "asyncio.Future[R]") -> None:
        # A task cancelled before its first step never enters _invoke
        if future.cancelled() and self._remove(entry):
            logger.debug(f"Cache {self.name}: evicted key {entry.key!r} after cancellation")

    def _expire(self, entry: CacheEntry[R]) -> None:
        entry.timer = None
        if self._remove(entry):
            logger.debug(f"Cache {self.name}: key {entry.key!r} expired")

    def _remove(self, entry: CacheEntry[R]) -> bool:
        """Remove ``entry`` if it is still the live entry for its key."""
        entry.cancel_timer()
        if self._entries.get(entry.key) is entry:
            del self._entries[entry.key]
            return True
        return False

    def invalidate(self, key: Hashable) -> bool:
        """Drop the entry for ``key``; callers already holding its future keep it."""
        entry = self._entries.get(key)
        if entry is None:
            return False
        return self._remove(entry)

    def clear(self) -> None:
        """Drop every entry and cancel every expiry timer."""
        for entry in list(self._entries.values()):
            self._remove(entry)

    def keys(self) -> List[Hashable]:
        return list(self._entries.keys())

    @property
    def invocations(self) -> int:
        """How many times the underlying function has been invoked."""
        return self._invocations

    def stats(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "entries": len(self._entries),
            "invocations": self._invocations,
            "ttl_seconds": self.ttl_seconds,
            "keys": [entry.describe() for entry in self._entries.values()],
        }

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def wrap(
    fn: AsyncFunction[R],
    key_fn: KeyFunction,
    ttl_seconds: Optional[float] = None
) -> KeyedAsyncCache[R]:
    """Wrap ``fn`` so equal-key calls share one in-flight result.

    Args:
        fn: Underlying async function
        key_fn: Derives the key from the call arguments
        ttl_seconds: Fixed lifetime of an entry; <= 0 never expires,
            None uses ``FetchSettings.cache_ttl_seconds``

    Returns:
        Callable with the same arguments as ``fn`` returning a shared future
    """
    cache = KeyedAsyncCache(fn, key_fn, ttl_seconds)
    functools.update_wrapper(cache, fn, updated=())
    return cache


def async_cache(
    key_fn: KeyFunction,
    ttl_seconds: Optional[float] = None
) -> Callable[[AsyncFunction[R]], KeyedAsyncCache[R]]:
    """Decorator form of :func:`wrap`.

    Example:
        @async_cache(lambda user_id: user_id, ttl_seconds=5)
        async def load_user(user_id): ...
    """
    def decorator(fn: AsyncFunction[R]) -> KeyedAsyncCache[R]:
        return wrap(fn, key_fn, ttl_seconds)

    return decorator
