"""Cache entry entity."""

import asyncio
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Optional, TypeVar

R = TypeVar('R')


@dataclass
class CacheEntry(Generic[R]):
    """One live key in a KeyedAsyncCache.
    
    ``future`` is shared by every caller that asks for ``key`` while the
    entry is live. ``timer`` is the pending TTL expiry, if any.
    """
    key: Hashable
    created_at: float
    future: Optional["asyncio.Future[R]"] = None
    timer: Optional[asyncio.TimerHandle] = None
    
    @property
    def is_settled(self) -> bool:
        return self.future is not None and self.future.done()
    
    def cancel_timer(self) -> None:
        """Cancel the expiry timer if one is armed."""
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None
    
    def describe(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "created_at": self.created_at,
            "settled": self.is_settled,
            "expires": self.timer is not None,
        }
