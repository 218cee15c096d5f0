"""Publish/subscribe hub used for error observers."""

import logging
from typing import Any, Callable, List

logger = logging.getLogger(__name__)


class Subscription:
    """Ordered set of callbacks invoked by ``publish``.
    
    Duplicate and non-callable subscribers are ignored. A subscriber that
    raises is logged and skipped; the remaining subscribers still run.
    """
    
    def __init__(self, name: str = "subscription"):
        self.name = name
        self._callbacks: List[Callable[..., Any]] = []
    
    def subscribe(self, callback: Callable[..., Any]) -> Callable[[], None]:
        """Add a subscriber and return a function that removes it."""
        if callable(callback) and callback not in self._callbacks:
            self._callbacks.append(callback)
        return lambda: self.unsubscribe(callback)
    
    def unsubscribe(self, callback: Callable[..., Any]) -> bool:
        """Remove a subscriber; returns whether it was registered."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)
            return True
        return False
    
    def publish(self, *args: Any, **kwargs: Any) -> int:
        """Call every subscriber; returns how many completed without error."""
        delivered = 0
        for callback in list(self._callbacks):
            try:
                callback(*args, **kwargs)
                delivered += 1
            except Exception as e:
                logger.error(f"Error in {self.name} subscriber {callback!r}: {e}")
        return delivered
    
    def clear(self) -> None:
        self._callbacks.clear()
    
    def __len__(self) -> int:
        return len(self._callbacks)
