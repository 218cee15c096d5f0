"""Observable value cells.

A ``Ref`` is the unit of state the pagination controllers expose to a UI
layer. Watchers run synchronously on change; anything asynchronous they
trigger must be scheduled by the watcher itself.
"""

from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar('T')

WatchCallback = Callable[[Any, Any], Any]


class Ref(Generic[T]):
    """Mutable cell that notifies watchers when its value changes."""
    
    def __init__(self, value: T, name: str = "ref"):
        self._value = value
        self._watchers: List[WatchCallback] = []
        self.name = name
    
    @property
    def value(self) -> T:
        return self._value
    
    @value.setter
    def value(self, new_value: T) -> None:
        old_value = self._value
        self._value = new_value
        if new_value != old_value:
            self._notify(new_value, old_value)
    
    def set_silently(self, new_value: T) -> None:
        """Write without notifying watchers."""
        self._value = new_value
    
    def watch(self, callback: WatchCallback) -> Callable[[], None]:
        """Register ``callback(new, old)``; returns a function that removes it."""
        if callback not in self._watchers:
            self._watchers.append(callback)
        
        def stop() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)
        
        return stop
    
    def _notify(self, new_value: T, old_value: T) -> None:
        # Copy so a watcher may unsubscribe itself while being notified
        for callback in list(self._watchers):
            callback(new_value, old_value)
    
    def __repr__(self) -> str:
        return f"Ref({self.name}={self._value!r})"


class Computed(Generic[T]):
    """Read-only cell whose value is derived on every read."""
    
    def __init__(self, getter: Callable[[], T], name: str = "computed"):
        self._getter = getter
        self.name = name
    
    @property
    def value(self) -> T:
        return self._getter()
    
    def __repr__(self) -> str:
        return f"Computed({self.name}={self.value!r})"


def to_ref(value: Any, name: str = "ref") -> Ref:
    """Return ``value`` if it already is a Ref, otherwise wrap it."""
    if isinstance(value, Ref):
        return value
    return Ref(value, name=name)
