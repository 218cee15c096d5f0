"""Callable protocols for the keyed async cache."""

from typing import Any, Awaitable, Hashable, Protocol, TypeVar, runtime_checkable

R_co = TypeVar('R_co', covariant=True)


@runtime_checkable
class AsyncFunction(Protocol[R_co]):
    """The underlying function whose calls are coalesced."""
    
    def __call__(self, *args: Any, **kwargs: Any) -> Awaitable[R_co]:
        ...


@runtime_checkable
class KeyFunction(Protocol):
    """Derives the coalescing key from the call arguments.
    
    Equal keys mean equal calls; the key must be hashable.
    """
    
    def __call__(self, *args: Any, **kwargs: Any) -> Hashable:
        ...
