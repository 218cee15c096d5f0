"""Request and response shaping protocols for pagination.

A controller talks to its collaborators through three single-method
interfaces: the request function, a params shaper applied to the merged
request parameters, and a response shaper that turns the raw response into
a ``PageResult``. Plain callables are adapted to the shaper protocols.
"""

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from ..entities.page import PageResult
from ....core.exceptions import ResponseShapeError


@runtime_checkable
class RequestFunction(Protocol):
    """Performs the paged request; the only suspension point of a cycle."""
    
    def __call__(self, params: Dict[str, Any]) -> Awaitable[Any]:
        ...


@runtime_checkable
class ParamsShaper(Protocol):
    """Transforms merged request parameters before they are sent."""
    
    def shape(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Return the parameters to send.
        
        Args:
            params: Snapshot of the external params merged with page keys
            
        Returns:
            Parameters passed to the request function
        """
        ...


@runtime_checkable
class ResponseShaper(Protocol):
    """Extracts items and total from a raw response."""
    
    def extract(self, response: Any) -> PageResult:
        """Return the page carried by ``response``."""
        ...


class IdentityParamsShaper:
    """Sends the merged parameters unchanged."""
    
    def shape(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return params


class CallableParamsShaper:
    """Adapts ``get_params(params) -> params`` to ParamsShaper."""
    
    def __init__(self, func: Callable[[Dict[str, Any]], Dict[str, Any]]):
        self.func = func
    
    def shape(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self.func(params)


def _pluck(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        if key not in source:
            raise ResponseShapeError(f"Response has no '{key}' field", details={"field": key})
        return source[key]
    if not hasattr(source, key):
        raise ResponseShapeError(f"Response has no '{key}' attribute", details={"field": key})
    return getattr(source, key)


class DefaultResponseShaper:
    """Reads items and total from a nested envelope.
    
    By default ``response["data"]["data"]`` holds the items and
    ``response["data"]["total"]`` the count. Attribute access is used for
    objects that are not mappings.
    """
    
    def __init__(
        self,
        envelope: Sequence[str] = ("data",),
        items_key: str = "data",
        total_key: str = "total"
    ):
        self.envelope = tuple(envelope)
        self.items_key = items_key
        self.total_key = total_key
    
    def extract(self, response: Any) -> PageResult:
        body = response
        for key in self.envelope:
            body = _pluck(body, key)
        
        items = _pluck(body, self.items_key)
        total = _pluck(body, self.total_key)
        return PageResult.coerce({"items": items, "total": total})


class CallableResponseShaper:
    """Adapts ``get_response(response) -> {items|data, total}`` to ResponseShaper."""
    
    def __init__(self, func: Callable[[Any], Any]):
        self.func = func
    
    def extract(self, response: Any) -> PageResult:
        return PageResult.coerce(self.func(response))


def as_params_shaper(value: Optional[Union[ParamsShaper, Callable]]) -> ParamsShaper:
    """Return a ParamsShaper for a shaper, a callable or None."""
    if value is None:
        return IdentityParamsShaper()
    if isinstance(value, ParamsShaper):
        return value
    if callable(value):
        return CallableParamsShaper(value)
    raise TypeError(f"get_params must be a ParamsShaper or callable, got {type(value).__name__}")


def as_response_shaper(value: Optional[Union[ResponseShaper, Callable]]) -> ResponseShaper:
    """Return a ResponseShaper for a shaper, a callable or None."""
    if value is None:
        return DefaultResponseShaper()
    if isinstance(value, ResponseShaper):
        return value
    if callable(value):
        return CallableResponseShaper(value)
    raise TypeError(f"get_response must be a ResponseShaper or callable, got {type(value).__name__}")
