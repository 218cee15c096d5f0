"""Protocols and default implementations for request/response shaping."""

from .shaping import (
    RequestFunction,
    ParamsShaper,
    ResponseShaper,
    IdentityParamsShaper,
    CallableParamsShaper,
    DefaultResponseShaper,
    CallableResponseShaper,
    as_params_shaper,
    as_response_shaper,
)

__all__ = [
    # Protocols
    "RequestFunction",
    "ParamsShaper",
    "ResponseShaper",
    
    # Implementations
    "IdentityParamsShaper",
    "CallableParamsShaper",
    "DefaultResponseShaper",
    "CallableResponseShaper",
    
    # Adapters
    "as_params_shaper",
    "as_response_shaper",
]
