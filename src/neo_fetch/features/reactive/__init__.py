"""Reactive feature for neo-fetch.

Small observable primitives the controllers build their state on:
- ref: Ref (observable cell) and Computed (derived cell)
- subscription: pub/sub hub for observers such as error hooks
"""

from .ref import Ref, Computed, to_ref
from .subscription import Subscription

__all__ = [
    "Ref",
    "Computed",
    "to_ref",
    "Subscription",
]
