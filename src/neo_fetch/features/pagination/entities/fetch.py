"""Fetch cycle entities."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .page import PageResult


@dataclass(frozen=True)
class FetchContext:
    """Page coordinates of one fetch cycle.
    
    ``sequence`` increases by one for every cycle a controller starts.
    """
    page_num: int
    page_size: int
    sequence: int


@dataclass(frozen=True)
class FetchOutcome:
    """What one fetch cycle did."""
    
    context: FetchContext
    params: Optional[Mapping[str, Any]] = None
    result: Optional[PageResult] = None
    error: Optional[Exception] = None
    applied: bool = False
    
    @property
    def succeeded(self) -> bool:
        return self.error is None
