"""Page result and pagination state entities."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple

from ....core.exceptions import ResponseShapeError


@dataclass(frozen=True)
class PageResult:
    """Items of one fetched page and the server's total count."""
    
    items: List[Any] = field(default_factory=list)
    total: int = 0
    
    def __post_init__(self):
        if self.total < 0:
            raise ResponseShapeError(
                f"Total must be >= 0, got {self.total}",
                details={"total": self.total}
            )
    
    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)
    
    @classmethod
    def coerce(cls, value: Any) -> 'PageResult':
        """Build a PageResult from a shaped response.
        
        Accepts a PageResult, a mapping with ``items`` (or ``data``) and
        ``total``, or an object exposing those attributes. Missing items
        become an empty list and a missing total becomes 0.
        """
        if isinstance(value, cls):
            return value
        
        if isinstance(value, Mapping):
            items = value.get("items", value.get("data"))
            total = value.get("total")
        elif value is not None and (hasattr(value, "items") or hasattr(value, "data")):
            items = getattr(value, "items", None)
            if items is None or callable(items):
                items = getattr(value, "data", None)
            total = getattr(value, "total", None)
        else:
            raise ResponseShapeError(
                f"Cannot read items and total from {type(value).__name__}",
                details={"type": type(value).__name__}
            )
        
        try:
            items = list(items) if items is not None else []
            total = int(total) if total is not None else 0
        except (TypeError, ValueError) as e:
            raise ResponseShapeError(f"Malformed page result: {e}") from e
        
        return cls(items=items, total=total)


@dataclass(frozen=True)
class PaginationState:
    """Point-in-time snapshot of a controller's state."""
    
    page_num: int
    page_size: int
    total: int
    items: Tuple[Any, ...]
    is_loading: bool
    is_last: bool
    
    @property
    def offset(self) -> int:
        """Offset of the current page's first item."""
        return (self.page_num - 1) * self.page_size
    
    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        return (self.total + self.page_size - 1) // self.page_size
    
    @property
    def page_info(self) -> dict:
        """Get comprehensive page information."""
        return {
            "current_page": self.page_num,
            "page_size": self.page_size,
            "total_items": self.total,
            "total_pages": self.total_pages,
            "items_loaded": len(self.items),
            "is_loading": self.is_loading,
            "is_last": self.is_last,
        }
