"""Pagination controller options."""

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from ....config.settings import FetchSettings
from ....core.exceptions import InvalidPageSizeError, ValidationError

if TYPE_CHECKING:
    from ..protocols import ParamsShaper, ResponseShaper


@dataclass(frozen=True)
class PaginationOptions:
    """Per-controller configuration.
    
    Fields left as None fall back to ``FetchSettings`` when the controller
    is built (see ``with_defaults``). ``params`` may be a mapping or a Ref
    holding one; ``get_params``/``get_response`` may be shaper objects or
    plain callables.
    """
    
    params: Any = None
    page_size: Optional[int] = None
    get_params: Optional[Union["ParamsShaper", Callable]] = None
    get_response: Optional[Union["ResponseShaper", Callable]] = None
    watch_page: Optional[bool] = None
    immediate: Optional[bool] = None
    discard_stale_responses: Optional[bool] = None
    page_num_key: Optional[str] = None
    page_size_key: Optional[str] = None
    name: Optional[str] = None
    
    def with_defaults(self, settings: FetchSettings) -> 'PaginationOptions':
        """Fill every unset field from ``settings`` and validate the result."""
        resolved = replace(
            self,
            page_size=self.page_size if self.page_size is not None else settings.default_page_size,
            watch_page=self.watch_page if self.watch_page is not None else settings.watch_page,
            immediate=self.immediate if self.immediate is not None else settings.immediate,
            discard_stale_responses=(
                self.discard_stale_responses
                if self.discard_stale_responses is not None
                else settings.discard_stale_responses
            ),
            page_num_key=self.page_num_key or settings.page_num_key,
            page_size_key=self.page_size_key or settings.page_size_key,
        )
        
        if resolved.page_size <= 0:
            raise InvalidPageSizeError(f"Page size must be > 0, got {resolved.page_size}")
        if resolved.page_num_key == resolved.page_size_key:
            raise ValidationError(
                f"page_num_key and page_size_key must differ, both are '{resolved.page_num_key}'"
            )
        return resolved
    
    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}
