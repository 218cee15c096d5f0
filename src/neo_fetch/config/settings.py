"""
Settings for neo-fetch.

Defaults for the keyed async cache and the pagination controllers, read from
``NEO_FETCH_*`` environment variables (or a ``.env`` file).
"""
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FetchSettings(BaseSettings):
    """Global request-orchestration settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_FETCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Keyed async cache
    cache_ttl_seconds: float = Field(
        default=1.0,
        description="Lifetime of a cache entry from creation; <= 0 disables expiry"
    )
    
    # Pagination defaults
    default_page_size: int = Field(default=20, gt=0, description="Initial page size")
    page_num_key: str = Field(default="num", min_length=1, description="Request key for the page number")
    page_size_key: str = Field(default="size", min_length=1, description="Request key for the page size")
    watch_page: bool = Field(default=True, description="Fetch when page_num is written from outside")
    immediate: bool = Field(default=False, description="Run search() when a controller is built")
    discard_stale_responses: bool = Field(
        default=False,
        description="Drop responses older than the last applied one"
    )
    
    @model_validator(mode="after")
    def validate_page_keys(self) -> "FetchSettings":
        """Page number and page size must not share a request key."""
        if self.page_num_key == self.page_size_key:
            raise ValueError(
                f"page_num_key and page_size_key must differ, both are '{self.page_num_key}'"
            )
        return self


@lru_cache()
def get_settings() -> FetchSettings:
    """Get cached settings instance."""
    return FetchSettings()
