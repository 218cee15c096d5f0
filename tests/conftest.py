"""Pytest configuration and fixtures for neo-fetch tests."""

import asyncio
import os
import pytest
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock

from neo_fetch.config.settings import get_settings


def build_page_response(params: Dict[str, Any], total: int = 100) -> Dict[str, Any]:
    """Page of sequential integers offset by ``(num - 1) * size``."""
    num, size = params["num"], params["size"]
    start = (num - 1) * size
    return {"data": {"data": list(range(start, start + size)), "total": total}}


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from NEO_FETCH_* variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("NEO_FETCH_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_paged_request():
    """Factory for request mocks serving sequential integer pages.
    
    ``delays`` maps a page number to its response delay in seconds.
    """
    def factory(total: int = 100, delay: float = 0.01, delays: Optional[Dict[int, float]] = None):
        async def request(params):
            await asyncio.sleep((delays or {}).get(params["num"], delay))
            return build_page_response(params, total=total)
        
        return AsyncMock(side_effect=request)
    
    return factory


@pytest.fixture
def paged_request(make_paged_request):
    """Request mock with total=100 and a 10ms delay."""
    return make_paged_request()


@pytest.fixture
def failing_request():
    """Request mock that always fails."""
    async def request(params):
        await asyncio.sleep(0)
        raise RuntimeError("backend unavailable")
    
    return AsyncMock(side_effect=request)
