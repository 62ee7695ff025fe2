"""Shared test configuration and fixtures."""
from __future__ import annotations

import pytest

from naver_search_mcp.primitives import load_all_tools

from .helpers import StubNaverClient


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only (the server never runs on trio)."""
    return "asyncio"


@pytest.fixture(scope="session", autouse=True)
def tools():
    """Import every tool module so the registries are populated."""
    return load_all_tools()


@pytest.fixture
def stub_client():
    """Client stand-in returning {"items": []} for every call."""
    return StubNaverClient()
