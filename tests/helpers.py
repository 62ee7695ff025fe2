"""Helpers shared by unit and e2e tests."""
from __future__ import annotations

from typing import Any

import httpx

from naver_search_mcp.naver_client import Credentials, NaverSearchClient

BASE_URL = "https://openapi.naver.com"


class StubNaverClient:
    """Records every client call instead of touching the network.

    Any public method name works (search, search_local, datalab_search, ...).
    Each call is stored as (method_name, request) in ``calls``; the stub then
    returns ``result`` or raises ``error``.
    """

    def __init__(self, result: Any = None, error: BaseException | None = None):
        self.result = {"items": []} if result is None else result
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        async def method(request: Any) -> Any:
            self.calls.append((name, request))
            if self.error is not None:
                raise self.error
            return self.result

        return method

    async def aclose(self) -> None:
        pass

    @property
    def methods_called(self) -> list[str]:
        return [name for name, _ in self.calls]


def mock_client(handler) -> tuple[NaverSearchClient, httpx.AsyncClient]:
    """Build a NaverSearchClient whose HTTP layer is an httpx.MockTransport.

    Args:
        handler: Function taking an httpx.Request and returning an httpx.Response

    Returns:
        Tuple of (client, underlying httpx.AsyncClient).
    """
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    client = NaverSearchClient(Credentials("test-id", "test-secret"), http_client=http)
    return client, http
