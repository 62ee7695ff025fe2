"""Async HTTP client for the Naver Open API (search and DataLab).

One NaverSearchClient is constructed at startup with the credential pair and
handed to the Dispatcher. It owns a pooled httpx.AsyncClient; credentials and
headers are fixed at construction and never written afterwards, so the client
can be shared by concurrently running tool calls.

Errors:
    - Non-2xx responses raise NaverApiError carrying Naver's errorMessage and
      errorCode when the body has them.
    - Transport failures (DNS, connect, timeout) surface as httpx exceptions.
    Neither is retried here.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional
import logging

import httpx
from pydantic import BaseModel

if TYPE_CHECKING:
    from .primitives.search.models import (
        AcademicSearchRequest,
        LocalSearchRequest,
        SearchRequest,
    )
    from .primitives.datalab.models import (
        DatalabSearchArgs,
        DatalabShoppingArgs,
        DatalabShoppingCategoryArgs,
        DatalabShoppingKeywordArgs,
        DatalabShoppingKeywordsArgs,
    )

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openapi.naver.com"
SEARCH_PATH = "/v1/search"
DATALAB_PATH = "/v1/datalab"


@dataclass(frozen=True)
class Credentials:
    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, client_secret='***')"


class NaverApiError(Exception):
    """The Naver Open API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response
        message: Naver's errorMessage, or the raw body when it is not JSON
        error_code: Naver's errorCode (e.g. "SE01", "024"), if present
    """

    def __init__(self, status_code: int, message: str, error_code: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        detail = f"{message} ({error_code})" if error_code else message
        super().__init__(f"Naver API error {status_code}: {detail}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "NaverApiError":
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            message = str(body.get("errorMessage") or response.reason_phrase)
            error_code = body.get("errorCode")
            return cls(response.status_code, message, str(error_code) if error_code else None)

        text = response.text.strip() or response.reason_phrase
        return cls(response.status_code, text)


class NaverSearchClient:
    """Authenticated client for the Naver search and DataLab endpoints.

    Args:
        credentials: Client id/secret issued by the Naver developer console
        base_url: API root, overridable for proxies and tests
        timeout: Per-request timeout in seconds
        http_client: Pre-built httpx.AsyncClient (tests inject one with a
            MockTransport). When omitted the client creates and owns one.

    Example:
        >>> async with NaverSearchClient(Credentials("id", "secret")) as client:
        ...     result = await client.search(NewsSearchRequest(query="weather"))
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._headers = {
            "X-Naver-Client-Id": credentials.client_id,
            "X-Naver-Client-Secret": credentials.client_secret,
        }
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "NaverSearchClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search(self, request: "SearchRequest") -> dict[str, Any]:
        """GET /v1/search/{type}.json with the request's fields as query params."""
        params = request.model_dump(exclude_none=True, exclude={"type"})
        return await self._request("GET", f"{SEARCH_PATH}/{request.type}.json", params=params)

    async def search_academic(self, request: "AcademicSearchRequest") -> dict[str, Any]:
        return await self.search(request)

    async def search_local(self, request: "LocalSearchRequest") -> dict[str, Any]:
        return await self.search(request)

    # ------------------------------------------------------------------
    # DataLab
    # ------------------------------------------------------------------

    async def datalab_search(self, request: "DatalabSearchArgs") -> dict[str, Any]:
        return await self._post_datalab("/search", request)

    async def datalab_shopping_categories(self, request: "DatalabShoppingArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/categories", request)

    async def datalab_shopping_by_device(self, request: "DatalabShoppingCategoryArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/device", request)

    async def datalab_shopping_by_gender(self, request: "DatalabShoppingCategoryArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/gender", request)

    async def datalab_shopping_by_age(self, request: "DatalabShoppingCategoryArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/age", request)

    async def datalab_shopping_keywords(self, request: "DatalabShoppingKeywordsArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/keywords", request)

    async def datalab_shopping_keyword_by_device(self, request: "DatalabShoppingKeywordArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/keyword/device", request)

    async def datalab_shopping_keyword_by_gender(self, request: "DatalabShoppingKeywordArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/keyword/gender", request)

    async def datalab_shopping_keyword_by_age(self, request: "DatalabShoppingKeywordArgs") -> dict[str, Any]:
        return await self._post_datalab("/shopping/category/keyword/age", request)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _post_datalab(self, path: str, request: BaseModel) -> dict[str, Any]:
        body = request.model_dump(exclude_none=True)
        return await self._request("POST", f"{DATALAB_PATH}{path}", json=body)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        logger.debug("%s %s params=%s", method, path, params)
        response = await self._http.request(method, path, params=params, json=json, headers=self._headers)
        if response.is_error:
            error = NaverApiError.from_response(response)
            logger.warning("%s %s failed: %s", method, path, error)
            raise error
        return response.json()
