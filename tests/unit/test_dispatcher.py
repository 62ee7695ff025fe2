"""Tests for the Dispatcher response envelope and routing."""
from __future__ import annotations

import anyio
import httpx
import pytest

from naver_search_mcp.dispatcher import Dispatcher, InvocationResponse
from naver_search_mcp.handler_registry import handler_map
from naver_search_mcp.naver_client import NaverApiError
from naver_search_mcp.primitives.datalab.models import DatalabSearchArgs
from naver_search_mcp.primitives.search.models import (
    AcademicSearchRequest,
    LocalSearchRequest,
    NewsSearchRequest,
    ShopSearchRequest,
)

from ..helpers import StubNaverClient


@pytest.mark.anyio
class TestDispatcherContract:
    """invoke() must never raise, whatever the input."""

    async def test_every_registered_tool_survives_empty_arguments(self, stub_client):
        """invoke(name, {}) returns a response for every tool."""
        dispatcher = Dispatcher(stub_client)
        for name in handler_map():
            response = await dispatcher.invoke(name, {})
            assert isinstance(response, InvocationResponse)

    async def test_unknown_tool(self, stub_client):
        """Unknown tool names come back as an error envelope."""
        response = await Dispatcher(stub_client).invoke("nonexistent-tool", {})
        assert response.is_error is True
        assert "Unknown tool" in response.text
        assert response.text.startswith("Error: ")
        assert stub_client.calls == []

    async def test_missing_arguments(self, stub_client):
        """A null argument object is rejected for every registered tool."""
        dispatcher = Dispatcher(stub_client)
        for name in handler_map():
            response = await dispatcher.invoke(name, None)
            assert response.is_error is True
            assert "Arguments are required" in response.text
        assert stub_client.calls == []

    async def test_remote_error_message(self):
        """Errors raised by the client are reported as 'Error: <message>'."""
        client = StubNaverClient(error=Exception("rate limited"))
        response = await Dispatcher(client).invoke("news-search", {"query": "test"})
        assert response.to_dict() == {
            "content": [{"type": "text", "text": "Error: rate limited"}],
            "isError": True,
        }

    async def test_naver_api_error(self):
        """NaverApiError keeps status, message and code in the text."""
        client = StubNaverClient(error=NaverApiError(429, "Rate limit exceeded", "012"))
        response = await Dispatcher(client).invoke("blog-search", {"query": "test"})
        assert response.is_error is True
        assert response.text == "Error: Naver API error 429: Rate limit exceeded (012)"

    async def test_transport_error(self):
        """httpx failures are caught too."""
        client = StubNaverClient(error=httpx.ConnectError("connection refused"))
        response = await Dispatcher(client).invoke("web-search", {"query": "test"})
        assert response.is_error is True
        assert response.text == "Error: connection refused"

    async def test_invalid_arguments_are_not_sent(self, stub_client):
        """Out-of-range values fail before any network call."""
        response = await Dispatcher(stub_client).invoke("news-search", {"query": "test", "display": 500})
        assert response.is_error is True
        assert response.text.startswith("Error: Invalid arguments: display")
        assert stub_client.calls == []

    async def test_missing_required_field(self, stub_client):
        """A missing query is named in the error."""
        response = await Dispatcher(stub_client).invoke("news-search", {})
        assert response.is_error is True
        assert "query" in response.text


@pytest.mark.anyio
class TestDispatcherRouting:
    """Each tool calls exactly one client method with its request variant."""

    async def test_news_search(self, stub_client):
        """news-search builds a NewsSearchRequest and calls search()."""
        response = await Dispatcher(stub_client).invoke("news-search", {"query": "test"})

        assert stub_client.methods_called == ["search"]
        request = stub_client.calls[0][1]
        assert isinstance(request, NewsSearchRequest)
        assert request.type == "news"
        assert request.query == "test"
        assert request.display is None

        assert response.to_dict() == {
            "content": [{"type": "text", "text": '{\n  "items": []\n}'}],
            "isError": False,
        }

    async def test_local_search_uses_search_local(self, stub_client):
        """local-search routes to search_local, not the generic search."""
        await Dispatcher(stub_client).invoke("local-search", {"query": "cafe"})
        assert stub_client.methods_called == ["search_local"]
        request = stub_client.calls[0][1]
        assert isinstance(request, LocalSearchRequest)
        assert request.type == "local"

    async def test_academic_search_uses_search_academic(self, stub_client):
        """academic-search routes to search_academic with the 'doc' tag."""
        await Dispatcher(stub_client).invoke("academic-search", {"query": "deep learning"})
        assert stub_client.methods_called == ["search_academic"]
        request = stub_client.calls[0][1]
        assert isinstance(request, AcademicSearchRequest)
        assert request.type == "doc"

    async def test_shop_search_options(self, stub_client):
        """Shop-specific options reach the request."""
        await Dispatcher(stub_client).invoke(
            "shop-search", {"query": "laptop", "sort": "asc", "exclude": "used:rental"}
        )
        request = stub_client.calls[0][1]
        assert isinstance(request, ShopSearchRequest)
        assert request.sort == "asc"
        assert request.exclude == "used:rental"

    @pytest.mark.parametrize(
        "tool_name, search_type",
        [
            ("web-search", "webkr"),
            ("news-search", "news"),
            ("blog-search", "blog"),
            ("shop-search", "shop"),
            ("image-search", "image"),
            ("kin-search", "kin"),
            ("book-search", "book"),
            ("encyc-search", "encyc"),
            ("cafearticle-search", "cafearticle"),
        ],
    )
    async def test_document_search_types(self, stub_client, tool_name, search_type):
        await Dispatcher(stub_client).invoke(tool_name, {"query": "test"})
        assert stub_client.methods_called == ["search"]
        assert stub_client.calls[0][1].type == search_type

    async def test_datalab_search(self, stub_client):
        """datalab-search posts a validated DatalabSearchArgs."""
        arguments = {
            "startDate": "2024-01-01",
            "endDate": "2024-03-31",
            "timeUnit": "month",
            "keywordGroups": [{"groupName": "coffee", "keywords": ["coffee", "latte"]}],
        }
        response = await Dispatcher(stub_client).invoke("datalab-search", arguments)

        assert response.is_error is False
        assert stub_client.methods_called == ["datalab_search"]
        request = stub_client.calls[0][1]
        assert isinstance(request, DatalabSearchArgs)
        assert request.keywordGroups[0].keywords == ["coffee", "latte"]

    @pytest.mark.parametrize(
        "tool_name, method",
        [
            ("datalab-shopping-by-device", "datalab_shopping_by_device"),
            ("datalab-shopping-by-gender", "datalab_shopping_by_gender"),
            ("datalab-shopping-by-age", "datalab_shopping_by_age"),
        ],
    )
    async def test_datalab_shopping_category_breakdowns(self, stub_client, tool_name, method):
        arguments = {
            "startDate": "2024-01-01",
            "endDate": "2024-01-31",
            "timeUnit": "week",
            "category": "50000000",
        }
        response = await Dispatcher(stub_client).invoke(tool_name, arguments)
        assert response.is_error is False
        assert stub_client.methods_called == [method]

    async def test_datalab_bad_date(self, stub_client):
        """Dates must be yyyy-mm-dd."""
        arguments = {
            "startDate": "01/01/2024",
            "endDate": "2024-01-31",
            "timeUnit": "date",
            "category": "50000000",
            "keyword": "jeans",
        }
        response = await Dispatcher(stub_client).invoke("datalab-shopping-keyword-by-age", arguments)
        assert response.is_error is True
        assert "startDate" in response.text
        assert stub_client.calls == []


@pytest.mark.anyio
class TestDispatcherInjection:
    """The Dispatcher works with any handler map and client."""

    async def test_custom_handler_map(self):
        client = StubNaverClient()

        async def echo(client, arguments):
            return {"echo": arguments["text"]}

        dispatcher = Dispatcher(client, handlers={"echo": echo})
        response = await dispatcher.invoke("echo", {"text": "안녕"})

        assert dispatcher.tool_names == frozenset({"echo"})
        assert response.is_error is False
        # Non-ASCII text is kept as-is
        assert response.text == '{\n  "echo": "안녕"\n}'

        missing = await dispatcher.invoke("news-search", {"query": "test"})
        assert missing.is_error is True
        assert "Unknown tool" in missing.text

    async def test_unserializable_result(self):
        """A result json cannot encode is reported, not raised."""
        async def loop_back(client, arguments):
            result: dict = {}
            result["self"] = result
            return result

        response = await Dispatcher(StubNaverClient(), handlers={"loop": loop_back}).invoke("loop", {})

        assert response.is_error is True
        assert response.text.startswith("Error: ")
        assert "Circular reference" in response.text

    async def test_concurrent_invocations(self):
        """Interleaved calls each get their own response."""
        client = StubNaverClient()
        dispatcher = Dispatcher(client)
        responses: dict[str, InvocationResponse] = {}

        async def run(name: str, arguments: dict) -> None:
            responses[name] = await dispatcher.invoke(name, arguments)

        async with anyio.create_task_group() as tg:
            tg.start_soon(run, "news-search", {"query": "a"})
            tg.start_soon(run, "local-search", {"query": "b"})
            tg.start_soon(run, "nonexistent-tool", {})

        assert responses["news-search"].is_error is False
        assert responses["local-search"].is_error is False
        assert responses["nonexistent-tool"].is_error is True
        assert sorted(client.methods_called) == ["search", "search_local"]


class TestInvocationResponse:
    def test_call_tool_result(self):
        """Conversion to the SDK type keeps text and error flag."""
        result = InvocationResponse.failure("boom").to_call_tool_result()
        assert result.isError is True
        assert result.content[0].type == "text"
        assert result.content[0].text == "Error: boom"
