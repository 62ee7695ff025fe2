"""Dispatcher that routes tool calls to their handlers.

The Dispatcher is the boundary between the MCP protocol layer and the tool
handlers. It looks up the handler for a tool name, runs it with the injected
NaverSearchClient and wraps the outcome in an InvocationResponse.

Contract:
    invoke() never raises. Unknown tools, missing arguments, argument
    validation errors and remote failures all come back as an
    InvocationResponse with is_error=True and the text "Error: <message>".

Concurrency:
    Each invoke() is an independent coroutine. The Dispatcher holds no
    per-call state, so any number of calls may be in flight at once on the
    same event loop.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional

import mcp.types as types

from .handler_registry import Handler, handler_map
from .handler_wrappers import MissingArgumentsError, UnknownToolError, error_message
from .naver_client import NaverSearchClient

logger = logging.getLogger(__name__)


@dataclass
class InvocationRequest:
    """A single tools/call as received from the client.

    Attributes:
        tool_name: Name of the tool to execute (e.g., "news-search")
        arguments: Raw argument mapping, or None when the caller sent none
    """

    tool_name: str
    arguments: Optional[Mapping[str, Any]]


@dataclass(frozen=True)
class TextContent:
    text: str
    type: Literal["text"] = "text"


@dataclass
class InvocationResponse:
    """Uniform result envelope for a tool call.

    Attributes:
        content: Ordered content blocks; always a single text block here
        is_error: True when the call failed. The text then starts with "Error: ".

    Example (success):
        >>> InvocationResponse.success({"items": []}).to_dict()
        {'content': [{'type': 'text', 'text': '{\\n  "items": []\\n}'}], 'isError': False}

    Example (error):
        >>> InvocationResponse.failure("rate limited").to_dict()
        {'content': [{'type': 'text', 'text': 'Error: rate limited'}], 'isError': True}
    """

    content: list[TextContent] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def success(cls, result: Any) -> "InvocationResponse":
        text = json.dumps(result, indent=2, ensure_ascii=False, default=str)
        return cls(content=[TextContent(text=text)], is_error=False)

    @classmethod
    def failure(cls, message: str) -> "InvocationResponse":
        return cls(content=[TextContent(text=f"Error: {message}")], is_error=True)

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [{"type": block.type, "text": block.text} for block in self.content],
            "isError": self.is_error,
        }

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=block.text) for block in self.content],
            isError=self.is_error,
        )


class Dispatcher:
    """Routes tool calls to handlers and normalizes their outcome.

    Args:
        client: Naver API client passed to every handler
        handlers: Tool name -> handler mapping. Defaults to the global
            handler map populated by @Tool.

    Usage:
        >>> dispatcher = Dispatcher(client)
        >>> response = await dispatcher.invoke("news-search", {"query": "weather"})
        >>> response.is_error
        False
    """

    def __init__(
        self,
        client: NaverSearchClient,
        handlers: Optional[Mapping[str, Handler]] = None,
    ) -> None:
        self._client = client
        self._handlers = handlers if handlers is not None else handler_map()

    @property
    def client(self) -> NaverSearchClient:
        return self._client

    @property
    def tool_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    async def invoke(self, tool_name: str, arguments: Optional[Mapping[str, Any]]) -> InvocationResponse:
        """Run one tool call. Never raises."""
        try:
            result = await self._call(InvocationRequest(tool_name=tool_name, arguments=arguments))
            response = InvocationResponse.success(result)
        except Exception as e:
            message = error_message(e)
            logger.error("API Error: tool %s failed: %s", tool_name, message)
            return InvocationResponse.failure(message)

        logger.info("Tool %s executed successfully", tool_name)
        return response

    async def _call(self, request: InvocationRequest) -> Any:
        logger.info("Executing tool: %s with args: %s", request.tool_name, request.arguments)

        handler = self._handlers.get(request.tool_name)
        if handler is None:
            raise UnknownToolError(request.tool_name)

        if request.arguments is None:
            raise MissingArgumentsError()

        return await handler(self._client, dict(request.arguments))
