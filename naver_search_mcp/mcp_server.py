"""MCP server exposing the Naver tools over stdio or streamable HTTP.

This module binds the tool registry and the Dispatcher to the MCP SDK's
low-level Server. The low-level Server is used (rather than FastMCP) because
tool arguments must reach the Dispatcher untouched: argument validation and
error envelopes are the Dispatcher's job, not the SDK's.

Architecture:
    - tools/list: returns every ToolDescriptor as an MCP Tool
    - tools/call: Dispatcher.invoke() -> InvocationResponse -> CallToolResult
    - Transport: stdio (default) or streamable HTTP (starlette + uvicorn)

Error Handling:
    - Tool failures never reach the SDK; the Dispatcher returns isError results
    - Unhandled exceptions elsewhere on the event loop are logged and the
      server keeps running
"""

import asyncio
import contextlib
import logging
from typing import Any, AsyncIterator, Optional

import uvicorn
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.routing import Mount

from . import __version__
from .config import Config
from .dispatcher import Dispatcher
from .tool_decorator import ToolDescriptor

logger = logging.getLogger(__name__)

SERVER_NAME = "naver-search"


class McpServer:
    """Naver Search MCP server.

    Attributes:
        _dispatcher: Routes tool calls to handlers (owns the Naver client)
        _config: Transport and HTTP settings
        _tools: Tool registry advertised on tools/list
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        config: Config,
        tools: tuple[ToolDescriptor, ...],
    ) -> None:
        self._dispatcher = dispatcher
        self._config = config
        self._tools = tools
        self._server: Optional[Server] = None

    @property
    def server(self) -> Server:
        """The configured low-level Server, built on first access."""
        if self._server is None:
            self._server = self._build()
        return self._server

    def run(self) -> None:
        """Run the server until the transport closes (blocking)."""
        asyncio.run(self._async_main())

    def _build(self) -> Server:
        server: Server = Server(SERVER_NAME, version=__version__)
        mcp_tools = [tool.to_mcp_tool() for tool in self._tools]
        dispatcher = self._dispatcher

        @server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return mcp_tools

        # Registered on request_handlers directly: the call_tool() decorator
        # replaces absent arguments with {} and validates against the schema,
        # both of which belong to the Dispatcher
        async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
            response = await dispatcher.invoke(req.params.name, req.params.arguments)
            return types.ServerResult(response.to_call_tool_result())

        server.request_handlers[types.CallToolRequest] = call_tool
        return server

    async def _async_main(self) -> None:
        asyncio.get_running_loop().set_exception_handler(_log_unhandled_exception)

        try:
            if self._config.transport == "http":
                await self._run_http_mode()
            else:
                await self._run_stdio_mode()
        finally:
            await self._dispatcher.client.aclose()

    async def _run_stdio_mode(self) -> None:
        server = self.server
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Naver Search MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())

    async def _run_http_mode(self) -> None:
        """Serve streamable HTTP via a Starlette app on uvicorn.

        The session manager's task group must be running for the lifetime of
        the app, hence the lifespan context.
        """
        session_manager = StreamableHTTPSessionManager(app=self.server)

        async def handle_streamable_http(scope: Any, receive: Any, send: Any) -> None:
            await session_manager.handle_request(scope, receive, send)

        @contextlib.asynccontextmanager
        async def lifespan(app: Starlette) -> AsyncIterator[None]:
            async with session_manager.run():
                logger.info(
                    "Naver Search MCP Server running on http://%s:%s%s",
                    self._config.http_host,
                    self._config.http_port,
                    self._config.http_path,
                )
                yield

        app = Starlette(
            routes=[Mount(self._config.http_path, app=handle_streamable_http)],
            lifespan=lifespan,
        )
        config = uvicorn.Config(
            app,
            host=self._config.http_host,
            port=self._config.http_port,
            log_level="warning",
        )
        await uvicorn.Server(config).serve()


def _log_unhandled_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    message = context.get("message", "Unhandled exception in event loop")
    if exc is not None:
        logger.error("Unhandled exception: %s", message, exc_info=exc)
    else:
        logger.error("Unhandled error: %s", message)
