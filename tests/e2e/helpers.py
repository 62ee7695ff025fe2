"""Helpers for protocol-level tests over an in-memory MCP session."""
from __future__ import annotations

import contextlib
from typing import Any, AsyncIterator

from mcp.client.session import ClientSession
from mcp.shared.memory import create_connected_server_and_client_session

from naver_search_mcp.config import Config
from naver_search_mcp.dispatcher import Dispatcher
from naver_search_mcp.mcp_server import McpServer
from naver_search_mcp.primitives import load_all_tools


@contextlib.asynccontextmanager
async def connected_session(client: Any) -> AsyncIterator[ClientSession]:
    """Run the real MCP server in-process and yield an initialized client session.

    Args:
        client: Naver client (or stub) the server's Dispatcher will use

    Yields:
        ClientSession connected to the server through memory streams.
    """
    config = Config(client_id="test-id", client_secret="test-secret")
    server = McpServer(Dispatcher(client), config, load_all_tools())
    async with create_connected_server_and_client_session(server.server) as session:
        yield session
