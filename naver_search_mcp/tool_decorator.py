from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Type
import logging

from pydantic import BaseModel

import mcp.types as types

from .handler_registry import handler_map, register_handler
from .handler_wrappers import _validated

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# ToolDescriptor - What tools/list advertises for one tool
# ------------------------------------------------------------------------------
# Frozen: descriptors are built at import time and never change afterwards.
# parameter_schema is the JSON Schema of the tool's pydantic argument model.
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    parameter_schema: Mapping[str, Any]

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=dict(self.parameter_schema),
        )


# Global registry storing all tools registered via @Tool decorator, in
# registration order. Key: tool name, Value: descriptor
_registry: dict[str, ToolDescriptor] = {}


# ------------------------------------------------------------------------------
# Tool - Decorator class that registers functions as MCP tools
# ------------------------------------------------------------------------------
# Usage:
#   @Tool("news-search", "Description for AI", SearchArgs)
#   async def news_search(client: NaverSearchClient, params: SearchArgs) -> dict:
#       ...
#
# Parameters:
#   - name: Unique tool identifier exposed to MCP clients
#   - description: Shown to AI to understand when/how to use the tool
#   - params: pydantic model the raw arguments are validated into; its JSON
#     schema becomes the advertised inputSchema
#
# What happens at import time:
#   1. Wraps function with _validated (dict arguments -> params model)
#   2. Registers the wrapped handler for dispatch
#   3. Stores a ToolDescriptor in _registry for tools/list
# ------------------------------------------------------------------------------
class Tool:
    def __init__(
        self,
        name: str,
        description: str,
        params: Type[BaseModel],
    ):
        self.name = name
        self.description = description
        self.params = params

    # Called when used as @Tool(...) decorator
    def __call__(self, func: Callable[[Any, Any], Awaitable[Any]]) -> Callable[[Any, Any], Awaitable[Any]]:
        self._register(func)
        return func  # Return original so it can be called directly for testing

    def _register(self, func: Callable[[Any, Any], Awaitable[Any]]) -> None:
        # Prevent duplicate registration (would cause confusing behavior)
        if self.name in _registry:
            raise ValueError(f"Tool already registered: {self.name}")

        register_handler(self.name, _validated(self.params, func))

        _registry[self.name] = ToolDescriptor(
            name=self.name,
            description=self.description,
            parameter_schema=MappingProxyType(self.params.model_json_schema()),
        )
        logger.debug("Registered tool: %s", self.name)


# ------------------------------------------------------------------------------
# list_tool_descriptors - The Tool Registry, in registration order
# ------------------------------------------------------------------------------
def list_tool_descriptors() -> tuple[ToolDescriptor, ...]:
    return tuple(_registry.values())


# ------------------------------------------------------------------------------
# verify_registry - Every handler has a descriptor and vice versa
# ------------------------------------------------------------------------------
# Called once at server startup. A mismatch means a tool module registered a
# handler without going through @Tool (or the reverse), which would either
# advertise a tool that cannot run or hide one that can.
# ------------------------------------------------------------------------------
def verify_registry() -> None:
    advertised = set(_registry)
    handled = set(handler_map())
    if advertised != handled:
        raise RuntimeError(
            "Tool registry and handler map disagree: "
            f"without handler={sorted(advertised - handled)}, "
            f"without descriptor={sorted(handled - advertised)}"
        )
