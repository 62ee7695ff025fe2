"""Central registry for tool handlers.

Handlers register themselves at import time (via @Tool). The Dispatcher
uses this registry to route tool calls to the correct handler.
"""
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping

Handler = Callable[[Any, dict[str, Any]], Awaitable[Any]]

_handlers: dict[str, Handler] = {}


def register_handler(name: str, handler: Handler) -> None:
    """Register a handler function for a tool name."""
    if name in _handlers:
        raise ValueError(f"Handler already registered: {name}")
    _handlers[name] = handler


def handler_map() -> Mapping[str, Handler]:
    """Read-only view of every registered handler."""
    return MappingProxyType(_handlers)
