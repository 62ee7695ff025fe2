# handler_wrappers.py
"""Shared wrappers and helpers for tool handlers.

This module provides the pieces the @Tool decorator and the Dispatcher share:
- HandlerError and its subclasses for the dispatch failures
- Argument validation wrapper (raw mapping -> pydantic model)
- Error message formatting for the response envelope

Error Handling Strategy:
    Handlers never catch their own failures. Validation errors, HandlerError,
    NaverApiError and httpx errors all propagate unchanged to the Dispatcher,
    which is the single place where exceptions are turned into an error
    envelope via error_message().
"""

from typing import Any, Awaitable, Callable, Optional, Type
from functools import wraps

from pydantic import BaseModel, ValidationError


# ------------------------------------------------------------------------------
# HandlerError - Custom exception for dispatch failures with structured info
# ------------------------------------------------------------------------------
# - message: What went wrong
# - hint: Actionable suggestion for the AI (optional)
# - **data: Extra context like tool name, query, etc. (optional)
#
# Example: raise HandlerError("Category not found", hint="Use a category id", category="abc")
# ------------------------------------------------------------------------------
class HandlerError(Exception):
    """Structured error for tool handlers and the dispatcher.

    str() of the error is the message followed by the hint and context,
    which is what ends up after "Error: " in the response text.

    Args:
        message: Description of what went wrong
        hint: Actionable suggestion for the AI (optional)
        **data: Extra context (optional)
    """
    def __init__(self, message: str, hint: Optional[str] = None, **data: Any):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.data = data

    def __str__(self) -> str:
        msg = self.message
        if self.hint:
            msg += f" (hint: {self.hint})"
        if self.data:
            msg += f" (context: {self.data})"
        return msg


class UnknownToolError(HandlerError):
    """Tool name has no entry in the handler map."""

    def __init__(self, tool_name: str):
        super().__init__(
            f"Unknown tool: {tool_name}",
            hint="Call tools/list to see the available tools",
        )
        self.tool_name = tool_name


class MissingArgumentsError(HandlerError):
    """Call arrived without an argument object."""

    def __init__(self) -> None:
        super().__init__("Arguments are required")


# ------------------------------------------------------------------------------
# error_message - Text placed after "Error: " in the response envelope
# ------------------------------------------------------------------------------
# pydantic's own str() spans several lines with URLs; collapse it into one line
# naming each offending field. Everything else uses str(exc), falling back to
# the exception type when the message is empty (e.g. bare httpx timeouts).
# ------------------------------------------------------------------------------
def error_message(exc: BaseException) -> str:
    if isinstance(exc, ValidationError):
        problems = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err.get("loc", ())) or "arguments"
            problems.append(f"{loc}: {err.get('msg', 'invalid value')}")
        return "Invalid arguments: " + "; ".join(problems)
    message = str(exc).strip()
    return message or type(exc).__name__


# ------------------------------------------------------------------------------
# _validated - Turn the raw argument mapping into the tool's pydantic model
# ------------------------------------------------------------------------------
# Outermost wrapper applied by @Tool. The wrapped function receives
# (client, params) where params is an instance of `model`; the resulting
# handler takes (client, arguments) with arguments a plain dict.
# ------------------------------------------------------------------------------
def _validated(
    model: Type[BaseModel],
    func: Callable[[Any, Any], Awaitable[Any]],
) -> Callable[[Any, dict[str, Any]], Awaitable[Any]]:
    @wraps(func)
    async def wrapper(client: Any, arguments: dict[str, Any]) -> Any:
        params = model.model_validate(arguments)
        return await func(client, params)

    return wrapper
