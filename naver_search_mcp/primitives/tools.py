# primitives/tools.py
"""Central tool registration module."""

import importlib

from ..tool_decorator import ToolDescriptor, list_tool_descriptors, verify_registry

# Tool subpackages; importing one registers every tool module inside it
_TOOL_PACKAGES = ("search", "datalab")


def load_all_tools() -> tuple[ToolDescriptor, ...]:
    """Import every tool module and return the resulting tool registry.

    Safe to call more than once: modules are imported (and their tools
    registered) only the first time.

    Raises:
        RuntimeError: If the tool registry and handler map disagree
    """
    for package in _TOOL_PACKAGES:
        importlib.import_module(f".{package}", __package__)
    verify_registry()
    return list_tool_descriptors()
