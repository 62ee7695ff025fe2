# primitives/__init__.py
"""MCP primitives module - the Naver search and DataLab tools."""

from .tools import load_all_tools


__all__ = ["load_all_tools"]
