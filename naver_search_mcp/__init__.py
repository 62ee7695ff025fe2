"""
Naver Search MCP Server - Model Context Protocol server for the Naver Open API.

Exposes Naver search (web, news, blog, shopping, image, ...) and DataLab
trend endpoints as MCP tools.
"""

__version__ = "0.1.0"
