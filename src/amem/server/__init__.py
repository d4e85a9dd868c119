"""MCP server exposing the memory index to assistant tools."""

from amem.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
