"""MCP server factory.

Exposes campaign creation, ad decisions and impression redemption as MCP
tools over the same DecisionService the HTTP app uses.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ...services.decision_service import DecisionService
from .tools import register_tools

SERVER_NAME = "adserver"


def create_server(service: DecisionService | None = None) -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        service: DecisionService to expose; defaults to the process-wide one.
    """
    server = FastMCP(SERVER_NAME)
    register_tools(server, service)
    return server


if __name__ == "__main__":
    create_server().run(transport="stdio")
