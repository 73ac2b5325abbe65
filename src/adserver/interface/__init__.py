"""Boundary layers: HTTP app, MCP tools, CLI."""
