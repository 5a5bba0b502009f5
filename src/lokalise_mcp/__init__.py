"""Lokalise MCP server and CLI."""

__version__ = "1.0.0"
