"""MCP server for the Lokalise API.

This is the main entry point. It builds a FastMCP server and registers
the tools and resources of every domain together with the workflow
prompts. Invoked with command-line arguments it runs the CLI instead.

Run with:
    lokalise-mcp
    # or
    python -m lokalise_mcp
"""

from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP

from lokalise_mcp import __version__
from lokalise_mcp.config import settings
from lokalise_mcp.domains import (
    DomainRegistry,
    register_all_resources,
    register_all_tools,
)
from lokalise_mcp.errors import LokaliseMcpError
from lokalise_mcp.logging_setup import setup_logging
from lokalise_mcp.prompts import register_prompts

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Lokalise MCP server. Use these tools to manage localization projects, "
    "keys, languages, translations, tasks, contributors, comments, glossary "
    "terms, team users, user groups and background processes. Every tool "
    "returns Markdown."
)


def create_server(registry: DomainRegistry | None = None) -> FastMCP:
    """Build the server with all domain tools, resources and prompts.

    Args:
        registry: Registry to take domains from. Defaults to the built-in
            domains package.
    """
    mcp = FastMCP("lokalise-mcp", instructions=INSTRUCTIONS, port=settings.port)
    logger.info("Creating lokalise-mcp server v%s", __version__)

    if registry is None:
        register_all_tools(mcp)
        register_all_resources(mcp)
    else:
        registry.register_all_tools(mcp)
        registry.register_all_resources(mcp)
    register_prompts(mcp)
    return mcp


def _run_server() -> None:
    transport = settings.transport_mode
    if transport == "stdio":
        try:
            settings.validate()
        except LokaliseMcpError as exc:
            logger.error("%s", exc.message)
            sys.exit(1)

    mcp = create_server()
    logger.info("Starting server with %s transport", transport)
    mcp.run(transport="stdio" if transport == "stdio" else "streamable-http")


def main() -> None:
    """Entry point: run the CLI when given arguments, otherwise the MCP server."""
    settings.load()
    setup_logging(settings.debug)

    if len(sys.argv) > 1 and not settings.mcp_server_mode:
        from lokalise_mcp.cli import main as cli_main

        cli_main(sys.argv[1:])
        return

    _run_server()


if __name__ == "__main__":
    main()
