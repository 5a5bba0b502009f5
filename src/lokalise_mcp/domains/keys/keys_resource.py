"""MCP resources for Lokalise translation keys."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.keys import keys_controller as controller
from lokalise_mcp.domains.keys.keys_types import GetKeyArgs, ListKeysArgs
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register key resources with the MCP server."""

    @mcp.resource(
        "lokalise://keys/{project_id}",
        name="lokalise-project-keys",
        description="First page of translation keys in a project",
        mime_type="text/markdown",
    )
    def project_keys(project_id: str) -> str:
        return read_resource(
            f"lokalise://keys/{project_id}",
            controller.list_keys,
            ListKeysArgs,
            project_id=project_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://keys/{project_id}/{key_id}",
        name="lokalise-key-details",
        description="One translation key with its translations",
        mime_type="text/markdown",
    )
    def key_details(project_id: str, key_id: str) -> str:
        return read_resource(
            f"lokalise://keys/{project_id}/{key_id}",
            controller.get_key,
            GetKeyArgs,
            project_id=project_id,
            key_id=key_id,
        )
