"""MCP resources for Lokalise key comments."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.comments import comments_controller as controller
from lokalise_mcp.domains.comments.comments_types import (
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
)
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register comment resources with the MCP server."""

    @mcp.resource(
        "lokalise://comments/{project_id}",
        name="lokalise-project-comments",
        description="All comments in a project",
        mime_type="text/markdown",
    )
    def project_comments(project_id: str) -> str:
        return read_resource(
            f"lokalise://comments/{project_id}",
            controller.list_project_comments,
            ListProjectCommentsArgs,
            project_id=project_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://comments/{project_id}/{key_id}",
        name="lokalise-key-comments",
        description="Comments on one key",
        mime_type="text/markdown",
    )
    def key_comments(project_id: str, key_id: str) -> str:
        return read_resource(
            f"lokalise://comments/{project_id}/{key_id}",
            controller.list_key_comments,
            ListKeyCommentsArgs,
            project_id=project_id,
            key_id=key_id,
        )
