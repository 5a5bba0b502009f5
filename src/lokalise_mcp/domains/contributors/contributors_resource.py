"""MCP resources for Lokalise contributors."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.contributors import contributors_controller as controller
from lokalise_mcp.domains.contributors.contributors_types import (
    GetContributorArgs,
    ListContributorsArgs,
)
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register contributor resources with the MCP server."""

    @mcp.resource(
        "lokalise://contributors/{project_id}",
        name="lokalise-project-contributors",
        description="Contributors of a project",
        mime_type="text/markdown",
    )
    def project_contributors(project_id: str) -> str:
        return read_resource(
            f"lokalise://contributors/{project_id}",
            controller.list_contributors,
            ListContributorsArgs,
            project_id=project_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://contributors/{project_id}/{contributor_id}",
        name="lokalise-contributor-details",
        description="One contributor of a project",
        mime_type="text/markdown",
    )
    def contributor_details(project_id: str, contributor_id: str) -> str:
        return read_resource(
            f"lokalise://contributors/{project_id}/{contributor_id}",
            controller.get_contributor,
            GetContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
        )
