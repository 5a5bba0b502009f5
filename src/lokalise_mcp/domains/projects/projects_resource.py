"""MCP resources for Lokalise projects."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.projects import projects_controller as controller
from lokalise_mcp.domains.projects.projects_types import GetProjectArgs, ListProjectsArgs
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register project resources with the MCP server."""

    @mcp.resource(
        "lokalise://projects",
        name="lokalise-projects",
        description="All Lokalise projects accessible with the configured token",
        mime_type="text/markdown",
    )
    def projects_list() -> str:
        return read_resource(
            "lokalise://projects", controller.list_projects, ListProjectsArgs, limit=100
        )

    @mcp.resource(
        "lokalise://projects/{project_id}",
        name="lokalise-project-details",
        description="Details, statistics and language progress of one project",
        mime_type="text/markdown",
    )
    def project_details(project_id: str) -> str:
        return read_resource(
            f"lokalise://projects/{project_id}",
            controller.get_project,
            GetProjectArgs,
            project_id=project_id,
            include_languages=True,
        )
