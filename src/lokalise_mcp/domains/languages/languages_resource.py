"""MCP resources for Lokalise languages."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.languages import languages_controller as controller
from lokalise_mcp.domains.languages.languages_types import (
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
)
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register language resources with the MCP server."""

    @mcp.resource(
        "lokalise://languages/system",
        name="lokalise-system-languages",
        description="Languages supported by Lokalise",
        mime_type="text/markdown",
    )
    def system_languages() -> str:
        return read_resource(
            "lokalise://languages/system",
            controller.list_system_languages,
            ListSystemLanguagesArgs,
            limit=500,
        )

    @mcp.resource(
        "lokalise://languages/{project_id}",
        name="lokalise-project-languages",
        description="Languages of a project with translation progress",
        mime_type="text/markdown",
    )
    def project_languages(project_id: str) -> str:
        return read_resource(
            f"lokalise://languages/{project_id}",
            controller.list_project_languages,
            ListProjectLanguagesArgs,
            project_id=project_id,
            include_progress=True,
        )
