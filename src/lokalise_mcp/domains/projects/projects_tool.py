"""MCP tools for Lokalise projects."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.projects import projects_controller as controller
from lokalise_mcp.domains.projects.projects_types import (
    CreateProjectArgs,
    DeleteProjectArgs,
    EmptyProjectArgs,
    GetProjectArgs,
    ListProjectsArgs,
    ProjectUpdate,
    UpdateProjectArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register project tools with the MCP server."""

    @mcp.tool(name="lokalise_list_projects")
    def list_projects(
        limit: int | None = None,
        page: int | None = None,
        include_stats: bool = False,
    ) -> str:
        """List the Lokalise projects your API token can access.

        Start here to find project IDs; most other tools need one.

        Args:
            limit: Number of projects to return (1-500, default 100).
            page: Page number for pagination (default 1).
            include_stats: Include progress, key and QA statistics per project.
        """
        return run_tool(
            controller.list_projects,
            ListProjectsArgs,
            limit=limit,
            page=page,
            include_stats=include_stats,
        )

    @mcp.tool(name="lokalise_get_project")
    def get_project(
        project_id: str,
        include_languages: bool = False,
        include_keys_summary: bool = False,
    ) -> str:
        """Get a detailed overview of one project: statistics, language progress and QA issues.

        Args:
            project_id: Project ID, e.g. '123456789.abcdef'.
            include_languages: Show progress for every language.
            include_keys_summary: Add a summary of key counts.
        """
        return run_tool(
            controller.get_project,
            GetProjectArgs,
            project_id=project_id,
            include_languages=include_languages,
            include_keys_summary=include_keys_summary,
        )

    @mcp.tool(name="lokalise_create_project")
    def create_project(
        name: str,
        description: str | None = None,
        base_lang_iso: str = "en",
    ) -> str:
        """Create a new Lokalise project.

        Args:
            name: Project name (1-100 characters).
            description: Optional project description.
            base_lang_iso: Base (source) language ISO code.
        """
        return run_tool(
            controller.create_project,
            CreateProjectArgs,
            name=name,
            description=description,
            base_lang_iso=base_lang_iso,
        )

    @mcp.tool(name="lokalise_update_project")
    def update_project(project_id: str, project_data: ProjectUpdate) -> str:
        """Update a project's name or description.

        Args:
            project_id: Project ID.
            project_data: Fields to change; at least one is required.
        """
        return run_tool(
            controller.update_project,
            UpdateProjectArgs,
            project_id=project_id,
            project_data=project_data,
        )

    @mcp.tool(name="lokalise_delete_project")
    def delete_project(project_id: str) -> str:
        """Permanently delete a project with all its keys and translations.

        Args:
            project_id: Project ID.
        """
        return run_tool(controller.delete_project, DeleteProjectArgs, project_id=project_id)

    @mcp.tool(name="lokalise_empty_project")
    def empty_project(project_id: str) -> str:
        """Delete every key and translation in a project but keep the project and its settings.

        Args:
            project_id: Project ID.
        """
        return run_tool(controller.empty_project, EmptyProjectArgs, project_id=project_id)

