"""CLI commands for Lokalise projects."""

from __future__ import annotations

import click

from lokalise_mcp.domains.projects import projects_controller as controller
from lokalise_mcp.domains.projects.projects_types import (
    CreateProjectArgs,
    DeleteProjectArgs,
    EmptyProjectArgs,
    GetProjectArgs,
    ListProjectsArgs,
    UpdateProjectArgs,
)
from lokalise_mcp.handlers import run_command


def register(cli: click.Group) -> None:
    """Add the project commands to *cli*."""

    @cli.command("list-projects")
    @click.option("--limit", type=int, default=None, help="Projects per page (1-500).")
    @click.option("--page", type=int, default=None, help="Page number.")
    @click.option("--include-stats", is_flag=True, help="Include project statistics.")
    def list_projects(limit: int | None, page: int | None, include_stats: bool) -> None:
        """List Lokalise projects."""
        run_command(
            controller.list_projects,
            ListProjectsArgs,
            limit=limit,
            page=page,
            include_stats=include_stats,
        )

    @cli.command("get-project-details")
    @click.argument("project_id")
    @click.option("--include-languages", is_flag=True, help="Show every language's progress.")
    @click.option("--include-keys-summary", is_flag=True, help="Add a summary of key counts.")
    def get_project_details(
        project_id: str, include_languages: bool, include_keys_summary: bool
    ) -> None:
        """Show details of one project."""
        run_command(
            controller.get_project,
            GetProjectArgs,
            project_id=project_id,
            include_languages=include_languages,
            include_keys_summary=include_keys_summary,
        )

    @cli.command("create-project")
    @click.option("--name", required=True, help="Project name.")
    @click.option("--description", default=None, help="Project description.")
    @click.option("--base-lang-iso", default="en", show_default=True, help="Base language ISO code.")
    def create_project(name: str, description: str | None, base_lang_iso: str) -> None:
        """Create a project."""
        run_command(
            controller.create_project,
            CreateProjectArgs,
            name=name,
            description=description,
            base_lang_iso=base_lang_iso,
        )

    @cli.command("update-project")
    @click.argument("project_id")
    @click.option("--name", default=None, help="New project name.")
    @click.option("--description", default=None, help="New project description.")
    def update_project(project_id: str, name: str | None, description: str | None) -> None:
        """Rename a project or change its description."""
        run_command(
            controller.update_project,
            UpdateProjectArgs,
            project_id=project_id,
            project_data={"name": name, "description": description},
        )

    @cli.command("delete-project")
    @click.argument("project_id")
    @click.confirmation_option(prompt="This permanently deletes the project. Continue?")
    def delete_project(project_id: str) -> None:
        """Delete a project permanently."""
        run_command(controller.delete_project, DeleteProjectArgs, project_id=project_id)

    @cli.command("empty-project")
    @click.argument("project_id")
    @click.confirmation_option(prompt="This deletes every key in the project. Continue?")
    def empty_project(project_id: str) -> None:
        """Delete all keys of a project, keeping the project."""
        run_command(controller.empty_project, EmptyProjectArgs, project_id=project_id)
