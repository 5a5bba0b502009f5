"""CLI commands for Lokalise contributors."""

from __future__ import annotations

import click

from lokalise_mcp.domains.contributors import contributors_controller as controller
from lokalise_mcp.domains.contributors.contributors_types import (
    AddContributorsArgs,
    GetContributorArgs,
    GetCurrentUserArgs,
    ListContributorsArgs,
    RemoveContributorArgs,
    UpdateContributorArgs,
)
from lokalise_mcp.handlers import parse_json_option, run_command


def register(cli: click.Group) -> None:
    """Add the contributor commands to *cli*."""

    @cli.command("list-contributors")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None, help="Contributors per page (1-100).")
    @click.option("--page", type=int, default=None, help="Page number.")
    def list_contributors(project_id: str, limit: int | None, page: int | None) -> None:
        """List contributors of a project."""
        run_command(
            controller.list_contributors,
            ListContributorsArgs,
            project_id=project_id,
            limit=limit,
            page=page,
        )

    @cli.command("get-contributor")
    @click.argument("project_id")
    @click.argument("contributor_id", type=int)
    def get_contributor(project_id: str, contributor_id: int) -> None:
        """Show one contributor."""
        run_command(
            controller.get_contributor,
            GetContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
        )

    @cli.command("add-contributors")
    @click.argument("project_id")
    @click.option("--email", default=None, help="Email of a single contributor.")
    @click.option("--fullname", default=None)
    @click.option("--language", "languages", multiple=True, help="Language ISO (repeatable).")
    @click.option("--contributors-json", default=None, help="JSON array of contributors.")
    def add_contributors(
        project_id: str,
        email: str | None,
        fullname: str | None,
        languages: tuple[str, ...],
        contributors_json: str | None,
    ) -> None:
        """Add one contributor from options, or many from --contributors-json."""
        contributors = parse_json_option(contributors_json)
        if contributors is None:
            if not email:
                raise click.UsageError("Pass --email or --contributors-json.")
            contributors = [
                {
                    "email": email,
                    "fullname": fullname,
                    "languages": [{"lang_iso": iso} for iso in languages],
                }
            ]
        run_command(
            controller.add_contributors,
            AddContributorsArgs,
            project_id=project_id,
            contributors=contributors,
        )

    @cli.command("me")
    @click.argument("project_id")
    def me(project_id: str) -> None:
        """Show your own contributor profile in a project."""
        run_command(controller.get_current_user, GetCurrentUserArgs, project_id=project_id)

    @cli.command("update-contributor")
    @click.argument("project_id")
    @click.argument("contributor_id", type=int)
    @click.option("--admin-right", "admin_rights", multiple=True, help="Admin right (repeatable).")
    @click.option("--language", "languages", multiple=True, help="Language ISO (repeatable).")
    def update_contributor(
        project_id: str,
        contributor_id: int,
        admin_rights: tuple[str, ...],
        languages: tuple[str, ...],
    ) -> None:
        """Update a contributor's languages or admin rights."""
        run_command(
            controller.update_contributor,
            UpdateContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
            admin_rights=list(admin_rights) or None,
            languages=[{"lang_iso": iso} for iso in languages] or None,
        )

    @cli.command("remove-contributor")
    @click.argument("project_id")
    @click.argument("contributor_id", type=int)
    def remove_contributor(project_id: str, contributor_id: int) -> None:
        """Remove a contributor from a project."""
        run_command(
            controller.remove_contributor,
            RemoveContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
        )
