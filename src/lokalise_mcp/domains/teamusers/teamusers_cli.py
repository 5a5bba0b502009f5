"""CLI commands for Lokalise team users."""

from __future__ import annotations

import click

from lokalise_mcp.domains.teamusers import teamusers_controller as controller
from lokalise_mcp.domains.teamusers.teamusers_types import (
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    UpdateTeamUserArgs,
)
from lokalise_mcp.handlers import run_command


def register(cli: click.Group) -> None:
    """Add the team user commands to *cli*."""

    @cli.command("list-team-users")
    @click.argument("team_id")
    @click.option("--limit", type=int, default=None, help="Users per page (1-100).")
    @click.option("--page", type=int, default=None, help="Page number.")
    def list_team_users(team_id: str, limit: int | None, page: int | None) -> None:
        """List the users of a team."""
        run_command(
            controller.list_team_users,
            ListTeamUsersArgs,
            team_id=team_id,
            limit=limit,
            page=page,
        )

    @cli.command("get-team-user")
    @click.argument("team_id")
    @click.argument("user_id", type=int)
    def get_team_user(team_id: str, user_id: int) -> None:
        """Show one team user."""
        run_command(
            controller.get_team_user, GetTeamUserArgs, team_id=team_id, user_id=user_id
        )

    @cli.command("update-team-user")
    @click.argument("team_id")
    @click.argument("user_id", type=int)
    @click.option(
        "--role",
        required=True,
        type=click.Choice(["owner", "admin", "member", "biller"]),
    )
    def update_team_user(team_id: str, user_id: int, role: str) -> None:
        """Change a team user's role."""
        run_command(
            controller.update_team_user,
            UpdateTeamUserArgs,
            team_id=team_id,
            user_id=user_id,
            role=role,
        )

    @cli.command("delete-team-user")
    @click.argument("team_id")
    @click.argument("user_id", type=int)
    @click.confirmation_option(prompt="Remove this user from the team?")
    def delete_team_user(team_id: str, user_id: int) -> None:
        """Remove a user from a team."""
        run_command(
            controller.delete_team_user,
            DeleteTeamUserArgs,
            team_id=team_id,
            user_id=user_id,
        )
