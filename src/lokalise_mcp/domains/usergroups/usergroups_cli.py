"""CLI commands for Lokalise user groups."""

from __future__ import annotations

import click

from lokalise_mcp.domains.usergroups import usergroups_controller as controller
from lokalise_mcp.domains.usergroups.usergroups_types import (
    CreateUserGroupArgs,
    DeleteUserGroupArgs,
    GetUserGroupArgs,
    GroupMembersArgs,
    GroupProjectsArgs,
    ListUserGroupsArgs,
    UpdateUserGroupArgs,
)
from lokalise_mcp.handlers import parse_json_option, run_command


SETTINGS_OPTIONS = [
    click.option("--name", required=True, help="Group name."),
    click.option("--reviewer", "is_reviewer", is_flag=True, help="Members are reviewers."),
    click.option("--admin", "is_admin", is_flag=True, help="Members are admins."),
    click.option(
        "--admin-right", "admin_rights", multiple=True, help="Admin right (repeatable)."
    ),
    click.option(
        "--languages-json", default=None, help="JSON array of {lang_id, is_writable}."
    ),
]


def _settings_options(func):
    for option in reversed(SETTINGS_OPTIONS):
        func = option(func)
    return func


def register(cli: click.Group) -> None:
    """Add the user group commands to *cli*."""

    @cli.command("list-usergroups")
    @click.argument("team_id")
    @click.option("--limit", type=int, default=None, help="Groups per page (1-100).")
    @click.option("--page", type=int, default=None, help="Page number.")
    def list_usergroups(team_id: str, limit: int | None, page: int | None) -> None:
        """List the user groups of a team."""
        run_command(
            controller.list_usergroups,
            ListUserGroupsArgs,
            team_id=team_id,
            limit=limit,
            page=page,
        )

    @cli.command("get-usergroup")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    def get_usergroup(team_id: str, group_id: int) -> None:
        """Show one user group."""
        run_command(
            controller.get_usergroup, GetUserGroupArgs, team_id=team_id, group_id=group_id
        )

    @cli.command("create-usergroup")
    @click.argument("team_id")
    @_settings_options
    @click.option("--member", "members", type=int, multiple=True, help="User ID (repeatable).")
    @click.option("--project", "projects", multiple=True, help="Project ID (repeatable).")
    def create_usergroup(
        team_id: str,
        name: str,
        is_reviewer: bool,
        is_admin: bool,
        admin_rights: tuple[str, ...],
        languages_json: str | None,
        members: tuple[int, ...],
        projects: tuple[str, ...],
    ) -> None:
        """Create a user group."""
        run_command(
            controller.create_usergroup,
            CreateUserGroupArgs,
            team_id=team_id,
            name=name,
            is_reviewer=is_reviewer,
            is_admin=is_admin,
            admin_rights=list(admin_rights) or None,
            languages=parse_json_option(languages_json),
            members=list(members) or None,
            projects=list(projects) or None,
        )

    @cli.command("update-usergroup")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    @_settings_options
    def update_usergroup(
        team_id: str,
        group_id: int,
        name: str,
        is_reviewer: bool,
        is_admin: bool,
        admin_rights: tuple[str, ...],
        languages_json: str | None,
    ) -> None:
        """Replace a user group's name and permissions."""
        run_command(
            controller.update_usergroup,
            UpdateUserGroupArgs,
            team_id=team_id,
            group_id=group_id,
            name=name,
            is_reviewer=is_reviewer,
            is_admin=is_admin,
            admin_rights=list(admin_rights) or None,
            languages=parse_json_option(languages_json),
        )

    @cli.command("delete-usergroup")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    @click.confirmation_option(prompt="Delete this user group?")
    def delete_usergroup(team_id: str, group_id: int) -> None:
        """Delete a user group."""
        run_command(
            controller.delete_usergroup,
            DeleteUserGroupArgs,
            team_id=team_id,
            group_id=group_id,
        )

    @cli.command("add-members-to-group")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    @click.argument("user_ids", type=int, nargs=-1, required=True)
    def add_members_to_group(team_id: str, group_id: int, user_ids: tuple[int, ...]) -> None:
        """Add users to a group."""
        run_command(
            controller.add_members_to_group,
            GroupMembersArgs,
            team_id=team_id,
            group_id=group_id,
            user_ids=list(user_ids),
        )

    @cli.command("remove-members-from-group")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    @click.argument("user_ids", type=int, nargs=-1, required=True)
    def remove_members_from_group(
        team_id: str, group_id: int, user_ids: tuple[int, ...]
    ) -> None:
        """Remove users from a group."""
        run_command(
            controller.remove_members_from_group,
            GroupMembersArgs,
            team_id=team_id,
            group_id=group_id,
            user_ids=list(user_ids),
        )

    @cli.command("add-projects-to-group")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    @click.argument("project_ids", nargs=-1, required=True)
    def add_projects_to_group(
        team_id: str, group_id: int, project_ids: tuple[str, ...]
    ) -> None:
        """Give a group access to projects."""
        run_command(
            controller.add_projects_to_group,
            GroupProjectsArgs,
            team_id=team_id,
            group_id=group_id,
            project_ids=list(project_ids),
        )

    @cli.command("remove-projects-from-group")
    @click.argument("team_id")
    @click.argument("group_id", type=int)
    @click.argument("project_ids", nargs=-1, required=True)
    def remove_projects_from_group(
        team_id: str, group_id: int, project_ids: tuple[str, ...]
    ) -> None:
        """Revoke a group's access to projects."""
        run_command(
            controller.remove_projects_from_group,
            GroupProjectsArgs,
            team_id=team_id,
            group_id=group_id,
            project_ids=list(project_ids),
        )
