"""MCP tools for Lokalise user groups."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.contributors.contributors_types import ContributorRight
from lokalise_mcp.domains.usergroups import usergroups_controller as controller
from lokalise_mcp.domains.usergroups.usergroups_types import (
    CreateUserGroupArgs,
    DeleteUserGroupArgs,
    GetUserGroupArgs,
    GroupLanguage,
    GroupMembersArgs,
    GroupProjectsArgs,
    ListUserGroupsArgs,
    UpdateUserGroupArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register user group tools with the MCP server."""

    @mcp.tool(name="lokalise_list_usergroups")
    def list_usergroups(
        team_id: str, limit: int | None = None, page: int | None = None
    ) -> str:
        """List a team's user groups with their permissions and sizes.

        Args:
            team_id: Team ID.
            limit: Groups per page (1-100).
            page: Page number.
        """
        return run_tool(
            controller.list_usergroups,
            ListUserGroupsArgs,
            team_id=team_id,
            limit=limit,
            page=page,
        )

    @mcp.tool(name="lokalise_get_usergroup")
    def get_usergroup(team_id: str, group_id: int) -> str:
        """Get a user group with its languages, members and projects.

        Args:
            team_id: Team ID.
            group_id: User group ID.
        """
        return run_tool(
            controller.get_usergroup, GetUserGroupArgs, team_id=team_id, group_id=group_id
        )

    @mcp.tool(name="lokalise_create_usergroup")
    def create_usergroup(
        team_id: str,
        name: str,
        is_reviewer: bool = False,
        is_admin: bool = False,
        admin_rights: list[ContributorRight] | None = None,
        languages: list[GroupLanguage] | None = None,
        members: list[int] | None = None,
        projects: list[str] | None = None,
    ) -> str:
        """Create a user group, optionally with initial members and projects.

        Args:
            team_id: Team ID.
            name: Group name.
            is_reviewer: Members can review translations.
            is_admin: Members are project admins.
            admin_rights: Rights granted to admins.
            languages: Language permissions (language ID and writability).
            members: User IDs to add after creation.
            projects: Project IDs to add after creation.
        """
        return run_tool(
            controller.create_usergroup,
            CreateUserGroupArgs,
            team_id=team_id,
            name=name,
            is_reviewer=is_reviewer,
            is_admin=is_admin,
            admin_rights=admin_rights,
            languages=languages,
            members=members,
            projects=projects,
        )

    @mcp.tool(name="lokalise_update_usergroup")
    def update_usergroup(
        team_id: str,
        group_id: int,
        name: str,
        is_reviewer: bool = False,
        is_admin: bool = False,
        admin_rights: list[ContributorRight] | None = None,
        languages: list[GroupLanguage] | None = None,
    ) -> str:
        """Replace a user group's name and permissions.

        Args:
            team_id: Team ID.
            group_id: User group ID.
            name: Group name.
            is_reviewer: Members can review translations.
            is_admin: Members are project admins.
            admin_rights: Rights granted to admins.
            languages: Language permissions.
        """
        return run_tool(
            controller.update_usergroup,
            UpdateUserGroupArgs,
            team_id=team_id,
            group_id=group_id,
            name=name,
            is_reviewer=is_reviewer,
            is_admin=is_admin,
            admin_rights=admin_rights,
            languages=languages,
        )

    @mcp.tool(name="lokalise_delete_usergroup")
    def delete_usergroup(team_id: str, group_id: int) -> str:
        """Delete a user group. Members keep their team membership.

        Args:
            team_id: Team ID.
            group_id: User group ID.
        """
        return run_tool(
            controller.delete_usergroup,
            DeleteUserGroupArgs,
            team_id=team_id,
            group_id=group_id,
        )

    @mcp.tool(name="lokalise_add_members_to_group")
    def add_members_to_group(team_id: str, group_id: int, user_ids: list[int]) -> str:
        """Add team users to a group.

        Args:
            team_id: Team ID.
            group_id: User group ID.
            user_ids: User IDs to add.
        """
        return run_tool(
            controller.add_members_to_group,
            GroupMembersArgs,
            team_id=team_id,
            group_id=group_id,
            user_ids=user_ids,
        )

    @mcp.tool(name="lokalise_remove_members_from_group")
    def remove_members_from_group(team_id: str, group_id: int, user_ids: list[int]) -> str:
        """Remove users from a group.

        Args:
            team_id: Team ID.
            group_id: User group ID.
            user_ids: User IDs to remove.
        """
        return run_tool(
            controller.remove_members_from_group,
            GroupMembersArgs,
            team_id=team_id,
            group_id=group_id,
            user_ids=user_ids,
        )

    @mcp.tool(name="lokalise_add_projects_to_group")
    def add_projects_to_group(team_id: str, group_id: int, project_ids: list[str]) -> str:
        """Give a group access to projects.

        Args:
            team_id: Team ID.
            group_id: User group ID.
            project_ids: Project IDs to add.
        """
        return run_tool(
            controller.add_projects_to_group,
            GroupProjectsArgs,
            team_id=team_id,
            group_id=group_id,
            project_ids=project_ids,
        )

    @mcp.tool(name="lokalise_remove_projects_from_group")
    def remove_projects_from_group(
        team_id: str, group_id: int, project_ids: list[str]
    ) -> str:
        """Revoke a group's access to projects.

        Args:
            team_id: Team ID.
            group_id: User group ID.
            project_ids: Project IDs to remove.
        """
        return run_tool(
            controller.remove_projects_from_group,
            GroupProjectsArgs,
            team_id=team_id,
            group_id=group_id,
            project_ids=project_ids,
        )
