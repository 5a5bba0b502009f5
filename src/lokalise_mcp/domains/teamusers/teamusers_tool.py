"""MCP tools for Lokalise team users."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.teamusers import teamusers_controller as controller
from lokalise_mcp.domains.teamusers.teamusers_types import (
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    TeamRole,
    UpdateTeamUserArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register team user tools with the MCP server."""

    @mcp.tool(name="lokalise_list_team_users")
    def list_team_users(
        team_id: str, limit: int | None = None, page: int | None = None
    ) -> str:
        """List the users of a team with their roles.

        Args:
            team_id: Team ID.
            limit: Users per page (1-100).
            page: Page number.
        """
        return run_tool(
            controller.list_team_users,
            ListTeamUsersArgs,
            team_id=team_id,
            limit=limit,
            page=page,
        )

    @mcp.tool(name="lokalise_get_team_user")
    def get_team_user(team_id: str, user_id: int) -> str:
        """Get one team user and what their role allows.

        Args:
            team_id: Team ID.
            user_id: User ID.
        """
        return run_tool(
            controller.get_team_user, GetTeamUserArgs, team_id=team_id, user_id=user_id
        )

    @mcp.tool(name="lokalise_update_team_user")
    def update_team_user(team_id: str, user_id: int, role: TeamRole) -> str:
        """Change a team user's role.

        Args:
            team_id: Team ID.
            user_id: User ID.
            role: owner, admin, member or biller.
        """
        return run_tool(
            controller.update_team_user,
            UpdateTeamUserArgs,
            team_id=team_id,
            user_id=user_id,
            role=role,
        )

    @mcp.tool(name="lokalise_delete_team_user")
    def delete_team_user(team_id: str, user_id: int) -> str:
        """Remove a user from the team. This cannot be undone.

        Args:
            team_id: Team ID.
            user_id: User ID.
        """
        return run_tool(
            controller.delete_team_user,
            DeleteTeamUserArgs,
            team_id=team_id,
            user_id=user_id,
        )
