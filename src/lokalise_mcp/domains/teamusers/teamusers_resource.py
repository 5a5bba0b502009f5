"""MCP resources for Lokalise team users."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.teamusers import teamusers_controller as controller
from lokalise_mcp.domains.teamusers.teamusers_types import GetTeamUserArgs, ListTeamUsersArgs
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register team user resources with the MCP server."""

    @mcp.resource(
        "lokalise://teamusers/{team_id}",
        name="lokalise-team-users",
        description="Users of a team",
        mime_type="text/markdown",
    )
    def team_users(team_id: str) -> str:
        return read_resource(
            f"lokalise://teamusers/{team_id}",
            controller.list_team_users,
            ListTeamUsersArgs,
            team_id=team_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://teamusers/{team_id}/{user_id}",
        name="lokalise-team-user-details",
        description="One team user",
        mime_type="text/markdown",
    )
    def team_user_details(team_id: str, user_id: str) -> str:
        return read_resource(
            f"lokalise://teamusers/{team_id}/{user_id}",
            controller.get_team_user,
            GetTeamUserArgs,
            team_id=team_id,
            user_id=user_id,
        )
