"""MCP resources for Lokalise user groups."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.usergroups import usergroups_controller as controller
from lokalise_mcp.domains.usergroups.usergroups_types import (
    GetUserGroupArgs,
    ListUserGroupsArgs,
)
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register user group resources with the MCP server."""

    @mcp.resource(
        "lokalise://usergroups/{team_id}",
        name="lokalise-team-usergroups",
        description="User groups of a team",
        mime_type="text/markdown",
    )
    def team_usergroups(team_id: str) -> str:
        return read_resource(
            f"lokalise://usergroups/{team_id}",
            controller.list_usergroups,
            ListUserGroupsArgs,
            team_id=team_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://usergroups/{team_id}/{group_id}",
        name="lokalise-usergroup-details",
        description="One user group",
        mime_type="text/markdown",
    )
    def usergroup_details(team_id: str, group_id: str) -> str:
        return read_resource(
            f"lokalise://usergroups/{team_id}/{group_id}",
            controller.get_usergroup,
            GetUserGroupArgs,
            team_id=team_id,
            group_id=group_id,
        )
