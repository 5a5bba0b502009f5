"""Argument models for team user operations."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from lokalise_mcp.schemas import TeamArgs, TeamPagingArgs

TeamRole = Literal["owner", "admin", "member", "biller"]

MAX_TEAM_USERS_PAGE = 100


class ListTeamUsersArgs(TeamPagingArgs):
    pass


class TeamUserArgs(TeamArgs):
    user_id: int = Field(description="Team user ID")


class GetTeamUserArgs(TeamUserArgs):
    pass


class UpdateTeamUserArgs(TeamUserArgs):
    role: TeamRole = Field(description="New role for the user")


class DeleteTeamUserArgs(TeamUserArgs):
    pass
