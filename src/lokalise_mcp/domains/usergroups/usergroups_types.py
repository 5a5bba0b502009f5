"""Argument models for user group operations."""

from __future__ import annotations

from pydantic import Field

from lokalise_mcp.domains.contributors.contributors_types import ContributorRight
from lokalise_mcp.schemas import TeamArgs, TeamPagingArgs, ToolArgs

MAX_GROUPS_PAGE = 100


class GroupLanguage(ToolArgs):
    lang_id: int = Field(description="Language ID")
    is_writable: bool | None = None


class GroupSettings(ToolArgs):
    name: str = Field(min_length=1, description="Group name")
    is_reviewer: bool = False
    is_admin: bool = False
    admin_rights: list[ContributorRight] | None = Field(
        default=None, description="Rights granted when is_admin is true"
    )
    languages: list[GroupLanguage] | None = None


class ListUserGroupsArgs(TeamPagingArgs):
    pass


class GroupArgs(TeamArgs):
    group_id: int = Field(description="User group ID")


class GetUserGroupArgs(GroupArgs):
    pass


class DeleteUserGroupArgs(GroupArgs):
    pass


class CreateUserGroupArgs(TeamArgs, GroupSettings):
    members: list[int] | None = Field(default=None, description="Initial member user IDs")
    projects: list[str] | None = Field(default=None, description="Initial project IDs")


class UpdateUserGroupArgs(GroupArgs, GroupSettings):
    pass


class GroupMembersArgs(GroupArgs):
    user_ids: list[int] = Field(min_length=1, description="User IDs")


class GroupProjectsArgs(GroupArgs):
    project_ids: list[str] = Field(min_length=1, description="Project IDs")
