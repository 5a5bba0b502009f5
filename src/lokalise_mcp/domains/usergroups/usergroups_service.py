"""Lokalise team user group endpoints."""

from __future__ import annotations

import logging
from typing import Any

from lokalise_mcp.lokalise_client import (
    BaseService,
    PagedResult,
    api_errors,
    build_params,
    paged_result,
    to_plain,
)

logger = logging.getLogger(__name__)


class UserGroupsService(BaseService):
    """Wraps the ``/teams/{team_id}/groups`` endpoints."""

    def list_groups(
        self, team_id: int | str, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        with api_errors("list user groups"):
            return paged_result(
                self.client.team_user_groups(team_id, build_params(limit=limit, page=page))
            )

    def get_group(self, team_id: int | str, group_id: int) -> dict[str, Any]:
        with api_errors("get user group"):
            return to_plain(self.client.team_user_group(team_id, group_id))

    def create_group(self, team_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        with api_errors("create user group"):
            return to_plain(self.client.create_team_user_group(team_id, data))

    def update_group(
        self, team_id: int | str, group_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        with api_errors("update user group"):
            return to_plain(self.client.update_team_user_group(team_id, group_id, data))

    def delete_group(self, team_id: int | str, group_id: int) -> dict[str, Any]:
        with api_errors("delete user group"):
            return to_plain(self.client.delete_team_user_group(team_id, group_id))

    def add_members(
        self, team_id: int | str, group_id: int, user_ids: list[int]
    ) -> dict[str, Any]:
        with api_errors("add members to user group"):
            return to_plain(self.client.add_members_to_group(team_id, group_id, user_ids))

    def remove_members(
        self, team_id: int | str, group_id: int, user_ids: list[int]
    ) -> dict[str, Any]:
        with api_errors("remove members from user group"):
            return to_plain(self.client.remove_members_from_group(team_id, group_id, user_ids))

    def add_projects(
        self, team_id: int | str, group_id: int, project_ids: list[str]
    ) -> dict[str, Any]:
        with api_errors("add projects to user group"):
            return to_plain(self.client.add_projects_to_group(team_id, group_id, project_ids))

    def remove_projects(
        self, team_id: int | str, group_id: int, project_ids: list[str]
    ) -> dict[str, Any]:
        with api_errors("remove projects from user group"):
            return to_plain(
                self.client.remove_projects_from_group(team_id, group_id, project_ids)
            )
