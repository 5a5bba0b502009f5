"""Lokalise team user endpoints."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.lokalise_client import (
    BaseService,
    PagedResult,
    api_errors,
    build_params,
    paged_result,
    to_plain,
)


class TeamUsersService(BaseService):
    """Wraps the ``/teams/{team_id}/users`` endpoints."""

    def list_team_users(
        self, team_id: int | str, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        with api_errors("list team users"):
            return paged_result(
                self.client.team_users(team_id, build_params(limit=limit, page=page))
            )

    def get_team_user(self, team_id: int | str, user_id: int) -> dict[str, Any]:
        with api_errors("get team user"):
            return to_plain(self.client.team_user(team_id, user_id))

    def update_team_user(
        self, team_id: int | str, user_id: int, role: str
    ) -> dict[str, Any]:
        with api_errors("update team user"):
            return to_plain(self.client.update_team_user(team_id, user_id, {"role": role}))

    def delete_team_user(self, team_id: int | str, user_id: int) -> dict[str, Any]:
        with api_errors("delete team user"):
            return to_plain(self.client.delete_team_user(team_id, user_id))
