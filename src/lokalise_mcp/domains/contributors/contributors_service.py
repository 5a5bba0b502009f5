"""Lokalise contributor endpoints."""

from __future__ import annotations

import logging
from typing import Any

from lokalise_mcp.lokalise_client import (
    BaseService,
    BulkResult,
    PagedResult,
    api_errors,
    build_params,
    bulk_result,
    paged_result,
    to_plain,
)

logger = logging.getLogger(__name__)


class ContributorsService(BaseService):
    """Wraps the ``/projects/{project_id}/contributors`` endpoints."""

    def list_contributors(
        self, project_id: str, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        with api_errors("list contributors"):
            return paged_result(
                self.client.contributors(project_id, build_params(limit=limit, page=page))
            )

    def get_contributor(self, project_id: str, contributor_id: int) -> dict[str, Any]:
        with api_errors("get contributor"):
            return to_plain(self.client.contributor(project_id, contributor_id))

    def add_contributors(
        self, project_id: str, contributors: list[dict[str, Any]]
    ) -> BulkResult:
        with api_errors("add contributors"):
            return bulk_result(self.client.create_contributors(project_id, contributors))

    def get_current_user(self, project_id: str) -> dict[str, Any]:
        with api_errors("get current contributor"):
            return to_plain(self.client.current_contributor(project_id))

    def update_contributor(
        self, project_id: str, contributor_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        with api_errors("update contributor"):
            return to_plain(self.client.update_contributor(project_id, contributor_id, data))

    def remove_contributor(self, project_id: str, contributor_id: int) -> dict[str, Any]:
        with api_errors("remove contributor"):
            return to_plain(self.client.delete_contributor(project_id, contributor_id))
