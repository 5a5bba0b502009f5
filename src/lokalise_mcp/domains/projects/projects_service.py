"""Lokalise project endpoints."""

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


class ProjectsService(BaseService):
    """Wraps the ``/projects`` endpoints of the Lokalise API."""

    def list_projects(
        self, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        params = build_params(
            limit=limit, page=page, include_statistics=True, include_settings=True
        )
        logger.debug("Fetching projects with params %s", params)
        with api_errors("list projects"):
            return paged_result(self.client.projects(params))

    def get_project(self, project_id: str) -> dict[str, Any]:
        with api_errors("get project"):
            return to_plain(self.client.project(project_id))

    def create_project(self, data: dict[str, Any]) -> dict[str, Any]:
        with api_errors("create project"):
            return to_plain(self.client.create_project(data))

    def update_project(self, project_id: str, data: dict[str, Any]) -> dict[str, Any]:
        with api_errors("update project"):
            return to_plain(self.client.update_project(project_id, data))

    def delete_project(self, project_id: str) -> dict[str, Any]:
        with api_errors("delete project"):
            return to_plain(self.client.delete_project(project_id))

    def empty_project(self, project_id: str) -> dict[str, Any]:
        """Delete every key in the project while keeping the project itself."""
        with api_errors("empty project"):
            return to_plain(self.client.empty_project(project_id))
