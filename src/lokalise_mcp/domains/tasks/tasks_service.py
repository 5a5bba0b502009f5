"""Lokalise task endpoints."""

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


class TasksService(BaseService):
    """Wraps the ``/projects/{project_id}/tasks`` endpoints."""

    def list_tasks(
        self,
        project_id: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        filter_title: str | None = None,
        filter_statuses: list[str] | None = None,
    ) -> PagedResult:
        params = build_params(
            limit=limit,
            page=page,
            filter_title=filter_title,
            filter_statuses=filter_statuses,
        )
        with api_errors("list tasks"):
            return paged_result(self.client.tasks(project_id, params))

    def get_task(self, project_id: str, task_id: int) -> dict[str, Any]:
        with api_errors("get task"):
            return to_plain(self.client.task(project_id, task_id))

    def create_task(self, project_id: str, data: dict[str, Any]) -> dict[str, Any]:
        with api_errors("create task"):
            return to_plain(self.client.create_task(project_id, data))

    def update_task(
        self, project_id: str, task_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        with api_errors("update task"):
            return to_plain(self.client.update_task(project_id, task_id, data))

    def delete_task(self, project_id: str, task_id: int) -> dict[str, Any]:
        with api_errors("delete task"):
            return to_plain(self.client.delete_task(project_id, task_id))
