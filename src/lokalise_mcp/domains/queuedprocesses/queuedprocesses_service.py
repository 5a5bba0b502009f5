"""Lokalise queued process endpoints."""

from __future__ import annotations

import math
from typing import Any

from lokalise_mcp.lokalise_client import (
    BaseService,
    PagedResult,
    api_errors,
    paged_result,
    to_plain,
)


class QueuedProcessesService(BaseService):
    """Wraps the read-only ``/projects/{project_id}/processes`` endpoints."""

    def list_processes(
        self, project_id: str, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        """List processes, paging locally.

        The endpoint takes no query parameters and returns the whole list, so
        ``limit`` and ``page`` slice it here.
        """
        with api_errors("list queued processes"):
            fetched = paged_result(self.client.queued_processes(project_id))
        if not limit:
            return fetched

        page = page or 1
        total = len(fetched.items)
        start = (page - 1) * limit
        return PagedResult(
            items=fetched.items[start : start + limit],
            total_count=total,
            page_count=max(1, math.ceil(total / limit)),
            limit=limit,
            current_page=page,
        )

    def get_process(self, project_id: str, process_id: str) -> dict[str, Any]:
        with api_errors("get queued process"):
            return to_plain(self.client.queued_process(project_id, process_id))
