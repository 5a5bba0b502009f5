"""Lokalise key endpoints."""

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

DEFAULT_LIMIT = 100


class KeysService(BaseService):
    """Wraps the ``/projects/{project_id}/keys`` endpoints."""

    def list_keys(
        self,
        project_id: str,
        *,
        limit: int | None = None,
        page: int | None = None,
        cursor: str | None = None,
        include_translations: bool = False,
        filter_keys: list[str] | None = None,
        filter_platforms: list[str] | None = None,
        filter_filenames: list[str] | None = None,
    ) -> PagedResult:
        """List keys, using cursor pagination unless an explicit page is requested."""
        params = build_params(
            limit=limit or DEFAULT_LIMIT,
            include_translations=include_translations,
            filter_keys=filter_keys,
            filter_platforms=filter_platforms,
            filter_filenames=filter_filenames,
        )
        if page is not None and cursor is None:
            params["page"] = page
        else:
            params["pagination"] = "cursor"
            if cursor:
                params["cursor"] = cursor

        logger.debug("Fetching keys for %s with params %s", project_id, params)
        with api_errors("list keys"):
            return paged_result(self.client.keys(project_id, params))

    def get_key(self, project_id: str, key_id: int) -> dict[str, Any]:
        with api_errors("get key"):
            return to_plain(self.client.key(project_id, key_id))

    def create_keys(self, project_id: str, keys: list[dict[str, Any]]) -> BulkResult:
        with api_errors("create keys"):
            return bulk_result(self.client.create_keys(project_id, keys))

    def update_key(
        self, project_id: str, key_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        with api_errors("update key"):
            return to_plain(self.client.update_key(project_id, key_id, data))

    def update_keys(self, project_id: str, keys: list[dict[str, Any]]) -> BulkResult:
        with api_errors("bulk update keys"):
            return bulk_result(self.client.update_keys(project_id, keys))

    def delete_key(self, project_id: str, key_id: int) -> dict[str, Any]:
        with api_errors("delete key"):
            return to_plain(self.client.delete_key(project_id, key_id))

    def delete_keys(self, project_id: str, key_ids: list[int]) -> dict[str, Any]:
        with api_errors("bulk delete keys"):
            return to_plain(self.client.delete_keys(project_id, key_ids))
