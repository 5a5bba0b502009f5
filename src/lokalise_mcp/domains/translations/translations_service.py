"""Lokalise translation endpoints."""

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

DEFAULT_LIMIT = 100


class TranslationsService(BaseService):
    """Wraps the ``/projects/{project_id}/translations`` endpoints."""

    def list_translations(
        self,
        project_id: str,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        **filters: Any,
    ) -> PagedResult:
        params = build_params(limit=limit or DEFAULT_LIMIT, pagination="cursor", **filters)
        if cursor:
            params["cursor"] = cursor
        logger.debug("Fetching translations for %s with params %s", project_id, params)
        with api_errors("list translations"):
            return paged_result(self.client.translations(project_id, params))

    def get_translation(
        self, project_id: str, translation_id: int, disable_references: bool | None = None
    ) -> dict[str, Any]:
        params = build_params(disable_references=disable_references)
        with api_errors("get translation"):
            return to_plain(self.client.translation(project_id, translation_id, params))

    def update_translation(
        self, project_id: str, translation_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        with api_errors("update translation"):
            return to_plain(self.client.update_translation(project_id, translation_id, data))
