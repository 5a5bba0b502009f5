"""Lokalise language endpoints."""

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


class LanguagesService(BaseService):
    """Wraps ``/system/languages`` and ``/projects/{project_id}/languages``."""

    def list_system_languages(
        self, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        with api_errors("list system languages"):
            return paged_result(
                self.client.system_languages(build_params(limit=limit, page=page))
            )

    def list_project_languages(self, project_id: str) -> PagedResult:
        with api_errors("list project languages"):
            return paged_result(self.client.project_languages(project_id, {"limit": 500}))

    def language_progress(self, project_id: str) -> dict[int, dict[str, Any]]:
        """Map language ID to the per-language statistics of the project."""
        with api_errors("get language progress"):
            project = to_plain(self.client.project(project_id))
        stats = project.get("statistics") or {}
        return {
            lang["language_id"]: lang
            for lang in stats.get("languages") or []
            if lang.get("language_id") is not None
        }

    def add_languages(
        self, project_id: str, languages: list[dict[str, Any]]
    ) -> BulkResult:
        with api_errors("add project languages"):
            return bulk_result(self.client.create_languages(project_id, languages))

    def get_language(self, project_id: str, language_id: int) -> dict[str, Any]:
        with api_errors("get language"):
            return to_plain(self.client.language(project_id, language_id))

    def update_language(
        self, project_id: str, language_id: int, data: dict[str, Any]
    ) -> dict[str, Any]:
        with api_errors("update language"):
            return to_plain(self.client.update_language(project_id, language_id, data))

    def remove_language(self, project_id: str, language_id: int) -> dict[str, Any]:
        with api_errors("remove language"):
            return to_plain(self.client.delete_language(project_id, language_id))
