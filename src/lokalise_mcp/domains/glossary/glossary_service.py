"""Lokalise glossary endpoints."""

from __future__ import annotations

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


class GlossaryService(BaseService):
    """Wraps the ``/projects/{project_id}/glossary-terms`` endpoints."""

    def list_terms(
        self, project_id: str, *, limit: int | None = None, cursor: str | None = None
    ) -> PagedResult:
        params = build_params(limit=limit, cursor=cursor)
        with api_errors("list glossary terms"):
            return paged_result(self.client.glossary_terms(project_id, params))

    def get_term(self, project_id: str, term_id: int) -> dict[str, Any]:
        with api_errors("get glossary term"):
            return to_plain(self.client.glossary_term(project_id, term_id))

    def create_terms(self, project_id: str, terms: list[dict[str, Any]]) -> BulkResult:
        with api_errors("create glossary terms"):
            return bulk_result(self.client.create_glossary_terms(project_id, terms))

    def update_terms(self, project_id: str, terms: list[dict[str, Any]]) -> BulkResult:
        with api_errors("update glossary terms"):
            return bulk_result(self.client.update_glossary_terms(project_id, terms))

    def delete_terms(self, project_id: str, term_ids: list[int]) -> dict[str, Any]:
        with api_errors("delete glossary terms"):
            response = to_plain(self.client.delete_glossary_terms(project_id, term_ids))
        # the API nests the outcome under "data"
        return response.get("data") or response
