"""Lokalise comment endpoints."""

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


class CommentsService(BaseService):
    """Wraps the project and key comment endpoints."""

    def list_project_comments(
        self, project_id: str, *, limit: int | None = None, page: int | None = None
    ) -> PagedResult:
        with api_errors("list project comments"):
            return paged_result(
                self.client.project_comments(project_id, build_params(limit=limit, page=page))
            )

    def list_key_comments(
        self,
        project_id: str,
        key_id: int,
        *,
        limit: int | None = None,
        page: int | None = None,
    ) -> PagedResult:
        with api_errors("list key comments"):
            return paged_result(
                self.client.key_comments(project_id, key_id, build_params(limit=limit, page=page))
            )

    def get_comment(self, project_id: str, key_id: int, comment_id: int) -> dict[str, Any]:
        with api_errors("get comment"):
            return to_plain(self.client.key_comment(project_id, key_id, comment_id))

    def create_comments(
        self, project_id: str, key_id: int, comments: list[dict[str, Any]]
    ) -> BulkResult:
        with api_errors("create comments"):
            return bulk_result(self.client.create_key_comments(project_id, key_id, comments))

    def delete_comment(self, project_id: str, key_id: int, comment_id: int) -> dict[str, Any]:
        with api_errors("delete comment"):
            return to_plain(self.client.delete_key_comment(project_id, key_id, comment_id))
