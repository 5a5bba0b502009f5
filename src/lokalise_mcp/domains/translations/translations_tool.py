"""MCP tools for Lokalise translations."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.translations import translations_controller as controller
from lokalise_mcp.domains.translations.translations_types import (
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    QaIssue,
    TranslationChanges,
    TranslationUpdate,
    UpdateTranslationArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register translation tools with the MCP server."""

    @mcp.tool(name="lokalise_list_translations")
    def list_translations(
        project_id: str,
        limit: int | None = None,
        cursor: str | None = None,
        filter_lang_id: int | None = None,
        filter_is_reviewed: bool | None = None,
        filter_unverified: bool | None = None,
        filter_untranslated: bool | None = None,
        filter_qa_issues: list[QaIssue] | None = None,
        filter_active_task_id: int | None = None,
        disable_references: bool | None = None,
    ) -> str:
        """List translations in a project with cursor pagination and filters.

        Args:
            project_id: Project ID.
            limit: Translations per page (1-5000, default 100).
            cursor: Cursor returned by a previous call.
            filter_lang_id: Numeric language ID (not the ISO code).
            filter_is_reviewed: Reviewed (true) or not reviewed (false) only.
            filter_unverified: Unverified (true) or verified (false) only.
            filter_untranslated: Only untranslated entries when true.
            filter_qa_issues: Only translations with these QA issues.
            filter_active_task_id: Only translations in this task.
            disable_references: Omit reference information.
        """
        return run_tool(
            controller.list_translations,
            ListTranslationsArgs,
            project_id=project_id,
            limit=limit,
            cursor=cursor,
            filter_lang_id=filter_lang_id,
            filter_is_reviewed=filter_is_reviewed,
            filter_unverified=filter_unverified,
            filter_untranslated=filter_untranslated,
            filter_qa_issues=filter_qa_issues,
            filter_active_task_id=filter_active_task_id,
            disable_references=disable_references,
        )

    @mcp.tool(name="lokalise_get_translation")
    def get_translation(
        project_id: str, translation_id: int, disable_references: bool | None = None
    ) -> str:
        """Get one translation with its review status.

        Args:
            project_id: Project ID.
            translation_id: Translation ID.
            disable_references: Omit reference information.
        """
        return run_tool(
            controller.get_translation,
            GetTranslationArgs,
            project_id=project_id,
            translation_id=translation_id,
            disable_references=disable_references,
        )

    @mcp.tool(name="lokalise_update_translation")
    def update_translation(
        project_id: str, translation_id: int, translation_data: TranslationChanges
    ) -> str:
        """Change a translation's text or review flags.

        Args:
            project_id: Project ID.
            translation_id: Translation ID.
            translation_data: New text and optional flags.
        """
        return run_tool(
            controller.update_translation,
            UpdateTranslationArgs,
            project_id=project_id,
            translation_id=translation_id,
            translation_data=translation_data,
        )

    @mcp.tool(name="lokalise_bulk_update_translations")
    def bulk_update_translations(project_id: str, updates: list[TranslationUpdate]) -> str:
        """Update up to 100 translations. Each update is applied separately and failures are listed.

        Args:
            project_id: Project ID.
            updates: Translation IDs with their new data.
        """
        return run_tool(
            controller.bulk_update_translations,
            BulkUpdateTranslationsArgs,
            project_id=project_id,
            updates=updates,
        )
