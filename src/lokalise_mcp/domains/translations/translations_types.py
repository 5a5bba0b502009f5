"""Argument models for translation operations."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ToolArgs

MAX_TRANSLATIONS_PAGE = 5000
MAX_BULK_TRANSLATIONS = 100

QaIssue = Literal[
    "spelling_and_grammar",
    "inconsistent_placeholders",
    "inconsistent_html",
    "whitespace_issues",
    "missing_translation",
    "unreliable_translation",
    "unbalanced_brackets",
    "double_space",
    "special_character",
    "unverified",
    "glossary_term_violation",
]


class ListTranslationsArgs(ProjectArgs):
    limit: int | None = Field(default=None, description="Translations per page (1-5000)")
    cursor: str | None = Field(default=None, description="Cursor from a previous page")
    filter_lang_id: int | None = Field(default=None, description="Numeric language ID")
    filter_is_reviewed: bool | None = None
    filter_unverified: bool | None = None
    filter_untranslated: bool | None = Field(
        default=None, description="Only untranslated entries when true"
    )
    filter_qa_issues: list[QaIssue] | None = None
    filter_active_task_id: int | None = None
    disable_references: bool | None = None


class GetTranslationArgs(ProjectArgs):
    translation_id: int = Field(description="Translation ID")
    disable_references: bool | None = None


class TranslationChanges(ToolArgs):
    translation: str = Field(description="New translation text")
    is_reviewed: bool | None = None
    is_unverified: bool | None = None
    custom_translation_status_ids: list[int] | None = None


class UpdateTranslationArgs(ProjectArgs):
    translation_id: int = Field(description="Translation ID")
    translation_data: TranslationChanges


class TranslationUpdate(ToolArgs):
    translation_id: int
    translation_data: TranslationChanges


class BulkUpdateTranslationsArgs(ProjectArgs):
    updates: list[TranslationUpdate] = Field(min_length=1, max_length=MAX_BULK_TRANSLATIONS)
