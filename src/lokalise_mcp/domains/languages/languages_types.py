"""Argument models for language operations."""

from __future__ import annotations

from pydantic import Field

from lokalise_mcp.schemas import PagingArgs, ProjectArgs, ToolArgs

MAX_NEW_LANGUAGES = 100


class ListSystemLanguagesArgs(PagingArgs):
    pass


class ListProjectLanguagesArgs(ProjectArgs):
    include_progress: bool = Field(
        default=False, description="Include translation progress for each language"
    )


class NewLanguage(ToolArgs):
    lang_iso: str = Field(min_length=2, description="Language ISO code, e.g. 'fr'")
    custom_iso: str | None = None
    custom_name: str | None = None
    custom_plural_forms: list[str] | None = None


class AddProjectLanguagesArgs(ProjectArgs):
    languages: list[NewLanguage] = Field(min_length=1, max_length=MAX_NEW_LANGUAGES)


class LanguageArgs(ProjectArgs):
    language_id: int = Field(description="Language ID")


class GetLanguageArgs(LanguageArgs):
    pass


class LanguageChanges(ToolArgs):
    lang_iso: str | None = None
    lang_name: str | None = None
    plural_forms: list[str] | None = None


class UpdateLanguageArgs(LanguageArgs):
    language_data: LanguageChanges


class RemoveLanguageArgs(LanguageArgs):
    pass
