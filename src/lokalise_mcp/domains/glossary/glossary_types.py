"""Argument models for glossary operations.

The glossary endpoints use camelCase field names; models expose snake_case
fields and serialise with ``by_alias=True``.
"""

from __future__ import annotations

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ToolArgs

MAX_TERMS_PAGE = 5000


class GlossaryTranslation(ToolArgs):
    lang_id: int = Field(serialization_alias="langId", description="Language ID")
    translation: str | None = None
    description: str | None = None


class NewGlossaryTerm(ToolArgs):
    term: str = Field(min_length=1, description="Term text, e.g. a brand name")
    description: str = Field(default="", description="Definition of the term")
    case_sensitive: bool = Field(default=False, serialization_alias="caseSensitive")
    translatable: bool = Field(default=True, description="Whether the term may be translated")
    forbidden: bool = Field(default=False, description="Flag the term as forbidden")
    translations: list[GlossaryTranslation] | None = None
    tags: list[str] | None = None


class GlossaryTermUpdate(ToolArgs):
    id: int = Field(description="Glossary term ID")
    term: str | None = None
    description: str | None = None
    case_sensitive: bool | None = Field(default=None, serialization_alias="caseSensitive")
    translatable: bool | None = None
    forbidden: bool | None = None
    translations: list[GlossaryTranslation] | None = None
    tags: list[str] | None = None


class ListGlossaryTermsArgs(ProjectArgs):
    limit: int | None = Field(default=None, description="Terms per page (1-5000)")
    cursor: str | None = Field(default=None, description="Cursor from a previous page")


class GetGlossaryTermArgs(ProjectArgs):
    term_id: int = Field(description="Glossary term ID")


class CreateGlossaryTermsArgs(ProjectArgs):
    terms: list[NewGlossaryTerm] = Field(min_length=1)


class UpdateGlossaryTermsArgs(ProjectArgs):
    terms: list[GlossaryTermUpdate] = Field(min_length=1)


class DeleteGlossaryTermsArgs(ProjectArgs):
    term_ids: list[int] = Field(min_length=1)
