"""Argument models for key operations."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ProjectPagingArgs, ToolArgs

Platform = Literal["ios", "android", "web", "other"]

MAX_BULK_KEYS = 1000
MAX_KEYS_PAGE = 500


class ListKeysArgs(ProjectPagingArgs):
    cursor: str | None = Field(
        default=None, description="Cursor from a previous page (cursor pagination)"
    )
    include_translations: bool = Field(
        default=False, description="Include translation data for each key"
    )
    filter_keys: list[str] | None = Field(default=None, description="Filter by key names")
    filter_platforms: list[Platform] | None = Field(
        default=None, description="Filter by platforms"
    )
    filter_filenames: list[str] | None = Field(
        default=None, description="Filter by filenames, e.g. ['strings.json']"
    )


class KeyArgs(ProjectArgs):
    key_id: int = Field(description="Key ID")


class GetKeyArgs(KeyArgs):
    pass


class DeleteKeyArgs(KeyArgs):
    pass


class KeyTranslation(ToolArgs):
    language_iso: str
    translation: str


class NewKey(ToolArgs):
    key_name: str = Field(min_length=1, description="Name of the key")
    description: str | None = None
    platforms: list[Platform] = Field(min_length=1, description="Platforms the key belongs to")
    translations: list[KeyTranslation] | None = None
    tags: list[str] | None = None


class CreateKeysArgs(ProjectArgs):
    keys: list[NewKey] = Field(min_length=1, max_length=MAX_BULK_KEYS)


class KeyChanges(ToolArgs):
    description: str | None = None
    platforms: list[Platform] | None = None
    tags: list[str] | None = None


class UpdateKeyArgs(KeyArgs):
    key_data: KeyChanges


class KeyUpdate(KeyChanges):
    key_id: int


class BulkUpdateKeysArgs(ProjectArgs):
    keys: list[KeyUpdate] = Field(min_length=1, max_length=MAX_BULK_KEYS)


class BulkDeleteKeysArgs(ProjectArgs):
    key_ids: list[int] = Field(min_length=1, max_length=MAX_BULK_KEYS)
