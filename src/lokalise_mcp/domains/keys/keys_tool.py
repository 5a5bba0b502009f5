"""MCP tools for Lokalise translation keys."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.keys import keys_controller as controller
from lokalise_mcp.domains.keys.keys_types import (
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    DeleteKeyArgs,
    GetKeyArgs,
    KeyChanges,
    KeyUpdate,
    ListKeysArgs,
    NewKey,
    Platform,
    UpdateKeyArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register key tools with the MCP server."""

    @mcp.tool(name="lokalise_list_keys")
    def list_keys(
        project_id: str,
        limit: int | None = None,
        page: int | None = None,
        cursor: str | None = None,
        include_translations: bool = False,
        filter_keys: list[str] | None = None,
        filter_platforms: list[Platform] | None = None,
        filter_filenames: list[str] | None = None,
    ) -> str:
        """List translation keys in a project.

        Uses cursor pagination by default; pass the returned cursor to get the
        next page. Passing ``page`` switches to page-based paging.

        Args:
            project_id: Project ID.
            limit: Keys per page (1-500, default 100).
            page: Page number for offset pagination.
            cursor: Cursor returned by a previous call.
            include_translations: Include translations for each key.
            filter_keys: Only keys with these names.
            filter_platforms: Only keys on these platforms.
            filter_filenames: Only keys assigned to these filenames.
        """
        return run_tool(
            controller.list_keys,
            ListKeysArgs,
            project_id=project_id,
            limit=limit,
            page=page,
            cursor=cursor,
            include_translations=include_translations,
            filter_keys=filter_keys,
            filter_platforms=filter_platforms,
            filter_filenames=filter_filenames,
        )

    @mcp.tool(name="lokalise_get_key")
    def get_key(project_id: str, key_id: int) -> str:
        """Get one key with its metadata and translations.

        Args:
            project_id: Project ID.
            key_id: Key ID.
        """
        return run_tool(controller.get_key, GetKeyArgs, project_id=project_id, key_id=key_id)

    @mcp.tool(name="lokalise_create_keys")
    def create_keys(project_id: str, keys: list[NewKey]) -> str:
        """Create up to 1000 keys at once, optionally with initial translations.

        Args:
            project_id: Project ID.
            keys: Keys to create; each needs a name and at least one platform.
        """
        return run_tool(controller.create_keys, CreateKeysArgs, project_id=project_id, keys=keys)

    @mcp.tool(name="lokalise_update_key")
    def update_key(project_id: str, key_id: int, key_data: KeyChanges) -> str:
        """Update a key's description, platforms or tags.

        Args:
            project_id: Project ID.
            key_id: Key ID.
            key_data: Fields to change.
        """
        return run_tool(
            controller.update_key,
            UpdateKeyArgs,
            project_id=project_id,
            key_id=key_id,
            key_data=key_data,
        )

    @mcp.tool(name="lokalise_delete_key")
    def delete_key(project_id: str, key_id: int) -> str:
        """Delete one key and all its translations.

        Args:
            project_id: Project ID.
            key_id: Key ID.
        """
        return run_tool(controller.delete_key, DeleteKeyArgs, project_id=project_id, key_id=key_id)

    @mcp.tool(name="lokalise_bulk_update_keys")
    def bulk_update_keys(project_id: str, keys: list[KeyUpdate]) -> str:
        """Update up to 1000 keys in one request. Per-key failures are reported, not raised.

        Args:
            project_id: Project ID.
            keys: Updates, each carrying the key_id to change.
        """
        return run_tool(
            controller.bulk_update_keys, BulkUpdateKeysArgs, project_id=project_id, keys=keys
        )

    @mcp.tool(name="lokalise_bulk_delete_keys")
    def bulk_delete_keys(project_id: str, key_ids: list[int]) -> str:
        """Delete up to 1000 keys in one request.

        Args:
            project_id: Project ID.
            key_ids: IDs of the keys to delete.
        """
        return run_tool(
            controller.bulk_delete_keys, BulkDeleteKeysArgs, project_id=project_id, key_ids=key_ids
        )
