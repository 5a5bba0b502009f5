"""CLI commands for Lokalise translation keys."""

from __future__ import annotations

import click

from lokalise_mcp.domains.keys import keys_controller as controller
from lokalise_mcp.domains.keys.keys_types import (
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    DeleteKeyArgs,
    GetKeyArgs,
    ListKeysArgs,
    UpdateKeyArgs,
)
from lokalise_mcp.handlers import parse_json_option, run_command

PLATFORMS = click.Choice(["ios", "android", "web", "other"])


def register(cli: click.Group) -> None:
    """Add the key commands to *cli*."""

    @cli.command("list-keys")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None, help="Keys per page (1-500).")
    @click.option("--page", type=int, default=None, help="Page number (offset pagination).")
    @click.option("--cursor", default=None, help="Cursor from a previous page.")
    @click.option("--include-translations", is_flag=True, help="Include translations.")
    @click.option("--filter-key", "filter_keys", multiple=True, help="Key name filter (repeatable).")
    @click.option("--filter-platform", "filter_platforms", type=PLATFORMS, multiple=True)
    @click.option("--filter-filename", "filter_filenames", multiple=True)
    def list_keys(
        project_id: str,
        limit: int | None,
        page: int | None,
        cursor: str | None,
        include_translations: bool,
        filter_keys: tuple[str, ...],
        filter_platforms: tuple[str, ...],
        filter_filenames: tuple[str, ...],
    ) -> None:
        """List keys in a project."""
        run_command(
            controller.list_keys,
            ListKeysArgs,
            project_id=project_id,
            limit=limit,
            page=page,
            cursor=cursor,
            include_translations=include_translations,
            filter_keys=list(filter_keys) or None,
            filter_platforms=list(filter_platforms) or None,
            filter_filenames=list(filter_filenames) or None,
        )

    @cli.command("get-key")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    def get_key(project_id: str, key_id: int) -> None:
        """Show one key with its translations."""
        run_command(controller.get_key, GetKeyArgs, project_id=project_id, key_id=key_id)

    @cli.command("create-keys")
    @click.argument("project_id")
    @click.option("--key-name", default=None, help="Name of a single key to create.")
    @click.option("--platform", "platforms", type=PLATFORMS, multiple=True, help="Key platform (repeatable).")
    @click.option("--description", default=None)
    @click.option("--tag", "tags", multiple=True)
    @click.option("--keys-json", default=None, help="JSON array of key objects for bulk creation.")
    def create_keys(
        project_id: str,
        key_name: str | None,
        platforms: tuple[str, ...],
        description: str | None,
        tags: tuple[str, ...],
        keys_json: str | None,
    ) -> None:
        """Create one key from options, or many from --keys-json."""
        keys = parse_json_option(keys_json)
        if keys is None:
            if not key_name:
                raise click.UsageError("Pass --key-name or --keys-json.")
            keys = [
                {
                    "key_name": key_name,
                    "platforms": list(platforms) or ["web"],
                    "description": description,
                    "tags": list(tags) or None,
                }
            ]
        run_command(controller.create_keys, CreateKeysArgs, project_id=project_id, keys=keys)

    @cli.command("update-key")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    @click.option("--description", default=None)
    @click.option("--platform", "platforms", type=PLATFORMS, multiple=True)
    @click.option("--tag", "tags", multiple=True)
    def update_key(
        project_id: str,
        key_id: int,
        description: str | None,
        platforms: tuple[str, ...],
        tags: tuple[str, ...],
    ) -> None:
        """Update a key's description, platforms or tags."""
        run_command(
            controller.update_key,
            UpdateKeyArgs,
            project_id=project_id,
            key_id=key_id,
            key_data={
                "description": description,
                "platforms": list(platforms) or None,
                "tags": list(tags) or None,
            },
        )

    @cli.command("delete-key")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    def delete_key(project_id: str, key_id: int) -> None:
        """Delete one key."""
        run_command(controller.delete_key, DeleteKeyArgs, project_id=project_id, key_id=key_id)

    @cli.command("bulk-update-keys")
    @click.argument("project_id")
    @click.option("--keys-json", required=True, help="JSON array of updates, each with key_id.")
    def bulk_update_keys(project_id: str, keys_json: str) -> None:
        """Update many keys at once."""
        run_command(
            controller.bulk_update_keys,
            BulkUpdateKeysArgs,
            project_id=project_id,
            keys=parse_json_option(keys_json),
        )

    @cli.command("bulk-delete-keys")
    @click.argument("project_id")
    @click.argument("key_ids", type=int, nargs=-1, required=True)
    def bulk_delete_keys(project_id: str, key_ids: tuple[int, ...]) -> None:
        """Delete many keys at once."""
        run_command(
            controller.bulk_delete_keys,
            BulkDeleteKeysArgs,
            project_id=project_id,
            key_ids=list(key_ids),
        )
