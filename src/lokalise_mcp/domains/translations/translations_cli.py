"""CLI commands for Lokalise translations."""

from __future__ import annotations

import click

from lokalise_mcp.domains.translations import translations_controller as controller
from lokalise_mcp.domains.translations.translations_types import (
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    UpdateTranslationArgs,
)
from lokalise_mcp.handlers import parse_json_option, run_command


def register(cli: click.Group) -> None:
    """Add the translation commands to *cli*."""

    @cli.command("list-translations")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None, help="Translations per page (1-5000).")
    @click.option("--cursor", default=None, help="Cursor from a previous page.")
    @click.option("--lang-id", "filter_lang_id", type=int, default=None, help="Language ID.")
    @click.option("--untranslated", "filter_untranslated", is_flag=True, help="Only untranslated.")
    @click.option("--task-id", "filter_active_task_id", type=int, default=None)
    def list_translations(
        project_id: str,
        limit: int | None,
        cursor: str | None,
        filter_lang_id: int | None,
        filter_untranslated: bool,
        filter_active_task_id: int | None,
    ) -> None:
        """List translations in a project."""
        run_command(
            controller.list_translations,
            ListTranslationsArgs,
            project_id=project_id,
            limit=limit,
            cursor=cursor,
            filter_lang_id=filter_lang_id,
            filter_untranslated=filter_untranslated or None,
            filter_active_task_id=filter_active_task_id,
        )

    @cli.command("get-translation")
    @click.argument("project_id")
    @click.argument("translation_id", type=int)
    def get_translation(project_id: str, translation_id: int) -> None:
        """Show one translation."""
        run_command(
            controller.get_translation,
            GetTranslationArgs,
            project_id=project_id,
            translation_id=translation_id,
        )

    @cli.command("update-translation")
    @click.argument("project_id")
    @click.argument("translation_id", type=int)
    @click.option("--translation", "text", required=True, help="New translation text.")
    @click.option("--reviewed/--not-reviewed", default=None)
    @click.option("--unverified/--verified", default=None)
    def update_translation(
        project_id: str,
        translation_id: int,
        text: str,
        reviewed: bool | None,
        unverified: bool | None,
    ) -> None:
        """Update a translation."""
        run_command(
            controller.update_translation,
            UpdateTranslationArgs,
            project_id=project_id,
            translation_id=translation_id,
            translation_data={
                "translation": text,
                "is_reviewed": reviewed,
                "is_unverified": unverified,
            },
        )

    @cli.command("bulk-update-translations")
    @click.argument("project_id")
    @click.option(
        "--updates-json",
        required=True,
        help="JSON array of {translation_id, translation_data} objects.",
    )
    def bulk_update_translations(project_id: str, updates_json: str) -> None:
        """Update many translations; failures are reported per item."""
        run_command(
            controller.bulk_update_translations,
            BulkUpdateTranslationsArgs,
            project_id=project_id,
            updates=parse_json_option(updates_json),
        )
