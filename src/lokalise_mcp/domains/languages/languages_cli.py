"""CLI commands for Lokalise languages."""

from __future__ import annotations

import click

from lokalise_mcp.domains.languages import languages_controller as controller
from lokalise_mcp.domains.languages.languages_types import (
    AddProjectLanguagesArgs,
    GetLanguageArgs,
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
    RemoveLanguageArgs,
    UpdateLanguageArgs,
)
from lokalise_mcp.handlers import run_command


def register(cli: click.Group) -> None:
    """Add the language commands to *cli*."""

    @cli.command("list-system-languages")
    @click.option("--limit", type=int, default=None, help="Languages per page (1-500).")
    @click.option("--page", type=int, default=None, help="Page number.")
    def list_system_languages(limit: int | None, page: int | None) -> None:
        """List all languages supported by Lokalise."""
        run_command(
            controller.list_system_languages, ListSystemLanguagesArgs, limit=limit, page=page
        )

    @cli.command("list-project-languages")
    @click.argument("project_id")
    @click.option("--include-progress", is_flag=True, help="Show translation progress.")
    def list_project_languages(project_id: str, include_progress: bool) -> None:
        """List the languages of a project."""
        run_command(
            controller.list_project_languages,
            ListProjectLanguagesArgs,
            project_id=project_id,
            include_progress=include_progress,
        )

    @cli.command("add-project-languages")
    @click.argument("project_id")
    @click.argument("lang_isos", nargs=-1, required=True)
    def add_project_languages(project_id: str, lang_isos: tuple[str, ...]) -> None:
        """Add languages (by ISO code) to a project."""
        run_command(
            controller.add_project_languages,
            AddProjectLanguagesArgs,
            project_id=project_id,
            languages=[{"lang_iso": iso} for iso in lang_isos],
        )

    @cli.command("get-language")
    @click.argument("project_id")
    @click.argument("language_id", type=int)
    def get_language(project_id: str, language_id: int) -> None:
        """Show one project language."""
        run_command(
            controller.get_language,
            GetLanguageArgs,
            project_id=project_id,
            language_id=language_id,
        )

    @cli.command("update-language")
    @click.argument("project_id")
    @click.argument("language_id", type=int)
    @click.option("--lang-iso", default=None, help="New ISO code.")
    @click.option("--lang-name", default=None, help="New display name.")
    @click.option("--plural-form", "plural_forms", multiple=True, help="Plural form (repeatable).")
    def update_language(
        project_id: str,
        language_id: int,
        lang_iso: str | None,
        lang_name: str | None,
        plural_forms: tuple[str, ...],
    ) -> None:
        """Update a project language."""
        run_command(
            controller.update_language,
            UpdateLanguageArgs,
            project_id=project_id,
            language_id=language_id,
            language_data={
                "lang_iso": lang_iso,
                "lang_name": lang_name,
                "plural_forms": list(plural_forms) or None,
            },
        )

    @cli.command("remove-language")
    @click.argument("project_id")
    @click.argument("language_id", type=int)
    def remove_language(project_id: str, language_id: int) -> None:
        """Remove a language from a project."""
        run_command(
            controller.remove_language,
            RemoveLanguageArgs,
            project_id=project_id,
            language_id=language_id,
        )
