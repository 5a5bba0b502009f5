"""CLI commands for Lokalise glossary terms."""

from __future__ import annotations

import click

from lokalise_mcp.domains.glossary import glossary_controller as controller
from lokalise_mcp.domains.glossary.glossary_types import (
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    GetGlossaryTermArgs,
    ListGlossaryTermsArgs,
    UpdateGlossaryTermsArgs,
)
from lokalise_mcp.handlers import parse_json_option, run_command


def register(cli: click.Group) -> None:
    """Add the glossary commands to *cli*."""

    @cli.command("list-glossary-terms")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None, help="Terms per page (1-5000).")
    @click.option("--cursor", default=None, help="Cursor from a previous page.")
    def list_glossary_terms(project_id: str, limit: int | None, cursor: str | None) -> None:
        """List glossary terms."""
        run_command(
            controller.list_glossary_terms,
            ListGlossaryTermsArgs,
            project_id=project_id,
            limit=limit,
            cursor=cursor,
        )

    @cli.command("get-glossary-term")
    @click.argument("project_id")
    @click.argument("term_id", type=int)
    def get_glossary_term(project_id: str, term_id: int) -> None:
        """Show one glossary term."""
        run_command(
            controller.get_glossary_term,
            GetGlossaryTermArgs,
            project_id=project_id,
            term_id=term_id,
        )

    @cli.command("create-glossary-terms")
    @click.argument("project_id")
    @click.option("--term", default=None, help="Text of a single term.")
    @click.option("--description", default="", help="Definition of the term.")
    @click.option("--forbidden", is_flag=True)
    @click.option("--no-translate", is_flag=True, help="Mark the term as not translatable.")
    @click.option("--terms-json", default=None, help="JSON array of terms.")
    def create_glossary_terms(
        project_id: str,
        term: str | None,
        description: str,
        forbidden: bool,
        no_translate: bool,
        terms_json: str | None,
    ) -> None:
        """Create one term from options, or many from --terms-json."""
        terms = parse_json_option(terms_json)
        if terms is None:
            if not term:
                raise click.UsageError("Pass --term or --terms-json.")
            terms = [
                {
                    "term": term,
                    "description": description,
                    "forbidden": forbidden,
                    "translatable": not no_translate,
                }
            ]
        run_command(
            controller.create_glossary_terms,
            CreateGlossaryTermsArgs,
            project_id=project_id,
            terms=terms,
        )

    @cli.command("update-glossary-terms")
    @click.argument("project_id")
    @click.option("--terms-json", required=True, help="JSON array of updates, each with id.")
    def update_glossary_terms(project_id: str, terms_json: str) -> None:
        """Update glossary terms."""
        run_command(
            controller.update_glossary_terms,
            UpdateGlossaryTermsArgs,
            project_id=project_id,
            terms=parse_json_option(terms_json),
        )

    @cli.command("delete-glossary-terms")
    @click.argument("project_id")
    @click.argument("term_ids", type=int, nargs=-1, required=True)
    def delete_glossary_terms(project_id: str, term_ids: tuple[int, ...]) -> None:
        """Delete glossary terms."""
        run_command(
            controller.delete_glossary_terms,
            DeleteGlossaryTermsArgs,
            project_id=project_id,
            term_ids=list(term_ids),
        )
