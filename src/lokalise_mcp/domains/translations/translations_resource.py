"""MCP resources for Lokalise translations."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.translations import translations_controller as controller
from lokalise_mcp.domains.translations.translations_types import (
    GetTranslationArgs,
    ListTranslationsArgs,
)
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register translation resources with the MCP server."""

    @mcp.resource(
        "lokalise://translations/{project_id}",
        name="lokalise-project-translations",
        description="First page of translations in a project",
        mime_type="text/markdown",
    )
    def project_translations(project_id: str) -> str:
        return read_resource(
            f"lokalise://translations/{project_id}",
            controller.list_translations,
            ListTranslationsArgs,
            project_id=project_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://translations/{project_id}/{translation_id}",
        name="lokalise-translation-details",
        description="One translation",
        mime_type="text/markdown",
    )
    def translation_details(project_id: str, translation_id: str) -> str:
        return read_resource(
            f"lokalise://translations/{project_id}/{translation_id}",
            controller.get_translation,
            GetTranslationArgs,
            project_id=project_id,
            translation_id=translation_id,
        )
