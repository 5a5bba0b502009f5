"""MCP tools for Lokalise languages."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.languages import languages_controller as controller
from lokalise_mcp.domains.languages.languages_types import (
    AddProjectLanguagesArgs,
    GetLanguageArgs,
    LanguageChanges,
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
    NewLanguage,
    RemoveLanguageArgs,
    UpdateLanguageArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register language tools with the MCP server."""

    @mcp.tool(name="lokalise_list_system_languages")
    def list_system_languages(limit: int | None = None, page: int | None = None) -> str:
        """List every language Lokalise supports, with ISO codes and plural forms.

        Args:
            limit: Languages per page (1-500).
            page: Page number.
        """
        return run_tool(
            controller.list_system_languages, ListSystemLanguagesArgs, limit=limit, page=page
        )

    @mcp.tool(name="lokalise_list_project_languages")
    def list_project_languages(project_id: str, include_progress: bool = False) -> str:
        """List the languages configured in a project.

        Args:
            project_id: Project ID.
            include_progress: Add the translation progress of each language.
        """
        return run_tool(
            controller.list_project_languages,
            ListProjectLanguagesArgs,
            project_id=project_id,
            include_progress=include_progress,
        )

    @mcp.tool(name="lokalise_add_project_languages")
    def add_project_languages(project_id: str, languages: list[NewLanguage]) -> str:
        """Add up to 100 languages to a project.

        Args:
            project_id: Project ID.
            languages: Languages to add, each identified by lang_iso.
        """
        return run_tool(
            controller.add_project_languages,
            AddProjectLanguagesArgs,
            project_id=project_id,
            languages=languages,
        )

    @mcp.tool(name="lokalise_get_language")
    def get_language(project_id: str, language_id: int) -> str:
        """Get one project language.

        Args:
            project_id: Project ID.
            language_id: Language ID.
        """
        return run_tool(
            controller.get_language,
            GetLanguageArgs,
            project_id=project_id,
            language_id=language_id,
        )

    @mcp.tool(name="lokalise_update_language")
    def update_language(
        project_id: str, language_id: int, language_data: LanguageChanges
    ) -> str:
        """Change a project language's ISO code, name or plural forms.

        Args:
            project_id: Project ID.
            language_id: Language ID.
            language_data: Fields to change.
        """
        return run_tool(
            controller.update_language,
            UpdateLanguageArgs,
            project_id=project_id,
            language_id=language_id,
            language_data=language_data,
        )

    @mcp.tool(name="lokalise_remove_language")
    def remove_language(project_id: str, language_id: int) -> str:
        """Remove a language from a project, deleting all its translations.

        Args:
            project_id: Project ID.
            language_id: Language ID.
        """
        return run_tool(
            controller.remove_language,
            RemoveLanguageArgs,
            project_id=project_id,
            language_id=language_id,
        )
