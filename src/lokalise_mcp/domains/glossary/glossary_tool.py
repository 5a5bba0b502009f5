"""MCP tools for Lokalise glossary terms."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.glossary import glossary_controller as controller
from lokalise_mcp.domains.glossary.glossary_types import (
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    GetGlossaryTermArgs,
    GlossaryTermUpdate,
    ListGlossaryTermsArgs,
    NewGlossaryTerm,
    UpdateGlossaryTermsArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register glossary tools with the MCP server."""

    @mcp.tool(name="lokalise_list_glossary_terms")
    def list_glossary_terms(
        project_id: str, limit: int | None = None, cursor: str | None = None
    ) -> str:
        """List glossary terms of a project (cursor pagination).

        Args:
            project_id: Project ID.
            limit: Terms per page (1-5000).
            cursor: Cursor returned by a previous call.
        """
        return run_tool(
            controller.list_glossary_terms,
            ListGlossaryTermsArgs,
            project_id=project_id,
            limit=limit,
            cursor=cursor,
        )

    @mcp.tool(name="lokalise_get_glossary_term")
    def get_glossary_term(project_id: str, term_id: int) -> str:
        """Get one glossary term with its translations.

        Args:
            project_id: Project ID.
            term_id: Glossary term ID.
        """
        return run_tool(
            controller.get_glossary_term,
            GetGlossaryTermArgs,
            project_id=project_id,
            term_id=term_id,
        )

    @mcp.tool(name="lokalise_create_glossary_terms")
    def create_glossary_terms(project_id: str, terms: list[NewGlossaryTerm]) -> str:
        """Create glossary terms such as brand names or technical vocabulary.

        Args:
            project_id: Project ID.
            terms: Terms to create.
        """
        return run_tool(
            controller.create_glossary_terms,
            CreateGlossaryTermsArgs,
            project_id=project_id,
            terms=terms,
        )

    @mcp.tool(name="lokalise_update_glossary_terms")
    def update_glossary_terms(project_id: str, terms: list[GlossaryTermUpdate]) -> str:
        """Update glossary terms in bulk.

        Args:
            project_id: Project ID.
            terms: Updates, each carrying the term id.
        """
        return run_tool(
            controller.update_glossary_terms,
            UpdateGlossaryTermsArgs,
            project_id=project_id,
            terms=terms,
        )

    @mcp.tool(name="lokalise_delete_glossary_terms")
    def delete_glossary_terms(project_id: str, term_ids: list[int]) -> str:
        """Delete glossary terms in bulk.

        Args:
            project_id: Project ID.
            term_ids: IDs of the terms to delete.
        """
        return run_tool(
            controller.delete_glossary_terms,
            DeleteGlossaryTermsArgs,
            project_id=project_id,
            term_ids=term_ids,
        )
