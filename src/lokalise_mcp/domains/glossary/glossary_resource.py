"""MCP resources for Lokalise glossary terms."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.glossary import glossary_controller as controller
from lokalise_mcp.domains.glossary.glossary_types import (
    GetGlossaryTermArgs,
    ListGlossaryTermsArgs,
)
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register glossary resources with the MCP server."""

    @mcp.resource(
        "lokalise://glossary-terms/{project_id}",
        name="lokalise-glossary-terms",
        description="Glossary terms of a project",
        mime_type="text/markdown",
    )
    def glossary_terms(project_id: str) -> str:
        return read_resource(
            f"lokalise://glossary-terms/{project_id}",
            controller.list_glossary_terms,
            ListGlossaryTermsArgs,
            project_id=project_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://glossary-terms/{project_id}/{term_id}",
        name="lokalise-glossary-term",
        description="One glossary term with its translations",
        mime_type="text/markdown",
    )
    def glossary_term(project_id: str, term_id: str) -> str:
        return read_resource(
            f"lokalise://glossary-terms/{project_id}/{term_id}",
            controller.get_glossary_term,
            GetGlossaryTermArgs,
            project_id=project_id,
            term_id=term_id,
        )
