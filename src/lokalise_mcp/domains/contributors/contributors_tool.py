"""MCP tools for Lokalise contributors."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.contributors import contributors_controller as controller
from lokalise_mcp.domains.contributors.contributors_types import (
    AddContributorsArgs,
    ContributorLanguage,
    ContributorRight,
    GetContributorArgs,
    GetCurrentUserArgs,
    ListContributorsArgs,
    NewContributor,
    RemoveContributorArgs,
    UpdateContributorArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register contributor tools with the MCP server."""

    @mcp.tool(name="lokalise_list_contributors")
    def list_contributors(
        project_id: str, limit: int | None = None, page: int | None = None
    ) -> str:
        """List a project's contributors with their roles and languages.

        Args:
            project_id: Project ID.
            limit: Contributors per page (1-100).
            page: Page number.
        """
        return run_tool(
            controller.list_contributors,
            ListContributorsArgs,
            project_id=project_id,
            limit=limit,
            page=page,
        )

    @mcp.tool(name="lokalise_get_contributor")
    def get_contributor(project_id: str, contributor_id: int) -> str:
        """Get one contributor's profile, languages and rights.

        Args:
            project_id: Project ID.
            contributor_id: Contributor user ID.
        """
        return run_tool(
            controller.get_contributor,
            GetContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
        )

    @mcp.tool(name="lokalise_add_contributors")
    def add_contributors(project_id: str, contributors: list[NewContributor]) -> str:
        """Invite contributors to a project.

        Args:
            project_id: Project ID.
            contributors: People to add, each with an email and at least one language.
        """
        return run_tool(
            controller.add_contributors,
            AddContributorsArgs,
            project_id=project_id,
            contributors=contributors,
        )

    @mcp.tool(name="lokalise_get_current_user")
    def get_current_user(project_id: str) -> str:
        """Get the contributor profile of the API token owner in a project.

        Args:
            project_id: Project ID.
        """
        return run_tool(controller.get_current_user, GetCurrentUserArgs, project_id=project_id)

    @mcp.tool(name="lokalise_update_contributor")
    def update_contributor(
        project_id: str,
        contributor_id: int,
        is_admin: bool | None = None,
        is_reviewer: bool | None = None,
        languages: list[ContributorLanguage] | None = None,
        admin_rights: list[ContributorRight] | None = None,
    ) -> str:
        """Change a contributor's role, languages or admin rights.

        Args:
            project_id: Project ID.
            contributor_id: Contributor user ID.
            is_admin: Deprecated; prefer admin_rights.
            is_reviewer: Deprecated; prefer admin_rights.
            languages: Replacement language list.
            admin_rights: Replacement admin rights.
        """
        return run_tool(
            controller.update_contributor,
            UpdateContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
            is_admin=is_admin,
            is_reviewer=is_reviewer,
            languages=languages,
            admin_rights=admin_rights,
        )

    @mcp.tool(name="lokalise_remove_contributor")
    def remove_contributor(project_id: str, contributor_id: int) -> str:
        """Remove a contributor from a project.

        Args:
            project_id: Project ID.
            contributor_id: Contributor user ID.
        """
        return run_tool(
            controller.remove_contributor,
            RemoveContributorArgs,
            project_id=project_id,
            contributor_id=contributor_id,
        )
