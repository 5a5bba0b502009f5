"""MCP tools for Lokalise key comments."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.comments import comments_controller as controller
from lokalise_mcp.domains.comments.comments_types import (
    CreateCommentsArgs,
    DeleteCommentArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
    NewComment,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register comment tools with the MCP server."""

    @mcp.tool(name="lokalise_list_key_comments")
    def list_key_comments(
        project_id: str, key_id: int, limit: int | None = None, page: int | None = None
    ) -> str:
        """List the comments on one key.

        Args:
            project_id: Project ID.
            key_id: Key ID.
            limit: Comments per page (1-5000).
            page: Page number.
        """
        return run_tool(
            controller.list_key_comments,
            ListKeyCommentsArgs,
            project_id=project_id,
            key_id=key_id,
            limit=limit,
            page=page,
        )

    @mcp.tool(name="lokalise_list_project_comments")
    def list_project_comments(
        project_id: str, limit: int | None = None, page: int | None = None
    ) -> str:
        """List every comment in a project, grouped by key.

        Args:
            project_id: Project ID.
            limit: Comments per page (1-5000).
            page: Page number.
        """
        return run_tool(
            controller.list_project_comments,
            ListProjectCommentsArgs,
            project_id=project_id,
            limit=limit,
            page=page,
        )

    @mcp.tool(name="lokalise_get_comment")
    def get_comment(project_id: str, key_id: int, comment_id: int) -> str:
        """Get one comment.

        Args:
            project_id: Project ID.
            key_id: Key ID the comment belongs to.
            comment_id: Comment ID.
        """
        return run_tool(
            controller.get_comment,
            GetCommentArgs,
            project_id=project_id,
            key_id=key_id,
            comment_id=comment_id,
        )

    @mcp.tool(name="lokalise_create_comments")
    def create_comments(project_id: str, key_id: int, comments: list[NewComment]) -> str:
        """Add one or more comments to a key.

        Args:
            project_id: Project ID.
            key_id: Key ID.
            comments: Comments to add.
        """
        return run_tool(
            controller.create_comments,
            CreateCommentsArgs,
            project_id=project_id,
            key_id=key_id,
            comments=comments,
        )

    @mcp.tool(name="lokalise_delete_comment")
    def delete_comment(project_id: str, key_id: int, comment_id: int) -> str:
        """Delete a comment from a key.

        Args:
            project_id: Project ID.
            key_id: Key ID.
            comment_id: Comment ID.
        """
        return run_tool(
            controller.delete_comment,
            DeleteCommentArgs,
            project_id=project_id,
            key_id=key_id,
            comment_id=comment_id,
        )
