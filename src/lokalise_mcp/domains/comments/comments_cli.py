"""CLI commands for Lokalise key comments."""

from __future__ import annotations

import click

from lokalise_mcp.domains.comments import comments_controller as controller
from lokalise_mcp.domains.comments.comments_types import (
    CreateCommentsArgs,
    DeleteCommentArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
)
from lokalise_mcp.handlers import run_command


def register(cli: click.Group) -> None:
    """Add the comment commands to *cli*."""

    @cli.command("list-key-comments")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    @click.option("--limit", type=int, default=None)
    @click.option("--page", type=int, default=None)
    def list_key_comments(
        project_id: str, key_id: int, limit: int | None, page: int | None
    ) -> None:
        """List comments on a key."""
        run_command(
            controller.list_key_comments,
            ListKeyCommentsArgs,
            project_id=project_id,
            key_id=key_id,
            limit=limit,
            page=page,
        )

    @cli.command("list-project-comments")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None)
    @click.option("--page", type=int, default=None)
    def list_project_comments(project_id: str, limit: int | None, page: int | None) -> None:
        """List all comments in a project."""
        run_command(
            controller.list_project_comments,
            ListProjectCommentsArgs,
            project_id=project_id,
            limit=limit,
            page=page,
        )

    @cli.command("get-comment")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    @click.argument("comment_id", type=int)
    def get_comment(project_id: str, key_id: int, comment_id: int) -> None:
        """Show one comment."""
        run_command(
            controller.get_comment,
            GetCommentArgs,
            project_id=project_id,
            key_id=key_id,
            comment_id=comment_id,
        )

    @cli.command("create-comments")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    @click.option("--comment", "comments", multiple=True, required=True, help="Comment text (repeatable).")
    def create_comments(project_id: str, key_id: int, comments: tuple[str, ...]) -> None:
        """Add comments to a key."""
        run_command(
            controller.create_comments,
            CreateCommentsArgs,
            project_id=project_id,
            key_id=key_id,
            comments=[{"comment": text} for text in comments],
        )

    @cli.command("delete-comment")
    @click.argument("project_id")
    @click.argument("key_id", type=int)
    @click.argument("comment_id", type=int)
    def delete_comment(project_id: str, key_id: int, comment_id: int) -> None:
        """Delete a comment."""
        run_command(
            controller.delete_comment,
            DeleteCommentArgs,
            project_id=project_id,
            key_id=key_id,
            comment_id=comment_id,
        )
