"""Argument models for comment operations."""

from __future__ import annotations

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ProjectPagingArgs, ToolArgs

MAX_COMMENTS_PAGE = 5000


class ListProjectCommentsArgs(ProjectPagingArgs):
    pass


class ListKeyCommentsArgs(ProjectPagingArgs):
    key_id: int = Field(description="Key ID")


class CommentArgs(ProjectArgs):
    key_id: int = Field(description="Key ID")
    comment_id: int = Field(description="Comment ID")


class GetCommentArgs(CommentArgs):
    pass


class DeleteCommentArgs(CommentArgs):
    pass


class NewComment(ToolArgs):
    comment: str = Field(min_length=1, description="Comment text")


class CreateCommentsArgs(ProjectArgs):
    key_id: int = Field(description="Key ID")
    comments: list[NewComment] = Field(min_length=1)
