"""Comment operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.comments.comments_formatter import (
    format_comment_details,
    format_comments_list,
    format_create_comments_result,
    format_delete_comment_result,
)
from lokalise_mcp.domains.comments.comments_service import CommentsService
from lokalise_mcp.domains.comments.comments_types import (
    MAX_COMMENTS_PAGE,
    CreateCommentsArgs,
    DeleteCommentArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
    ListProjectCommentsArgs,
)

logger = logging.getLogger(__name__)

service = CommentsService()


def _missing(comment_id: int, key_id: int) -> str:
    return f"Comment {comment_id} not found on key {key_id}."


def list_project_comments(args: ListProjectCommentsArgs) -> ControllerResponse:
    with controller_errors("listing project comments", project_id=args.project_id):
        check_paging(args.limit, args.page, MAX_COMMENTS_PAGE)
        result = service.list_project_comments(args.project_id, limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_comments_list(result, args.project_id),
        metadata={"count": len(result.items)},
    )


def list_key_comments(args: ListKeyCommentsArgs) -> ControllerResponse:
    with controller_errors("listing key comments", project_id=args.project_id, key_id=args.key_id):
        check_paging(args.limit, args.page, MAX_COMMENTS_PAGE)
        result = service.list_key_comments(
            args.project_id, args.key_id, limit=args.limit, page=args.page
        )

    return ControllerResponse(
        content=format_comments_list(result, args.project_id, args.key_id),
        metadata={"count": len(result.items)},
    )


def get_comment(args: GetCommentArgs) -> ControllerResponse:
    with controller_errors("getting comment", project_id=args.project_id):
        with not_found_message(_missing(args.comment_id, args.key_id)):
            comment = service.get_comment(args.project_id, args.key_id, args.comment_id)

    return ControllerResponse(content=format_comment_details(comment, args.project_id))


def create_comments(args: CreateCommentsArgs) -> ControllerResponse:
    comments = [c.model_dump() for c in args.comments]
    with controller_errors("creating comments", project_id=args.project_id, key_id=args.key_id):
        result = service.create_comments(args.project_id, args.key_id, comments)

    return ControllerResponse(
        content=format_create_comments_result(result, args.project_id, args.key_id),
        metadata={"created": len(result.items)},
    )


def delete_comment(args: DeleteCommentArgs) -> ControllerResponse:
    with controller_errors("deleting comment", project_id=args.project_id):
        with not_found_message(_missing(args.comment_id, args.key_id)):
            result = service.delete_comment(args.project_id, args.key_id, args.comment_id)

    return ControllerResponse(
        content=format_delete_comment_result(args.comment_id, result, args.project_id)
    )
