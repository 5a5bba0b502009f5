"""Markdown rendering for comment results."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_pagination_info,
)
from lokalise_mcp.lokalise_client import BulkResult, PagedResult


def _comment_block(comment: dict[str, Any]) -> list[str]:
    author = comment.get("added_by_email") or comment.get("added_by") or "Unknown"
    return [
        f"**{author}** · {format_date(comment.get('added_at'))} "
        f"· ID {comment.get('comment_id')}",
        "",
        f"> {comment.get('comment', '')}".replace("\n", "\n> "),
        "",
    ]


def format_comments_list(
    result: PagedResult, project_id: str, key_id: int | None = None
) -> str:
    comments = result.items
    scope = f"Key {key_id}" if key_id is not None else "Project"
    lines = [
        format_heading(f"{scope} Comments ({len(comments)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]
    if not comments:
        lines.append(
            format_empty_state(
                "comments",
                f"key {key_id}" if key_id is not None else f"project {project_id}",
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    if key_id is not None:
        for comment in comments:
            lines.extend(_comment_block(comment))
    else:
        by_key: dict[Any, list[dict[str, Any]]] = defaultdict(list)
        for comment in comments:
            by_key[comment.get("key_id")].append(comment)
        for comment_key, key_comments in by_key.items():
            lines.extend([format_heading(f"Key {comment_key} ({len(key_comments)})", 2), ""])
            for comment in key_comments:
                lines.extend(_comment_block(comment))

    pagination = format_pagination_info(
        result.has_more, current_count=len(comments), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_comment_details(comment: dict[str, Any], project_id: str) -> str:
    lines = [
        format_heading(f"Comment {comment.get('comment_id')}", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Key ID": comment.get("key_id"),
                "Author": comment.get("added_by_email"),
                "Author ID": comment.get("added_by"),
                "Added": format_date(comment.get("added_at")),
            }
        ),
        "",
        format_heading("Comment", 2),
        "",
        comment.get("comment", ""),
        "",
        format_footer("details retrieved"),
    ]
    return "\n".join(lines)


def format_create_comments_result(
    result: BulkResult, project_id: str, key_id: int
) -> str:
    lines = [
        format_heading(f"💬 Comments Added ({len(result.items)})", 1),
        "",
        format_bullet_list({"Project ID": f"`{project_id}`", "Key ID": key_id}),
        "",
    ]
    for comment in result.items:
        lines.extend(_comment_block(comment))
    lines.append(format_footer("created"))
    return "\n".join(lines)


def format_delete_comment_result(
    comment_id: int, result: dict[str, Any], project_id: str
) -> str:
    deleted = bool(result.get("comment_deleted", True))
    lines = [
        format_heading("🗑️ Comment Deleted" if deleted else "⚠️ Comment Not Deleted", 1),
        "",
        format_bullet_list(
            {"Project ID": f"`{project_id}`", "Comment ID": comment_id, "Deleted": deleted}
        ),
        "",
        format_footer("deleted"),
    ]
    return "\n".join(lines)
