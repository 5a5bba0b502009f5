"""Markdown rendering for contributor results."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_date,
    format_empty_state,
    format_error_list,
    format_footer,
    format_heading,
    format_pagination_info,
    format_safe_list,
    format_table,
)
from lokalise_mcp.lokalise_client import BulkResult, PagedResult


def _role(contributor: dict[str, Any]) -> str:
    if contributor.get("is_admin"):
        return "Admin"
    if contributor.get("is_reviewer"):
        return "Reviewer"
    return "Translator"


def _languages(contributor: dict[str, Any]) -> str:
    languages = []
    for lang in contributor.get("languages") or []:
        iso = lang.get("lang_iso", "?")
        languages.append(iso if lang.get("is_writable", True) else f"{iso} (read-only)")
    return format_safe_list(languages)


def format_contributors_list(result: PagedResult, project_id: str) -> str:
    contributors = result.items
    lines = [
        format_heading(f"Project Contributors ({len(contributors)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]
    if not contributors:
        lines.append(
            format_empty_state(
                "contributors",
                f"project {project_id}",
                suggestions=["Invite people with `lokalise_add_contributors`"],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "user_id": c.get("user_id"),
            "name": c.get("fullname") or "",
            "email": c.get("email"),
            "role": _role(c),
            "languages": _languages(c),
        }
        for c in contributors
    ]
    lines.append(
        format_table(
            rows,
            [
                ("user_id", "User ID"),
                ("name", "Name"),
                ("email", "Email"),
                ("role", "Role"),
                ("languages", "Languages"),
            ],
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, current_count=len(contributors), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_contributor_details(
    contributor: dict[str, Any], project_id: str, current_user: bool = False
) -> str:
    title = "Your Contributor Profile" if current_user else "Contributor"
    name = contributor.get("fullname") or contributor.get("email") or "Unknown"
    lines = [
        format_heading(f"{title}: {name}", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "User ID": contributor.get("user_id"),
                "Email": contributor.get("email"),
                "Full Name": contributor.get("fullname"),
                "Role": _role(contributor),
                "Languages": _languages(contributor),
                "Admin Rights": (
                    format_safe_list(contributor["admin_rights"])
                    if contributor.get("admin_rights")
                    else None
                ),
                "Created": format_date(contributor.get("created_at")),
            }
        ),
        "",
        format_footer("details retrieved"),
    ]
    return "\n".join(lines)


def format_add_contributors_result(result: BulkResult, project_id: str) -> str:
    lines = [
        format_heading("Contributors Added", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Added": len(result.items),
                "Errors": len(result.errors),
            }
        ),
        "",
    ]
    if result.items:
        lines.append(format_heading("✅ Added Contributors", 2))
        lines.extend(
            f"- **{c.get('email')}** (ID: {c.get('user_id')}, {_role(c)}): {_languages(c)}"
            for c in result.items
        )
        lines.append("")
    errors = format_error_list(result.errors)
    if errors:
        lines.append(errors)
    lines.append(format_footer("added"))
    return "\n".join(lines)


def format_update_contributor_result(
    contributor: dict[str, Any], changes: dict[str, Any], project_id: str
) -> str:
    lines = [
        format_heading("✅ Contributor Updated", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "User ID": contributor.get("user_id"),
                "Email": contributor.get("email"),
                "Role": _role(contributor),
                "Languages": _languages(contributor),
            }
        ),
        "",
        format_heading("Updated Fields", 2),
    ]
    lines.extend(f"- **{field}**" for field in changes)
    lines.extend(["", format_footer("updated")])
    return "\n".join(lines)


def format_remove_contributor_result(
    contributor_id: int, result: dict[str, Any], project_id: str
) -> str:
    removed = bool(result.get("contributor_deleted", True))
    lines = [
        format_heading(
            "🗑️ Contributor Removed" if removed else "⚠️ Contributor Not Removed", 1
        ),
        "",
        format_bullet_list(
            {"Project ID": f"`{project_id}`", "User ID": contributor_id, "Removed": removed}
        ),
        "",
        format_footer("removed"),
    ]
    return "\n".join(lines)
