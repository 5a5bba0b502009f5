"""Markdown rendering for team user results."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_pagination_info,
    format_table,
)
from lokalise_mcp.lokalise_client import PagedResult

ROLE_PERMISSIONS = {
    "owner": [
        "Full access to all team resources",
        "Can manage billing and subscriptions",
        "Can delete the team",
    ],
    "admin": [
        "Can manage projects and team members",
        "Can create and delete projects",
        "Cannot manage billing",
    ],
    "member": ["Can access assigned projects", "Limited administrative permissions"],
    "biller": ["Can manage billing and subscriptions", "Limited access to projects"],
}


def format_team_users_list(result: PagedResult, team_id: int | str) -> str:
    users = result.items
    total = result.total_count if result.total_count is not None else len(users)
    lines = [
        format_heading(f"Team Users ({total})", 1),
        "",
        f"**Team ID:** `{team_id}`",
        "",
    ]
    if not users:
        lines.append(
            format_empty_state(
                "users",
                f"team {team_id}",
                suggestions=["The team ID is wrong", "Your token cannot see this team"],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    lines.append(
        format_table(
            users,
            [
                ("user_id", "User ID"),
                ("fullname", "Name"),
                ("email", "Email"),
                ("role", "Role"),
                ("created_at", "Created"),
            ],
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, current_count=len(users), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_team_user_details(user: dict[str, Any], team_id: int | str) -> str:
    role = user.get("role")
    lines = [
        format_heading(f"Team User: {user.get('fullname') or user.get('email')}", 1),
        "",
        format_bullet_list(
            {
                "Team ID": f"`{team_id}`",
                "User ID": user.get("user_id"),
                "Email": user.get("email"),
                "Role": role,
                "UUID": user.get("uuid"),
                "Created": format_date(user.get("created_at")),
            }
        ),
        "",
    ]
    permissions = ROLE_PERMISSIONS.get(role or "")
    if permissions:
        lines.append(format_heading("Role Permissions", 2))
        lines.extend(f"- {p}" for p in permissions)
        lines.append("")
    lines.append(format_footer("details retrieved"))
    return "\n".join(lines)


def format_update_team_user_result(user: dict[str, Any], team_id: int | str) -> str:
    lines = [
        format_heading("✅ Team User Updated", 1),
        "",
        format_bullet_list(
            {
                "Team ID": f"`{team_id}`",
                "User ID": user.get("user_id"),
                "Name": user.get("fullname"),
                "Email": user.get("email"),
                "New Role": user.get("role"),
            }
        ),
        "",
        format_footer("updated"),
    ]
    return "\n".join(lines)


def format_delete_team_user_result(
    user_id: int, result: dict[str, Any], team_id: int | str
) -> str:
    deleted = bool(result.get("team_user_deleted", True))
    lines = [
        format_heading("🗑️ Team User Removed" if deleted else "⚠️ Team User Not Removed", 1),
        "",
        format_bullet_list(
            {"Team ID": f"`{team_id}`", "User ID": user_id, "Removed": deleted}
        ),
        "",
        format_footer("removed"),
    ]
    return "\n".join(lines)
