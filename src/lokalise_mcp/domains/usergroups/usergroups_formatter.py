"""Markdown rendering for user group results."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_pagination_info,
    format_safe_list,
    format_table,
)
from lokalise_mcp.lokalise_client import PagedResult


def _permissions(group: dict[str, Any]) -> dict[str, Any]:
    return group.get("permissions") or {}


def _yes_no(value: Any) -> str:
    return "Yes" if value else "No"


def _languages(group: dict[str, Any]) -> list[str]:
    languages = []
    for lang in _permissions(group).get("languages") or []:
        label = lang.get("lang_iso") or str(lang.get("lang_id", "?"))
        if lang.get("lang_name"):
            label = f"{lang['lang_name']} ({label})"
        languages.append(label if lang.get("is_writable", True) else f"{label}, read-only")
    return languages


def _summary(group: dict[str, Any]) -> dict[str, Any]:
    permissions = _permissions(group)
    return {
        "Group ID": group.get("group_id"),
        "Name": group.get("name"),
        "Admin": _yes_no(permissions.get("is_admin")),
        "Reviewer": _yes_no(permissions.get("is_reviewer")),
        "Admin Rights": (
            format_safe_list(permissions["admin_rights"])
            if permissions.get("is_admin") and permissions.get("admin_rights")
            else None
        ),
    }


def format_groups_list(result: PagedResult, team_id: int | str) -> str:
    groups = result.items
    lines = [
        format_heading(f"User Groups ({len(groups)})", 1),
        "",
        f"**Team ID:** `{team_id}`",
        "",
    ]
    if not groups:
        lines.append(
            format_empty_state(
                "user groups",
                f"team {team_id}",
                suggestions=["Create one with `lokalise_create_usergroup`"],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "group_id": g.get("group_id"),
            "name": g.get("name"),
            "admin": _yes_no(_permissions(g).get("is_admin")),
            "reviewer": _yes_no(_permissions(g).get("is_reviewer")),
            "members": len(g.get("members") or []),
            "projects": len(g.get("projects") or []),
        }
        for g in groups
    ]
    lines.append(
        format_table(
            rows,
            [
                ("group_id", "Group ID"),
                ("name", "Name"),
                ("admin", "Admin"),
                ("reviewer", "Reviewer"),
                ("members", "Members"),
                ("projects", "Projects"),
            ],
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, current_count=len(groups), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_group_details(group: dict[str, Any], team_id: int | str) -> str:
    info = {"Team ID": f"`{team_id}`", **_summary(group)}
    info["Created"] = format_date(group.get("created_at"))
    lines = [
        format_heading(f"User Group: {group.get('name')}", 1),
        "",
        format_bullet_list(info),
        "",
    ]

    languages = _languages(group)
    if languages:
        lines.append(format_heading("Languages", 2))
        lines.extend(f"- {lang}" for lang in languages)
        lines.append("")

    members = group.get("members") or []
    lines.append(format_heading(f"Members ({len(members)})", 2))
    lines.extend(f"- User ID: {m}" for m in members)
    lines.append("")

    projects = group.get("projects") or []
    lines.append(format_heading(f"Projects ({len(projects)})", 2))
    lines.extend(f"- `{p}`" for p in projects)
    lines.extend(["", format_footer("details retrieved")])
    return "\n".join(lines)


def format_create_group_result(
    group: dict[str, Any], team_id: int | str, warnings: list[str]
) -> str:
    info = {"Team ID": f"`{team_id}`", **_summary(group)}
    info["Languages Configured"] = len(_languages(group)) or None
    info["Members"] = len(group.get("members") or [])
    info["Projects"] = len(group.get("projects") or [])
    lines = [
        format_heading("✅ User Group Created", 1),
        "",
        format_bullet_list(info),
        "",
    ]
    if warnings:
        lines.append(format_heading("⚠️ Warnings", 2))
        lines.extend(f"- {w}" for w in warnings)
        lines.append("")
    lines.append(format_footer("created"))
    return "\n".join(lines)


def format_update_group_result(group: dict[str, Any], team_id: int | str) -> str:
    info = {"Team ID": f"`{team_id}`", **_summary(group)}
    info["Languages"] = format_safe_list(_languages(group))
    lines = [
        format_heading("✅ User Group Updated", 1),
        "",
        format_bullet_list(info),
        "",
        format_footer("updated"),
    ]
    return "\n".join(lines)


def format_delete_group_result(
    group_id: int, result: dict[str, Any], team_id: int | str
) -> str:
    deleted = bool(result.get("group_deleted", True))
    lines = [
        format_heading("🗑️ User Group Deleted" if deleted else "⚠️ User Group Not Deleted", 1),
        "",
        format_bullet_list({"Team ID": f"`{team_id}`", "Group ID": group_id, "Deleted": deleted}),
        "",
        format_footer("deleted"),
    ]
    return "\n".join(lines)


def format_membership_result(
    group: dict[str, Any],
    team_id: int | str,
    action: str,
    noun: str,
    changed: list[Any],
) -> str:
    """Render the outcome of adding or removing group members or projects.

    Args:
        group: Group as returned by the API after the change.
        team_id: Team the group belongs to.
        action: ``"added"`` or ``"removed"``.
        noun: ``"members"`` or ``"projects"``.
        changed: IDs sent to the API.
    """
    current = group.get(noun) or []
    lines = [
        format_heading(f"✅ {noun.capitalize()} {action.capitalize()}", 1),
        "",
        format_bullet_list(
            {
                "Team ID": f"`{team_id}`",
                "Group ID": group.get("group_id"),
                "Group": group.get("name"),
                f"{noun.capitalize()} {action.capitalize()}": len(changed),
                f"Current {noun.capitalize()}": len(current),
            }
        ),
        "",
        format_heading(f"{noun.capitalize()} {action.capitalize()}", 2),
    ]
    lines.extend(f"- `{item}`" for item in changed)
    lines.extend(["", format_footer(action)])
    return "\n".join(lines)
