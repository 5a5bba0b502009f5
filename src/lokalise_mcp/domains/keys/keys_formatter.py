"""Markdown rendering for key results."""

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
    format_truncated,
    format_url,
    project_url,
)
from lokalise_mcp.lokalise_client import BulkResult, PagedResult

_NAME_PLATFORMS = ("web", "other", "ios", "android")


def key_name(key: dict[str, Any]) -> str:
    """Return a key's display name; the API returns one name per platform."""
    name = key.get("key_name")
    if isinstance(name, dict):
        for platform in _NAME_PLATFORMS:
            if name.get(platform):
                return name[platform]
        return "Unnamed key"
    return name or "Unnamed key"


def format_keys_list(result: PagedResult, project_id: str) -> str:
    keys = result.items
    lines = [format_heading(f"Translation Keys ({len(keys)})", 1), ""]
    lines.extend([f"**Project ID:** `{project_id}`", ""])

    if not keys:
        lines.append(
            format_empty_state(
                "keys",
                f"project {project_id}",
                suggestions=[
                    "The project has no keys yet",
                    "Your filters excluded every key",
                ],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "key_id": key.get("key_id"),
            "name": f"`{key_name(key)}`",
            "platforms": format_safe_list(key.get("platforms")),
            "tags": format_safe_list(key.get("tags")),
            "translations": len(key.get("translations") or []),
            "description": key.get("description") or "",
        }
        for key in keys
    ]
    lines.append(
        format_table(
            rows,
            [
                ("key_id", "Key ID"),
                ("name", "Key Name"),
                ("platforms", "Platforms"),
                ("tags", "Tags"),
                ("translations", "Translations"),
                ("description", "Description"),
            ],
            max_width=60,
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more,
        cursor=result.next_cursor,
        current_count=len(keys),
        next_page=result.next_page,
    )
    if pagination:
        lines.append(pagination)

    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_key_details(key: dict[str, Any], project_id: str) -> str:
    name = key_name(key)
    lines = [format_heading(f"Key: {name}", 1), ""]

    lines.append(format_heading("Key Information", 2))
    lines.append(
        format_bullet_list(
            {
                "Key ID": key.get("key_id"),
                "Key Name": f"`{name}`",
                "Description": key.get("description") or None,
                "Platforms": format_safe_list(key.get("platforms")),
                "Tags": format_safe_list(key.get("tags")),
                "Filenames": _filenames(key.get("filenames")),
                "Plural": key.get("is_plural"),
                "Hidden": key.get("is_hidden"),
                "Archived": key.get("is_archived"),
                "Created": format_date(key.get("created_at")),
                "Modified": format_date(key.get("modified_at")),
            }
        )
    )
    lines.append("")

    translations = key.get("translations") or []
    if translations:
        lines.append(format_heading(f"Translations ({len(translations)})", 2))
        lines.append(
            format_table(
                [
                    {
                        "language": t.get("language_iso"),
                        "translation": t.get("translation") or "*(empty)*",
                        "reviewed": bool(t.get("is_reviewed")),
                        "modified": format_date(t.get("modified_at")),
                    }
                    for t in translations
                ],
                [
                    ("language", "Language"),
                    ("translation", "Translation"),
                    ("reviewed", "Reviewed"),
                    ("modified", "Modified"),
                ],
                max_width=80,
            )
        )
        lines.append("")

    lines.append(
        format_url(
            project_url(project_id, f"?k={key.get('key_id')}"), "View Key in Lokalise"
        )
    )
    lines.extend(["", format_footer("details retrieved")])
    return "\n".join(lines)


def _filenames(filenames: Any) -> str | None:
    if isinstance(filenames, dict):
        values = [f"{platform}: {name}" for platform, name in filenames.items() if name]
        return format_safe_list(values) if values else None
    return filenames or None


def format_create_keys_result(result: BulkResult, project_id: str) -> str:
    lines = [format_heading("Keys Created", 1), ""]
    lines.append(
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Created": len(result.items),
                "Errors": len(result.errors),
            }
        )
    )
    lines.append("")

    if result.items:
        lines.append(format_heading("✅ Created Keys", 2))
        lines.extend(
            f"- `{key_name(key)}` (ID: {key.get('key_id')})" for key in result.items
        )
        lines.append("")

    errors = format_error_list(result.errors)
    if errors:
        lines.append(errors)

    lines.append(format_footer("created"))
    return "\n".join(lines)


def format_update_key_result(
    key: dict[str, Any], changes: dict[str, Any], project_id: str
) -> str:
    lines = [
        format_heading("✅ Key Updated", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Key ID": key.get("key_id"),
                "Key Name": f"`{key_name(key)}`",
            }
        ),
        "",
        format_heading("Updated Fields", 2),
    ]
    for field, value in changes.items():
        shown = format_safe_list(value) if isinstance(value, list) else value
        lines.append(f"- **{field}**: {shown}")
    lines.extend(["", format_footer("updated")])
    return "\n".join(lines)


def format_delete_key_result(
    key_id: int, result: dict[str, Any], project_id: str
) -> str:
    removed = bool(result.get("key_removed", True))
    lines = [
        format_heading("🗑️ Key Deleted" if removed else "⚠️ Key Not Deleted", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Key ID": key_id,
                "Removed": removed,
                "Locked Keys": result.get("keys_locked") or None,
            }
        ),
        "",
        format_footer("deleted"),
    ]
    return "\n".join(lines)


def format_bulk_update_keys_result(
    result: BulkResult, requested: int, project_id: str
) -> str:
    lines = [
        format_heading("Bulk Key Update", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Requested": requested,
                "Updated": len(result.items),
                "Errors": len(result.errors),
            }
        ),
        "",
    ]
    if result.items:
        lines.append(format_heading("✅ Updated Keys", 2))
        lines.extend(
            f"- `{key_name(key)}` (ID: {key.get('key_id')})"
            for key in result.items
        )
        lines.append("")

    errors = format_error_list(result.errors)
    if errors:
        lines.append(errors)

    lines.append(format_footer("updated"))
    return "\n".join(lines)


def format_bulk_delete_keys_result(
    key_ids: list[int], result: dict[str, Any], project_id: str
) -> str:
    removed = bool(result.get("keys_removed", True))
    preview = ", ".join(str(k) for k in key_ids[:20])
    if len(key_ids) > 20:
        preview += f" and {len(key_ids) - 20} more"
    lines = [
        format_heading("🗑️ Keys Deleted" if removed else "⚠️ Keys Not Deleted", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Requested": len(key_ids),
                "Removed": removed,
                "Locked Keys": result.get("keys_locked") or None,
                "Key IDs": format_truncated(preview, 400),
            }
        ),
        "",
        format_footer("deleted"),
    ]
    return "\n".join(lines)
