"""Markdown rendering for translation results."""

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


def _status(translation: dict[str, Any]) -> str:
    if not translation.get("translation"):
        return "⬜ untranslated"
    if translation.get("is_unverified"):
        return "⚠️ unverified"
    if translation.get("is_reviewed"):
        return "✅ reviewed"
    return "🔄 translated"


def format_translations_list(result: PagedResult, project_id: str) -> str:
    translations = result.items
    lines = [
        format_heading(f"Translations ({len(translations)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]
    if not translations:
        lines.append(
            format_empty_state(
                "translations",
                f"project {project_id}",
                suggestions=["Your filters excluded every translation"],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "translation_id": t.get("translation_id"),
            "key_id": t.get("key_id"),
            "language": t.get("language_iso"),
            "translation": t.get("translation") or "*(empty)*",
            "status": _status(t),
            "words": t.get("words"),
        }
        for t in translations
    ]
    lines.append(
        format_table(
            rows,
            [
                ("translation_id", "Translation ID"),
                ("key_id", "Key ID"),
                ("language", "Language"),
                ("translation", "Translation"),
                ("status", "Status"),
                ("words", "Words"),
            ],
            max_width=80,
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, cursor=result.next_cursor, current_count=len(translations)
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_translation_details(translation: dict[str, Any], project_id: str) -> str:
    lines = [
        format_heading(f"Translation {translation.get('translation_id')}", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Key ID": translation.get("key_id"),
                "Language": translation.get("language_iso"),
                "Status": _status(translation),
                "Reviewed": bool(translation.get("is_reviewed")),
                "Unverified": bool(translation.get("is_unverified")),
                "Words": translation.get("words"),
                "Reviewed By": translation.get("reviewed_by") or None,
                "Modified": format_date(translation.get("modified_at")),
                "Modified By": translation.get("modified_by_email"),
                "Task ID": translation.get("task_id"),
            }
        ),
        "",
        format_heading("Text", 2),
        "",
        translation.get("translation") or "*(empty)*",
        "",
    ]
    statuses = translation.get("custom_translation_statuses") or []
    if statuses:
        lines.append(format_heading("Custom Statuses", 2))
        lines.extend(f"- {s.get('title')} (ID: {s.get('status_id')})" for s in statuses)
        lines.append("")
    lines.append(format_footer("details retrieved"))
    return "\n".join(lines)


def format_update_translation_result(translation: dict[str, Any], project_id: str) -> str:
    lines = [
        format_heading("✅ Translation Updated", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Translation ID": translation.get("translation_id"),
                "Key ID": translation.get("key_id"),
                "Language": translation.get("language_iso"),
                "Status": _status(translation),
            }
        ),
        "",
        f"> {translation.get('translation') or ''}",
        "",
        format_footer("updated"),
    ]
    return "\n".join(lines)


def format_bulk_update_result(
    updated: list[dict[str, Any]], failed: list[dict[str, Any]], project_id: str
) -> str:
    total = len(updated) + len(failed)
    icon = "✅" if not failed else "⚠️" if updated else "❌"
    lines = [
        format_heading(f"{icon} Bulk Translation Update", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Requested": total,
                "Updated": len(updated),
                "Failed": len(failed),
            }
        ),
        "",
    ]
    if updated:
        lines.append(format_heading("Updated", 2))
        lines.extend(
            f"- {t.get('translation_id')} ({t.get('language_iso')}): {t.get('translation') or ''}"
            for t in updated
        )
        lines.append("")
    if failed:
        lines.append(format_heading("Failed", 2))
        lines.extend(f"- {f['translation_id']}: {f['message']}" for f in failed)
        lines.append("")
    lines.append(format_footer("updated"))
    return "\n".join(lines)
