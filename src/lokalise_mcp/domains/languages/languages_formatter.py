"""Markdown rendering for language results."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_empty_state,
    format_error_list,
    format_footer,
    format_heading,
    format_pagination_info,
    format_progress,
    format_safe_list,
    format_table,
)
from lokalise_mcp.lokalise_client import BulkResult, PagedResult


def _plural_forms(language: dict[str, Any]) -> str:
    return format_safe_list(language.get("plural_forms"))


def format_system_languages(result: PagedResult) -> str:
    languages = result.items
    total = result.total_count or len(languages)
    lines = [format_heading(f"Lokalise System Languages ({total})", 1), ""]

    if not languages:
        lines.append(format_empty_state("system languages"))
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    lines.append(
        format_table(
            languages,
            [
                ("lang_id", "ID"),
                ("lang_iso", "ISO"),
                ("lang_name", "Name"),
                ("is_rtl", "RTL"),
                ("plural_forms", "Plural Forms"),
            ],
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, current_count=len(languages), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_project_languages(
    result: PagedResult,
    project_id: str,
    progress: dict[int, dict[str, Any]] | None = None,
) -> str:
    languages = result.items
    progress = progress or {}
    lines = [
        format_heading(f"Project Languages ({len(languages)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]

    if not languages:
        lines.append(
            format_empty_state(
                "languages",
                f"project {project_id}",
                suggestions=["Add languages with `lokalise_add_project_languages`"],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    columns = [
        ("lang_id", "ID"),
        ("lang_iso", "ISO"),
        ("lang_name", "Name"),
        ("is_rtl", "RTL"),
        ("plural_forms", "Plural Forms"),
    ]
    rows = [dict(lang) for lang in languages]
    if progress:
        columns.append(("progress", "Progress"))
        for row in rows:
            stats = progress.get(row.get("lang_id"), {})
            row["progress"] = format_progress(stats.get("progress"))

    lines.extend([format_table(rows, columns), "", format_footer("list retrieved")])
    return "\n".join(lines)


def format_language_details(language: dict[str, Any], project_id: str) -> str:
    lines = [
        format_heading(f"Language: {language.get('lang_name', 'Unknown')}", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Language ID": language.get("lang_id"),
                "ISO Code": f"`{language.get('lang_iso')}`",
                "Name": language.get("lang_name"),
                "Right-to-left": language.get("is_rtl"),
                "Plural Forms": _plural_forms(language),
            }
        ),
        "",
        format_footer("details retrieved"),
    ]
    return "\n".join(lines)


def format_add_languages_result(result: BulkResult, project_id: str) -> str:
    lines = [
        format_heading("Languages Added", 1),
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
        lines.append(format_heading("✅ Added Languages", 2))
        lines.extend(
            f"- **{lang.get('lang_name')}** (`{lang.get('lang_iso')}`, ID: {lang.get('lang_id')})"
            for lang in result.items
        )
        lines.append("")

    errors = format_error_list(result.errors)
    if errors:
        lines.append(errors)
    lines.append(format_footer("added"))
    return "\n".join(lines)


def format_update_language_result(
    language: dict[str, Any], changes: dict[str, Any], project_id: str
) -> str:
    lines = [
        format_heading("✅ Language Updated", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Language ID": language.get("lang_id"),
                "ISO Code": f"`{language.get('lang_iso')}`",
                "Name": language.get("lang_name"),
            }
        ),
        "",
        format_heading("Updated Fields", 2),
    ]
    lines.extend(
        f"- **{field}**: {format_safe_list(value) if isinstance(value, list) else value}"
        for field, value in changes.items()
    )
    lines.extend(["", format_footer("updated")])
    return "\n".join(lines)


def format_remove_language_result(
    language_id: int, result: dict[str, Any], project_id: str
) -> str:
    removed = bool(result.get("language_deleted", True))
    lines = [
        format_heading("🗑️ Language Removed" if removed else "⚠️ Language Not Removed", 1),
        "",
        format_bullet_list(
            {"Project ID": f"`{project_id}`", "Language ID": language_id, "Removed": removed}
        ),
        "",
    ]
    if removed:
        lines.extend(["All translations for this language were deleted.", ""])
    lines.append(format_footer("removed"))
    return "\n".join(lines)
