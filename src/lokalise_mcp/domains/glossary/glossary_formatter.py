"""Markdown rendering for glossary results."""

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


def _flags(term: dict[str, Any]) -> str:
    flags = []
    if term.get("caseSensitive"):
        flags.append("case-sensitive")
    if not term.get("translatable", True):
        flags.append("do not translate")
    if term.get("forbidden"):
        flags.append("forbidden")
    return format_safe_list(flags, empty_message="")


def format_glossary_terms_list(result: PagedResult, project_id: str) -> str:
    terms = result.items
    lines = [
        format_heading(f"Glossary Terms ({len(terms)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]
    if not terms:
        lines.append(
            format_empty_state(
                "glossary terms",
                f"project {project_id}",
                suggestions=["Add terms with `lokalise_create_glossary_terms`"],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "id": term.get("id"),
            "term": f"**{term.get('term', '')}**",
            "description": term.get("description") or "",
            "flags": _flags(term),
            "translations": len(term.get("translations") or []),
            "tags": format_safe_list(term.get("tags"), empty_message=""),
        }
        for term in terms
    ]
    lines.append(
        format_table(
            rows,
            [
                ("id", "ID"),
                ("term", "Term"),
                ("description", "Description"),
                ("flags", "Flags"),
                ("translations", "Translations"),
                ("tags", "Tags"),
            ],
            max_width=60,
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, cursor=result.next_cursor, current_count=len(terms)
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_glossary_term(term: dict[str, Any], project_id: str) -> str:
    lines = [
        format_heading(f"Glossary Term: {term.get('term', '')}", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Term ID": term.get("id"),
                "Description": term.get("description") or None,
                "Case Sensitive": bool(term.get("caseSensitive")),
                "Translatable": bool(term.get("translatable", True)),
                "Forbidden": bool(term.get("forbidden")),
                "Tags": format_safe_list(term.get("tags")),
                "Created": format_date(term.get("createdAt")),
                "Updated": format_date(term.get("updatedAt")) if term.get("updatedAt") else None,
            }
        ),
        "",
    ]

    translations = term.get("translations") or []
    if translations:
        lines.append(format_heading(f"Translations ({len(translations)})", 2))
        lines.append(
            format_table(
                [
                    {
                        "language": t.get("langIso") or t.get("langId"),
                        "name": t.get("langName") or "",
                        "translation": t.get("translation") or "*(empty)*",
                        "description": t.get("description") or "",
                    }
                    for t in translations
                ],
                [
                    ("language", "Language"),
                    ("name", "Name"),
                    ("translation", "Translation"),
                    ("description", "Description"),
                ],
            )
        )
        lines.append("")

    lines.append(format_footer("details retrieved"))
    return "\n".join(lines)


def _term_summary(result: BulkResult, title: str, action: str, project_id: str) -> str:
    lines = [
        format_heading(f"{title} ({len(result.items)})", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                action.capitalize(): len(result.items),
                "Errors": len(result.errors),
            }
        ),
        "",
    ]
    lines.extend(f"- **{t.get('term')}** (ID: {t.get('id')})" for t in result.items)
    if result.items:
        lines.append("")
    errors = format_error_list(result.errors)
    if errors:
        lines.append(errors)
    lines.append(format_footer(action))
    return "\n".join(lines)


def format_create_terms_result(result: BulkResult, project_id: str) -> str:
    return _term_summary(result, "📖 Glossary Terms Created", "created", project_id)


def format_update_terms_result(result: BulkResult, project_id: str) -> str:
    return _term_summary(result, "📖 Glossary Terms Updated", "updated", project_id)


def format_delete_terms_result(
    result: dict[str, Any], term_ids: list[int], project_id: str
) -> str:
    deleted = result.get("deleted") or {}
    failed = result.get("failed") or []
    deleted_count = deleted.get("count", len(deleted.get("ids") or []))
    lines = [
        format_heading("🗑️ Glossary Terms Deleted", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Requested": len(term_ids),
                "Deleted": deleted_count,
                "Failed": sum(f.get("count", 0) for f in failed),
            }
        ),
        "",
    ]
    for failure in failed:
        ids = ", ".join(str(i) for i in failure.get("ids") or [])
        lines.append(f"- ❌ {failure.get('message', 'Unknown error')}: {ids}")
    if failed:
        lines.append("")
    lines.append(format_footer("deleted"))
    return "\n".join(lines)
