"""Shared Markdown building blocks used by every domain formatter."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from lokalise_mcp.config import settings

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}")

NOT_AVAILABLE = "Not available"


def format_date(value: str | datetime | None) -> str:
    """Render a date as ``YYYY-MM-DD HH:MM:SS UTC``."""
    if not value:
        return NOT_AVAILABLE
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip().replace(" (Etc/UTC)", "")
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        elif text.endswith(" UTC"):
            text = text[:-4] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return "Invalid date"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_url(url: str | None, title: str | None = None) -> str:
    if not url:
        return NOT_AVAILABLE
    return f"[{title or url}]({url})"


def format_heading(text: str, level: int = 1) -> str:
    level = min(max(level, 1), 6)
    return f"{'#' * level} {text}"


def format_value(value: Any) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return format_date(value)
    if isinstance(value, str):
        if value.startswith(("http://", "https://")):
            return format_url(value)
        if _ISO_PREFIX.match(value):
            rendered = format_date(value)
            return value if rendered == "Invalid date" else rendered
        return value
    if isinstance(value, (list, tuple)):
        return format_safe_list([str(v) for v in value])
    return str(value)


def format_bullet_list(
    items: Mapping[str, Any], key_formatter: Callable[[str], str] | None = None
) -> str:
    """Render ``- **key**: value`` lines, skipping ``None`` values."""
    lines = []
    for key, value in items.items():
        if value is None:
            continue
        label = key_formatter(key) if key_formatter else key
        lines.append(f"- **{label}**: {format_value(value)}")
    return "\n".join(lines)


def format_separator() -> str:
    return "---"


def format_safe_list(
    values: Sequence[str] | None, empty_message: str = "None", separator: str = ", "
) -> str:
    if not values:
        return empty_message
    return separator.join(values)


def format_table(
    rows: Iterable[Mapping[str, Any]],
    columns: Sequence[tuple[str, str]],
    formatters: Mapping[str, Callable[[Any], str]] | None = None,
    max_width: int | None = None,
) -> str:
    """Render a Markdown table.

    Args:
        rows: Row mappings.
        columns: ``(key, header)`` pairs in display order.
        formatters: Optional per-key cell formatters.
        max_width: Truncate cells longer than this.
    """
    rows = list(rows)
    if not rows:
        return ""
    formatters = formatters or {}
    lines = [
        "| " + " | ".join(header for _, header in columns) + " |",
        "|" + "|".join("---" for _ in columns) + "|",
    ]
    for row in rows:
        cells = []
        for key, _ in columns:
            fmt = formatters.get(key, format_value)
            cell = fmt(row.get(key)).replace("|", "\\|").replace("\n", " ")
            if max_width:
                cell = format_truncated(cell, max_width)
            cells.append(cell)
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


def format_empty_state(
    entity_type: str, context: str | None = None, suggestions: Sequence[str] = ()
) -> str:
    lines = [f"**No {entity_type} found{f' in {context}' if context else ''}.**", ""]
    if suggestions:
        lines.append("This could mean:")
        lines.extend(f"- {s}" for s in suggestions)
        lines.append("")
    return "\n".join(lines)


def format_pagination_info(
    has_more: bool,
    cursor: str | int | None = None,
    current_count: int | None = None,
    next_page: int | None = None,
) -> str:
    if not has_more:
        return ""
    showing = f" - showing {current_count} items" if current_count else ""
    lines = [
        format_heading("Pagination Information", 2),
        "",
        f"⚠️ **This is a paginated result**{showing} out of potentially more.",
        "",
    ]
    if cursor:
        lines.append(f"- **Next Cursor:** `{cursor}`")
    if next_page:
        lines.append(f"- **Next Page:** {next_page}")
    lines.append("- **Has More Data:** Yes")
    lines.append("")
    return "\n".join(lines)


def format_error_list(errors: Sequence[Mapping[str, Any]]) -> str:
    """Render the per-item errors returned by bulk endpoints."""
    if not errors:
        return ""
    lines = [format_heading("❌ Errors", 2), ""]
    for i, err in enumerate(errors, start=1):
        info: dict[str, Any] = {"Message": err.get("message") or "Unknown error"}
        if err.get("code"):
            info["Code"] = f"`{err['code']}`"
        if err.get("key"):
            info["Key"] = f"`{err['key']}`"
        if err.get("key_id"):
            info["Key ID"] = err["key_id"]
        lines.extend([format_heading(f"Error {i}", 3), "", format_bullet_list(info), ""])
    return "\n".join(lines)


def format_recommendations(recommendations: Sequence[str], title: str = "Next Steps") -> str:
    if not recommendations:
        return ""
    lines = [format_heading(title, 2), ""]
    lines.extend(f"- {r}" for r in recommendations)
    lines.append("")
    return "\n".join(lines)


def format_footer(action: str = "retrieved", context: str | None = None) -> str:
    now = format_date(datetime.now(timezone.utc))
    suffix = f" {context}" if context else ""
    return f"{format_separator()}\n*{action.capitalize()} at {now}*{suffix}"


def format_progress(progress: int | float | None) -> str:
    if progress is None:
        return NOT_AVAILABLE
    return f"{status_icon(progress)} {progress}%"


def status_icon(progress: int | float) -> str:
    if progress >= 100:
        return "✅"
    if progress >= 95:
        return "🟡"
    if progress >= 70:
        return "🔄"
    return "🔴"


def format_percentage(value: int | float, total: int | float) -> str:
    if not total:
        return "0%"
    return f"{round(value / total * 100)}%"


def format_truncated(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def project_url(project_id: str, path: str = "") -> str:
    return f"{settings.dashboard_base_url}/project/{project_id}/{path}"


def format_project_link(project_id: str, label: str = "View Project in Lokalise Dashboard") -> str:
    return format_url(project_url(project_id), label)
