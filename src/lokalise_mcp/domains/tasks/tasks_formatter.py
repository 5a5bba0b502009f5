"""Markdown rendering for task results."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_pagination_info,
    format_progress,
    format_safe_list,
    format_table,
    format_url,
    project_url,
)
from lokalise_mcp.lokalise_client import PagedResult

STATUS_ICONS = {
    "new": "🆕",
    "in_progress": "🔄",
    "completed": "✅",
    "closed": "🔒",
    "queued": "⏳",
    "created": "🆕",
}


def _status(task: dict[str, Any]) -> str:
    status = task.get("status") or "unknown"
    return f"{STATUS_ICONS.get(status, '❔')} {status}"


def _assignees(language: dict[str, Any]) -> str:
    users = [u.get("email") or str(u.get("user_id")) for u in language.get("users") or []]
    groups = [g.get("name") or str(g.get("id")) for g in language.get("groups") or []]
    return format_safe_list(users + [f"group: {g}" for g in groups])


def format_tasks_list(result: PagedResult, project_id: str) -> str:
    tasks = result.items
    lines = [
        format_heading(f"Translation Tasks ({len(tasks)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]

    if not tasks:
        lines.append(
            format_empty_state(
                "tasks",
                f"project {project_id}",
                suggestions=[
                    "No tasks have been created yet",
                    "Your status or title filters excluded every task",
                ],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "task_id": task.get("task_id"),
            "title": task.get("title"),
            "status": _status(task),
            "type": task.get("task_type"),
            "progress": format_progress(task.get("progress")),
            "languages": format_safe_list(
                [lang.get("language_iso", "") for lang in task.get("languages") or []]
            ),
            "due": format_date(task.get("due_date")) if task.get("due_date") else "No due date",
        }
        for task in tasks
    ]
    lines.append(
        format_table(
            rows,
            [
                ("task_id", "Task ID"),
                ("title", "Title"),
                ("status", "Status"),
                ("type", "Type"),
                ("progress", "Progress"),
                ("languages", "Languages"),
                ("due", "Due"),
            ],
            max_width=50,
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, current_count=len(tasks), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_task_details(task: dict[str, Any], project_id: str) -> str:
    lines = [format_heading(f"Task: {task.get('title', 'Untitled')}", 1), ""]
    lines.append(format_heading("Task Information", 2))
    lines.append(
        format_bullet_list(
            {
                "Task ID": task.get("task_id"),
                "Status": _status(task),
                "Type": task.get("task_type"),
                "Progress": format_progress(task.get("progress")),
                "Description": task.get("description") or None,
                "Source Language": task.get("source_language_iso"),
                "Keys": task.get("keys_count"),
                "Words": task.get("words_count"),
                "Created": format_date(task.get("created_at")),
                "Created By": task.get("created_by_email"),
                "Due Date": format_date(task.get("due_date")) if task.get("due_date") else None,
                "Completed": (
                    format_date(task.get("completed_at")) if task.get("completed_at") else None
                ),
                "Auto-close Languages": task.get("auto_close_languages"),
                "Auto-close Task": task.get("auto_close_task"),
                "Closing Tags": (
                    format_safe_list(task["closing_tags"]) if task.get("closing_tags") else None
                ),
            }
        )
    )
    lines.append("")

    languages = task.get("languages") or []
    if languages:
        lines.append(format_heading(f"Languages ({len(languages)})", 2))
        lines.append(
            format_table(
                [
                    {
                        "language": lang.get("language_iso"),
                        "status": _status(lang),
                        "progress": format_progress(lang.get("progress")),
                        "assignees": _assignees(lang),
                        "keys": lang.get("keys_count"),
                    }
                    for lang in languages
                ],
                [
                    ("language", "Language"),
                    ("status", "Status"),
                    ("progress", "Progress"),
                    ("assignees", "Assignees"),
                    ("keys", "Keys"),
                ],
            )
        )
        lines.append("")

    lines.append(
        format_url(project_url(project_id, f"tasks/{task.get('task_id')}"), "View Task in Lokalise")
    )
    lines.extend(["", format_footer("details retrieved")])
    return "\n".join(lines)


def format_create_task_result(task: dict[str, Any], project_id: str) -> str:
    languages = task.get("languages") or []
    lines = [
        format_heading("✅ Task Created", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Task ID": task.get("task_id"),
                "Title": task.get("title"),
                "Type": task.get("task_type"),
                "Status": _status(task),
                "Languages": format_safe_list(
                    [lang.get("language_iso", "") for lang in languages]
                ),
                "Due Date": format_date(task.get("due_date")) if task.get("due_date") else None,
            }
        ),
        "",
        format_footer("created"),
    ]
    return "\n".join(lines)


def format_update_task_result(
    task: dict[str, Any], changes: dict[str, Any], project_id: str
) -> str:
    lines = [
        format_heading("✅ Task Updated", 1),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Task ID": task.get("task_id"),
                "Title": task.get("title"),
                "Status": _status(task),
            }
        ),
        "",
        format_heading("Updated Fields", 2),
    ]
    for field, value in changes.items():
        if field == "languages":
            value = format_safe_list([lang.get("language_iso", "") for lang in value])
        elif isinstance(value, list):
            value = format_safe_list([str(v) for v in value])
        lines.append(f"- **{field}**: {value}")
    lines.extend(["", format_footer("updated")])
    return "\n".join(lines)


def format_delete_task_result(
    task_id: int, result: dict[str, Any], project_id: str
) -> str:
    deleted = bool(result.get("task_deleted", True))
    lines = [
        format_heading("🗑️ Task Deleted" if deleted else "⚠️ Task Not Deleted", 1),
        "",
        format_bullet_list(
            {"Project ID": f"`{project_id}`", "Task ID": task_id, "Deleted": deleted}
        ),
        "",
        format_footer("deleted"),
    ]
    return "\n".join(lines)
