"""Markdown rendering for queued process results."""

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
    format_url,
)
from lokalise_mcp.lokalise_client import PagedResult

STATUS_ICONS = {
    "queued": "⏳",
    "processing": "⚙️",
    "finished": "✅",
    "failed": "❌",
    "cancelled": "🚫",
}

STATUS_NOTES = {
    "queued": "Waiting for other processes ahead of it in the queue.",
    "processing": "Running now. Check again shortly.",
    "finished": "Completed successfully.",
    "failed": "Did not complete. Read the message above and retry the operation.",
    "cancelled": "Cancelled before completion. Start a new process if needed.",
}

PROCESS_TYPES = {
    "file-upload": "File Upload",
    "file-download": "File Download/Export",
    "project-export": "Project Export",
    "project-import": "Project Import",
}


def _icon(status: str | None) -> str:
    return STATUS_ICONS.get(status or "", "❓")


def _type_label(process_type: str | None) -> str:
    return PROCESS_TYPES.get(process_type or "", process_type or "Unknown")


def _upload_totals(files: list[dict[str, Any]]) -> dict[str, int]:
    return {
        "Files Processed": len(files),
        "Total Keys": sum(f.get("key_count_total") or 0 for f in files),
        "New Keys": sum(f.get("key_count_inserted") or 0 for f in files),
        "Updated Keys": sum(f.get("key_count_updated") or 0 for f in files),
        "Total Words": sum(f.get("word_count_total") or 0 for f in files),
    }


def _details_section(details: dict[str, Any]) -> list[str]:
    files = details.get("files")
    if isinstance(files, list):
        lines = [
            format_heading("Upload Statistics", 3),
            "",
            format_bullet_list(_upload_totals(files)),
            "",
        ]
        if files:
            lines.append(format_heading("Files Processed", 3))
            for f in files:
                lines.append(f"- **{f.get('name_original', 'unnamed')}**: {f.get('status', '?')}")
                if f.get("message"):
                    lines.append(f"  - Message: {f['message']}")
                lines.append(
                    f"  - Keys: {f.get('key_count_total', 0)} "
                    f"({f.get('key_count_inserted', 0)} new, "
                    f"{f.get('key_count_updated', 0)} updated, "
                    f"{f.get('key_count_skipped', 0)} skipped)"
                )
            lines.append("")
        return lines

    if "download_url" in details or "file_size_kb" in details:
        size_kb = details.get("file_size_kb")
        info: dict[str, Any] = {
            "File Size": f"{size_kb} KB" if size_kb is not None else None,
            "Total Keys": details.get("total_number_of_keys"),
        }
        if details.get("download_url"):
            info["Download"] = format_url(details["download_url"], "Download file")
        lines = [format_heading("Download Information", 3), "", format_bullet_list(info), ""]
        if details.get("download_url"):
            lines.extend(["*Download links expire after a while.*", ""])
        return lines

    return [format_heading("Additional Details", 3), "", format_bullet_list(details), ""]


def format_processes_list(result: PagedResult, project_id: str) -> str:
    processes = result.items
    lines = [
        format_heading(f"Queued Processes ({len(processes)})", 1),
        "",
        f"**Project ID:** `{project_id}`",
        "",
    ]
    if not processes:
        lines.append(
            format_empty_state(
                "queued processes",
                f"project {project_id}",
                suggestions=[
                    "No uploads or exports ran recently",
                    "Finished processes are only kept for a limited time",
                ],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    rows = [
        {
            "process_id": p.get("process_id"),
            "type": _type_label(p.get("type")),
            "status": f"{_icon(p.get('status'))} {p.get('status', '')}",
            "created_by": p.get("created_by_email"),
            "created_at": p.get("created_at"),
        }
        for p in processes
    ]
    lines.append(
        format_table(
            rows,
            [
                ("process_id", "Process ID"),
                ("type", "Type"),
                ("status", "Status"),
                ("created_by", "Created By"),
                ("created_at", "Created"),
            ],
        )
    )
    lines.append("")

    pagination = format_pagination_info(
        result.has_more, current_count=len(processes), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)
    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_process_details(process: dict[str, Any], project_id: str) -> str:
    status = process.get("status")
    lines = [
        format_heading(f"{_type_label(process.get('type'))} Process", 1),
        "",
        format_heading(f"{_icon(status)} Status: {(status or 'unknown').upper()}", 2),
        "",
        format_bullet_list(
            {
                "Project ID": f"`{project_id}`",
                "Process ID": f"`{process.get('process_id')}`",
                "Type": process.get("type"),
                "Message": process.get("message") or None,
                "Created By": process.get("created_by_email"),
                "Created": format_date(process.get("created_at")),
            }
        ),
        "",
    ]
    details = process.get("details")
    if details:
        lines.append(format_heading("Process Details", 2))
        lines.append("")
        lines.extend(_details_section(details))

    lines.append(format_heading("Status Information", 2))
    lines.append("")
    lines.append(STATUS_NOTES.get(status or "", f"Unknown status: {status}"))
    lines.extend(["", format_footer("details retrieved")])
    return "\n".join(lines)
