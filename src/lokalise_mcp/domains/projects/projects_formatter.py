"""Markdown rendering for project results."""

from __future__ import annotations

from typing import Any

from lokalise_mcp.formatting import (
    format_bullet_list,
    format_date,
    format_empty_state,
    format_footer,
    format_heading,
    format_pagination_info,
    format_percentage,
    format_project_link,
    format_recommendations,
    format_url,
    project_url,
)
from lokalise_mcp.lokalise_client import PagedResult

QA_ISSUE_LABELS = {
    "not_reviewed": "Not Reviewed",
    "unverified": "Unverified",
    "spelling_grammar": "Spelling/Grammar",
    "inconsistent_placeholders": "Inconsistent Placeholders",
    "inconsistent_html": "Inconsistent HTML",
    "different_number_of_urls": "Different Number of URLs",
    "different_urls": "Different URLs",
    "leading_whitespace": "Leading Whitespace",
    "trailing_whitespace": "Trailing Whitespace",
    "different_number_of_email_address": "Different Number of Email Addresses",
    "different_email_address": "Different Email Addresses",
    "different_brackets": "Different Brackets",
    "different_numbers": "Different Numbers",
    "double_space": "Double Space",
    "special_placeholder": "Special Placeholder",
    "unbalanced_brackets": "Unbalanced Brackets",
}


def _progress_indicator(progress: Any) -> str:
    if not progress:
        return "⚪"
    if progress >= 95:
        return "🟢"
    if progress >= 70:
        return "🟡"
    return "🔴"


def format_projects_list(result: PagedResult, include_stats: bool = False) -> str:
    projects = result.items
    lines = [format_heading(f"Lokalise Projects ({len(projects)})", 1), ""]

    if not projects:
        lines.append(
            format_empty_state(
                "projects",
                suggestions=[
                    "Your API token has no access to any project",
                    "No projects have been created yet",
                ],
            )
        )
        lines.append(format_footer("list retrieved"))
        return "\n".join(lines)

    for project in projects:
        stats = project.get("statistics") or {}
        lines.extend([format_heading(project.get("name") or "Untitled", 2), ""])
        lines.append(format_heading("Project Information", 3))

        info: dict[str, Any] = {
            "Project ID": project.get("project_id"),
            "Base Language": project.get("base_language_iso"),
            "Created": format_date(project.get("created_at")),
            "Created By": project.get("created_by_email"),
        }
        if project.get("description"):
            info["Description"] = project["description"]
        if stats:
            info["Progress"] = f"{stats.get('progress_total', 0)}%"
            info["Total Keys"] = stats.get("keys_total")
            info["Languages"] = len(stats.get("languages") or [])
        lines.extend([format_bullet_list(info), ""])

        if stats and include_stats:
            lines.append(format_heading("Project Statistics", 3))
            stats_info: dict[str, Any] = {
                "Progress": f"{stats.get('progress_total', 0)}%",
                "Total Keys": stats.get("keys_total"),
                "Languages": len(stats.get("languages") or []),
                "Team Members": stats.get("team"),
                "Base Words": stats.get("base_words"),
            }
            if stats.get("qa_issues_total"):
                stats_info["QA Issues"] = stats["qa_issues_total"]
            lines.extend([format_bullet_list(stats_info), ""])

        lines.append(format_heading("Dashboard", 3))
        lines.extend(
            [
                format_url(
                    project_url(project.get("project_id", ""), "?view=multi"),
                    "View in Lokalise Dashboard",
                ),
                "",
            ]
        )

    pagination = format_pagination_info(
        result.has_more, current_count=len(projects), next_page=result.next_page
    )
    if pagination:
        lines.append(pagination)

    lines.append(format_footer("list retrieved"))
    return "\n".join(lines)


def format_project_details(
    project: dict[str, Any],
    include_languages: bool = False,
    include_keys_summary: bool = False,
) -> str:
    stats = project.get("statistics") or {}
    name = project.get("name") or "Untitled"
    lines = [
        format_heading(
            f"{_progress_indicator(stats.get('progress_total'))} Project: {name}", 1
        ),
        "",
        format_heading("📋 Project Overview", 2),
    ]

    overview: dict[str, Any] = {
        "Project ID": f"`{project.get('project_id')}`",
        "Project Type": project.get("project_type") or "localization_files",
        "Base Language": (
            f"{project.get('base_language_iso')} (ID: {project.get('base_language_id')})"
        ),
        "Team ID": project.get("team_id"),
        "Created": format_date(project.get("created_at")),
        "Created By": project.get("created_by_email"),
    }
    description = (project.get("description") or "").strip()
    overview["Description"] = description or "*No description provided*"
    lines.extend([format_bullet_list(overview), ""])

    if stats:
        languages = stats.get("languages") or []
        lines.append(format_heading("📊 Project Statistics", 2))
        lines.append(format_heading("Overall Progress", 3))
        lines.append(
            format_bullet_list(
                {
                    "Completion": f"{stats.get('progress_total', 0)}%",
                    "Total Keys": f"{stats.get('keys_total', 0):,}",
                    "Base Words": f"{stats.get('base_words', 0):,}",
                    "Team Members": stats.get("team"),
                    "Active Languages": len(languages),
                    "QA Issues": stats.get("qa_issues_total", 0),
                }
            )
        )
        lines.append("")

        if languages and (include_languages or len(languages) <= 10):
            lines.append(format_heading("🌐 Language Progress", 3))
            for lang in sorted(languages, key=lambda l: l.get("progress", 0), reverse=True):
                progress = lang.get("progress", 0)
                icon = "✅" if progress >= 100 else "🔄" if progress >= 95 else "⚠️"
                words = lang.get("words_to_do") or 0
                remaining = f" ({words:,} words remaining)" if words > 0 else ""
                lines.append(
                    f"{icon} **{str(lang.get('language_iso', '')).upper()}** "
                    f"(ID: {lang.get('language_id')}): {progress}%{remaining}"
                )
            lines.append("")

        qa_issues = stats.get("qa_issues") or {}
        if stats.get("qa_issues_total"):
            lines.append(format_heading("🔍 Quality Assurance Issues", 3))
            lines.extend([f"**Total Issues: {stats['qa_issues_total']}**", ""])
            for field, label in QA_ISSUE_LABELS.items():
                count = qa_issues.get(field) or 0
                if count > 0:
                    lines.append(f"- **{label}**: {count}")
            lines.append("")

        if include_keys_summary:
            keys_total = stats.get("keys_total", 0)
            progress = stats.get("progress_total", 0)
            complete = sum(1 for lang in languages if lang.get("progress", 0) >= 100)
            lines.append(format_heading("🔑 Keys Summary", 3))
            lines.append(
                format_bullet_list(
                    {
                        "Total Keys": keys_total,
                        "Overall Completion": f"{progress}%",
                        "Languages Fully Translated": (
                            f"{complete} of {len(languages)} "
                            f"({format_percentage(complete, len(languages))})"
                        ),
                    }
                )
            )
            lines.append("")

    lines.append(format_heading("🔗 Quick Links", 2))
    project_id = project.get("project_id", "")
    lines.append(format_project_link(project_id))
    lines.append(f"- {format_url(project_url(project_id, 'settings'), 'Project Settings')}")
    lines.append("")
    lines.append(format_footer("details retrieved"))
    return "\n".join(lines)


def format_create_project_result(project: dict[str, Any]) -> str:
    project_id = project.get("project_id", "")
    lines = [
        format_heading("✅ Project Created Successfully", 1),
        "",
        format_bullet_list(
            {
                "Project Name": project.get("name"),
                "Project ID": f"`{project_id}`",
                "Base Language": project.get("base_language_iso"),
                "Description": project.get("description") or None,
                "Created": format_date(project.get("created_at")),
            }
        ),
        "",
        format_recommendations(
            [
                "Add target languages with `lokalise_add_project_languages`",
                "Create translation keys with `lokalise_create_keys`",
                "Invite contributors with `lokalise_add_contributors`",
            ]
        ),
        format_project_link(project_id),
        "",
        format_footer("created"),
    ]
    return "\n".join(lines)


def format_update_project_result(
    project: dict[str, Any], changes: dict[str, Any]
) -> str:
    lines = [
        format_heading("✅ Project Updated Successfully", 1),
        "",
        format_bullet_list(
            {
                "Project Name": project.get("name"),
                "Project ID": f"`{project.get('project_id')}`",
                "Description": project.get("description") or None,
            }
        ),
        "",
        format_heading("Updated Fields", 2),
        "",
    ]
    lines.extend(f"- **{field}**: {value}" for field, value in changes.items())
    lines.extend(["", format_footer("updated")])
    return "\n".join(lines)


def format_delete_project_result(project_id: str, result: dict[str, Any]) -> str:
    deleted = bool(result.get("project_deleted", True))
    heading = "🗑️ Project Deleted" if deleted else "⚠️ Project Not Deleted"
    lines = [
        format_heading(heading, 1),
        "",
        format_bullet_list({"Project ID": f"`{project_id}`", "Deleted": deleted}),
        "",
    ]
    if deleted:
        lines.extend(
            ["**Warning:** This action is permanent. The project and all its data are gone.", ""]
        )
    lines.append(format_footer("deleted"))
    return "\n".join(lines)


def format_empty_project_result(project_id: str, result: dict[str, Any]) -> str:
    keys_deleted = bool(result.get("keys_deleted", True))
    lines = [
        format_heading("🧹 Project Emptied", 1),
        "",
        format_bullet_list({"Project ID": f"`{project_id}`", "Keys Deleted": keys_deleted}),
        "",
        "All keys and translations were removed. Project settings, languages "
        "and contributors are preserved.",
        "",
        format_footer("emptied"),
    ]
    return "\n".join(lines)
