"""Workflow prompts: ready-made requests that chain several Lokalise tools."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

logger = logging.getLogger(__name__)


def register_prompts(mcp: FastMCP) -> None:
    """Register the workflow prompts with the MCP server."""
    logger.info("Registering MCP prompts")

    @mcp.prompt(
        name="project_portfolio_overview",
        description="Overview of all your Lokalise projects",
    )
    def project_portfolio_overview() -> str:
        return (
            "Show me all my Lokalise projects with their current status, team "
            "information and key statistics. Highlight projects that need "
            "immediate attention or have been inactive recently. Present this "
            "as a management dashboard summary."
        )

    @mcp.prompt(
        name="project_deep_dive",
        description="Detailed analysis of one project with languages and key statistics",
    )
    def project_deep_dive(project_id: str) -> str:
        return (
            f"Give me a detailed analysis of project '{project_id}'. Include the "
            "project details, every configured language with its progress, key "
            "statistics and recent activity. Point out potential issues or "
            "optimization opportunities."
        )

    @mcp.prompt(
        name="new_project_setup",
        description="Create and configure a new localization project",
    )
    def new_project_setup(
        project_name: str, target_languages: str, description: str = ""
    ) -> str:
        about = f" with description '{description}'" if description else ""
        return (
            f"Create a new Lokalise project named '{project_name}'{about}. Then add "
            f"these languages: {target_languages}. Show me the created project and "
            "confirm all languages are configured."
        )

    @mcp.prompt(
        name="language_expansion",
        description="Add new languages to an existing project",
    )
    def language_expansion(project_id: str, new_languages: str) -> str:
        return (
            f"Add these languages to project '{project_id}': {new_languages}. Then "
            "show me the updated language list with progress and confirm the "
            "project is ready for translation work."
        )

    @mcp.prompt(
        name="missing_translations_report",
        description="Find untranslated content in a project, optionally for one language",
    )
    def missing_translations_report(project_id: str, language_iso: str = "") -> str:
        scope = f" for language '{language_iso}'" if language_iso else " across all languages"
        return (
            f"Find all untranslated entries in project '{project_id}'{scope}. Look "
            "up the project languages to get language IDs, list untranslated "
            "translations, and group the results by language and key. Finish with "
            "the number of missing translations per language."
        )

    @mcp.prompt(
        name="translation_progress_check",
        description="Monitor translation status across languages",
    )
    def translation_progress_check(project_id: str, threshold: str = "") -> str:
        highlight = (
            f" Highlight any language below {threshold}% completion." if threshold else ""
        )
        return (
            f"Show me the translation progress for every language in project "
            f"'{project_id}'.{highlight} Include word counts, completion "
            "percentages and review status, and suggest what to finish first."
        )

    @mcp.prompt(
        name="create_translation_task",
        description="Create a translation task with language assignments",
    )
    def create_translation_task(
        project_id: str, task_title: str, languages: str, due_date: str = ""
    ) -> str:
        due = f" Set the due date to {due_date}." if due_date else ""
        return (
            f"Create a translation task titled '{task_title}' in project "
            f"'{project_id}' for languages: {languages}.{due} List the project "
            "contributors first and assign each language to contributors who can "
            "write it. Show me the created task."
        )

    @mcp.prompt(
        name="review_queue",
        description="Translations waiting for review in a project",
    )
    def review_queue(project_id: str) -> str:
        return (
            f"List the translations in project '{project_id}' that are translated "
            "but not yet reviewed, grouped by language. Mention the reviewers "
            "among the contributors and any open review tasks, and propose who "
            "should review what."
        )

    @mcp.prompt(
        name="glossary_management",
        description="Review and extend a project's glossary",
    )
    def glossary_management(project_id: str, new_terms: str = "") -> str:
        add = f" Then add these terms: {new_terms}." if new_terms else ""
        return (
            f"Show me the glossary of project '{project_id}', flagging terms "
            f"without translations or descriptions.{add} Summarize what changed."
        )

    @mcp.prompt(
        name="team_overview",
        description="Members, roles and groups of a team",
    )
    def team_overview(team_id: str) -> str:
        return (
            f"Give me an overview of team '{team_id}': list the team users with "
            "their roles and the user groups with their members, permissions and "
            "projects. Point out users who belong to no group and groups without "
            "projects."
        )

    logger.info("MCP prompts registered")
