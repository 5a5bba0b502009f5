"""Project operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.projects.projects_formatter import (
    format_create_project_result,
    format_delete_project_result,
    format_empty_project_result,
    format_project_details,
    format_projects_list,
    format_update_project_result,
)
from lokalise_mcp.domains.projects.projects_service import ProjectsService
from lokalise_mcp.domains.projects.projects_types import (
    CreateProjectArgs,
    DeleteProjectArgs,
    EmptyProjectArgs,
    GetProjectArgs,
    ListProjectsArgs,
    UpdateProjectArgs,
)
from lokalise_mcp.errors import validation_error

logger = logging.getLogger(__name__)

service = ProjectsService()


def _missing(project_id: str) -> str:
    return f"Project with ID '{project_id}' not found. Please check the project ID."


def list_projects(args: ListProjectsArgs) -> ControllerResponse:
    logger.debug("Listing projects (limit=%s, page=%s)", args.limit, args.page)
    with controller_errors("listing projects", limit=args.limit, page=args.page):
        check_paging(args.limit, args.page)
        result = service.list_projects(limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_projects_list(result, args.include_stats),
        metadata={"count": len(result.items), "has_more": result.has_more},
    )


def get_project(args: GetProjectArgs) -> ControllerResponse:
    logger.debug("Getting project %s", args.project_id)
    with controller_errors("getting project details", project_id=args.project_id):
        with not_found_message(_missing(args.project_id)):
            project = service.get_project(args.project_id)

    return ControllerResponse(
        content=format_project_details(
            project, args.include_languages, args.include_keys_summary
        )
    )


def create_project(args: CreateProjectArgs) -> ControllerResponse:
    name = args.name.strip()
    with controller_errors("creating project", name=name):
        if not name:
            raise validation_error("Project name is required and must be a non-empty string.")
        data = {"name": name, "base_lang_iso": args.base_lang_iso or "en"}
        if args.description and args.description.strip():
            data["description"] = args.description.strip()
        project = service.create_project(data)

    logger.info("Created project %s", project.get("project_id"))
    return ControllerResponse(content=format_create_project_result(project))


def update_project(args: UpdateProjectArgs) -> ControllerResponse:
    data = args.project_data.model_dump(exclude_none=True)
    with controller_errors("updating project", project_id=args.project_id):
        if not data:
            raise validation_error(
                "At least one field (name or description) must be provided for update."
            )
        if "name" in data and not data["name"].strip():
            raise validation_error("Project name cannot be empty.")
        with not_found_message(_missing(args.project_id)):
            project = service.update_project(args.project_id, data)

    return ControllerResponse(content=format_update_project_result(project, data))


def delete_project(args: DeleteProjectArgs) -> ControllerResponse:
    with controller_errors("deleting project", project_id=args.project_id):
        with not_found_message(_missing(args.project_id)):
            result = service.delete_project(args.project_id)

    logger.info("Deleted project %s", args.project_id)
    return ControllerResponse(content=format_delete_project_result(args.project_id, result))


def empty_project(args: EmptyProjectArgs) -> ControllerResponse:
    with controller_errors("emptying project", project_id=args.project_id):
        with not_found_message(_missing(args.project_id)):
            result = service.empty_project(args.project_id)

    logger.info("Emptied project %s", args.project_id)
    return ControllerResponse(content=format_empty_project_result(args.project_id, result))
