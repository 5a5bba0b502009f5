"""User group operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.usergroups.usergroups_formatter import (
    format_create_group_result,
    format_delete_group_result,
    format_group_details,
    format_groups_list,
    format_membership_result,
    format_update_group_result,
)
from lokalise_mcp.domains.usergroups.usergroups_service import UserGroupsService
from lokalise_mcp.domains.usergroups.usergroups_types import (
    MAX_GROUPS_PAGE,
    CreateUserGroupArgs,
    DeleteUserGroupArgs,
    GetUserGroupArgs,
    GroupMembersArgs,
    GroupProjectsArgs,
    ListUserGroupsArgs,
    UpdateUserGroupArgs,
)
from lokalise_mcp.errors import LokaliseMcpError

logger = logging.getLogger(__name__)

service = UserGroupsService()

SETTINGS_FIELDS = {"name", "is_reviewer", "is_admin", "admin_rights", "languages"}


def _missing(team_id: int | str, group_id: int) -> str:
    return f"User group {group_id} not found in team '{team_id}'."


def list_usergroups(args: ListUserGroupsArgs) -> ControllerResponse:
    with controller_errors("listing user groups", team_id=args.team_id):
        check_paging(args.limit, args.page, MAX_GROUPS_PAGE)
        result = service.list_groups(args.team_id, limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_groups_list(result, args.team_id),
        metadata={"count": len(result.items)},
    )


def get_usergroup(args: GetUserGroupArgs) -> ControllerResponse:
    with controller_errors("getting user group", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            group = service.get_group(args.team_id, args.group_id)

    return ControllerResponse(content=format_group_details(group, args.team_id))


def create_usergroup(args: CreateUserGroupArgs) -> ControllerResponse:
    """Create a group, then attach the initial members and projects.

    A failure to attach members or projects does not undo the group; it is
    reported as a warning alongside the created group.
    """
    data = args.model_dump(exclude_none=True, include=SETTINGS_FIELDS)
    warnings: list[str] = []
    with controller_errors("creating user group", team_id=args.team_id):
        group = service.create_group(args.team_id, data)
        group_id = group.get("group_id")

        if args.members:
            try:
                group = service.add_members(args.team_id, group_id, args.members)
            except LokaliseMcpError as exc:
                logger.warning("Failed to add initial members to group %s: %s", group_id, exc)
                warnings.append(f"Initial members were not added: {exc.message}")

        if args.projects:
            try:
                group = service.add_projects(args.team_id, group_id, args.projects)
            except LokaliseMcpError as exc:
                logger.warning("Failed to add initial projects to group %s: %s", group_id, exc)
                warnings.append(f"Initial projects were not added: {exc.message}")

    logger.info("Created user group %s in team %s", group_id, args.team_id)
    return ControllerResponse(
        content=format_create_group_result(group, args.team_id, warnings),
        metadata={"group_id": group_id, "warnings": len(warnings)},
    )


def update_usergroup(args: UpdateUserGroupArgs) -> ControllerResponse:
    data = args.model_dump(exclude_none=True, include=SETTINGS_FIELDS)
    with controller_errors("updating user group", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            group = service.update_group(args.team_id, args.group_id, data)

    return ControllerResponse(content=format_update_group_result(group, args.team_id))


def delete_usergroup(args: DeleteUserGroupArgs) -> ControllerResponse:
    with controller_errors("deleting user group", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            result = service.delete_group(args.team_id, args.group_id)

    logger.info("Deleted user group %s in team %s", args.group_id, args.team_id)
    return ControllerResponse(
        content=format_delete_group_result(args.group_id, result, args.team_id)
    )


def add_members_to_group(args: GroupMembersArgs) -> ControllerResponse:
    user_ids = list(dict.fromkeys(args.user_ids))
    with controller_errors("adding group members", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            group = service.add_members(args.team_id, args.group_id, user_ids)

    return ControllerResponse(
        content=format_membership_result(group, args.team_id, "added", "members", user_ids)
    )


def remove_members_from_group(args: GroupMembersArgs) -> ControllerResponse:
    user_ids = list(dict.fromkeys(args.user_ids))
    with controller_errors("removing group members", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            group = service.remove_members(args.team_id, args.group_id, user_ids)

    return ControllerResponse(
        content=format_membership_result(group, args.team_id, "removed", "members", user_ids)
    )


def add_projects_to_group(args: GroupProjectsArgs) -> ControllerResponse:
    project_ids = list(dict.fromkeys(args.project_ids))
    with controller_errors("adding group projects", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            group = service.add_projects(args.team_id, args.group_id, project_ids)

    return ControllerResponse(
        content=format_membership_result(group, args.team_id, "added", "projects", project_ids)
    )


def remove_projects_from_group(args: GroupProjectsArgs) -> ControllerResponse:
    project_ids = list(dict.fromkeys(args.project_ids))
    with controller_errors("removing group projects", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.group_id)):
            group = service.remove_projects(args.team_id, args.group_id, project_ids)

    return ControllerResponse(
        content=format_membership_result(
            group, args.team_id, "removed", "projects", project_ids
        )
    )
