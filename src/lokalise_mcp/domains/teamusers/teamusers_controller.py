"""Team user operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.teamusers.teamusers_formatter import (
    format_delete_team_user_result,
    format_team_user_details,
    format_team_users_list,
    format_update_team_user_result,
)
from lokalise_mcp.domains.teamusers.teamusers_service import TeamUsersService
from lokalise_mcp.domains.teamusers.teamusers_types import (
    MAX_TEAM_USERS_PAGE,
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    UpdateTeamUserArgs,
)

logger = logging.getLogger(__name__)

service = TeamUsersService()


def _missing(team_id: int | str, user_id: int) -> str:
    return f"User {user_id} not found in team '{team_id}'."


def list_team_users(args: ListTeamUsersArgs) -> ControllerResponse:
    with controller_errors("listing team users", team_id=args.team_id):
        check_paging(args.limit, args.page, MAX_TEAM_USERS_PAGE)
        result = service.list_team_users(args.team_id, limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_team_users_list(result, args.team_id),
        metadata={"count": len(result.items)},
    )


def get_team_user(args: GetTeamUserArgs) -> ControllerResponse:
    with controller_errors("getting team user", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.user_id)):
            user = service.get_team_user(args.team_id, args.user_id)

    return ControllerResponse(content=format_team_user_details(user, args.team_id))


def update_team_user(args: UpdateTeamUserArgs) -> ControllerResponse:
    with controller_errors("updating team user", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.user_id)):
            user = service.update_team_user(args.team_id, args.user_id, args.role)

    logger.info("Changed role of user %s in team %s to %s", args.user_id, args.team_id, args.role)
    return ControllerResponse(content=format_update_team_user_result(user, args.team_id))


def delete_team_user(args: DeleteTeamUserArgs) -> ControllerResponse:
    with controller_errors("deleting team user", team_id=args.team_id):
        with not_found_message(_missing(args.team_id, args.user_id)):
            result = service.delete_team_user(args.team_id, args.user_id)

    logger.info("Removed user %s from team %s", args.user_id, args.team_id)
    return ControllerResponse(
        content=format_delete_team_user_result(args.user_id, result, args.team_id)
    )
