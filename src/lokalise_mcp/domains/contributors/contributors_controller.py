"""Contributor operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.contributors.contributors_formatter import (
    format_add_contributors_result,
    format_contributor_details,
    format_contributors_list,
    format_remove_contributor_result,
    format_update_contributor_result,
)
from lokalise_mcp.domains.contributors.contributors_service import ContributorsService
from lokalise_mcp.domains.contributors.contributors_types import (
    MAX_CONTRIBUTORS_PAGE,
    AddContributorsArgs,
    GetContributorArgs,
    GetCurrentUserArgs,
    ListContributorsArgs,
    RemoveContributorArgs,
    UpdateContributorArgs,
)
from lokalise_mcp.errors import validation_error

logger = logging.getLogger(__name__)

service = ContributorsService()


def _missing(project_id: str, contributor_id: int) -> str:
    return f"Contributor {contributor_id} not found in project '{project_id}'."


def list_contributors(args: ListContributorsArgs) -> ControllerResponse:
    with controller_errors("listing contributors", project_id=args.project_id):
        check_paging(args.limit, args.page, MAX_CONTRIBUTORS_PAGE)
        result = service.list_contributors(args.project_id, limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_contributors_list(result, args.project_id),
        metadata={"count": len(result.items)},
    )


def get_contributor(args: GetContributorArgs) -> ControllerResponse:
    with controller_errors("getting contributor", project_id=args.project_id):
        with not_found_message(_missing(args.project_id, args.contributor_id)):
            contributor = service.get_contributor(args.project_id, args.contributor_id)

    return ControllerResponse(content=format_contributor_details(contributor, args.project_id))


def add_contributors(args: AddContributorsArgs) -> ControllerResponse:
    contributors = [c.model_dump(exclude_none=True) for c in args.contributors]
    with controller_errors("adding contributors", project_id=args.project_id):
        result = service.add_contributors(args.project_id, contributors)

    logger.info("Added %d contributors to %s", len(result.items), args.project_id)
    return ControllerResponse(
        content=format_add_contributors_result(result, args.project_id),
        metadata={"added": len(result.items), "errors": len(result.errors)},
    )


def get_current_user(args: GetCurrentUserArgs) -> ControllerResponse:
    with controller_errors("getting current user", project_id=args.project_id):
        contributor = service.get_current_user(args.project_id)

    return ControllerResponse(
        content=format_contributor_details(contributor, args.project_id, current_user=True)
    )


def update_contributor(args: UpdateContributorArgs) -> ControllerResponse:
    data = args.model_dump(exclude_none=True, exclude={"project_id", "contributor_id"})
    with controller_errors("updating contributor", project_id=args.project_id):
        if not data:
            raise validation_error(
                "At least one field must be provided to update the contributor."
            )
        with not_found_message(_missing(args.project_id, args.contributor_id)):
            contributor = service.update_contributor(
                args.project_id, args.contributor_id, data
            )

    return ControllerResponse(
        content=format_update_contributor_result(contributor, data, args.project_id)
    )


def remove_contributor(args: RemoveContributorArgs) -> ControllerResponse:
    with controller_errors("removing contributor", project_id=args.project_id):
        with not_found_message(_missing(args.project_id, args.contributor_id)):
            result = service.remove_contributor(args.project_id, args.contributor_id)

    return ControllerResponse(
        content=format_remove_contributor_result(args.contributor_id, result, args.project_id)
    )
