"""Key operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.keys.keys_formatter import (
    format_bulk_delete_keys_result,
    format_bulk_update_keys_result,
    format_create_keys_result,
    format_delete_key_result,
    format_key_details,
    format_keys_list,
    format_update_key_result,
)
from lokalise_mcp.domains.keys.keys_service import KeysService
from lokalise_mcp.domains.keys.keys_types import (
    MAX_KEYS_PAGE,
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    DeleteKeyArgs,
    GetKeyArgs,
    ListKeysArgs,
    UpdateKeyArgs,
)
from lokalise_mcp.errors import validation_error

logger = logging.getLogger(__name__)

service = KeysService()


def _missing(project_id: str, key_id: int) -> str:
    return f"Key {key_id} not found in project '{project_id}'."


def list_keys(args: ListKeysArgs) -> ControllerResponse:
    logger.debug("Listing keys for project %s", args.project_id)
    with controller_errors("listing keys", project_id=args.project_id):
        check_paging(args.limit, args.page, MAX_KEYS_PAGE)
        result = service.list_keys(
            args.project_id,
            limit=args.limit,
            page=args.page,
            cursor=args.cursor,
            include_translations=args.include_translations,
            filter_keys=args.filter_keys,
            filter_platforms=args.filter_platforms,
            filter_filenames=args.filter_filenames,
        )

    return ControllerResponse(
        content=format_keys_list(result, args.project_id),
        metadata={
            "count": len(result.items),
            "has_more": result.has_more,
            "next_cursor": result.next_cursor,
        },
    )


def get_key(args: GetKeyArgs) -> ControllerResponse:
    with controller_errors("getting key details", project_id=args.project_id, key_id=args.key_id):
        with not_found_message(_missing(args.project_id, args.key_id)):
            key = service.get_key(args.project_id, args.key_id)

    return ControllerResponse(content=format_key_details(key, args.project_id))


def create_keys(args: CreateKeysArgs) -> ControllerResponse:
    keys = [key.model_dump(exclude_none=True) for key in args.keys]
    with controller_errors("creating keys", project_id=args.project_id, count=len(keys)):
        result = service.create_keys(args.project_id, keys)

    logger.info(
        "Created %d keys in %s (%d errors)",
        len(result.items),
        args.project_id,
        len(result.errors),
    )
    return ControllerResponse(
        content=format_create_keys_result(result, args.project_id),
        metadata={"created": len(result.items), "errors": len(result.errors)},
    )


def update_key(args: UpdateKeyArgs) -> ControllerResponse:
    data = args.key_data.model_dump(exclude_none=True)
    with controller_errors("updating key", project_id=args.project_id, key_id=args.key_id):
        if not data:
            raise validation_error("At least one field must be provided to update the key.")
        with not_found_message(_missing(args.project_id, args.key_id)):
            key = service.update_key(args.project_id, args.key_id, data)

    return ControllerResponse(content=format_update_key_result(key, data, args.project_id))


def delete_key(args: DeleteKeyArgs) -> ControllerResponse:
    with controller_errors("deleting key", project_id=args.project_id, key_id=args.key_id):
        with not_found_message(_missing(args.project_id, args.key_id)):
            result = service.delete_key(args.project_id, args.key_id)

    return ControllerResponse(
        content=format_delete_key_result(args.key_id, result, args.project_id)
    )


def bulk_update_keys(args: BulkUpdateKeysArgs) -> ControllerResponse:
    keys = [key.model_dump(exclude_none=True) for key in args.keys]
    with controller_errors("bulk updating keys", project_id=args.project_id, count=len(keys)):
        result = service.update_keys(args.project_id, keys)

    return ControllerResponse(
        content=format_bulk_update_keys_result(result, len(keys), args.project_id),
        metadata={"updated": len(result.items), "errors": len(result.errors)},
    )


def bulk_delete_keys(args: BulkDeleteKeysArgs) -> ControllerResponse:
    key_ids = list(dict.fromkeys(args.key_ids))
    with controller_errors("bulk deleting keys", project_id=args.project_id, count=len(key_ids)):
        result = service.delete_keys(args.project_id, key_ids)

    return ControllerResponse(
        content=format_bulk_delete_keys_result(key_ids, result, args.project_id)
    )
