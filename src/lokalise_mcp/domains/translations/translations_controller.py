"""Translation operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.translations.translations_formatter import (
    format_bulk_update_result,
    format_translation_details,
    format_translations_list,
    format_update_translation_result,
)
from lokalise_mcp.domains.translations.translations_service import TranslationsService
from lokalise_mcp.domains.translations.translations_types import (
    MAX_TRANSLATIONS_PAGE,
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    UpdateTranslationArgs,
)
from lokalise_mcp.errors import LokaliseMcpError

logger = logging.getLogger(__name__)

service = TranslationsService()

_FILTERS = (
    "filter_lang_id",
    "filter_is_reviewed",
    "filter_unverified",
    "filter_untranslated",
    "filter_qa_issues",
    "filter_active_task_id",
    "disable_references",
)


@dataclass
class BulkUpdateOutcome:
    """Per-item results of a bulk translation update."""

    updated: list[dict[str, Any]] = field(default_factory=list)
    failed: list[dict[str, Any]] = field(default_factory=list)


def _missing(project_id: str, translation_id: int) -> str:
    return f"Translation {translation_id} not found in project '{project_id}'."


def list_translations(args: ListTranslationsArgs) -> ControllerResponse:
    with controller_errors("listing translations", project_id=args.project_id):
        check_paging(args.limit, None, MAX_TRANSLATIONS_PAGE)
        filters = {name: getattr(args, name) for name in _FILTERS}
        result = service.list_translations(
            args.project_id, limit=args.limit, cursor=args.cursor, **filters
        )

    return ControllerResponse(
        content=format_translations_list(result, args.project_id),
        metadata={"count": len(result.items), "next_cursor": result.next_cursor},
    )


def get_translation(args: GetTranslationArgs) -> ControllerResponse:
    with controller_errors("getting translation", project_id=args.project_id):
        with not_found_message(_missing(args.project_id, args.translation_id)):
            translation = service.get_translation(
                args.project_id, args.translation_id, args.disable_references
            )

    return ControllerResponse(content=format_translation_details(translation, args.project_id))


def update_translation(args: UpdateTranslationArgs) -> ControllerResponse:
    data = args.translation_data.model_dump(exclude_none=True)
    with controller_errors("updating translation", project_id=args.project_id):
        with not_found_message(_missing(args.project_id, args.translation_id)):
            translation = service.update_translation(
                args.project_id, args.translation_id, data
            )

    return ControllerResponse(
        content=format_update_translation_result(translation, args.project_id)
    )


def bulk_update_translations(args: BulkUpdateTranslationsArgs) -> ControllerResponse:
    """Apply every update independently; failures are collected, not raised."""
    outcome = BulkUpdateOutcome()
    for update in args.updates:
        data = update.translation_data.model_dump(exclude_none=True)
        try:
            translation = service.update_translation(
                args.project_id, update.translation_id, data
            )
        except LokaliseMcpError as exc:
            logger.warning(
                "Failed to update translation %s: %s", update.translation_id, exc.message
            )
            outcome.failed.append(
                {
                    "translation_id": update.translation_id,
                    "message": exc.message,
                    "error_type": exc.error_type.value,
                }
            )
            continue
        outcome.updated.append(translation)

    logger.info(
        "Bulk translation update in %s: %d updated, %d failed",
        args.project_id,
        len(outcome.updated),
        len(outcome.failed),
    )
    return ControllerResponse(
        content=format_bulk_update_result(outcome.updated, outcome.failed, args.project_id),
        metadata={"updated": len(outcome.updated), "failed": len(outcome.failed)},
    )
