"""Adapters from the MCP / CLI surfaces onto controller functions.

Each surface builds the controller's argument model from its own inputs,
calls the controller and renders failures in the way that surface expects:
tools raise ``ToolError``, resources return the error text, CLI commands
print to stderr and exit non-zero.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import BaseModel

from lokalise_mcp.controllers import ControllerResponse
from lokalise_mcp.errors import (
    format_error_for_resource,
    format_error_for_tool,
    handle_cli_error,
)

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT", bound=BaseModel)
Handler = Callable[[ArgsT], ControllerResponse]


def _build_args(model: type[ArgsT], values: dict[str, Any]) -> ArgsT:
    # click passes () for unused multiple options
    return model.model_validate(
        {k: v for k, v in values.items() if v is not None and v != ()}
    )


def run_tool(handler: Handler, model: type[ArgsT], **values: Any) -> str:
    """Run *handler* for an MCP tool call and return its Markdown."""
    try:
        args = _build_args(model, values)
        return handler(args).content
    except Exception as exc:
        logger.debug("Tool handler %s failed", getattr(handler, "__name__", handler))
        raise ToolError(format_error_for_tool(exc)) from exc


def read_resource(uri: str, handler: Handler, model: type[ArgsT], **values: Any) -> str:
    """Run *handler* for an MCP resource read; errors become resource text."""
    try:
        args = _build_args(model, values)
        return handler(args).content
    except Exception as exc:
        return format_error_for_resource(exc, uri)


def run_command(handler: Handler, model: type[ArgsT], **values: Any) -> None:
    """Run *handler* for a CLI command and print its Markdown."""
    try:
        args = _build_args(model, values)
        result = handler(args)
    except Exception as exc:
        handle_cli_error(exc)
    click.echo(result.content)


def parse_json_option(value: str | None) -> Any:
    """Decode a JSON-valued CLI option, reporting bad input as a usage error."""
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}") from exc
