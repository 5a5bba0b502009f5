"""Error taxonomy and surface-specific error rendering.

Every failure that reaches a tool, resource or CLI command is normalised
into a ``LokaliseMcpError`` carrying an ``ErrorType`` and, when known, the
HTTP status code of the underlying Lokalise API response.
"""

from __future__ import annotations

import logging
import sys
from enum import StrEnum
from typing import Any, NoReturn

import click
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ErrorType(StrEnum):
    """Classification of errors surfaced to users."""

    AUTH_MISSING = "AUTH_MISSING"
    AUTH_INVALID = "AUTH_INVALID"
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_PROJECT_ID = "INVALID_PROJECT_ID"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class LokaliseMcpError(Exception):
    """Error with a type classification and optional HTTP status code."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        status_code: int | None = None,
        original_error: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.original_error = original_error

    def __repr__(self) -> str:
        return (
            f"LokaliseMcpError({self.message!r}, {self.error_type.value}, "
            f"status_code={self.status_code})"
        )


# ------------------------------------------------------------------
# Factories
# ------------------------------------------------------------------


def auth_missing_error(
    message: str = "Authentication credentials are missing",
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.AUTH_MISSING)


def auth_invalid_error(
    message: str = "Authentication credentials are invalid",
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.AUTH_INVALID, 401)


def api_error(
    message: str, status_code: int | None = None, original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.API_ERROR, status_code, original_error)


def network_error(
    message: str = "Network error occurred", original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.NETWORK_ERROR, None, original_error)


def rate_limit_error(
    message: str = "Rate limit exceeded. Please try again later.",
    retry_after: int | None = None,
) -> LokaliseMcpError:
    return LokaliseMcpError(
        message, ErrorType.RATE_LIMIT_EXCEEDED, 429, {"retry_after": retry_after}
    )


def not_found_error(
    message: str = "Resource not found", original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.NOT_FOUND, 404, original_error)


def invalid_project_id_error(
    project_id: str, original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(
        f"Invalid project ID: {project_id}",
        ErrorType.INVALID_PROJECT_ID,
        400,
        original_error,
    )


def insufficient_permissions_error(
    message: str = "Insufficient permissions for this operation",
    original_error: Any = None,
) -> LokaliseMcpError:
    return LokaliseMcpError(
        message, ErrorType.INSUFFICIENT_PERMISSIONS, 403, original_error
    )


def validation_error(
    message: str = "Validation failed", original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.VALIDATION_ERROR, 400, original_error)


def timeout_error(
    message: str = "Request timed out", original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.TIMEOUT_ERROR, 408, original_error)


def unexpected_error(
    message: str = "An unexpected error occurred", original_error: Any = None
) -> LokaliseMcpError:
    return LokaliseMcpError(message, ErrorType.UNEXPECTED_ERROR, None, original_error)


def validation_error_from(exc: ValidationError) -> LokaliseMcpError:
    """Turn a pydantic ``ValidationError`` into a readable validation error."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "input"
        problems.append(f"{location}: {err.get('msg', 'invalid value')}")
    return validation_error("Invalid arguments: " + "; ".join(problems), exc)


# ------------------------------------------------------------------
# Classification
# ------------------------------------------------------------------


def ensure_mcp_error(error: BaseException | Any) -> LokaliseMcpError:
    if isinstance(error, LokaliseMcpError):
        return error
    if isinstance(error, ValidationError):
        return validation_error_from(error)
    if isinstance(error, BaseException):
        return unexpected_error(str(error) or type(error).__name__, error)
    return unexpected_error(str(error))


def classify_api_error(
    error: Any, status_code: int | None = None, message: str | None = None
) -> LokaliseMcpError:
    """Map an error to a typed ``LokaliseMcpError``.

    The HTTP status code wins when present; otherwise the message is
    inspected for well-known phrases.
    """
    error_message = message or str(error)

    if status_code == 401:
        return auth_invalid_error("Authentication failed. Check your API token.")
    if status_code == 403:
        return insufficient_permissions_error(
            "Access denied. Insufficient permissions.", error
        )
    if status_code == 404:
        return not_found_error("Resource not found.", error)
    if status_code == 408:
        return timeout_error("Request timed out.", error)
    if status_code == 429:
        return rate_limit_error("Rate limit exceeded. Please try again later.")
    if status_code in (500, 502, 503, 504):
        return api_error(f"Server error: {error_message}", status_code, error)

    lower = error_message.lower()

    if "network" in lower or "connection" in lower:
        return network_error(error_message, error)
    if "timeout" in lower or "timed out" in lower:
        return timeout_error(error_message, error)
    if "rate limit" in lower or "too many requests" in lower:
        return rate_limit_error(error_message)
    if "not found" in lower or "does not exist" in lower:
        return not_found_error(error_message, error)
    if "invalid" in lower and "project" in lower:
        return invalid_project_id_error("Unknown", error)
    if "validation" in lower or "invalid" in lower:
        return validation_error(error_message, error)
    if "permission" in lower or "access denied" in lower:
        return insufficient_permissions_error(error_message, error)

    return api_error(error_message, status_code, error)


def status_code_of(error: Any) -> int | None:
    """Return the HTTP status carried by an SDK error, if any."""
    code = getattr(error, "code", None)
    if isinstance(code, int):
        return code
    if isinstance(code, str) and code.isdigit():
        return int(code)
    return None


def handle_controller_error(
    error: BaseException, operation: str, **context: Any
) -> LokaliseMcpError:
    """Normalise an error raised while a controller performs *operation*.

    ``LokaliseMcpError`` instances pass through unchanged so that the
    classification made closer to the API is preserved.
    """
    if isinstance(error, LokaliseMcpError):
        return error
    if isinstance(error, ValidationError):
        return validation_error_from(error)

    logger.debug("Controller error while %s: %s", operation, error, extra={"context": context})
    status = status_code_of(error)
    classified = classify_api_error(error, status)
    if classified.error_type is ErrorType.API_ERROR and status is None:
        classified.message = f"Error {operation}: {classified.message}"
    return classified


def get_deep_original_error(error: Any, max_depth: int = 10) -> Any:
    """Follow ``original_error`` links down to the root cause."""
    current = error
    depth = 0
    while (
        depth < max_depth
        and isinstance(current, LokaliseMcpError)
        and current.original_error is not None
    ):
        current = current.original_error
        depth += 1
    return current


# ------------------------------------------------------------------
# Surface formatting
# ------------------------------------------------------------------


def format_error_for_tool(error: BaseException | Any) -> str:
    mcp_error = ensure_mcp_error(error)
    logger.error("%s error: %s", mcp_error.error_type.value, mcp_error.message)
    return f"Error: {mcp_error.message}"


def format_error_for_resource(error: BaseException | Any, uri: str) -> str:
    mcp_error = ensure_mcp_error(error)
    logger.error(
        "%s error reading %s: %s", mcp_error.error_type.value, uri, mcp_error.message
    )
    return f"Error: {mcp_error.message}\n\n*Resource: {uri} ({mcp_error.error_type.value})*"


_CLI_TIPS: dict[ErrorType, str] = {
    ErrorType.AUTH_MISSING: (
        "Tip: Make sure to set up your API token in the configuration file "
        "or environment variables."
    ),
    ErrorType.AUTH_INVALID: (
        "Tip: Check that your API token is correct and has not expired."
    ),
    ErrorType.NOT_FOUND: "Tip: Verify that the IDs you passed exist and are accessible.",
    ErrorType.RATE_LIMIT_EXCEEDED: "Tip: Wait a moment before retrying the command.",
    ErrorType.VALIDATION_ERROR: "Tip: Run the command with --help to review its arguments.",
    ErrorType.API_ERROR: "Tip: Check the Lokalise status page if the problem persists.",
}


def handle_cli_error(error: BaseException | Any) -> NoReturn:
    """Print a user-facing error with a hint and exit with status 1."""
    mcp_error = ensure_mcp_error(error)
    logger.error("%s error: %s", mcp_error.error_type.value, mcp_error.message)

    click.echo(f"Error: {mcp_error.message}", err=True)
    tip = _CLI_TIPS.get(mcp_error.error_type)
    if tip:
        click.echo(f"\n{tip}", err=True)

    original = get_deep_original_error(mcp_error.original_error)
    if original is not None and logger.isEnabledFor(logging.DEBUG):
        click.echo(f"\nOriginal error: {original}", err=True)

    sys.exit(1)
