"""Tests for error classification and surface rendering."""

import pytest
from pydantic import ValidationError

from lokalise_mcp.errors import (
    ErrorType,
    LokaliseMcpError,
    classify_api_error,
    ensure_mcp_error,
    format_error_for_resource,
    format_error_for_tool,
    get_deep_original_error,
    handle_cli_error,
    handle_controller_error,
    not_found_error,
    status_code_of,
    validation_error,
)
from lokalise_mcp.schemas import ProjectArgs
from tests.conftest import FakeApiError


class TestClassification:
    """Tests for classify_api_error."""

    @pytest.mark.parametrize(
        "status, expected",
        [
            (401, ErrorType.AUTH_INVALID),
            (403, ErrorType.INSUFFICIENT_PERMISSIONS),
            (404, ErrorType.NOT_FOUND),
            (408, ErrorType.TIMEOUT_ERROR),
            (429, ErrorType.RATE_LIMIT_EXCEEDED),
            (500, ErrorType.API_ERROR),
            (503, ErrorType.API_ERROR),
        ],
    )
    def test_status_code_wins(self, status, expected):
        """Test that the HTTP status decides the type regardless of message."""
        error = classify_api_error(Exception("connection reset"), status)

        assert error.error_type is expected

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("Connection refused", ErrorType.NETWORK_ERROR),
            ("Request timed out after 30s", ErrorType.TIMEOUT_ERROR),
            ("Too many requests", ErrorType.RATE_LIMIT_EXCEEDED),
            ("Key does not exist", ErrorType.NOT_FOUND),
            ("Invalid project id", ErrorType.INVALID_PROJECT_ID),
            ("Invalid `limit` parameter", ErrorType.VALIDATION_ERROR),
            ("Access denied for this token", ErrorType.INSUFFICIENT_PERMISSIONS),
            ("Something odd happened", ErrorType.API_ERROR),
        ],
    )
    def test_message_keywords(self, message, expected):
        """Test classification by message when there is no status code."""
        assert classify_api_error(Exception(message)).error_type is expected

    def test_server_error_keeps_status(self):
        """Test that 5xx errors keep their status and message."""
        error = classify_api_error(Exception("bad gateway"), 502)

        assert error.status_code == 502
        assert "bad gateway" in error.message

    def test_status_code_of(self):
        """Test reading the status from SDK-style errors."""
        assert status_code_of(FakeApiError("x", 404)) == 404
        assert status_code_of(FakeApiError("x", "429")) == 429
        assert status_code_of(FakeApiError("x", "E_NOPE")) is None
        assert status_code_of(ValueError("x")) is None


class TestControllerErrors:
    """Tests for handle_controller_error and ensure_mcp_error."""

    def test_mcp_error_passes_through(self):
        """Test that an already classified error is returned unchanged."""
        original = not_found_error("Key 1 not found")

        assert handle_controller_error(original, "getting key") is original

    def test_sdk_error_classified_by_code(self):
        """Test that an SDK error with a numeric code is classified by status."""
        error = handle_controller_error(FakeApiError("Unauthorized", 401), "listing projects")

        assert error.error_type is ErrorType.AUTH_INVALID

    def test_unknown_error_mentions_operation(self):
        """Test that an unclassifiable error is wrapped with the operation."""
        error = handle_controller_error(RuntimeError("weird"), "listing projects")

        assert error.error_type is ErrorType.API_ERROR
        assert error.message == "Error listing projects: weird"

    def test_pydantic_validation_error(self):
        """Test that argument validation failures become VALIDATION_ERROR."""
        with pytest.raises(ValidationError) as excinfo:
            ProjectArgs.model_validate({"project_id": ""})

        error = ensure_mcp_error(excinfo.value)

        assert error.error_type is ErrorType.VALIDATION_ERROR
        assert "project_id" in error.message

    def test_plain_exception_is_unexpected(self):
        """Test that arbitrary exceptions become UNEXPECTED_ERROR."""
        error = ensure_mcp_error(KeyError("boom"))

        assert error.error_type is ErrorType.UNEXPECTED_ERROR

    def test_deep_original_error(self):
        """Test following nested original errors down to the root cause."""
        root = ValueError("root cause")
        wrapped = validation_error("outer", not_found_error("inner", root))

        assert get_deep_original_error(wrapped) is root
        assert get_deep_original_error(root) is root

    def test_deep_original_error_is_bounded(self):
        """Test that a cycle of original errors does not loop forever."""
        first = LokaliseMcpError("a", ErrorType.API_ERROR)
        second = LokaliseMcpError("b", ErrorType.API_ERROR, original_error=first)
        first.original_error = second

        assert get_deep_original_error(first, max_depth=10) in (first, second)


class TestSurfaces:
    """Tests for the per-surface error renderers."""

    def test_tool_format(self):
        """Test the text returned to MCP tool callers."""
        assert format_error_for_tool(not_found_error("Key 1 not found")) == (
            "Error: Key 1 not found"
        )

    def test_resource_format(self):
        """Test that resource errors name the URI and error type."""
        text = format_error_for_resource(
            not_found_error("Project not found"), "lokalise://projects/abc"
        )

        assert text.startswith("Error: Project not found")
        assert "lokalise://projects/abc" in text
        assert "NOT_FOUND" in text

    def test_cli_error_exits_with_tip(self, capsys):
        """Test that CLI errors go to stderr with a tip and exit code 1."""
        with pytest.raises(SystemExit) as excinfo:
            handle_cli_error(LokaliseMcpError("No token", ErrorType.AUTH_MISSING))

        assert excinfo.value.code == 1
        err = capsys.readouterr().err
        assert "Error: No token" in err
        assert "Tip:" in err
