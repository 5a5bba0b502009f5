"""Tests for the shared Markdown helpers."""

from datetime import datetime, timezone

from lokalise_mcp.formatting import (
    NOT_AVAILABLE,
    format_bullet_list,
    format_date,
    format_empty_state,
    format_error_list,
    format_pagination_info,
    format_percentage,
    format_progress,
    format_table,
    format_truncated,
    format_value,
)


class TestDates:
    """Tests for date rendering."""

    def test_iso_with_z(self):
        assert format_date("2024-03-01T10:20:30Z") == "2024-03-01 10:20:30 UTC"

    def test_lokalise_format(self):
        """Test the '(Etc/UTC)' suffix used by the Lokalise API."""
        assert format_date("2024-03-01 10:20:30 (Etc/UTC)") == "2024-03-01 10:20:30 UTC"

    def test_already_formatted(self):
        assert format_date("2024-03-01 10:20:30 UTC") == "2024-03-01 10:20:30 UTC"

    def test_datetime_and_empty(self):
        dt = datetime(2024, 3, 1, 10, 20, 30, tzinfo=timezone.utc)

        assert format_date(dt) == "2024-03-01 10:20:30 UTC"
        assert format_date(None) == NOT_AVAILABLE
        assert format_date("yesterday") == "Invalid date"


class TestValues:
    """Tests for value and list rendering."""

    def test_format_value(self):
        assert format_value(True) == "Yes"
        assert format_value(None) == NOT_AVAILABLE
        assert format_value(["a", "b"]) == "a, b"
        assert format_value("https://lokalise.com") == "[https://lokalise.com](https://lokalise.com)"

    def test_bullet_list_skips_none(self):
        text = format_bullet_list({"Name": "Demo", "Description": None, "Keys": 3})

        assert text == "- **Name**: Demo\n- **Keys**: 3"

    def test_table_escapes_pipes(self):
        text = format_table([{"a": "x|y", "b": 1}], [("a", "A"), ("b", "B")])

        assert text.splitlines() == ["| A | B |", "|---|---|", "| x\\|y | 1 |"]

    def test_empty_table(self):
        assert format_table([], [("a", "A")]) == ""

    def test_truncation_and_percentage(self):
        assert format_truncated("abcdefghij", 6) == "abc..."
        assert format_truncated("abc", 6) == "abc"
        assert format_percentage(1, 3) == "33%"
        assert format_percentage(1, 0) == "0%"
        assert format_progress(100) == "✅ 100%"


class TestSections:
    """Tests for reusable sections."""

    def test_empty_state_with_suggestions(self):
        text = format_empty_state("keys", "project abc", ["Wrong filter"])

        assert "**No keys found in project abc.**" in text
        assert "- Wrong filter" in text

    def test_pagination_only_when_more(self):
        assert format_pagination_info(False) == ""
        text = format_pagination_info(True, cursor="eyJ", current_count=100)
        assert "`eyJ`" in text
        assert "showing 100 items" in text

    def test_error_list(self):
        text = format_error_list([{"message": "Duplicate key", "key": "welcome"}])

        assert "Duplicate key" in text
        assert "`welcome`" in text
        assert format_error_list([]) == ""
