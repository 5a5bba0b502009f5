"""Tests for the keys domain controller."""

import pytest
from pydantic import ValidationError

from lokalise_mcp.domains.keys import keys_controller as controller
from lokalise_mcp.domains.keys.keys_formatter import key_name
from lokalise_mcp.domains.keys.keys_types import (
    MAX_BULK_KEYS,
    BulkDeleteKeysArgs,
    BulkUpdateKeysArgs,
    CreateKeysArgs,
    GetKeyArgs,
    ListKeysArgs,
    UpdateKeyArgs,
)
from lokalise_mcp.errors import ErrorType, LokaliseMcpError
from tests.conftest import FakeApiError, collection

KEY = {
    "key_id": 101,
    "key_name": {"ios": "welcome", "android": "welcome", "web": "welcome", "other": ""},
    "platforms": ["ios", "web"],
    "tags": ["onboarding"],
    "description": "Greeting",
    "translations": [],
}


class TestListKeys:
    """Tests for list_keys."""

    def test_cursor_pagination_by_default(self, fake_client):
        """Test that keys are listed with cursor pagination and a default limit."""
        fake_client.keys.return_value = collection([KEY], next_cursor="eyIxIjo1fQ==")

        response = controller.list_keys(
            ListKeysArgs(project_id="p1", filter_platforms=["ios", "web"])
        )

        project_id, params = fake_client.keys.call_args.args
        assert project_id == "p1"
        assert params["pagination"] == "cursor"
        assert params["limit"] == 100
        assert params["filter_platforms"] == "ios,web"
        assert "page" not in params
        assert response.metadata["next_cursor"] == "eyIxIjo1fQ=="
        assert "`eyIxIjo1fQ==`" in response.content

    def test_explicit_page_uses_offset_pagination(self, fake_client):
        """Test that a page without a cursor switches to page-based paging."""
        fake_client.keys.return_value = collection([KEY])

        controller.list_keys(ListKeysArgs(project_id="p1", page=2, limit=50))

        params = fake_client.keys.call_args.args[1]
        assert params["page"] == 2
        assert "pagination" not in params

    def test_cursor_is_forwarded(self, fake_client):
        fake_client.keys.return_value = collection([])

        response = controller.list_keys(ListKeysArgs(project_id="p1", cursor="abc"))

        assert fake_client.keys.call_args.args[1]["cursor"] == "abc"
        assert "No keys found" in response.content

    def test_limit_above_maximum(self, fake_client):
        with pytest.raises(LokaliseMcpError):
            controller.list_keys(ListKeysArgs(project_id="p1", limit=501))


class TestKeyChanges:
    """Tests for single and bulk key changes."""

    def test_get_key_not_found(self, fake_client):
        fake_client.key.side_effect = FakeApiError("Not Found", 404)

        with pytest.raises(LokaliseMcpError) as excinfo:
            controller.get_key(GetKeyArgs(project_id="p1", key_id=9))

        assert excinfo.value.message == "Key 9 not found in project 'p1'."

    def test_create_keys_reports_partial_errors(self, fake_client):
        """Test that per-key API errors are listed next to the created keys."""
        fake_client.create_keys.return_value = collection(
            [KEY], errors=[{"message": "This key name is already taken", "key": "dup"}]
        )

        response = controller.create_keys(
            CreateKeysArgs(
                project_id="p1",
                keys=[
                    {"key_name": "welcome", "platforms": ["ios", "web"]},
                    {"key_name": "dup", "platforms": ["web"]},
                ],
            )
        )

        sent = fake_client.create_keys.call_args.args[1]
        assert sent[0] == {"key_name": "welcome", "platforms": ["ios", "web"]}
        assert response.metadata == {"created": 1, "errors": 1}
        assert "already taken" in response.content

    def test_create_keys_limit(self):
        """Test the bulk size limit."""
        keys = [{"key_name": f"k{i}", "platforms": ["web"]} for i in range(MAX_BULK_KEYS + 1)]

        with pytest.raises(ValidationError):
            CreateKeysArgs(project_id="p1", keys=keys)

    def test_update_key_requires_a_field(self, fake_client):
        with pytest.raises(LokaliseMcpError) as excinfo:
            controller.update_key(UpdateKeyArgs(project_id="p1", key_id=1, key_data={}))

        assert excinfo.value.error_type is ErrorType.VALIDATION_ERROR
        fake_client.update_key.assert_not_called()

    def test_bulk_update_keys(self, fake_client):
        fake_client.update_keys.return_value = collection([KEY], errors=[])

        response = controller.bulk_update_keys(
            BulkUpdateKeysArgs(
                project_id="p1", keys=[{"key_id": 101, "tags": ["onboarding"]}]
            )
        )

        fake_client.update_keys.assert_called_once_with(
            "p1", [{"key_id": 101, "tags": ["onboarding"]}]
        )
        assert response.metadata == {"updated": 1, "errors": 0}

    def test_bulk_delete_deduplicates_ids(self, fake_client):
        fake_client.delete_keys.return_value = {"project_id": "p1", "keys_removed": True}

        response = controller.bulk_delete_keys(
            BulkDeleteKeysArgs(project_id="p1", key_ids=[3, 1, 3, 2])
        )

        fake_client.delete_keys.assert_called_once_with("p1", [3, 1, 2])
        assert "Keys Deleted" in response.content


class TestKeyName:
    """Tests for key_name."""

    def test_per_platform_names(self):
        assert key_name(KEY) == "welcome"
        assert key_name({"key_name": {"ios": "", "web": "web.title"}}) == "web.title"

    def test_plain_name(self):
        assert key_name({"key_name": "title"}) == "title"
