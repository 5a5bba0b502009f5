"""Tests for the translations domain controller."""

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from lokalise_mcp.domains.translations import translations_controller as controller
from lokalise_mcp.domains.translations.translations_types import (
    BulkUpdateTranslationsArgs,
    GetTranslationArgs,
    ListTranslationsArgs,
    UpdateTranslationArgs,
)
from lokalise_mcp.errors import ErrorType, LokaliseMcpError
from tests.conftest import FakeApiError, collection


def translation(translation_id, text, language_iso="fr"):
    return SimpleNamespace(
        translation_id=translation_id,
        key_id=101,
        language_iso=language_iso,
        translation=text,
        is_reviewed=False,
        is_unverified=False,
    )


class TestListTranslations:
    """Tests for list_translations."""

    def test_filters_and_cursor(self, fake_client):
        """Test that filters are sent with cursor pagination."""
        fake_client.translations.return_value = collection(
            [translation(1, "Bonjour")], next_cursor="next"
        )

        response = controller.list_translations(
            ListTranslationsArgs(
                project_id="p1", filter_lang_id=640, filter_untranslated=True, cursor="abc"
            )
        )

        params = fake_client.translations.call_args.args[1]
        assert params["pagination"] == "cursor"
        assert params["cursor"] == "abc"
        assert params["filter_lang_id"] == 640
        assert params["filter_untranslated"] == 1
        assert "filter_is_reviewed" not in params
        assert response.metadata == {"count": 1, "next_cursor": "next"}
        assert "Bonjour" in response.content

    def test_limit_above_maximum(self, fake_client):
        with pytest.raises(LokaliseMcpError):
            controller.list_translations(ListTranslationsArgs(project_id="p1", limit=5001))

        fake_client.translations.assert_not_called()


class TestUpdateTranslations:
    """Tests for single and bulk translation updates."""

    def test_update_translation(self, fake_client):
        fake_client.update_translation.return_value = translation(9, "Salut")

        response = controller.update_translation(
            UpdateTranslationArgs(
                project_id="p1",
                translation_id=9,
                translation_data={"translation": "Salut", "is_reviewed": True},
            )
        )

        fake_client.update_translation.assert_called_once_with(
            "p1", 9, {"translation": "Salut", "is_reviewed": True}
        )
        assert "Translation Updated" in response.content

    def test_bulk_update_collects_failures(self, fake_client):
        """Test that one failing update does not stop the others."""
        fake_client.update_translation.side_effect = [
            translation(1, "Bonjour"),
            FakeApiError("Not Found", 404),
            translation(3, "Merci"),
        ]

        response = controller.bulk_update_translations(
            BulkUpdateTranslationsArgs(
                project_id="p1",
                updates=[
                    {"translation_id": 1, "translation_data": {"translation": "Bonjour"}},
                    {"translation_id": 2, "translation_data": {"translation": "Au revoir"}},
                    {"translation_id": 3, "translation_data": {"translation": "Merci"}},
                ],
            )
        )

        assert fake_client.update_translation.call_count == 3
        assert response.metadata == {"updated": 2, "failed": 1}
        assert "⚠️ Bulk Translation Update" in response.content
        assert "- 2: Resource not found." in response.content

    def test_bulk_update_all_failed(self, fake_client):
        fake_client.update_translation.side_effect = FakeApiError("Unauthorized", 401)

        response = controller.bulk_update_translations(
            BulkUpdateTranslationsArgs(
                project_id="p1",
                updates=[{"translation_id": 1, "translation_data": {"translation": "x"}}],
            )
        )

        assert response.metadata == {"updated": 0, "failed": 1}
        assert "❌ Bulk Translation Update" in response.content

    def test_bulk_update_requires_updates(self):
        with pytest.raises(ValidationError):
            BulkUpdateTranslationsArgs(project_id="p1", updates=[])

    def test_update_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            UpdateTranslationArgs(
                project_id="p1",
                translation_id=9,
                translation_data={"translation": "x", "reviewed": True},
            )


def test_not_found_error_type(fake_client):
    """Test that a missing translation is reported as NOT_FOUND."""
    fake_client.translation.side_effect = FakeApiError("Not Found", 404)

    with pytest.raises(LokaliseMcpError) as excinfo:
        controller.get_translation(GetTranslationArgs(project_id="p1", translation_id=4))

    assert excinfo.value.error_type is ErrorType.NOT_FOUND
    assert "Translation 4" in excinfo.value.message
