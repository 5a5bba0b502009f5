"""Tests for the languages, contributors, comments, glossary and queued process controllers."""

from types import SimpleNamespace

import lokalise
import pytest
from lokalise import request as lokalise_request
from pydantic import ValidationError

from lokalise_mcp.domains.comments import comments_controller
from lokalise_mcp.domains.comments.comments_types import (
    CreateCommentsArgs,
    GetCommentArgs,
    ListKeyCommentsArgs,
)
from lokalise_mcp.domains.contributors import contributors_controller
from lokalise_mcp.domains.contributors.contributors_types import (
    AddContributorsArgs,
    GetCurrentUserArgs,
    UpdateContributorArgs,
)
from lokalise_mcp.domains.glossary import glossary_controller
from lokalise_mcp.domains.glossary.glossary_types import (
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    UpdateGlossaryTermsArgs,
)
from lokalise_mcp.domains.languages import languages_controller
from lokalise_mcp.domains.languages.languages_types import (
    AddProjectLanguagesArgs,
    ListProjectLanguagesArgs,
    UpdateLanguageArgs,
)
from lokalise_mcp.domains.queuedprocesses import queuedprocesses_controller
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_types import (
    GetQueuedProcessArgs,
    ListQueuedProcessesArgs,
)
from lokalise_mcp.errors import ErrorType, LokaliseMcpError
from lokalise_mcp.lokalise_client import client as client_module
from tests.conftest import FakeApiError, collection


class TestLanguages:
    """Tests for language operations."""

    def test_project_languages_with_progress(self, fake_client):
        """Test that per-language progress comes from the project statistics."""
        fake_client.project_languages.return_value = collection(
            [{"lang_id": 640, "lang_iso": "fr", "lang_name": "French", "is_rtl": False}]
        )
        fake_client.project.return_value = SimpleNamespace(
            project_id="p1",
            statistics={"languages": [{"language_id": 640, "progress": 85}]},
        )

        response = languages_controller.list_project_languages(
            ListProjectLanguagesArgs(project_id="p1", include_progress=True)
        )

        fake_client.project_languages.assert_called_once_with("p1", {"limit": 500})
        assert "Project Languages (1)" in response.content
        assert "| Progress |" in response.content
        assert "85%" in response.content

    def test_project_languages_without_progress(self, fake_client):
        fake_client.project_languages.return_value = collection([])

        response = languages_controller.list_project_languages(
            ListProjectLanguagesArgs(project_id="p1")
        )

        fake_client.project.assert_not_called()
        assert "No languages found in project p1" in response.content

    def test_add_languages(self, fake_client):
        fake_client.create_languages.return_value = collection(
            [{"lang_id": 597, "lang_iso": "de", "lang_name": "German"}], errors=[]
        )

        response = languages_controller.add_project_languages(
            AddProjectLanguagesArgs(project_id="p1", languages=[{"lang_iso": "de"}])
        )

        fake_client.create_languages.assert_called_once_with("p1", [{"lang_iso": "de"}])
        assert "Languages Added" in response.content

    def test_update_requires_a_field(self, fake_client):
        with pytest.raises(LokaliseMcpError) as excinfo:
            languages_controller.update_language(
                UpdateLanguageArgs(project_id="p1", language_id=640, language_data={})
            )

        assert excinfo.value.error_type is ErrorType.VALIDATION_ERROR


class TestContributors:
    """Tests for contributor operations."""

    def test_add_contributors(self, fake_client):
        fake_client.create_contributors.return_value = collection(
            [{"user_id": 7, "email": "ana@example.com"}], errors=[]
        )

        contributors_controller.add_contributors(
            AddContributorsArgs(
                project_id="p1",
                contributors=[
                    {
                        "email": "ana@example.com",
                        "languages": [{"lang_iso": "fr", "is_writable": True}],
                        "admin_rights": ["keys"],
                    }
                ],
            )
        )

        fake_client.create_contributors.assert_called_once_with(
            "p1",
            [
                {
                    "email": "ana@example.com",
                    "languages": [{"lang_iso": "fr", "is_writable": True}],
                    "admin_rights": ["keys"],
                }
            ],
        )

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            AddContributorsArgs(
                project_id="p1",
                contributors=[{"email": "not-an-email", "languages": [{"lang_iso": "fr"}]}],
            )

    def test_current_user(self, fake_client):
        fake_client.current_contributor.return_value = {"user_id": 1, "fullname": "Me"}

        response = contributors_controller.get_current_user(GetCurrentUserArgs(project_id="p1"))

        assert "Your Contributor Profile: Me" in response.content

    def test_update_requires_a_field(self, fake_client):
        with pytest.raises(LokaliseMcpError):
            contributors_controller.update_contributor(
                UpdateContributorArgs(project_id="p1", contributor_id=7)
            )

        fake_client.update_contributor.assert_not_called()


class TestComments:
    """Tests for comment operations."""

    def test_key_comments(self, fake_client):
        fake_client.key_comments.return_value = collection(
            [{"comment_id": 3, "key_id": 101, "comment": "Check the tone"}]
        )

        response = comments_controller.list_key_comments(
            ListKeyCommentsArgs(project_id="p1", key_id=101)
        )

        fake_client.key_comments.assert_called_once_with("p1", 101, {})
        assert "Key 101 Comments (1)" in response.content

    def test_missing_comment(self, fake_client):
        fake_client.key_comment.side_effect = FakeApiError("Not Found", 404)

        with pytest.raises(LokaliseMcpError) as excinfo:
            comments_controller.get_comment(
                GetCommentArgs(project_id="p1", key_id=101, comment_id=3)
            )

        assert excinfo.value.message == "Comment 3 not found on key 101."

    def test_create_comments(self, fake_client):
        fake_client.create_key_comments.return_value = collection(
            [{"comment_id": 4, "comment": "Looks good"}]
        )

        response = comments_controller.create_comments(
            CreateCommentsArgs(project_id="p1", key_id=101, comments=[{"comment": "Looks good"}])
        )

        fake_client.create_key_comments.assert_called_once_with(
            "p1", 101, [{"comment": "Looks good"}]
        )
        assert "Comments Added (1)" in response.content


class TestGlossary:
    """Tests for glossary operations."""

    def test_create_terms_uses_api_field_names(self, fake_client):
        """Test that terms are sent with the camelCase field names."""
        fake_client.create_glossary_terms.return_value = collection([{"id": 1, "term": "Acme"}])

        glossary_controller.create_glossary_terms(
            CreateGlossaryTermsArgs(
                project_id="p1",
                terms=[
                    {
                        "term": "Acme",
                        "case_sensitive": True,
                        "translatable": False,
                        "translations": [{"lang_id": 640, "translation": "Acme"}],
                    }
                ],
            )
        )

        fake_client.create_glossary_terms.assert_called_once_with(
            "p1",
            [
                {
                    "term": "Acme",
                    "description": "",
                    "caseSensitive": True,
                    "translatable": False,
                    "forbidden": False,
                    "translations": [{"langId": 640, "translation": "Acme"}],
                }
            ],
        )

    def test_update_terms_sends_only_changes(self, fake_client):
        fake_client.update_glossary_terms.return_value = collection([{"id": 1, "term": "Acme"}])

        response = glossary_controller.update_glossary_terms(
            UpdateGlossaryTermsArgs(project_id="p1", terms=[{"id": 1, "forbidden": True}])
        )

        fake_client.update_glossary_terms.assert_called_once_with(
            "p1", [{"id": 1, "forbidden": True}]
        )
        assert response.metadata == {"updated": 1, "errors": 0}

    def test_delete_terms(self, fake_client):
        fake_client.delete_glossary_terms.return_value = {"deleted": {"count": 2}}

        response = glossary_controller.delete_glossary_terms(
            DeleteGlossaryTermsArgs(project_id="p1", term_ids=[1, 2])
        )

        fake_client.delete_glossary_terms.assert_called_once_with("p1", [1, 2])
        assert "Glossary Terms Deleted" in response.content


class TestGlossaryRequestBodies:
    """Tests that the glossary bulk endpoints put the expected JSON on the wire."""

    @pytest.fixture
    def sent(self, monkeypatch):
        """Route a real SDK client through recording request functions."""
        calls = []

        def post(client, path, params=None):
            calls.append(("POST", path, params))
            return {"project_id": "p1", "data": [{"term_id": 1, "term": "Acme"}]}

        def delete(client, path, params=None):
            calls.append(("DELETE", path, params))
            return {"project_id": "p1", "data": {"deleted": {"count": 2}}}

        monkeypatch.setattr(lokalise_request, "post", post)
        monkeypatch.setattr(lokalise_request, "delete", delete)
        monkeypatch.setattr(client_module, "_client", lokalise.Client("test-token"))
        return calls

    def test_create_body_wraps_terms_once(self, sent):
        """Test that the terms list is wrapped in a single ``terms`` key."""
        glossary_controller.create_glossary_terms(
            CreateGlossaryTermsArgs(project_id="p1", terms=[{"term": "Acme"}])
        )

        [(method, path, body)] = sent
        assert method == "POST"
        assert path.startswith("projects/p1/glossary-terms")
        assert list(body) == ["terms"]
        assert isinstance(body["terms"], list)
        assert body["terms"][0]["term"] == "Acme"

    def test_delete_body_lists_ids(self, sent):
        response = glossary_controller.delete_glossary_terms(
            DeleteGlossaryTermsArgs(project_id="p1", term_ids=[1, 2])
        )

        [(method, _, body)] = sent
        assert method == "DELETE"
        assert body == {"terms": [1, 2]}
        assert "- **Deleted**: 2" in response.content


class TestQueuedProcesses:
    """Tests for queued process operations."""

    def test_list_processes(self, fake_client):
        fake_client.queued_processes.return_value = collection(
            [{"process_id": "abc", "type": "file-upload", "status": "finished"}]
        )

        response = queuedprocesses_controller.list_queued_processes(
            ListQueuedProcessesArgs(project_id="p1")
        )

        fake_client.queued_processes.assert_called_once_with("p1")
        assert "Queued Processes (1)" in response.content
        assert "File Upload" in response.content
        assert "✅ finished" in response.content

    def test_list_processes_pages_locally(self, fake_client):
        """Test that limit and page slice the full process list."""
        fake_client.queued_processes.return_value = collection(
            [
                {"process_id": "proc-a", "type": "file-upload", "status": "finished"},
                {"process_id": "proc-b", "type": "file-upload", "status": "running"},
                {"process_id": "proc-c", "type": "file-upload", "status": "queued"},
            ]
        )

        response = queuedprocesses_controller.list_queued_processes(
            ListQueuedProcessesArgs(project_id="p1", limit=2, page=1)
        )

        fake_client.queued_processes.assert_called_once_with("p1")
        assert response.metadata == {"count": 2}
        assert "proc-c" not in response.content
        assert "- **Next Page:** 2" in response.content

        response = queuedprocesses_controller.list_queued_processes(
            ListQueuedProcessesArgs(project_id="p1", limit=2, page=2)
        )

        assert response.metadata == {"count": 1}
        assert "Next Page" not in response.content

    def test_upload_details(self, fake_client):
        """Test that upload statistics are summed over the processed files."""
        fake_client.queued_process.return_value = {
            "process_id": "abc",
            "type": "file-upload",
            "status": "finished",
            "details": {
                "files": [
                    {"name_original": "en.json", "key_count_total": 10, "key_count_inserted": 4},
                    {"name_original": "fr.json", "key_count_total": 5, "key_count_inserted": 1},
                ]
            },
        }

        response = queuedprocesses_controller.get_queued_process(
            GetQueuedProcessArgs(project_id="p1", process_id="abc")
        )

        fake_client.queued_process.assert_called_once_with("p1", "abc")
        assert "File Upload Process" in response.content
        assert "Status: FINISHED" in response.content
        assert "- **Total Keys**: 15" in response.content
        assert "- **New Keys**: 5" in response.content

    def test_missing_process(self, fake_client):
        fake_client.queued_process.side_effect = FakeApiError("Not Found", 404)

        with pytest.raises(LokaliseMcpError) as excinfo:
            queuedprocesses_controller.get_queued_process(
                GetQueuedProcessArgs(project_id="p1", process_id="zzz")
            )

        assert excinfo.value.message == "Process 'zzz' not found in project 'p1'."
