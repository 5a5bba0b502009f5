"""Tests for the tasks domain controller."""

import pytest

from lokalise_mcp.domains.tasks import tasks_controller as controller
from lokalise_mcp.domains.tasks.tasks_controller import resolve_task_languages
from lokalise_mcp.domains.tasks.tasks_types import (
    CreateTaskArgs,
    ListTasksArgs,
    TaskLanguage,
    UpdateTaskArgs,
)
from lokalise_mcp.errors import ErrorType, LokaliseMcpError
from tests.conftest import FakeApiError, collection

TASK = {
    "task_id": 55,
    "title": "Translate onboarding",
    "status": "in progress",
    "progress": 40,
    "languages": [{"language_iso": "fr", "users": [{"user_id": 7}]}],
}


class TestResolveTaskLanguages:
    """Tests for resolve_task_languages."""

    def test_assignees_fill_unassigned_languages(self):
        """Test that top-level assignees go to languages with nobody assigned."""
        languages = [
            TaskLanguage(language_iso="fr"),
            TaskLanguage(language_iso="de", groups=[3]),
        ]

        resolved = resolve_task_languages(languages, [7, 8])

        assert resolved == [
            {"language_iso": "fr", "users": [7, 8]},
            {"language_iso": "de", "groups": [3]},
        ]

    def test_explicit_users_are_kept(self):
        resolved = resolve_task_languages([TaskLanguage(language_iso="fr", users=[1])], [7])

        assert resolved == [{"language_iso": "fr", "users": [1]}]

    def test_requires_languages(self):
        with pytest.raises(LokaliseMcpError) as excinfo:
            resolve_task_languages([], [7])

        assert excinfo.value.error_type is ErrorType.VALIDATION_ERROR

    def test_language_without_anyone_assigned(self):
        """Test that a language with no users, no groups and no assignees is rejected."""
        with pytest.raises(LokaliseMcpError) as excinfo:
            resolve_task_languages([TaskLanguage(language_iso="fr")], None)

        assert "'fr'" in excinfo.value.message


class TestTasks:
    """Tests for task operations."""

    def test_list_tasks_filters(self, fake_client):
        fake_client.tasks.return_value = collection([TASK], total_count=1)

        response = controller.list_tasks(
            ListTasksArgs(project_id="p1", filter_statuses=["new", "in_progress"])
        )

        project_id, params = fake_client.tasks.call_args.args
        assert project_id == "p1"
        assert params == {"filter_statuses": "new,in_progress"}
        assert "Translation Tasks (1)" in response.content
        assert "Translate onboarding" in response.content

    def test_create_task_payload(self, fake_client):
        """Test that empty optional lists are dropped and assignees are resolved."""
        fake_client.create_task.return_value = TASK

        response = controller.create_task(
            CreateTaskArgs(
                project_id="p1",
                title="  Translate onboarding ",
                keys=[],
                languages=[{"language_iso": "fr"}],
                assignees=[7],
                closing_tags=[],
            )
        )

        project_id, data = fake_client.create_task.call_args.args
        assert project_id == "p1"
        assert data == {
            "title": "Translate onboarding",
            "task_type": "translation",
            "languages": [{"language_iso": "fr", "users": [7]}],
        }
        assert "Task Created" in response.content

    def test_create_task_without_languages(self, fake_client):
        with pytest.raises(LokaliseMcpError) as excinfo:
            controller.create_task(CreateTaskArgs(project_id="p1", title="Review"))

        assert excinfo.value.error_type is ErrorType.VALIDATION_ERROR
        fake_client.create_task.assert_not_called()

    def test_update_missing_task(self, fake_client):
        fake_client.update_task.side_effect = FakeApiError("Not Found", 404)

        with pytest.raises(LokaliseMcpError) as excinfo:
            controller.update_task(
                UpdateTaskArgs(project_id="p1", task_id=55, task_data={"close_task": True})
            )

        assert excinfo.value.message == "Task 55 not found in project 'p1'."
