"""Tests for the team users and user groups domain controllers."""

import pytest
from pydantic import ValidationError

from lokalise_mcp.domains.teamusers import teamusers_controller
from lokalise_mcp.domains.teamusers.teamusers_types import (
    DeleteTeamUserArgs,
    GetTeamUserArgs,
    ListTeamUsersArgs,
    UpdateTeamUserArgs,
)
from lokalise_mcp.domains.usergroups import usergroups_controller
from lokalise_mcp.domains.usergroups.usergroups_types import (
    CreateUserGroupArgs,
    GroupMembersArgs,
    GroupProjectsArgs,
    UpdateUserGroupArgs,
)
from lokalise_mcp.errors import LokaliseMcpError
from tests.conftest import FakeApiError, collection

USER = {
    "user_id": 7,
    "email": "ana@example.com",
    "fullname": "Ana Example",
    "role": "member",
    "created_at": "2023-03-01 09:00:00 (Etc/UTC)",
}

GROUP = {
    "group_id": 12,
    "name": "Reviewers",
    "permissions": {"is_admin": False, "is_reviewer": True, "languages": []},
    "members": [],
    "projects": [],
}


class TestTeamUsers:
    """Tests for team user operations."""

    def test_list_team_users(self, fake_client):
        fake_client.team_users.return_value = collection([USER], total_count=1)

        response = teamusers_controller.list_team_users(
            ListTeamUsersArgs(team_id="444", limit=50)
        )

        fake_client.team_users.assert_called_once_with("444", {"limit": 50})
        assert "Team Users (1)" in response.content
        assert "ana@example.com" in response.content

    def test_limit_above_team_maximum(self, fake_client):
        with pytest.raises(LokaliseMcpError):
            teamusers_controller.list_team_users(ListTeamUsersArgs(team_id=444, limit=101))

        fake_client.team_users.assert_not_called()

    def test_get_missing_user(self, fake_client):
        """Test the not-found message names both the user and the team."""
        fake_client.team_user.side_effect = FakeApiError("Not Found", 404)

        with pytest.raises(LokaliseMcpError) as excinfo:
            teamusers_controller.get_team_user(GetTeamUserArgs(team_id=444, user_id=7))

        assert excinfo.value.message == "User 7 not found in team '444'."

    def test_update_role(self, fake_client):
        fake_client.update_team_user.return_value = {**USER, "role": "admin"}

        response = teamusers_controller.update_team_user(
            UpdateTeamUserArgs(team_id=444, user_id=7, role="admin")
        )

        fake_client.update_team_user.assert_called_once_with(444, 7, {"role": "admin"})
        assert "Team User Updated" in response.content

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            UpdateTeamUserArgs(team_id=444, user_id=7, role="superuser")

    def test_delete_team_user(self, fake_client):
        fake_client.delete_team_user.return_value = {"team_id": 444, "team_user_deleted": True}

        response = teamusers_controller.delete_team_user(
            DeleteTeamUserArgs(team_id=444, user_id=7)
        )

        assert "Team User Removed" in response.content


class TestUserGroups:
    """Tests for user group operations."""

    def test_create_group_with_members_and_projects(self, fake_client):
        """Test that only group settings go to the create call."""
        fake_client.create_team_user_group.return_value = GROUP
        fake_client.add_members_to_group.return_value = {**GROUP, "members": [7, 8]}
        fake_client.add_projects_to_group.return_value = {
            **GROUP,
            "members": [7, 8],
            "projects": ["p1"],
        }

        response = usergroups_controller.create_usergroup(
            CreateUserGroupArgs(
                team_id=444,
                name="Reviewers",
                is_reviewer=True,
                languages=[{"lang_id": 640, "is_writable": True}],
                members=[7, 8],
                projects=["p1"],
            )
        )

        fake_client.create_team_user_group.assert_called_once_with(
            444,
            {
                "name": "Reviewers",
                "is_reviewer": True,
                "is_admin": False,
                "languages": [{"lang_id": 640, "is_writable": True}],
            },
        )
        fake_client.add_members_to_group.assert_called_once_with(444, 12, [7, 8])
        fake_client.add_projects_to_group.assert_called_once_with(444, 12, ["p1"])
        assert response.metadata == {"group_id": 12, "warnings": 0}
        assert "User Group Created" in response.content

    def test_create_group_member_failure_is_a_warning(self, fake_client):
        """Test that a failed member assignment keeps the created group."""
        fake_client.create_team_user_group.return_value = GROUP
        fake_client.add_members_to_group.side_effect = FakeApiError("Forbidden", 403)

        response = usergroups_controller.create_usergroup(
            CreateUserGroupArgs(team_id=444, name="Reviewers", members=[7])
        )

        assert response.metadata == {"group_id": 12, "warnings": 1}
        assert "Initial members were not added" in response.content
        fake_client.add_projects_to_group.assert_not_called()

    def test_create_group_failure_raises(self, fake_client):
        fake_client.create_team_user_group.side_effect = FakeApiError("Forbidden", 403)

        with pytest.raises(LokaliseMcpError):
            usergroups_controller.create_usergroup(
                CreateUserGroupArgs(team_id=444, name="Reviewers", members=[7])
            )

        fake_client.add_members_to_group.assert_not_called()

    def test_update_group_sends_settings_only(self, fake_client):
        fake_client.update_team_user_group.return_value = {**GROUP, "name": "Leads"}

        usergroups_controller.update_usergroup(
            UpdateUserGroupArgs(
                team_id=444, group_id=12, name="Leads", is_admin=True, admin_rights=["keys"]
            )
        )

        fake_client.update_team_user_group.assert_called_once_with(
            444,
            12,
            {"name": "Leads", "is_reviewer": False, "is_admin": True, "admin_rights": ["keys"]},
        )

    def test_add_members_deduplicates(self, fake_client):
        fake_client.add_members_to_group.return_value = {**GROUP, "members": [7, 8]}

        response = usergroups_controller.add_members_to_group(
            GroupMembersArgs(team_id=444, group_id=12, user_ids=[7, 8, 7])
        )

        fake_client.add_members_to_group.assert_called_once_with(444, 12, [7, 8])
        assert "Members Added" in response.content

    def test_remove_projects(self, fake_client):
        fake_client.remove_projects_from_group.return_value = GROUP

        response = usergroups_controller.remove_projects_from_group(
            GroupProjectsArgs(team_id=444, group_id=12, project_ids=["p1"])
        )

        fake_client.remove_projects_from_group.assert_called_once_with(444, 12, ["p1"])
        assert "Projects Removed" in response.content
        assert "- `p1`" in response.content

    def test_membership_requires_ids(self):
        with pytest.raises(ValidationError):
            GroupMembersArgs(team_id=444, group_id=12, user_ids=[])

    def test_missing_group(self, fake_client):
        fake_client.remove_members_from_group.side_effect = FakeApiError("Not Found", 404)

        with pytest.raises(LokaliseMcpError) as excinfo:
            usergroups_controller.remove_members_from_group(
                GroupMembersArgs(team_id=444, group_id=99, user_ids=[7])
            )

        assert excinfo.value.message == "User group 99 not found in team '444'."
