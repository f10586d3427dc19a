"""Unit tests for the User aggregate."""

import pytest

from directory.domain.aggregates import DEFAULT_AVATAR, User
from directory.domain.value_objects import Role, UserStatus


def make_user(**overrides) -> User:
    values = {
        "id": 1,
        "first_name": "Janet",
        "last_name": "Weaver",
        "email": "janet.weaver@example.com",
    }
    values.update(overrides)
    return User(**values)


class TestUserCreation:
    """Tests for User construction."""

    def test_defaults_role_status_and_avatar(self):
        """Omitted enumerable fields should take the standard defaults."""
        user = make_user()

        assert user.role is Role.USER
        assert user.status is UserStatus.ACTIVE
        assert user.avatar == DEFAULT_AVATAR
        assert user.created_at is None
        assert user.last_login is None

    def test_normalises_plain_strings_to_enums(self):
        """Wire strings should become enum members."""
        user = make_user(role="editor", status="pending")

        assert user.role is Role.EDITOR
        assert user.status is UserStatus.PENDING

    def test_rejects_unknown_role(self):
        """Only enumerated roles are valid."""
        with pytest.raises(ValueError):
            make_user(role="superuser")

    def test_rejects_unknown_status(self):
        """Only enumerated statuses are valid."""
        with pytest.raises(ValueError):
            make_user(status="banned")


class TestUserEquality:
    """Tests for identity-based equality."""

    def test_users_with_same_id_are_equal(self):
        assert make_user(first_name="A") == make_user(first_name="B")

    def test_users_with_different_ids_are_not_equal(self):
        assert make_user(id=1) != make_user(id=2)

    def test_hash_follows_id(self):
        assert len({make_user(), make_user(email="other@example.com")}) == 1

    def test_not_equal_to_other_types(self):
        assert make_user() != 1


class TestWithChanges:
    """Tests for merging partial changes."""

    def test_merges_given_fields_only(self):
        user = make_user(role=Role.ADMIN)

        updated = user.with_changes({"last_name": "Smith", "status": UserStatus.INACTIVE})

        assert updated.last_name == "Smith"
        assert updated.status is UserStatus.INACTIVE
        assert updated.first_name == "Janet"
        assert updated.role is Role.ADMIN

    def test_never_changes_id(self):
        updated = make_user(id=7).with_changes({"id": 99, "first_name": "Jan"})

        assert updated.id == 7
        assert updated.first_name == "Jan"

    def test_ignores_unknown_keys(self):
        updated = make_user().with_changes({"nickname": "jw"})

        assert not hasattr(updated, "nickname")

    def test_original_is_unchanged(self):
        user = make_user()

        user.with_changes({"first_name": "Other"})

        assert user.first_name == "Janet"

    def test_full_name(self):
        assert make_user().full_name == "Janet Weaver"
