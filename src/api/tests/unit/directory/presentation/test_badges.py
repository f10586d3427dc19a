"""Unit tests for role and status badges."""

import pytest

from directory.domain.value_objects import Role, UserStatus
from directory.presentation.badges import role_badge, status_badge, status_icon


class TestBadges:
    @pytest.mark.parametrize("role", list(Role))
    def test_every_role_has_a_badge(self, role):
        badge = role_badge(role)

        assert badge.label
        assert badge.color

    @pytest.mark.parametrize("status", list(UserStatus))
    def test_every_status_has_a_badge_and_icon(self, status):
        assert status_badge(status).label
        assert status_icon(status)

    def test_role_colours_are_distinct(self):
        assert len({role_badge(role).color for role in Role}) == len(Role)

    def test_known_styles(self):
        assert role_badge(Role.ADMIN).color == "purple"
        assert status_badge(UserStatus.PENDING).color == "yellow"
        assert status_icon(UserStatus.ACTIVE) == "user-check"
