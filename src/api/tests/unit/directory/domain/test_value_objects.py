"""Unit tests for directory value objects."""

import math

import pytest

from directory.domain.value_objects import PAGE_SIZE, PageInfo, Role, UserStatus


class TestEnumerations:
    """Tests for the closed role and status sets."""

    def test_roles(self):
        assert {role.value for role in Role} == {"admin", "user", "editor"}

    def test_statuses(self):
        assert {status.value for status in UserStatus} == {"active", "inactive", "pending"}

    def test_unknown_value_is_rejected(self):
        with pytest.raises(ValueError):
            Role("owner")


class TestPageInfo:
    """Tests for pagination metadata."""

    def test_page_size_is_six(self):
        assert PAGE_SIZE == 6
        assert PageInfo().per_page == 6

    @pytest.mark.parametrize("total", [0, 1, 5, 6, 7, 11, 12, 13, 100])
    def test_total_pages_is_ceiling_of_total_over_page_size(self, total):
        info = PageInfo(total=total)

        assert info.total_pages == math.ceil(total / 6)

    def test_offset(self):
        assert PageInfo(page=1, total=12).offset == 0
        assert PageInfo(page=2, total=12).offset == 6

    def test_contains(self):
        info = PageInfo(page=1, total=12)

        assert info.contains(1)
        assert info.contains(2)
        assert not info.contains(0)
        assert not info.contains(3)

    def test_empty_directory_contains_no_pages(self):
        assert not PageInfo(total=0).contains(1)

    @pytest.mark.parametrize(
        "kwargs",
        [{"page": 0}, {"per_page": 0}, {"total": -1}],
    )
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            PageInfo(**kwargs)
