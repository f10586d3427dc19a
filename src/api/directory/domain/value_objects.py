"""Value objects for the user directory domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for roles, statuses and pagination.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

PAGE_SIZE = 6


class Role(StrEnum):
    """Directory roles.

    Closed set: any other string is rejected when a Role is built from it.
    """

    ADMIN = "admin"
    USER = "user"
    EDITOR = "editor"


class UserStatus(StrEnum):
    """Account lifecycle status of a directory user."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for one window into the directory.

    ``total_pages`` is always derived from ``total`` so the two can never
    disagree.
    """

    page: int = 1
    per_page: int = PAGE_SIZE
    total: int = 0

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.per_page < 1:
            raise ValueError(f"per_page must be >= 1, got {self.per_page}")
        if self.total < 0:
            raise ValueError(f"total must be >= 0, got {self.total}")

    @property
    def total_pages(self) -> int:
        """Number of pages needed to show ``total`` records."""
        return math.ceil(self.total / self.per_page)

    @property
    def offset(self) -> int:
        """Zero-based index of the first record on this page."""
        return (self.page - 1) * self.per_page

    def contains(self, page: int) -> bool:
        """Return True if ``page`` is a valid page number for this total."""
        return 1 <= page <= self.total_pages
