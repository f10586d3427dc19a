"""Directory state snapshot exposed to consumers."""

from __future__ import annotations

from dataclasses import dataclass, field

from directory.domain.aggregates import User
from directory.domain.value_objects import PageInfo


@dataclass(frozen=True)
class DirectoryState:
    """What the directory looks like right now.

    Snapshots are immutable. The store swaps in a whole new snapshot on
    every change, so a reader never observes users from one fetch paired
    with pagination metadata from another.
    """

    users: tuple[User, ...] = ()
    loading: bool = True
    error: str | None = None
    page_info: PageInfo = field(default_factory=PageInfo)

    @property
    def current_page(self) -> int:
        return self.page_info.page

    @property
    def total(self) -> int:
        return self.page_info.total

    @property
    def total_pages(self) -> int:
        return self.page_info.total_pages
