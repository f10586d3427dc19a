"""Summary statistics shown on the dashboard cards and charts."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from directory.domain.aggregates import User
from directory.domain.value_objects import Role, UserStatus


@dataclass(frozen=True)
class DirectoryStatistics:
    """Counts by status and role over a set of users.

    ``total`` is the directory-wide record count reported by the gateway,
    while the breakdowns only cover the users that were counted (the
    loaded page).
    """

    total: int = 0
    by_status: dict[UserStatus, int] = field(default_factory=dict)
    by_role: dict[Role, int] = field(default_factory=dict)

    @classmethod
    def from_users(cls, users: Iterable[User], total: int | None = None) -> DirectoryStatistics:
        users = list(users)
        status_counts = Counter(user.status for user in users)
        role_counts = Counter(user.role for user in users)
        return cls(
            total=len(users) if total is None else total,
            by_status={status: status_counts.get(status, 0) for status in UserStatus},
            by_role={role: role_counts.get(role, 0) for role in Role},
        )

    @property
    def active(self) -> int:
        return self.by_status.get(UserStatus.ACTIVE, 0)

    @property
    def inactive(self) -> int:
        return self.by_status.get(UserStatus.INACTIVE, 0)

    @property
    def pending(self) -> int:
        return self.by_status.get(UserStatus.PENDING, 0)

    @property
    def counted(self) -> int:
        """Number of users the breakdowns were computed over."""
        return sum(self.by_status.values())
