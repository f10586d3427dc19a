"""Client-side filtering of the currently loaded directory page.

Filtering never reaches the gateway: it narrows the users already held
in the store's snapshot. Switching pages changes the input set but not
the criteria.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from directory.domain.aggregates import User
from directory.domain.value_objects import Role, UserStatus


@dataclass(frozen=True)
class UserFilter:
    """Search and facet criteria for the visible user list.

    Attributes:
        query: Free text matched case-insensitively against first name,
            last name and email. Empty matches everyone.
        role: Only keep users with this role (None keeps all roles).
        status: Only keep users with this status (None keeps all statuses).
    """

    query: str = ""
    role: Role | None = None
    status: UserStatus | None = None

    @classmethod
    def from_inputs(
        cls,
        query: str = "",
        role: str | None = None,
        status: str | None = None,
    ) -> UserFilter:
        """Build a filter from raw widget values.

        Empty strings mean "no filter", matching the "All Roles" and
        "All Status" select options.

        Raises:
            ValueError: If role or status is not one of the enumerated values
        """
        return cls(
            query=query,
            role=Role(role) if role else None,
            status=UserStatus(status) if status else None,
        )

    @property
    def is_empty(self) -> bool:
        return not self.query and self.role is None and self.status is None

    def matches(self, user: User) -> bool:
        """Return True if ``user`` satisfies every criterion."""
        if self.query:
            needle = self.query.lower()
            haystacks = (user.first_name, user.last_name, user.email)
            if not any(needle in value.lower() for value in haystacks):
                return False
        if self.role is not None and user.role != self.role:
            return False
        if self.status is not None and user.status != self.status:
            return False
        return True

    def apply(self, users: Iterable[User]) -> list[User]:
        """Return the matching users, preserving their order."""
        return [user for user in users if self.matches(user)]
