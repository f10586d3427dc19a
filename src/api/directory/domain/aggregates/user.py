"""User aggregate for the directory context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

from directory.domain.value_objects import Role, UserStatus

DEFAULT_AVATAR = "https://reqres.in/img/faces/1-image.jpg"


@dataclass(frozen=True)
class User:
    """User aggregate representing one record in the directory.

    Identifiers are numeric and assigned by whichever gateway stores the
    record. Role and status are closed enumerations.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    avatar: str = DEFAULT_AVATAR
    role: Role = Role.USER
    status: UserStatus = UserStatus.ACTIVE
    created_at: datetime | None = None
    last_login: datetime | None = None
    department: str | None = None
    location: str | None = None

    def __post_init__(self) -> None:
        # Normalise plain strings coming from wire payloads; invalid values raise ValueError
        object.__setattr__(self, "role", Role(self.role))
        object.__setattr__(self, "status", UserStatus(self.status))

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.id}, {self.email})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def with_changes(self, changes: Mapping[str, Any]) -> User:
        """Return a copy with ``changes`` merged in.

        Unknown keys are ignored and the identifier is never changed.

        Args:
            changes: Field name to new value

        Returns:
            A new User carrying the merged values
        """
        allowed = {f.name for f in fields(self)} - {"id"}
        return replace(self, **{k: v for k, v in changes.items() if k in allowed})
