"""Badge styling for roles and statuses.

Every branch on Role or UserStatus goes through ``match`` with an
``assert_never`` fallthrough, so adding an enum member without handling
it here is reported by the type checker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from directory.domain.value_objects import Role, UserStatus


@dataclass(frozen=True)
class BadgeStyle:
    """Visual treatment of a badge: display label plus a colour name."""

    label: str
    color: str


def role_badge(role: Role) -> BadgeStyle:
    match role:
        case Role.ADMIN:
            return BadgeStyle(label="Admin", color="purple")
        case Role.USER:
            return BadgeStyle(label="User", color="blue")
        case Role.EDITOR:
            return BadgeStyle(label="Editor", color="indigo")
        case _:
            assert_never(role)


def status_badge(status: UserStatus) -> BadgeStyle:
    match status:
        case UserStatus.ACTIVE:
            return BadgeStyle(label="Active", color="green")
        case UserStatus.INACTIVE:
            return BadgeStyle(label="Inactive", color="grey50")
        case UserStatus.PENDING:
            return BadgeStyle(label="Pending", color="yellow")
        case _:
            assert_never(status)


def status_icon(status: UserStatus) -> str:
    """Icon name shown next to the status badge on user cards."""
    match status:
        case UserStatus.ACTIVE:
            return "user-check"
        case UserStatus.INACTIVE:
            return "user-minus"
        case UserStatus.PENDING:
            return "user-x"
        case _:
            assert_never(status)
