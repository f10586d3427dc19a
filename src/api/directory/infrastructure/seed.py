"""Demo directory used by the in-memory gateway."""

from __future__ import annotations

from datetime import UTC, datetime

from directory.domain.aggregates import User
from directory.domain.value_objects import Role, UserStatus

# (first, last, role, status, department, location, joined)
_DEMO_ROWS: tuple[tuple[str, str, Role, UserStatus, str, str, str], ...] = (
    ("Janet", "Weaver", Role.ADMIN, UserStatus.ACTIVE, "Engineering", "San Francisco", "2022-01-05"),
    ("Emma", "Wong", Role.USER, UserStatus.ACTIVE, "Marketing", "New York", "2022-02-10"),
    ("Eve", "Holt", Role.EDITOR, UserStatus.INACTIVE, "Product", "Chicago", "2022-03-15"),
    ("Charles", "Morris", Role.USER, UserStatus.ACTIVE, "Sales", "London", "2022-04-20"),
    ("Tracey", "Ramos", Role.EDITOR, UserStatus.PENDING, "Design", "Paris", "2022-05-25"),
    ("Michael", "Lawson", Role.USER, UserStatus.ACTIVE, "Support", "Berlin", "2022-06-30"),
    ("Lindsay", "Ferguson", Role.USER, UserStatus.INACTIVE, "HR", "Tokyo", "2022-07-05"),
    ("Tobias", "Funke", Role.EDITOR, UserStatus.ACTIVE, "Legal", "Sydney", "2022-08-10"),
    ("Byron", "Fields", Role.ADMIN, UserStatus.ACTIVE, "Executive", "Singapore", "2022-09-15"),
    ("George", "Edwards", Role.USER, UserStatus.PENDING, "Finance", "Toronto", "2022-10-20"),
    ("Rachel", "Howell", Role.USER, UserStatus.ACTIVE, "Research", "Melbourne", "2022-11-25"),
    ("Alex", "Garcia", Role.EDITOR, UserStatus.ACTIVE, "Development", "Madrid", "2022-12-30"),
)


def demo_users() -> list[User]:
    """Return a fresh copy of the twelve demo users, ids 1 through 12."""
    users = []
    for user_id, (first, last, role, status, department, location, joined) in enumerate(
        _DEMO_ROWS, start=1
    ):
        users.append(
            User(
                id=user_id,
                first_name=first,
                last_name=last,
                email=f"{first.lower()}.{last.lower()}@example.com",
                avatar=f"https://reqres.in/img/faces/{user_id + 1}-image.jpg",
                role=role,
                status=status,
                created_at=datetime.fromisoformat(joined).replace(tzinfo=UTC),
                department=department,
                location=location,
            )
        )
    return users
