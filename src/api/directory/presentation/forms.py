"""Pydantic model for the add/edit user form.

Structural validation happens here, before anything reaches the store.
A draft that fails raises pydantic's ValidationError with one entry per
offending field.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from directory.domain.aggregates import User
from directory.domain.value_objects import Role, UserStatus
from directory.ports.models import UserChanges

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserForm(BaseModel):
    """Values of the user form, as typed by an administrator."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=2, description="First name")
    last_name: str = Field(..., min_length=2, description="Last name")
    email: str = Field(..., description="Email address")
    avatar: str | None = Field(default=None, description="Avatar image URL")
    role: Role = Field(default=Role.USER, description="Directory role")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account status")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not _EMAIL_PATTERN.match(value):
            raise ValueError("Please enter a valid email address")
        return value

    @classmethod
    def from_user(cls, user: User) -> UserForm:
        """Prefill the form for editing an existing user."""
        return cls(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            avatar=user.avatar,
            role=user.role,
            status=user.status,
        )

    def to_changes(self) -> UserChanges:
        """Convert the validated form to a store payload.

        An empty avatar is left out so the default applies on create and
        the current avatar is kept on update.
        """
        values = self.model_dump()
        if not values["avatar"]:
            del values["avatar"]
        return UserChanges(**values)
