"""Pydantic models for the remote users service contract."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from directory.domain.aggregates import DEFAULT_AVATAR, User
from directory.domain.value_objects import Role, UserStatus

# A user always has these, so an explicit None means "leave unchanged"
_NON_NULLABLE_FIELDS = frozenset(
    {"first_name", "last_name", "email", "avatar", "role", "status"}
)


class UserChanges(BaseModel):
    """Partial user payload for create and update requests.

    Only the fields the caller actually set are sent, so an update never
    overwrites fields it did not mention.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    avatar: str | None = None
    role: Role | None = None
    status: UserStatus | None = None
    department: str | None = None
    location: str | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_null_required_fields(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {
                key: value
                for key, value in data.items()
                if not (key in _NON_NULLABLE_FIELDS and value is None)
            }
        return data

    def to_payload(self) -> dict[str, Any]:
        """Serialize the fields that were set to a JSON-ready dict."""
        return self.model_dump(mode="json", exclude_unset=True)

    def with_creation_defaults(self) -> UserChanges:
        """Fill omitted enumerable fields and the avatar for a new record."""
        defaults: dict[str, Any] = {}
        if self.role is None:
            defaults["role"] = Role.USER
        if self.status is None:
            defaults["status"] = UserStatus.ACTIVE
        if not self.avatar:
            defaults["avatar"] = DEFAULT_AVATAR
        if not defaults:
            return self
        # Round trip through validation so the defaults count as "set" for exclude_unset
        return UserChanges.model_validate({**self.model_dump(exclude_unset=True), **defaults})


class UserRecord(BaseModel):
    """User as it appears on the wire.

    The remote service may omit role, status and timestamps. Missing
    enumerable fields take the same defaults a newly created user gets.
    """

    model_config = ConfigDict(extra="ignore")

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

    def to_domain(self) -> User:
        """Convert the wire record to the domain aggregate."""
        return User(**self.model_dump())

    @classmethod
    def from_domain(cls, user: User) -> UserRecord:
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            avatar=user.avatar,
            role=user.role,
            status=user.status,
            created_at=user.created_at,
            last_login=user.last_login,
            department=user.department,
            location=user.location,
        )


class UserListResponse(BaseModel):
    """Response of ``GET /users?page&per_page``."""

    page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    data: list[UserRecord] = Field(default_factory=list)


class UserEnvelope(BaseModel):
    """Response of ``GET /users/{id}``."""

    data: UserRecord


class CreateUserAck(BaseModel):
    """Acknowledgement of ``POST /users``.

    Some services echo the id as a string; it is kept as received.
    """

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at")
    )


class UpdateUserAck(BaseModel):
    """Acknowledgement of ``PUT /users/{id}``."""

    model_config = ConfigDict(extra="allow")

    updated_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("updatedAt", "updated_at")
    )
