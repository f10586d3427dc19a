"""In-memory implementation of the user gateway.

Stands in for the remote users service in demos and tests. Behaves like
the HTTP gateway from the store's point of view: same payload models,
same RequestError family, same failure notifications.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from datetime import UTC, datetime

from directory.domain.aggregates import User
from directory.domain.value_objects import PageInfo
from directory.infrastructure.observability import DefaultGatewayProbe, GatewayProbe
from directory.ports.exceptions import RequestError, UserNotFoundError
from directory.ports.models import (
    CreateUserAck,
    UpdateUserAck,
    UserChanges,
    UserListResponse,
    UserRecord,
)
from directory.ports.notifications import INotifier, Notification


class InMemoryUserGateway:
    """User gateway holding the directory in a process-local list.

    New users get ``max(existing id) + 1``. Every call sleeps for
    ``latency`` seconds first, which also yields to the event loop so
    overlapping calls interleave the way network calls do.
    """

    def __init__(
        self,
        notifier: INotifier,
        users: Iterable[User] = (),
        latency: float = 0.0,
        probe: GatewayProbe | None = None,
    ):
        self._notifier = notifier
        self._users: list[User] = list(users)
        self._latency = latency
        self._probe = probe or DefaultGatewayProbe()

    @property
    def users(self) -> tuple[User, ...]:
        """Snapshot of every stored user, in insertion order."""
        return tuple(self._users)

    async def list_page(self, page: int, per_page: int) -> UserListResponse:
        await self._begin("GET", "/users")
        if page < 1 or per_page < 1:
            raise self._failure(
                RequestError("Invalid pagination parameters", status_code=400), "GET", "/users"
            )

        info = PageInfo(page=page, per_page=per_page, total=len(self._users))
        window = self._users[info.offset : info.offset + per_page]
        self._probe.request_succeeded(method="GET", path="/users", status_code=200)
        return UserListResponse(
            page=info.page,
            per_page=info.per_page,
            total=info.total,
            total_pages=info.total_pages,
            data=[UserRecord.from_domain(user) for user in window],
        )

    async def get_one(self, user_id: int) -> User:
        path = f"/users/{user_id}"
        await self._begin("GET", path)
        user = self._users[self._index_of(user_id, "GET", path)]
        self._probe.request_succeeded(method="GET", path=path, status_code=200)
        return user

    async def create(self, changes: UserChanges) -> CreateUserAck:
        await self._begin("POST", "/users")
        fields = changes.with_creation_defaults().model_dump(exclude_unset=True)
        now = datetime.now(tz=UTC)
        new_id = max((user.id for user in self._users), default=0) + 1

        user = User(
            id=new_id,
            first_name=fields.pop("first_name", None) or "",
            last_name=fields.pop("last_name", None) or "",
            email=fields.pop("email", None) or "",
            created_at=now,
            last_login=now,
            **{k: v for k, v in fields.items() if v is not None},
        )
        self._users.append(user)
        self._probe.request_succeeded(method="POST", path="/users", status_code=201)
        return CreateUserAck(id=new_id, created_at=now)

    async def update(self, user_id: int, changes: UserChanges) -> UpdateUserAck:
        path = f"/users/{user_id}"
        await self._begin("PUT", path)
        index = self._index_of(user_id, "PUT", path)
        self._users[index] = self._users[index].with_changes(
            changes.model_dump(exclude_unset=True)
        )
        self._probe.request_succeeded(method="PUT", path=path, status_code=200)
        return UpdateUserAck(updated_at=datetime.now(tz=UTC))

    async def delete(self, user_id: int) -> None:
        path = f"/users/{user_id}"
        await self._begin("DELETE", path)
        del self._users[self._index_of(user_id, "DELETE", path)]
        self._probe.request_succeeded(method="DELETE", path=path, status_code=204)

    async def _begin(self, method: str, path: str) -> None:
        self._probe.request_issued(method=method, path=path)
        await asyncio.sleep(self._latency)

    def _index_of(self, user_id: int, method: str, path: str) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise self._failure(UserNotFoundError(user_id), method, path)

    def _failure(self, error: RequestError, method: str, path: str) -> RequestError:
        self._probe.request_failed(
            method=method,
            path=path,
            message=error.message,
            status_code=error.status_code,
        )
        self._notifier.notify(Notification.failure(error.message))
        return error
