"""Gateway interface (port) for the directory bounded context.

The gateway turns the CRUD verbs into calls against a remote users
service, or an in-memory stand-in. Implementations are chosen at
composition time; the store never branches on which one it holds.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from directory.domain.aggregates import User
from directory.ports.models import (
    CreateUserAck,
    UpdateUserAck,
    UserChanges,
    UserListResponse,
)


@runtime_checkable
class IUserGateway(Protocol):
    """Request/response access to the user collection.

    Every method either returns a parsed success payload or raises
    RequestError. Before raising, implementations emit a destructive
    notification carrying the same message, so each gateway failure
    reaches the user exactly once.
    """

    async def list_page(self, page: int, per_page: int) -> UserListResponse:
        """Fetch one page of users.

        Args:
            page: 1-based page number
            per_page: Page size

        Returns:
            The page of users with pagination metadata

        Raises:
            RequestError: If the request fails
        """
        ...

    async def get_one(self, user_id: int) -> User:
        """Fetch a single user.

        Raises:
            UserNotFoundError: If no user has this identifier
            RequestError: If the request fails otherwise
        """
        ...

    async def create(self, changes: UserChanges) -> CreateUserAck:
        """Create a user from the given fields.

        Raises:
            RequestError: If the request fails
        """
        ...

    async def update(self, user_id: int, changes: UserChanges) -> UpdateUserAck:
        """Merge the given fields into an existing user.

        Raises:
            UserNotFoundError: If no user has this identifier
            RequestError: If the request fails otherwise
        """
        ...

    async def delete(self, user_id: int) -> None:
        """Remove a user.

        Raises:
            UserNotFoundError: If no user has this identifier
            RequestError: If the request fails otherwise
        """
        ...
