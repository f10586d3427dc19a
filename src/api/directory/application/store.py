"""Directory store for the user directory.

The store is the single source of truth for what the directory looks
like right now and the only writer of DirectoryState. Consumers hold a
reference to the store, read ``state`` and request changes through its
operations. Nothing else assigns state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from directory.application.observability import (
    DefaultDirectoryStoreProbe,
    DirectoryStoreProbe,
)
from directory.application.state import DirectoryState
from directory.domain.aggregates import User
from directory.domain.statistics import DirectoryStatistics
from directory.domain.value_objects import PAGE_SIZE, PageInfo
from directory.ports.exceptions import RequestError
from directory.ports.gateway import IUserGateway
from directory.ports.models import UserChanges
from directory.ports.notifications import INotifier, Notification

FETCH_ERROR_MESSAGE = "Failed to fetch users"

StateListener = Callable[[DirectoryState], None]


class DirectoryStore:
    """Fetches, caches, paginates and mutates the user collection.

    Every fetch is stamped with a monotonically increasing sequence number.
    A completion is applied only if its number is higher than the last one
    applied; older completions are discarded, but the call that issued them
    still returns normally.

    Gateway failures never escape: mutations report a boolean and lookups
    return None. The gateway has already put its failure on the
    notification channel, so the store does not notify again.
    """

    def __init__(
        self,
        gateway: IUserGateway,
        notifier: INotifier,
        probe: DirectoryStoreProbe | None = None,
        page_size: int = PAGE_SIZE,
    ):
        """Initialize DirectoryStore with dependencies.

        Args:
            gateway: Gateway used for every read and write
            notifier: Channel for success confirmations
            probe: Optional domain probe for observability
            page_size: Records per page
        """
        self._gateway = gateway
        self._notifier = notifier
        self._probe = probe or DefaultDirectoryStoreProbe()
        self._page_size = page_size
        self._state = DirectoryState(page_info=PageInfo(per_page=page_size))
        self._listeners: list[StateListener] = []
        self._issued_sequence = 0
        self._applied_sequence = 0

    @property
    def state(self) -> DirectoryState:
        """Current snapshot. Read-only for consumers."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def statistics(self) -> DirectoryStatistics:
        """Summary counts over the loaded page and the directory total."""
        return DirectoryStatistics.from_users(self._state.users, total=self._state.total)

    async def fetch_page(self, page: int = 1) -> None:
        """Load ``page`` into the directory state.

        Pages below 1 are treated as 1. If the gateway reports a page
        beyond the last one (the directory shrank), the last page is
        fetched instead so ``current_page`` stays within range.
        """
        page = max(1, page)
        self._issued_sequence += 1
        sequence = self._issued_sequence

        self._probe.page_requested(page=page, sequence=sequence)
        self._set_state(replace(self._state, loading=True, error=None))

        try:
            response = await self._gateway.list_page(page, self._page_size)
        except RequestError as e:
            if self._is_stale(sequence, page):
                return
            self._applied_sequence = sequence
            self._probe.page_fetch_failed(page=page, error=e.message, sequence=sequence)
            self._set_state(
                replace(
                    self._state,
                    loading=self._has_newer_fetch(sequence),
                    error=FETCH_ERROR_MESSAGE,
                )
            )
            return

        if self._is_stale(sequence, page):
            return

        page_info = PageInfo(
            page=response.page,
            per_page=response.per_page,
            total=response.total,
        )
        if page_info.total_pages >= 1 and not page_info.contains(page_info.page):
            self._probe.page_out_of_range(
                requested=page_info.page, total_pages=page_info.total_pages
            )
            if not self._has_newer_fetch(sequence):
                await self.fetch_page(page_info.total_pages)
            return

        users = tuple(record.to_domain() for record in response.data)
        self._applied_sequence = sequence
        self._probe.page_applied(
            page=page_info.page,
            total=page_info.total,
            count=len(users),
            sequence=sequence,
        )
        self._set_state(
            DirectoryState(
                users=users,
                loading=self._has_newer_fetch(sequence),
                error=None,
                page_info=page_info,
            )
        )

    async def fetch_one(self, user_id: int) -> User | None:
        """Look up a single user without touching the directory state.

        Returns:
            The user, or None if it does not exist or the lookup failed
        """
        try:
            return await self._gateway.get_one(user_id)
        except RequestError as e:
            self._probe.user_lookup_failed(user_id=user_id, error=e.message)
            return None

    async def create(self, changes: UserChanges | Mapping[str, Any]) -> bool:
        """Create a user, filling defaults for omitted role, status and avatar.

        Returns:
            True if the user was created
        """
        payload = _as_changes(changes).with_creation_defaults()
        try:
            ack = await self._gateway.create(payload)
        except RequestError as e:
            self._probe.user_mutation_failed(operation="create", user_id=None, error=e.message)
            return False

        self._probe.user_mutated(operation="create", user_id=ack.id)
        self._notifier.notify(Notification.success("User created successfully"))
        await self.fetch_page(self._state.current_page)
        return True

    async def update(self, user_id: int, changes: UserChanges | Mapping[str, Any]) -> bool:
        """Merge ``changes`` into the user with ``user_id``.

        Returns:
            True if the user was updated
        """
        try:
            await self._gateway.update(user_id, _as_changes(changes))
        except RequestError as e:
            self._probe.user_mutation_failed(operation="update", user_id=user_id, error=e.message)
            return False

        self._probe.user_mutated(operation="update", user_id=user_id)
        self._notifier.notify(Notification.success("User updated successfully"))
        await self.fetch_page(self._state.current_page)
        return True

    async def delete(self, user_id: int) -> bool:
        """Remove the user with ``user_id``.

        Returns:
            True if the user was deleted
        """
        try:
            await self._gateway.delete(user_id)
        except RequestError as e:
            self._probe.user_mutation_failed(operation="delete", user_id=user_id, error=e.message)
            return False

        self._probe.user_mutated(operation="delete", user_id=user_id)
        self._notifier.notify(Notification.success("User deleted successfully"))
        await self.fetch_page(self._state.current_page)
        return True

    def _is_stale(self, sequence: int, page: int) -> bool:
        if sequence > self._applied_sequence:
            return False
        self._probe.stale_page_discarded(
            page=page, sequence=sequence, latest_applied=self._applied_sequence
        )
        return True

    def _has_newer_fetch(self, sequence: int) -> bool:
        return sequence < self._issued_sequence

    def _set_state(self, state: DirectoryState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


def _as_changes(changes: UserChanges | Mapping[str, Any]) -> UserChanges:
    if isinstance(changes, UserChanges):
        return changes
    return UserChanges.model_validate(dict(changes))
