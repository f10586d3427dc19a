"""Protocol for directory store observability.

Defines the interface for domain probes that capture application-level
events of the directory store: page fetches, stale responses and
mutations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DirectoryStoreProbe(Protocol):
    """Domain probe for directory store operations."""

    def page_requested(self, page: int, sequence: int) -> None:
        """Record that a page fetch was issued."""
        ...

    def page_applied(self, page: int, total: int, count: int, sequence: int) -> None:
        """Record that a fetched page replaced the directory state."""
        ...

    def page_fetch_failed(self, page: int, error: str, sequence: int) -> None:
        """Record that a page fetch failed and the error was applied."""
        ...

    def stale_page_discarded(self, page: int, sequence: int, latest_applied: int) -> None:
        """Record that an out-of-date fetch completion was dropped."""
        ...

    def page_out_of_range(self, requested: int, total_pages: int) -> None:
        """Record that a fetched page lay beyond the last page."""
        ...

    def user_lookup_failed(self, user_id: int, error: str) -> None:
        """Record that a single-user lookup failed."""
        ...

    def user_mutated(self, operation: str, user_id: int | str | None) -> None:
        """Record that a create, update or delete succeeded."""
        ...

    def user_mutation_failed(self, operation: str, user_id: int | None, error: str) -> None:
        """Record that a create, update or delete failed."""
        ...

    def with_context(self, context: ObservationContext) -> DirectoryStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDirectoryStoreProbe:
    """Default implementation of DirectoryStoreProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultDirectoryStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultDirectoryStoreProbe(logger=self._logger, context=context)

    def page_requested(self, page: int, sequence: int) -> None:
        self._logger.debug(
            "directory_page_requested",
            page=page,
            sequence=sequence,
            **self._get_context_kwargs(),
        )

    def page_applied(self, page: int, total: int, count: int, sequence: int) -> None:
        self._logger.info(
            "directory_page_applied",
            page=page,
            total=total,
            count=count,
            sequence=sequence,
            **self._get_context_kwargs(),
        )

    def page_fetch_failed(self, page: int, error: str, sequence: int) -> None:
        self._logger.warning(
            "directory_page_fetch_failed",
            page=page,
            error=error,
            sequence=sequence,
            **self._get_context_kwargs(),
        )

    def stale_page_discarded(self, page: int, sequence: int, latest_applied: int) -> None:
        self._logger.info(
            "directory_stale_page_discarded",
            page=page,
            sequence=sequence,
            latest_applied=latest_applied,
            **self._get_context_kwargs(),
        )

    def page_out_of_range(self, requested: int, total_pages: int) -> None:
        self._logger.info(
            "directory_page_out_of_range",
            requested=requested,
            total_pages=total_pages,
            **self._get_context_kwargs(),
        )

    def user_lookup_failed(self, user_id: int, error: str) -> None:
        self._logger.warning(
            "directory_user_lookup_failed",
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def user_mutated(self, operation: str, user_id: int | str | None) -> None:
        self._logger.info(
            "directory_user_mutated",
            operation=operation,
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_mutation_failed(self, operation: str, user_id: int | None, error: str) -> None:
        self._logger.error(
            "directory_user_mutation_failed",
            operation=operation,
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )
