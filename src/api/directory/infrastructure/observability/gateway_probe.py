"""Domain probe for user gateway observability.

Captures request-level events for the remote users service and the
in-memory stand-in without exposing logging details to the gateways.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class GatewayProbe(Protocol):
    """Domain probe for user gateway operations."""

    def request_issued(self, method: str, path: str) -> None:
        """Record that a request was sent."""
        ...

    def request_succeeded(self, method: str, path: str, status_code: int) -> None:
        """Record that a request completed with a success status."""
        ...

    def request_failed(
        self,
        method: str,
        path: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        """Record that a request failed (transport, status or payload)."""
        ...

    def with_context(self, context: ObservationContext) -> GatewayProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultGatewayProbe:
    """Default implementation of GatewayProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultGatewayProbe:
        """Create a new probe with observation context bound."""
        return DefaultGatewayProbe(logger=self._logger, context=context)

    def request_issued(self, method: str, path: str) -> None:
        self._logger.debug(
            "user_gateway_request_issued",
            method=method,
            path=path,
            **self._get_context_kwargs(),
        )

    def request_succeeded(self, method: str, path: str, status_code: int) -> None:
        self._logger.debug(
            "user_gateway_request_succeeded",
            method=method,
            path=path,
            status_code=status_code,
            **self._get_context_kwargs(),
        )

    def request_failed(
        self,
        method: str,
        path: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self._logger.error(
            "user_gateway_request_failed",
            method=method,
            path=path,
            error=message,
            status_code=status_code,
            **self._get_context_kwargs(),
        )
