"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures operation-scoped metadata that should be included with all
    instrumentation events emitted by a probe.

    Attributes:
        request_id: Identifier for the current operation (if applicable).
        actor: Who triggered the operation, e.g. the signed-in admin.
        gateway: Name of the gateway implementation in use.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-123", gateway="http")
        probe = DefaultGatewayProbe().with_context(context)
    """

    request_id: str | None = None
    actor: str | None = None
    gateway: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.actor is not None:
            result["actor"] = self.actor
        if self.gateway is not None:
            result["gateway"] = self.gateway
        result.update(self.extra)
        return result

    def with_gateway(self, gateway: str) -> ObservationContext:
        """Create a new context with the gateway name set."""
        return ObservationContext(
            request_id=self.request_id,
            actor=self.actor,
            gateway=gateway,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            actor=self.actor,
            gateway=self.gateway,
            extra={**self.extra, **kwargs},
        )
