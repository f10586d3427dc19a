"""Domain-Oriented Observability for directory infrastructure."""

from directory.infrastructure.observability.gateway_probe import (
    DefaultGatewayProbe,
    GatewayProbe,
)

__all__ = [
    "DefaultGatewayProbe",
    "GatewayProbe",
]
