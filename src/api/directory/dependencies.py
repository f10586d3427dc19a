"""Composition of the directory bounded context.

The gateway and notifier implementations are chosen here, once, from
settings. The resulting store is handed to consumers by reference.
"""

from __future__ import annotations

from directory.application.observability import DefaultDirectoryStoreProbe
from directory.application.store import DirectoryStore
from directory.infrastructure.http_gateway import HttpUserGateway
from directory.infrastructure.in_memory_gateway import InMemoryUserGateway
from directory.infrastructure.notifiers import LoggingNotifier, RichConsoleNotifier
from directory.infrastructure.observability import DefaultGatewayProbe
from directory.infrastructure.seed import demo_users
from directory.ports.gateway import IUserGateway
from directory.ports.notifications import INotifier
from infrastructure.settings import DirectorySettings, get_directory_settings
from shared_kernel.observability_context import ObservationContext


def get_notifier(settings: DirectorySettings | None = None) -> INotifier:
    """Build the notification channel selected in settings."""
    settings = settings or get_directory_settings()
    if settings.notifier == "log":
        return LoggingNotifier()
    return RichConsoleNotifier()


def get_user_gateway(
    notifier: INotifier,
    settings: DirectorySettings | None = None,
) -> IUserGateway:
    """Build the gateway implementation selected in settings.

    Args:
        notifier: Channel the gateway reports failures on
        settings: Directory settings (defaults to the cached environment settings)

    Returns:
        An HttpUserGateway or an InMemoryUserGateway seeded with demo users
    """
    settings = settings or get_directory_settings()
    probe = DefaultGatewayProbe().with_context(ObservationContext(gateway=settings.gateway))

    if settings.gateway == "memory":
        return InMemoryUserGateway(
            notifier=notifier,
            users=demo_users(),
            latency=settings.mock_latency_seconds,
            probe=probe,
        )

    return HttpUserGateway(
        base_url=settings.base_url,
        notifier=notifier,
        api_key=settings.api_key.get_secret_value() or None,
        timeout=settings.timeout_seconds,
        probe=probe,
    )


def get_directory_store(
    settings: DirectorySettings | None = None,
    notifier: INotifier | None = None,
    gateway: IUserGateway | None = None,
) -> DirectoryStore:
    """Wire a DirectoryStore with its gateway and notifier."""
    settings = settings or get_directory_settings()
    notifier = notifier or get_notifier(settings)
    gateway = gateway or get_user_gateway(notifier, settings)
    probe = DefaultDirectoryStoreProbe().with_context(
        ObservationContext(gateway=settings.gateway)
    )
    return DirectoryStore(gateway=gateway, notifier=notifier, probe=probe)
