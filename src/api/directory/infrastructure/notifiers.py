"""Notification channel implementations."""

from __future__ import annotations

import structlog
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from directory.ports.notifications import Notification


class RichConsoleNotifier:
    """Shows notifications as coloured panels on a terminal."""

    def __init__(self, console: Console | None = None):
        self._console = console or Console(stderr=True)

    def notify(self, notification: Notification) -> None:
        style = "red" if notification.destructive else "green"
        self._console.print(
            Panel(
                Text(notification.description),
                title=Text(notification.title, style="bold"),
                border_style=style,
                expand=False,
            )
        )


class LoggingNotifier:
    """Writes notifications to the structured log instead of a screen."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def notify(self, notification: Notification) -> None:
        log = self._logger.warning if notification.destructive else self._logger.info
        log(
            "user_notification",
            title=notification.title,
            description=notification.description,
            destructive=notification.destructive,
        )
