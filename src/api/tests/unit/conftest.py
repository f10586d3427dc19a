"""Unit test fixtures with in-memory collaborators."""

import pytest

from directory.infrastructure.seed import demo_users
from directory.ports.notifications import Notification


class RecordingNotifier:
    """Notifier that keeps every notification for later assertions."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def failures(self) -> list[Notification]:
        return [n for n in self.notifications if n.destructive]

    @property
    def successes(self) -> list[Notification]:
        return [n for n in self.notifications if not n.destructive]


@pytest.fixture
def notifier():
    """Provide a recording notifier."""
    return RecordingNotifier()


@pytest.fixture
def seeded_users():
    """Provide the twelve demo users."""
    return demo_users()


@pytest.fixture
def directory_settings():
    """Provide test directory settings."""
    from infrastructure.settings import DirectorySettings

    return DirectorySettings(
        gateway="memory",
        base_url="https://users.example.test/api",
        timeout_seconds=5.0,
        mock_latency_seconds=0.0,
        notifier="log",
    )
