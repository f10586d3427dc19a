"""Notification channel port.

A fire-and-forget "show this title and description" call, used both for
success confirmations and for failures. It is the only side channel the
directory core emits on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Notification:
    """A toast-style message for the end user."""

    title: str
    description: str
    destructive: bool = False

    @classmethod
    def success(cls, description: str) -> Notification:
        return cls(title="Success", description=description)

    @classmethod
    def failure(cls, description: str) -> Notification:
        return cls(title="Error", description=description, destructive=True)


@runtime_checkable
class INotifier(Protocol):
    """Delivers notifications to whatever surface the user is looking at."""

    def notify(self, notification: Notification) -> None:
        """Show ``notification``. Must not raise."""
        ...
