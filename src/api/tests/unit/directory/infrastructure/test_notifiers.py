"""Unit tests for notification channel implementations."""

import io
from unittest.mock import MagicMock

from rich.console import Console

from directory.infrastructure.notifiers import LoggingNotifier, RichConsoleNotifier
from directory.ports.notifications import INotifier, Notification


class TestNotification:
    def test_success_is_not_destructive(self):
        notification = Notification.success("User created successfully")

        assert notification.title == "Success"
        assert notification.destructive is False

    def test_failure_is_destructive(self):
        notification = Notification.failure("Failed to fetch user details")

        assert notification.title == "Error"
        assert notification.destructive is True


class TestRichConsoleNotifier:
    def test_prints_title_and_description(self):
        buffer = io.StringIO()
        notifier = RichConsoleNotifier(console=Console(file=buffer, width=80))

        notifier.notify(Notification.failure("Database offline"))

        output = buffer.getvalue()
        assert "Error" in output
        assert "Database offline" in output

    def test_bracketed_description_is_printed_literally(self):
        buffer = io.StringIO()
        notifier = RichConsoleNotifier(console=Console(file=buffer, width=80))

        notifier.notify(Notification.failure("closing tag [/x] in server message"))

        assert "closing tag [/x] in server message" in buffer.getvalue()

    def test_implements_protocol(self):
        assert isinstance(RichConsoleNotifier(), INotifier)


class TestLoggingNotifier:
    def test_success_logs_info(self):
        logger = MagicMock()
        notifier = LoggingNotifier(logger=logger)

        notifier.notify(Notification.success("User updated successfully"))

        logger.info.assert_called_once_with(
            "user_notification",
            title="Success",
            description="User updated successfully",
            destructive=False,
        )
        logger.warning.assert_not_called()

    def test_failure_logs_warning(self):
        logger = MagicMock()
        notifier = LoggingNotifier(logger=logger)

        notifier.notify(Notification.failure("User 9 not found"))

        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["destructive"] is True
