"""Unit tests for the directory store probe."""

from unittest.mock import MagicMock

from directory.application.observability import DefaultDirectoryStoreProbe
from shared_kernel.observability_context import ObservationContext


class TestDirectoryStoreProbeProtocol:
    """Tests for DirectoryStoreProbe protocol compliance."""

    def test_default_probe_implements_protocol(self):
        probe = DefaultDirectoryStoreProbe()

        assert hasattr(probe, "page_requested")
        assert hasattr(probe, "page_applied")
        assert hasattr(probe, "page_fetch_failed")
        assert hasattr(probe, "stale_page_discarded")
        assert hasattr(probe, "page_out_of_range")
        assert hasattr(probe, "user_lookup_failed")
        assert hasattr(probe, "user_mutated")
        assert hasattr(probe, "user_mutation_failed")
        assert hasattr(probe, "with_context")


class TestDirectoryStoreProbeEvents:
    def test_page_applied_logs_info(self):
        logger = MagicMock()
        probe = DefaultDirectoryStoreProbe(logger=logger)

        probe.page_applied(page=2, total=12, count=6, sequence=3)

        logger.info.assert_called_once_with(
            "directory_page_applied", page=2, total=12, count=6, sequence=3
        )

    def test_stale_page_discarded_includes_context(self):
        logger = MagicMock()
        probe = DefaultDirectoryStoreProbe(logger=logger).with_context(
            ObservationContext(actor="admin@example.com")
        )

        probe.stale_page_discarded(page=1, sequence=1, latest_applied=2)

        logger.info.assert_called_once_with(
            "directory_stale_page_discarded",
            page=1,
            sequence=1,
            latest_applied=2,
            actor="admin@example.com",
        )

    def test_mutation_failure_logs_error(self):
        logger = MagicMock()
        probe = DefaultDirectoryStoreProbe(logger=logger)

        probe.user_mutation_failed(operation="delete", user_id=4, error="boom")

        logger.error.assert_called_once()
        assert logger.error.call_args.args == ("directory_user_mutation_failed",)
