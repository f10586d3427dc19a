"""Architecture tests for the directory bounded context.

These tests enforce layer boundaries inside the directory context: the
domain is pure, the application layer talks to ports only, and nothing
below presentation depends on rendering libraries.
"""

from pytest_archon import archrule


class TestDirectoryDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain objects should not know about gateways or HTTP."""
        (
            archrule("domain_no_infrastructure")
            .match("directory.domain*")
            .should_not_import("directory.infrastructure*", "httpx*")
            .check("directory")
        )

    def test_domain_does_not_import_application(self):
        """Domain objects should be usable without the store."""
        (
            archrule("domain_no_application")
            .match("directory.domain*")
            .should_not_import("directory.application*", "directory.ports*")
            .check("directory")
        )


class TestDirectoryApplicationLayerBoundaries:
    """Tests that the store depends on ports, not implementations."""

    def test_application_does_not_import_infrastructure(self):
        """The store must work with any gateway implementation."""
        (
            archrule("application_no_infrastructure")
            .match("directory.application*")
            .should_not_import("directory.infrastructure*", "httpx*", "rich*")
            .check("directory")
        )

    def test_ports_do_not_import_infrastructure(self):
        (
            archrule("ports_no_infrastructure")
            .match("directory.ports*")
            .should_not_import("directory.infrastructure*", "directory.application*")
            .check("directory")
        )
