"""Unit tests for infrastructure settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import DirectorySettings, Settings


class TestDirectorySettingsDefaults:
    """Tests for default directory configuration."""

    def test_defaults(self, monkeypatch):
        for name in (
            "USER_DIRECTORY_GATEWAY",
            "USER_DIRECTORY_BASE_URL",
            "USER_DIRECTORY_API_KEY",
            "USER_DIRECTORY_NOTIFIER",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = DirectorySettings(_env_file=None)

        assert settings.gateway == "http"
        assert settings.base_url == "https://reqres.in/api"
        assert settings.api_key.get_secret_value() == ""
        assert settings.notifier == "console"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("USER_DIRECTORY_GATEWAY", "memory")
        monkeypatch.setenv("USER_DIRECTORY_MOCK_LATENCY_SECONDS", "0.5")

        settings = DirectorySettings(_env_file=None)

        assert settings.gateway == "memory"
        assert settings.mock_latency_seconds == 0.5


class TestDirectorySettingsValidation:
    """Tests for rejected configuration."""

    def test_strips_trailing_slash(self):
        settings = DirectorySettings(base_url="https://users.example.test/api/")

        assert settings.base_url == "https://users.example.test/api"

    def test_base_url_must_be_http(self):
        with pytest.raises(ValidationError) as exc_info:
            DirectorySettings(base_url="ftp://users.example.test")

        assert "base_url" in str(exc_info.value)

    def test_unknown_gateway_is_rejected(self):
        with pytest.raises(ValidationError):
            DirectorySettings(gateway="postgres")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            DirectorySettings(timeout_seconds=0)

    def test_latency_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            DirectorySettings(mock_latency_seconds=-1)


class TestSettings:
    def test_exposes_directory_section(self):
        assert isinstance(Settings().directory, DirectorySettings)
