"""Tests for pydantic settings."""

import pytest
from pydantic import ValidationError

from openiban.utils.config import Settings, get_settings, reload_settings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the host environment and any local .env file."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "OPENIBAN_LOG_LEVEL",
        "OPENIBAN_JSON_LOGS",
        "OPENIBAN_OUTPUT_FORMAT",
        "OPENIBAN_MASK_IBANS_IN_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.json_logs is False
    assert settings.output_format == "rich"
    assert settings.mask_ibans_in_logs is True


def test_settings_env_override(monkeypatch):
    """Environment variables with the OPENIBAN_ prefix override defaults."""
    monkeypatch.setenv("OPENIBAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("OPENIBAN_JSON_LOGS", "true")
    monkeypatch.setenv("OPENIBAN_OUTPUT_FORMAT", "json")

    settings = reload_settings()

    assert settings.log_level == "DEBUG"
    assert settings.json_logs is True
    assert settings.output_format == "json"


def test_settings_from_env_file(tmp_path):
    (tmp_path / ".env").write_text("OPENIBAN_MASK_IBANS_IN_LOGS=false\n")

    assert Settings().mask_ibans_in_logs is False


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_invalid_output_format_rejected(monkeypatch):
    monkeypatch.setenv("OPENIBAN_OUTPUT_FORMAT", "xml")

    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("OPENIBAN_OUTPUT_FORMAT", "json")

    assert get_settings() is first
    assert reload_settings().output_format == "json"
