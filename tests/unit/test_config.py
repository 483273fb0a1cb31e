"""Tests for ServerConfig.from_env."""

import pytest
from buildplan.config import ServerConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without environment overrides the server listens on 127.0.0.1:8080."""
    for var in ("BUILDPLAN_HOST", "BUILDPLAN_PORT", "BUILDPLAN_DEBUG", "BUILDPLAN_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    config = ServerConfig.from_env()

    assert config == ServerConfig(host="127.0.0.1", port=8080, debug=False, log_level="INFO")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every field can be set from the environment."""
    monkeypatch.setenv("BUILDPLAN_HOST", "0.0.0.0")
    monkeypatch.setenv("BUILDPLAN_PORT", "9000")
    monkeypatch.setenv("BUILDPLAN_DEBUG", "false")
    monkeypatch.setenv("BUILDPLAN_LOG_LEVEL", "warning")

    config = ServerConfig.from_env()

    assert config == ServerConfig(host="0.0.0.0", port=9000, debug=False, log_level="WARNING")


def test_debug_defaults_log_level_to_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    """Debug mode lowers the default log level."""
    monkeypatch.setenv("BUILDPLAN_DEBUG", "True")
    monkeypatch.delenv("BUILDPLAN_LOG_LEVEL", raising=False)

    config = ServerConfig.from_env()

    assert config.debug is True
    assert config.log_level == "DEBUG"
