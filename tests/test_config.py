"""Tests for settings and logging setup."""

import logging

from mapshapes.config import Settings, get_settings
from mapshapes.log import configure_logging


def test_defaults():
    s = Settings(_env_file=None)
    assert s.strict_geometry is True
    assert s.log_level == "info"


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAPSHAPES_STRICT_GEOMETRY", "false")
    monkeypatch.setenv("MAPSHAPES_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.strict_geometry is False
    assert s.log_level == "debug"


def test_get_settings_is_singleton():
    assert get_settings() is get_settings()


def test_configure_logging_uses_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    monkeypatch.setattr(get_settings(), "log_level", "warning")
    configure_logging()
    assert calls["level"] == logging.WARNING
    configure_logging("debug")
    assert calls["level"] == logging.DEBUG


def test_env_file_read_without_direct_dotenv(tmp_path, monkeypatch):
    monkeypatch.delenv("MAPSHAPES_STRICT_GEOMETRY", raising=False)
    monkeypatch.delenv("MAPSHAPES_ENV", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("MAPSHAPES_STRICT_GEOMETRY=false\nMAPSHAPES_ENV=test\n")
    s = Settings(_env_file=env_file)
    assert s.strict_geometry is False
    assert s.env == "test"
