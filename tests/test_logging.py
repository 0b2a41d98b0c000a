"""Tests for logging configuration."""

import logging

import pytest
import structlog

from boutique.utils.logging import _rendering_processors, configure_logging, current_environment, get_log_level


@pytest.mark.parametrize(
    "env, level",
    [("production", "INFO"), ("development", "DEBUG"), ("test", "WARNING"), ("unknown", "INFO")],
)
def test_level_follows_environment(monkeypatch, env, level):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setenv("PROTEAN_ENV", env)

    assert current_environment() == env
    assert get_log_level() == level


def test_explicit_log_level_wins(monkeypatch):
    monkeypatch.setenv("PROTEAN_ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    assert get_log_level() == "ERROR"


def test_test_environment_logs_to_console_only(monkeypatch, tmp_path):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("PROTEAN_ENV", "test")

    configure_logging(log_dir=tmp_path, force=True)

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("env", ["development", "test"])
def test_console_renderer_receives_raw_exc_info(monkeypatch, env):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("PROTEAN_ENV", env)

    processors = _rendering_processors()

    assert structlog.processors.format_exc_info not in processors
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_json_renderer_gets_formatted_exceptions(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("PROTEAN_ENV", "production")

    processors = _rendering_processors()

    assert processors[0] is structlog.processors.format_exc_info
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
