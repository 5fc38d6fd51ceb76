import logging

import pytest
from pythonjsonlogger import jsonlogger

from ws_views.config.model import GlobalConfig
from ws_views.logging_config import LOG_FORMAT_ENV, configure_logging, resolve_log_format


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_is_the_default(restore_root_logger, monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    configure_logging()

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.INFO


def test_env_var_selects_plain(restore_root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "PLAIN")
    configure_logging(level=logging.DEBUG)

    root = restore_root_logger
    formatter = root.handlers[0].formatter
    assert not isinstance(formatter, jsonlogger.JsonFormatter)
    assert root.level == logging.DEBUG


def test_argument_overrides_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")
    configure_logging(force_format="json")
    assert isinstance(restore_root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_json_records_carry_extra_fields(restore_root_logger):
    configure_logging(force_format="json")
    formatter = restore_root_logger.handlers[0].formatter

    record = logging.LogRecord("ws_views.test", logging.INFO, __file__, 1, "Switched view", None, None)
    record.view = "python"
    output = formatter.format(record)

    assert '"view": "python"' in output
    assert "Switched view" in output


def test_global_config_format_applies_when_env_unset(restore_root_logger, monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    config = GlobalConfig(default_view=None, views=[], log_format="plain")

    configure_logging(config=config)
    assert not isinstance(restore_root_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_env_overrides_global_config(monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "json")
    config = GlobalConfig(default_view=None, views=[], log_format="plain")
    assert resolve_log_format(config=config) == "json"
    assert resolve_log_format("plain", config) == "plain"


def test_unknown_format_falls_back_to_json(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    assert resolve_log_format("xml") == "json"
    assert resolve_log_format(config=GlobalConfig(default_view=None, views=[], log_format=" ")) == "json"
