import logging

import pytest

import modified
from modified import logconfig


def test_trace_level_is_registered():
    assert "TRACE" == logging.getLevelName(logconfig.TRACE)


def test_get_level(monkeypatch):
    monkeypatch.delenv("MODIFIED_LOGGING_LEVEL", raising=False)
    assert "WARNING" == logconfig.get_level()

    monkeypatch.setenv("MODIFIED_LOGGING_LEVEL", "DEBUG")
    assert "DEBUG" == logconfig.get_level()


@pytest.mark.parametrize(
    "env_value,handler_type",
    [
        ("true", logging.StreamHandler),
        ("TRUE", logging.StreamHandler),
        ("false", logging.NullHandler),
        ("", logging.NullHandler),
    ],
)
def test_get_handler(monkeypatch, env_value, handler_type):
    monkeypatch.setenv("MODIFIED_USE_DEV_LOGGER", env_value)
    handler = logconfig.get_handler(level="INFO")
    assert type(handler) is handler_type
    assert logging.INFO == handler.level


def test_get_handler_uses_default_level(monkeypatch):
    monkeypatch.delenv("MODIFIED_USE_DEV_LOGGER", raising=False)
    monkeypatch.setenv("MODIFIED_LOGGING_LEVEL", "ERROR")
    assert logging.ERROR == logconfig.get_handler().level


def test_package_logger_name():
    assert logging.getLogger(logconfig.LOGGER_NAME) is logging.getLogger(
        modified.__name__
    )


@pytest.mark.usefixtures("restore_logger")
def test_configure_root_logger_installs_null_handler(monkeypatch):
    monkeypatch.delenv("MODIFIED_USE_DEV_LOGGER", raising=False)
    logger = logconfig.configure_root_logger()
    assert type(logger.handlers[-1]) is logging.NullHandler


@pytest.mark.parametrize("env_value", ["bogus", "", "NOTALEVEL"])
def test_get_level_falls_back_on_unknown_level(monkeypatch, env_value):
    monkeypatch.setenv("MODIFIED_LOGGING_LEVEL", env_value)
    assert "WARNING" == logconfig.get_level()


def test_get_level_accepts_lowercase_and_trace(monkeypatch):
    monkeypatch.setenv("MODIFIED_LOGGING_LEVEL", "info")
    assert "INFO" == logconfig.get_level()

    monkeypatch.setenv("MODIFIED_LOGGING_LEVEL", "trace")
    assert "TRACE" == logconfig.get_level()


@pytest.mark.usefixtures("restore_logger")
def test_configure_root_logger_with_unknown_env_level(monkeypatch):
    monkeypatch.setenv("MODIFIED_LOGGING_LEVEL", "bogus")
    logger = logconfig.configure_root_logger()
    assert logging.WARNING == logger.level


@pytest.mark.usefixtures("restore_logger")
def test_configure_root_logger_replaces_handler(monkeypatch):
    monkeypatch.delenv("MODIFIED_USE_DEV_LOGGER", raising=False)
    logger = logconfig.configure_root_logger(level="INFO")
    n_handlers = len(logger.handlers)
    assert logging.INFO == logger.level

    logger = logconfig.configure_root_logger(level="DEBUG")
    assert n_handlers == len(logger.handlers)
    assert logging.DEBUG == logger.level
    assert logging.DEBUG == logger.handlers[-1].level
