"""
Tests for logging configuration helpers.
"""

import logging

import pytest

from lib.logging_utils import configureLogger, getLogLevelByStr, initLogging


@pytest.fixture
def rootLogger():
    """Provide root logger and restore its state afterwards."""
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def namedLogger():
    """Provide a throw-away named logger."""
    localLogger = logging.getLogger("lib.nominatim.test-logger")
    yield localLogger
    for handler in localLogger.handlers[:]:
        handler.close()
        localLogger.removeHandler(handler)
    localLogger.setLevel(logging.NOTSET)
    localLogger.propagate = True


@pytest.mark.parametrize(
    "levelStr, expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("Warning", logging.WARNING), ("nonsense", None)],
)
def test_get_log_level_by_str(levelStr, expected):
    """Test log level lookup, dood!"""
    assert getLogLevelByStr(levelStr) == expected


def test_get_log_level_by_str_default():
    """Test that default is returned for unknown level, dood!"""
    assert getLogLevelByStr("", logging.ERROR) == logging.ERROR
    assert getLogLevelByStr("basicConfig", logging.ERROR) == logging.ERROR


def test_configure_logger_level_only(namedLogger):
    """Test that handlers are untouched without console or file, dood!"""
    existing = logging.NullHandler()
    namedLogger.addHandler(existing)

    configureLogger(namedLogger, {"level": "DEBUG", "propagate": False})

    assert namedLogger.level == logging.DEBUG
    assert namedLogger.propagate is False
    assert namedLogger.handlers == [existing]


def test_configure_logger_console(namedLogger):
    """Test console handler creation, dood!"""
    configureLogger(namedLogger, {"level": "INFO", "console": True, "console-level": "ERROR"})

    assert len(namedLogger.handlers) == 1
    handler = namedLogger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.level == logging.ERROR


def test_configure_logger_file(namedLogger, tmp_path):
    """Test file handler creation including missing directories, dood!"""
    logFile = tmp_path / "logs" / "nominatim.log"

    configureLogger(namedLogger, {"level": "INFO", "file": str(logFile)})
    namedLogger.info("Geocoding Berlin")
    for handler in namedLogger.handlers:
        handler.flush()

    assert len(namedLogger.handlers) == 1
    assert isinstance(namedLogger.handlers[0], logging.FileHandler)
    assert namedLogger.handlers[0].level == logging.INFO
    assert "Geocoding Berlin" in logFile.read_text(encoding="utf-8")


def test_init_logging(rootLogger, namedLogger):
    """Test root and per-logger configuration, dood!"""
    initLogging(
        {
            "level": "DEBUG",
            "logger": {namedLogger.name: {"level": "WARNING"}},
        }
    )

    assert rootLogger.level == logging.DEBUG
    assert namedLogger.level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING


def test_init_logging_empty_config(rootLogger):
    """Test that empty config keeps INFO level, dood!"""
    initLogging({})

    assert rootLogger.level == logging.INFO
