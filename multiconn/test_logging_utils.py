"""Tests for logging configuration helpers."""

import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from .logging_utils import configureLogger, getLogLevelByStr, initLogging


@pytest.fixture
def isolatedLogger():
    """Provide a named logger and clean its handlers afterwards."""
    localLogger = logging.getLogger("multiconn.tests.isolated")
    yield localLogger
    for handler in localLogger.handlers[:]:
        handler.close()
        localLogger.removeHandler(handler)
    localLogger.setLevel(logging.NOTSET)
    localLogger.propagate = True


@pytest.fixture
def restoreRootLogger():
    """Restore root logger level and handlers after initLogging()."""
    rootLogger = logging.getLogger()
    level = rootLogger.level
    handlers = rootLogger.handlers[:]
    yield rootLogger
    for handler in rootLogger.handlers[:]:
        if handler not in handlers:
            handler.close()
        rootLogger.removeHandler(handler)
    for handler in handlers:
        rootLogger.addHandler(handler)
    rootLogger.setLevel(level)


class TestGetLogLevelByStr:
    def testKnownLevels(self):
        assert getLogLevelByStr("debug") == logging.DEBUG
        assert getLogLevelByStr("WARNING") == logging.WARNING

    def testUnknownLevel(self):
        assert getLogLevelByStr("loud") is None
        assert getLogLevelByStr("loud", logging.INFO) == logging.INFO

    def testNonLevelAttribute(self):
        assert getLogLevelByStr("getLogger") is None


class TestConfigureLogger:
    def testLevelAndPropagate(self, isolatedLogger):
        configureLogger(isolatedLogger, {"level": "DEBUG", "propagate": False})

        assert isolatedLogger.level == logging.DEBUG
        assert isolatedLogger.propagate is False

    def testConsoleHandler(self, isolatedLogger):
        configureLogger(isolatedLogger, {"level": "INFO", "console": True, "console-level": "ERROR"})

        assert len(isolatedLogger.handlers) == 1
        assert isolatedLogger.handlers[0].level == logging.ERROR

    def testReconfigureReplacesHandlers(self, isolatedLogger):
        configureLogger(isolatedLogger, {"console": True})
        configureLogger(isolatedLogger, {"console": True})

        assert len(isolatedLogger.handlers) == 1

    def testFileHandler(self, isolatedLogger, tmp_path):
        logFile = tmp_path / "logs" / "manager.log"

        configureLogger(isolatedLogger, {"level": "INFO", "file": str(logFile)})
        isolatedLogger.info("Created connection")
        for handler in isolatedLogger.handlers:
            handler.flush()

        assert "Created connection" in logFile.read_text()

    def testRotatingFileHandler(self, isolatedLogger, tmp_path):
        configureLogger(isolatedLogger, {"file": str(tmp_path / "manager.log"), "rotate": True})

        assert isinstance(isolatedLogger.handlers[0], TimedRotatingFileHandler)


def testInitLoggingConfiguresNamedLoggers(restoreRootLogger, isolatedLogger):
    initLogging({"level": "WARNING", "logger": {isolatedLogger.name: {"level": "DEBUG"}}})

    assert restoreRootLogger.level == logging.WARNING
    assert isolatedLogger.level == logging.DEBUG
