"""Pytest configuration and fixtures."""

import logging

import pytest


class RecordingSink(list):
    """Sink that keeps every message it is called with."""

    def __call__(self, message: str) -> None:
        self.append(message)


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach expectkit log handlers after each test so names can be reused."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("expectkit")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture
def make_sink():
    """Factory for independent recording sinks."""
    return RecordingSink
