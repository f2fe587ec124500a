"""
Pytest configuration and fixtures for ampy_dump tests.
"""

import pytest

from ampy_dump import DumpConfig, FormatPolicy, set_logger, shutdown


class CapturingLogger:
    """Logger double that keeps every record in memory."""

    def __init__(self):
        self.records = []

    def debug(self, msg, **kv):
        self.records.append(("debug", msg, kv))

    def info(self, msg, **kv):
        self.records.append(("info", msg, kv))

    def warn(self, msg, **kv):
        self.records.append(("warn", msg, kv))

    def error(self, msg, **kv):
        self.records.append(("error", msg, kv))

    def warnings(self):
        return [r for r in self.records if r[0] == "warn"]


@pytest.fixture(autouse=True)
def reset_process_config():
    """Every test starts and ends with the default configuration."""
    shutdown()
    yield
    shutdown()


@pytest.fixture
def compact():
    return DumpConfig(policy=FormatPolicy.compact())


@pytest.fixture
def pretty():
    return DumpConfig(policy=FormatPolicy.pretty(newline="\n"))


@pytest.fixture
def captured_logger():
    logger = CapturingLogger()
    set_logger(logger)
    return logger


@pytest.fixture
def logger_factory():
    return CapturingLogger
