"""
Unit tests for process configuration.
"""

import pytest

from ampy_dump import get_config, get_logger, init, serialize, shutdown
from ampy_dump.logging import _NopLogger, _StdoutLogger
from ampy_dump.policy import FormatPolicy


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Money:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


class Holder:
    def __init__(self, inner):
        self.inner = inner


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("AMPY_DUMP_MODE", "AMPY_DUMP_VALIDATE", "AMPY_DUMP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestInit:
    def test_defaults_are_pretty(self, clean_env):
        config = get_config()
        assert config.policy.name == "pretty"
        assert config.legacy_value_collections
        assert not config.validate_output

    def test_compact_mode_applies_to_serialize(self, clean_env):
        init(mode="compact")
        assert serialize(Point(1, 2)) == '{"x":1,"y":2}'

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            init(mode="fancy")

    def test_explicit_config_overrides_process_config(self, compact):
        init(mode="pretty")
        assert serialize(Point(1, 2), config=compact) == '{"x":1,"y":2}'

    def test_normalized_value_collections(self):
        init(mode="compact", legacy_value_collections=False)
        assert serialize([1, 2]) == "[1,2]"

    def test_extra_leaf_types_are_sniffed(self):
        init(mode="compact", extra_leaf_types=[Money])
        assert serialize(Holder(Money("12.50"))) == '{"inner":12.5}'
        assert serialize(Holder(Money("EUR"))) == '{"inner":"EUR"}'

    def test_logger_selection(self):
        init(enable_logs=False)
        assert isinstance(get_logger(), _NopLogger)
        init(enable_logs=True, log_level="debug")
        assert isinstance(get_logger(), _StdoutLogger)
        assert get_logger().threshold == 10

    def test_shutdown_rereads_environment(self, clean_env):
        init(mode="pretty")
        shutdown()
        clean_env.setenv("AMPY_DUMP_MODE", "compact")
        clean_env.setenv("AMPY_DUMP_VALIDATE", "yes")
        config = get_config()
        assert config.policy == FormatPolicy.compact()
        assert config.validate_output


class TestFormatPolicy:
    def test_pretty(self):
        policy = FormatPolicy.pretty(newline="\n")
        assert policy.indent_unit == "  "
        assert policy.colon == ": "
        assert policy.is_pretty

    def test_compact(self):
        policy = FormatPolicy.compact()
        assert (policy.indent_unit, policy.newline, policy.space) == ("", "", "")
        assert policy.colon == ":"
        assert not policy.is_pretty

    def test_from_name(self):
        assert FormatPolicy.from_name(" Compact ") == FormatPolicy.compact()
