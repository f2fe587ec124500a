"""
Unit tests for the diagnostic JSON check.
"""

from ampy_dump import DumpConfig, FormatPolicy, serialize
from ampy_dump.validate import check_output


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestCheckOutput:
    def test_valid_json(self, captured_logger):
        assert check_output('{"a": 1}')
        assert captured_logger.records == []

    def test_malformed_json_logs_warning(self, captured_logger):
        assert not check_output("{ 1, 2 }")
        level, msg, kv = captured_logger.warnings()[0]
        assert msg == "malformed dump output"
        assert kv["output"] == "{ 1, 2 }"
        assert kv["error"]

    def test_explicit_logger(self, captured_logger, logger_factory):
        other = logger_factory()
        check_output("{", other)
        assert len(other.warnings()) == 1
        assert captured_logger.records == []


class TestSerializeWithValidation:
    def test_output_unchanged_and_warned(self, captured_logger):
        config = DumpConfig(policy=FormatPolicy.pretty(), validate_output=True)
        assert serialize([1, 2, 3], config=config) == "{ 1, 2, 3 }"
        assert len(captured_logger.warnings()) == 1

    def test_valid_record_not_warned(self, captured_logger):
        config = DumpConfig(policy=FormatPolicy.compact(), validate_output=True)
        assert serialize(Point(1, 2), config=config) == '{"x":1,"y":2}'
        assert captured_logger.records == []

    def test_scalar_root_not_checked(self, captured_logger):
        config = DumpConfig(policy=FormatPolicy.compact(), validate_output=True)
        assert serialize("plain", config=config) == '"plain"'
        assert captured_logger.records == []

    def test_disabled_by_default(self, captured_logger):
        config = DumpConfig(policy=FormatPolicy.compact())
        serialize([1, 2], config=config)
        assert captured_logger.records == []
