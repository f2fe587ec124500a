"""
Unit tests for the type classifier.
"""

from datetime import datetime

from ampy_dump.classify import Shape, classify, is_value_sequence, sequence_items


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestClassify:
    def test_null(self):
        assert classify(None) is Shape.NULL

    def test_scalars(self):
        for value in (1, 1.5, "text", b"raw", True, datetime(2024, 1, 1)):
            assert classify(value) is Shape.SCALAR

    def test_string_is_not_a_sequence(self):
        assert classify("abc") is Shape.SCALAR

    def test_mapping(self):
        assert classify({"a": 1}) is Shape.MAPPING

    def test_sequences(self):
        for value in ([1], (1,), {1}, frozenset(), range(3), (i for i in range(2))):
            assert classify(value) is Shape.SEQUENCE

    def test_record(self):
        assert classify(Point(1, 2)) is Shape.RECORD

    def test_extra_leaf_type_wins_over_record(self):
        assert classify(Point(1, 2), (Point,)) is Shape.SCALAR


class TestValueSequence:
    def test_scalars_and_nulls(self):
        assert is_value_sequence([1, "a", None, 2.5])

    def test_empty_is_not_value_form(self):
        assert not is_value_sequence([])

    def test_nested_scalar_collections(self):
        assert is_value_sequence([[1, 2], (3,)])

    def test_records_and_mappings(self):
        assert not is_value_sequence([Point(1, 2)])
        assert not is_value_sequence([{"a": 1}])
        assert not is_value_sequence([1, Point(1, 2)])

    def test_self_containing_list_terminates(self):
        items = [1]
        items.append(items)
        assert not is_value_sequence(items, (), frozenset({id(items)}))

    def test_sets_are_sorted(self):
        assert sequence_items({3, 1, 2}) == [1, 2, 3]
        assert sequence_items(["b", "a"]) == ["b", "a"]
