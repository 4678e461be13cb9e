#!/usr/bin/env python3
"""
Tests for array validation.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from json_tree import (
    ArraySchema,
    BooleanSchema,
    ErrorCode,
    JsonKind,
    NullSchema,
    NumberSchema,
    StringSchema,
    Validator,
    from_python,
    loads,
)
# autopep8: on


def error_summary(result):
    """Return (path, code) pairs for every error in a result."""
    return [(e.path, e.code) for e in result.errors]


class TestArraySize:
    """Tests for array size constraints."""

    def setup_method(self):
        """Set up test environment."""
        self.validator = Validator()

    def test_size_bounds(self):
        """Test inclusive minimum and maximum item counts."""
        schema = ArraySchema().min(1).max(2)

        assert self.validator.validate(from_python([1]), schema).valid
        assert self.validator.validate(from_python([1, 2]), schema).valid

        result = self.validator.validate(from_python([]), schema)
        assert error_summary(result) == [("", ErrorCode.ARRAY_TOO_SHORT)]
        assert result.errors[0].message == "Array must contain at least 1 items, but got 0"

        result = self.validator.validate(from_python([1, 2, 3]), schema)
        assert error_summary(result) == [("", ErrorCode.ARRAY_TOO_LONG)]
        assert result.errors[0].message == "Array must contain at most 2 items, but got 3"


class TestArrayItems:
    """Tests for single-schema item validation."""

    def setup_method(self):
        """Set up test environment."""
        self.validator = Validator()

    def test_items_get_indexed_paths(self):
        """Test that element errors carry the element index."""
        schema = ArraySchema().item(StringSchema().min(2))
        result = self.validator.validate(from_python(["ok", "x", 3]), schema)

        assert error_summary(result) == [
            ("[1]", ErrorCode.STRING_TOO_SHORT),
            ("[2]", ErrorCode.TYPE_ERROR),
        ]

    def test_items_then_uniqueness(self):
        """Test that element errors come before duplicate errors."""
        schema = ArraySchema().item(NumberSchema().min(5).max(10)).unique(True)
        result = self.validator.validate(loads('[5, 7, 7, "x"]'), schema)

        assert not result.valid
        assert error_summary(result) == [
            ("[3]", ErrorCode.TYPE_ERROR),
            ("[2]", ErrorCode.ARRAY_ITEMS_NOT_UNIQUE),
        ]

    def test_nested_arrays(self):
        """Test paths through nested arrays."""
        schema = ArraySchema().item(ArraySchema().item(BooleanSchema()))
        result = self.validator.validate(from_python([[True], [False, None]]), schema)

        assert error_summary(result) == [("[1][1]", ErrorCode.TYPE_ERROR)]

    def test_item_none_is_ignored(self):
        """Test that passing None keeps the current item schema."""
        element = StringSchema()
        schema = ArraySchema().item(element).item(None)
        assert schema.items is element


class TestArrayTuple:
    """Tests for positional tuple validation."""

    def setup_method(self):
        """Set up test environment."""
        self.validator = Validator()
        self.positions = [StringSchema(), NumberSchema(), BooleanSchema(), NullSchema()]

    def test_tuple_positions(self):
        """Test that each position uses its own schema."""
        schema = ArraySchema().tuple(self.positions)

        assert self.validator.validate(from_python(["a", 1, True, None]), schema).valid

        result = self.validator.validate(from_python([1, "a", True, None]), schema)
        assert error_summary(result) == [
            ("[0]", ErrorCode.TYPE_ERROR),
            ("[1]", ErrorCode.TYPE_ERROR),
        ]

    def test_lenient_length(self):
        """Test that extra elements and missing positions are accepted by default."""
        schema = ArraySchema().tuple(self.positions)

        assert self.validator.validate(from_python(["a", 1, True, None, "extra"]), schema).valid
        assert self.validator.validate(from_python(["a"]), schema).valid
        assert self.validator.validate(from_python([]), schema).valid

    def test_strict_length(self):
        """Test that strict tuples report extra and missing elements."""
        schema = ArraySchema().tuple([StringSchema(), NumberSchema()]).strict_tuple(True)

        result = self.validator.validate(from_python(["a", 1, True]), schema)
        assert error_summary(result) == [("[2]", ErrorCode.ARRAY_ITEM_UNEXPECTED)]
        assert result.errors[0].actual == JsonKind.BOOL

        result = self.validator.validate(from_python(["a"]), schema)
        assert error_summary(result) == [("", ErrorCode.ARRAY_ITEM_MISSING)]

        assert self.validator.validate(from_python(["a", 2]), schema).valid

    def test_tuple_replaces_item(self):
        """Test that the two content modes are exclusive."""
        schema = ArraySchema().item(StringSchema()).tuple(self.positions)
        assert schema.items is None
        assert len(schema.tuple_items) == 4

        schema.item(StringSchema())
        assert schema.tuple_items == []

    def test_empty_tuple_is_ignored(self):
        """Test that an empty tuple keeps the current content mode."""
        element = StringSchema()
        schema = ArraySchema().item(element).tuple([])
        assert schema.items is element
        assert schema.tuple_items == []


class TestArrayUniqueness:
    """Tests for unique item validation."""

    def setup_method(self):
        """Set up test environment."""
        self.validator = Validator()
        self.schema = ArraySchema().unique(True)

    def test_every_repeat_is_reported(self):
        """Test that each repeat after the first occurrence is reported."""
        result = self.validator.validate(from_python(["a", "b", "a", "a"]), self.schema)

        assert error_summary(result) == [
            ("[2]", ErrorCode.ARRAY_ITEMS_NOT_UNIQUE),
            ("[3]", ErrorCode.ARRAY_ITEMS_NOT_UNIQUE),
        ]
        assert result.errors[0].message == "Duplicate item found in array, items must be unique"

    def test_kinds_are_compared_separately(self):
        """Test that equal-looking values of different kinds are distinct."""
        assert self.validator.validate(from_python([1, "1", True, None]), self.schema).valid
        assert self.validator.validate(from_python([True, 1, False, 0]), self.schema).valid

    def test_numbers_compare_by_value(self):
        """Test that 1 and 1.0 are the same number."""
        result = self.validator.validate(loads("[1, 1.0]"), self.schema)
        assert error_summary(result) == [("[1]", ErrorCode.ARRAY_ITEMS_NOT_UNIQUE)]

    def test_single_null_allowed(self):
        """Test that only the first null is accepted."""
        result = self.validator.validate(from_python([None, None, None]), self.schema)
        assert [e.path for e in result.errors] == ["[1]", "[2]"]

    def test_containers_are_not_compared(self):
        """Test that nested arrays and objects never count as duplicates."""
        data = [[1], [1], {"a": 1}, {"a": 1}]
        assert self.validator.validate(from_python(data), self.schema).valid

    def test_uniqueness_off(self):
        """Test that duplicates are allowed unless requested."""
        assert self.validator.validate(from_python([1, 1]), ArraySchema()).valid
        assert self.validator.validate(from_python([1, 1]), ArraySchema().unique(False)).valid

    def test_str(self):
        """Test the schema description."""
        schema = ArraySchema().item(StringSchema()).min(1).unique(True)
        assert str(schema) == "ArraySchema(item=StringSchema(), min=1, unique=True)"


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
