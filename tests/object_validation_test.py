#!/usr/bin/env python3
"""
Tests for object validation.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from json_tree import (
    ArraySchema,
    ErrorCode,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    Validator,
    from_python,
    loads,
)
# autopep8: on


def error_summary(result):
    """Return (path, code) pairs for every error in a result."""
    return [(e.path, e.code) for e in result.errors]


class TestObjectValidation:
    """Test object schema constraints."""

    def setup_method(self):
        """Set up test environment."""
        self.validator = Validator()

    def test_required_properties(self):
        """Test that every missing required property is reported at the object's path."""
        schema = ObjectSchema().required("host", "port")
        result = self.validator.validate(loads("{}"), schema)

        assert not result.valid
        assert error_summary(result) == [
            ("", ErrorCode.REQUIRED_PROPERTY_MISSING),
            ("", ErrorCode.REQUIRED_PROPERTY_MISSING),
        ]
        assert [e.message for e in result.errors] == [
            "Missing required property 'host'",
            "Missing required property 'port'",
        ]

    def test_required_without_declaration(self):
        """Test that a required name need not be declared as a property."""
        schema = ObjectSchema().required("anything")
        assert self.validator.validate(from_python({"anything": [1]}), schema).valid

    def test_required_is_deduplicated(self):
        """Test that requiring a name twice reports it once."""
        schema = ObjectSchema().required("a").required("a", "b")
        assert schema.required_names == ["a", "b"]
        assert len(self.validator.validate(from_python({}), schema).errors) == 2

    def test_property_paths(self):
        """Test that property errors are reported under the member name."""
        schema = (ObjectSchema()
                  .property("port", NumberSchema().min(1024))
                  .property("host", StringSchema().min(1)))
        result = self.validator.validate(from_python({"host": "", "port": 80}), schema)

        # Members are visited in key order
        assert error_summary(result) == [
            (".host", ErrorCode.STRING_TOO_SHORT),
            (".port", ErrorCode.NUMBER_TOO_SMALL),
        ]

    def test_nested_paths(self):
        """Test paths through nested objects and arrays."""
        inner = ObjectSchema().property("protocols", ArraySchema().item(StringSchema()))
        schema = ObjectSchema().property("webserver", inner)
        result = self.validator.validate(
            from_python({"webserver": {"protocols": ["http", "https", 3]}}), schema
        )

        assert error_summary(result) == [(".webserver.protocols[2]", ErrorCode.TYPE_ERROR)]

    def test_absent_property_is_skipped(self):
        """Test that declared but absent properties are not validated."""
        schema = ObjectSchema().property("timeout", NumberSchema().min(0))
        assert self.validator.validate(from_python({}), schema).valid

    def test_additional_properties_allowed_by_default(self):
        """Test that undeclared members are accepted by default."""
        schema = ObjectSchema().property("host", StringSchema())
        assert self.validator.validate(from_python({"host": "x", "extra": 1}), schema).valid

    def test_additional_properties_disallowed(self):
        """Test that undeclared members are reported when disallowed."""
        schema = ObjectSchema().property("host", StringSchema()).additional(False)
        result = self.validator.validate(from_python({"host": "x", "b": 1, "a": 2}), schema)

        assert error_summary(result) == [
            ("", ErrorCode.ADDITIONAL_PROPERTY_NOT_ALLOWED),
            ("", ErrorCode.ADDITIONAL_PROPERTY_NOT_ALLOWED),
        ]
        assert [e.message for e in result.errors] == [
            "Additional property 'a' not allowed",
            "Additional property 'b' not allowed",
        ]

    def test_property_count(self):
        """Test minimum and maximum property counts."""
        schema = ObjectSchema().min(1).max(2)

        assert self.validator.validate(from_python({"a": 1}), schema).valid
        result = self.validator.validate(from_python({}), schema)
        assert error_summary(result) == [("", ErrorCode.OBJECT_TOO_FEW_PROPERTIES)]
        assert result.errors[0].message == "Object must contain at least 1 properties, but got 0"

        result = self.validator.validate(from_python({"a": 1, "b": 2, "c": 3}), schema)
        assert error_summary(result) == [("", ErrorCode.OBJECT_TOO_MANY_PROPERTIES)]

    def test_all_violations_reported(self):
        """Test that size, required and property errors are collected together."""
        schema = (ObjectSchema()
                  .min(3).max(1)
                  .required("z")
                  .property("a", StringSchema()))
        result = self.validator.validate(from_python({"a": 1, "b": 2}), schema)

        assert [e.code for e in result.errors] == [
            ErrorCode.OBJECT_TOO_MANY_PROPERTIES,
            ErrorCode.OBJECT_TOO_FEW_PROPERTIES,
            ErrorCode.REQUIRED_PROPERTY_MISSING,
            ErrorCode.TYPE_ERROR,
        ]

    def test_redeclared_property_keeps_first(self):
        """Test that declaring a property twice keeps the first schema."""
        first = StringSchema()
        schema = ObjectSchema().property("a", first).property("a", NumberSchema())
        assert schema.properties["a"] is first

    def test_shared_child_schema(self):
        """Test that one child schema can serve several properties."""
        name = StringSchema().min(2)
        schema = ObjectSchema().property("first", name).property("last", name)
        result = self.validator.validate(from_python({"first": "a", "last": "b"}), schema)

        assert [e.path for e in result.errors] == [".first", ".last"]

    def test_str(self):
        """Test the schema description."""
        schema = ObjectSchema().property("host", StringSchema()).required("host")
        assert str(schema) == "ObjectSchema(properties=['host'], required=['host'])"


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
