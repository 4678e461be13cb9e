#!/usr/bin/env python3
"""
Tests for number validation.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from json_tree import ErrorCode, JsonNumber, NumberSchema, Validator, loads
# autopep8: on


class TestNumberValidation:
    """Test number schema constraints."""

    def setup_method(self):
        """Set up test environment."""
        self.validator = Validator()

    def test_inclusive_bounds(self):
        """Test that both bounds are inclusive."""
        schema = NumberSchema().min(1024).max(65535)

        assert self.validator.validate(JsonNumber(1024), schema).valid
        assert self.validator.validate(JsonNumber(65535), schema).valid

        result = self.validator.validate(JsonNumber(80), schema)
        assert [e.code for e in result.errors] == [ErrorCode.NUMBER_TOO_SMALL]
        assert result.errors[0].message == "Number 80 is below minimum value 1024"

        result = self.validator.validate(JsonNumber(70000), schema)
        assert [e.code for e in result.errors] == [ErrorCode.NUMBER_TOO_LARGE]
        assert result.errors[0].message == "Number 70000 exceeds maximum value 65535"

    def test_negative_bounds(self):
        """Test that bounds are signed."""
        schema = NumberSchema().min(-10).max(-5)

        assert self.validator.validate(JsonNumber(-7), schema).valid
        assert not self.validator.validate(JsonNumber(0), schema).valid
        assert not self.validator.validate(JsonNumber(-11), schema).valid

    def test_fractional_values(self):
        """Test fractional values and bounds."""
        schema = NumberSchema().min(0.5).max(1.5)

        assert self.validator.validate(loads("1.25"), schema).valid
        result = self.validator.validate(loads("0.25"), schema)
        assert result.errors[0].message == "Number 0.25 is below minimum value 0.5"

    def test_both_bounds_violated(self):
        """Test that contradictory bounds report both violations."""
        schema = NumberSchema().min(10).max(1)
        result = self.validator.validate(JsonNumber(5), schema)

        assert [e.code for e in result.errors] == [
            ErrorCode.NUMBER_TOO_LARGE,
            ErrorCode.NUMBER_TOO_SMALL,
        ]

    def test_integral_values_accepted(self):
        """Test that integers and floats are the same kind."""
        schema = NumberSchema().min(0)
        assert self.validator.validate(loads("3"), schema).valid
        assert self.validator.validate(loads("3.0"), schema).valid
        assert self.validator.validate(loads("3e2"), schema).valid

    def test_str(self):
        """Test the schema description."""
        assert str(NumberSchema().min(0).max(60)) == "NumberSchema(min=0, max=60)"
        assert str(NumberSchema()) == "NumberSchema()"


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
