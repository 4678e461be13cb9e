"""
Number schema implementation.
"""

from typing import Any, Optional

from .base import Schema, ValidatorContext
from ..api import ErrorCode, SchemaKind
from ..utils import format_number
from ..values import JsonKind


class NumberSchema(Schema):
    """
    Schema for validating numeric values.

    Bounds are signed and inclusive.
    """

    kind = SchemaKind.NUMBER

    def __init__(self):
        self.minimum: Optional[float] = None
        self.maximum: Optional[float] = None

    def min(self, minimum: float) -> "NumberSchema":
        """
        Set the inclusive lower bound.

        Returns:
            This schema, for chaining
        """
        self.minimum = float(minimum)
        return self

    def max(self, maximum: float) -> "NumberSchema":
        """
        Set the inclusive upper bound.

        Returns:
            This schema, for chaining
        """
        self.maximum = float(maximum)
        return self

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        """
        Validate number-specific constraints.

        Args:
            value: The number to validate (guaranteed to be a number)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True
        number = value.value

        # Check maximum
        if self.maximum is not None and number > self.maximum:
            context.add_error(
                ErrorCode.NUMBER_TOO_LARGE,
                f"Number {format_number(number)} exceeds maximum value {format_number(self.maximum)}",
                expected=self.kind,
                actual=JsonKind.NUMBER
            )
            valid = False

        # Check minimum
        if self.minimum is not None and number < self.minimum:
            context.add_error(
                ErrorCode.NUMBER_TOO_SMALL,
                f"Number {format_number(number)} is below minimum value {format_number(self.minimum)}",
                expected=self.kind,
                actual=JsonKind.NUMBER
            )
            valid = False

        return valid

    def __str__(self) -> str:
        """String representation of the schema."""
        parts = []
        if self.minimum is not None:
            parts.append(f"min={format_number(self.minimum)}")
        if self.maximum is not None:
            parts.append(f"max={format_number(self.maximum)}")

        return f"NumberSchema({', '.join(parts)})"
