"""
String schema implementation.
"""

from typing import Any, Optional

from .base import Schema, ValidatorContext
from ..api import ErrorCode, SchemaKind
from ..values import JsonKind


class StringSchema(Schema):
    """
    Schema for validating string values.
    """

    kind = SchemaKind.STRING

    def __init__(self):
        self.min_length: Optional[int] = None
        self.max_length: Optional[int] = None

    def min(self, min_length: int) -> "StringSchema":
        """
        Set the minimum length in characters.

        Returns:
            This schema, for chaining
        """
        self.min_length = min_length
        return self

    def max(self, max_length: int) -> "StringSchema":
        """
        Set the maximum length in characters.

        Returns:
            This schema, for chaining
        """
        self.max_length = max_length
        return self

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        """
        Validate string-specific constraints.

        Args:
            value: The string to validate (guaranteed to be a string)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True
        length = len(value.value)

        # Check max_length
        if self.max_length is not None and length > self.max_length:
            context.add_error(
                ErrorCode.STRING_TOO_LONG,
                f"String length should be at most {self.max_length} characters, but got {length}",
                expected=self.kind,
                actual=JsonKind.STRING
            )
            valid = False

        # Check min_length
        if self.min_length is not None and length < self.min_length:
            context.add_error(
                ErrorCode.STRING_TOO_SHORT,
                f"String length should be at least {self.min_length} characters, but got {length}",
                expected=self.kind,
                actual=JsonKind.STRING
            )
            valid = False

        return valid

    def __str__(self) -> str:
        """String representation of the schema."""
        parts = []
        if self.min_length is not None:
            parts.append(f"min={self.min_length}")
        if self.max_length is not None:
            parts.append(f"max={self.max_length}")

        return f"StringSchema({', '.join(parts)})"
