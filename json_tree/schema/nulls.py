"""
Null schema implementation.
"""

from typing import Any

from .base import Schema, ValidatorContext
from ..api import SchemaKind


class NullSchema(Schema):
    """
    Schema for validating null values.
    """

    kind = SchemaKind.NULL

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        # No additional constraints for null
        return True
