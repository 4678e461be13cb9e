"""
Boolean schema implementation.
"""

from typing import Any

from .base import Schema, ValidatorContext
from ..api import SchemaKind


class BooleanSchema(Schema):
    """
    Schema for validating boolean values.
    """

    kind = SchemaKind.BOOLEAN

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        # No additional constraints for booleans
        return True
