"""
Array schema implementation.
"""

from typing import Any, List, Optional, Sequence

from .base import Schema, ValidatorContext
from ..api import ErrorCode, SchemaKind
from ..values import JsonKind


class ArraySchema(Schema):
    """
    Schema for validating array values.

    Element content is checked in one of two modes: ``item`` applies a
    single schema to every element, ``tuple`` applies one schema per
    position. Setting either mode replaces the other.
    """

    kind = SchemaKind.ARRAY

    def __init__(self):
        self.items: Optional[Schema] = None
        self.tuple_items: List[Schema] = []
        self.min_items: Optional[int] = None
        self.max_items: Optional[int] = None
        self.unique_items = False
        self.strict_tuple_length = False

    def item(self, schema: Optional[Schema]) -> "ArraySchema":
        """
        Validate every element against one schema.

        Args:
            schema: Element schema; None leaves the schema unchanged

        Returns:
            This schema, for chaining
        """
        if schema is None:
            return self
        self.items = schema
        self.tuple_items = []
        return self

    def tuple(self, schemas: Sequence[Schema]) -> "ArraySchema":
        """
        Validate each position against its own schema.

        Args:
            schemas: Per-position schemas; an empty sequence leaves the schema unchanged

        Returns:
            This schema, for chaining
        """
        if not schemas:
            return self
        self.tuple_items = list(schemas)
        self.items = None
        return self

    def min(self, min_items: int) -> "ArraySchema":
        self.min_items = min_items
        return self

    def max(self, max_items: int) -> "ArraySchema":
        self.max_items = max_items
        return self

    def unique(self, unique_items: bool = True) -> "ArraySchema":
        self.unique_items = unique_items
        return self

    def strict_tuple(self, strict: bool = True) -> "ArraySchema":
        """
        Require the array length to match the tuple length.

        Off by default: extra elements and unused tuple positions are ignored.

        Returns:
            This schema, for chaining
        """
        self.strict_tuple_length = strict
        return self

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        """
        Validate array-specific constraints.

        Size checks run first, then element content, then uniqueness.

        Args:
            value: The array to validate (guaranteed to be an array)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True
        size = len(value)

        # Check max_items
        if self.max_items is not None and size > self.max_items:
            context.add_error(
                ErrorCode.ARRAY_TOO_LONG,
                f"Array must contain at most {self.max_items} items, but got {size}",
                expected=self.kind,
                actual=JsonKind.ARRAY
            )
            valid = False

        # Check min_items
        if self.min_items is not None and size < self.min_items:
            context.add_error(
                ErrorCode.ARRAY_TOO_SHORT,
                f"Array must contain at least {self.min_items} items, but got {size}",
                expected=self.kind,
                actual=JsonKind.ARRAY
            )
            valid = False

        # Validate items
        if self.items is not None:
            for i, element in enumerate(value):
                with context.with_index(i):
                    if not self.items.validate(element, context):
                        valid = False

        if self.tuple_items:
            if not self._validate_tuple(value, context):
                valid = False

        if self.unique_items:
            if not self._validate_unique(value, context):
                valid = False

        return valid

    def _validate_tuple(self, value: Any, context: ValidatorContext) -> bool:
        valid = True

        for i, (schema, element) in enumerate(zip(self.tuple_items, value)):
            with context.with_index(i):
                if not schema.validate(element, context):
                    valid = False

        if not self.strict_tuple_length:
            return valid

        for i in range(len(self.tuple_items), len(value)):
            with context.with_index(i):
                context.add_error(
                    ErrorCode.ARRAY_ITEM_UNEXPECTED,
                    f"Unexpected item beyond the {len(self.tuple_items)} tuple positions",
                    expected=self.kind,
                    actual=value[i].kind
                )
            valid = False

        if len(value) < len(self.tuple_items):
            context.add_error(
                ErrorCode.ARRAY_ITEM_MISSING,
                f"Array must contain {len(self.tuple_items)} tuple items, but got {len(value)}",
                expected=self.kind,
                actual=JsonKind.ARRAY
            )
            valid = False

        return valid

    def _validate_unique(self, value: Any, context: ValidatorContext) -> bool:
        """
        Report every element that repeats an earlier one.

        Numbers, strings and booleans are compared within their own kind;
        at most one null is allowed. Arrays and objects are never compared.
        """
        valid = True
        buckets = {
            JsonKind.NUMBER: set(),
            JsonKind.STRING: set(),
            JsonKind.BOOL: set(),
        }
        null_found = False

        for i, element in enumerate(value):
            duplicate = False

            if element.kind in buckets:
                bucket = buckets[element.kind]
                duplicate = element.value in bucket
                bucket.add(element.value)
            elif element.kind is JsonKind.NULL:
                duplicate = null_found
                null_found = True

            if duplicate:
                with context.with_index(i):
                    context.add_error(
                        ErrorCode.ARRAY_ITEMS_NOT_UNIQUE,
                        "Duplicate item found in array, items must be unique",
                        expected=self.kind,
                        actual=JsonKind.ARRAY
                    )
                valid = False

        return valid

    def __str__(self) -> str:
        """String representation of the schema."""
        parts = []
        if self.items is not None:
            parts.append(f"item={self.items}")
        if self.tuple_items:
            parts.append(f"tuple={self.tuple_items}")
        if self.min_items is not None:
            parts.append(f"min={self.min_items}")
        if self.max_items is not None:
            parts.append(f"max={self.max_items}")
        if self.unique_items:
            parts.append("unique=True")
        if self.strict_tuple_length:
            parts.append("strict_tuple=True")

        return f"ArraySchema({', '.join(parts)})"
