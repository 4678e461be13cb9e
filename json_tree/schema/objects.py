"""
Object schema implementation.
"""

import logging
from typing import Any, Dict, List, Optional

from .base import Schema, ValidatorContext
from ..api import ErrorCode, SchemaKind
from ..values import JsonKind

logger = logging.getLogger("json_tree")


class ObjectSchema(Schema):
    """
    Schema for validating object values.

    Properties are referenced, not owned: the same child schema may be
    declared under several names or in several parents.
    """

    kind = SchemaKind.OBJECT

    def __init__(self):
        self.properties: Dict[str, Schema] = {}
        self.required_names: List[str] = []
        self.min_properties: Optional[int] = None
        self.max_properties: Optional[int] = None
        self.additional_properties = True

    def min(self, min_properties: int) -> "ObjectSchema":
        self.min_properties = min_properties
        return self

    def max(self, max_properties: int) -> "ObjectSchema":
        self.max_properties = max_properties
        return self

    def required(self, *names: str) -> "ObjectSchema":
        """
        Require members to be present.

        Args:
            names: Member names; names already required are skipped

        Returns:
            This schema, for chaining
        """
        for name in names:
            if name not in self.required_names:
                self.required_names.append(name)
        return self

    def additional(self, allowed: bool) -> "ObjectSchema":
        """
        Control whether members without a declared schema are accepted.

        Accepted by default.

        Returns:
            This schema, for chaining
        """
        self.additional_properties = allowed
        return self

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        """
        Validate object-specific constraints.

        Size checks and required members are reported at the object's own
        path; declared properties are validated under ``.name``.

        Args:
            value: The object to validate (guaranteed to be an object)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        valid = True
        size = len(value)

        # Check max_properties
        if self.max_properties is not None and size > self.max_properties:
            context.add_error(
                ErrorCode.OBJECT_TOO_MANY_PROPERTIES,
                f"Object must contain at most {self.max_properties} properties, but got {size}",
                expected=self.kind,
                actual=JsonKind.OBJECT
            )
            valid = False

        # Check min_properties
        if self.min_properties is not None and size < self.min_properties:
            context.add_error(
                ErrorCode.OBJECT_TOO_FEW_PROPERTIES,
                f"Object must contain at least {self.min_properties} properties, but got {size}",
                expected=self.kind,
                actual=JsonKind.OBJECT
            )
            valid = False

        # Check required properties
        for name in self.required_names:
            if name not in value:
                context.add_error(
                    ErrorCode.REQUIRED_PROPERTY_MISSING,
                    f"Missing required property '{name}'",
                    expected=self.kind,
                    actual=JsonKind.OBJECT
                )
                valid = False

        # Validate declared properties
        for name, member in value.items():
            schema = self.properties.get(name)
            if schema is None:
                continue
            with context.with_member(name):
                if not schema.validate(member, context):
                    valid = False

        if not self.additional_properties:
            for name in value.keys():
                if name not in self.properties:
                    context.add_error(
                        ErrorCode.ADDITIONAL_PROPERTY_NOT_ALLOWED,
                        f"Additional property '{name}' not allowed",
                        expected=self.kind,
                        actual=JsonKind.OBJECT
                    )
                    valid = False

        return valid

    def __str__(self) -> str:
        """String representation of the schema."""
        parts = []
        if self.properties:
            parts.append(f"properties={list(self.properties.keys())}")
        if self.required_names:
            parts.append(f"required={self.required_names}")
        if self.min_properties is not None:
            parts.append(f"min={self.min_properties}")
        if self.max_properties is not None:
            parts.append(f"max={self.max_properties}")
        if not self.additional_properties:
            parts.append("additional=False")

        return f"ObjectSchema({', '.join(parts)})"

    # Defined last: the name shadows the builtin for the rest of the class body
    def property(self, name: str, schema: Schema) -> "ObjectSchema":
        """
        Declare the schema of a member.

        Args:
            name: Member name
            schema: Schema the member's value must satisfy

        Returns:
            This schema, for chaining
        """
        if name in self.properties:
            logger.debug(f"Property '{name}' is already declared; keeping the first declaration")
            return self
        self.properties[name] = schema
        return self
