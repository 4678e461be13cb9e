"""
Base schema classes and the validation context.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional

from ..api import ErrorCode, SchemaKind, ValidationError
from ..utils import JsonPath, describe_kind
from ..values import JsonKind, JsonValue


class ValidatorContext:
    """
    Context for one validation run.

    This class maintains state during the validation process: the path to
    the value currently being checked and the errors collected so far.
    A fresh context is created for every run and never shared.
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize a new validation context.

        Args:
            max_errors: Maximum number of errors to store (None for no limit)

        Raises:
            ValueError: If max_errors is less than 1
        """
        if max_errors is not None and max_errors < 1:
            raise ValueError(f"max_errors must be at least 1, got {max_errors}")

        self.errors: List[ValidationError] = []
        self.path_parts: List[str] = []
        self.max_errors = max_errors
        self.dropped_errors = 0

    @property
    def path(self) -> str:
        """
        Get the current path.

        Returns:
            Rendered path, empty at the root
        """
        return JsonPath.from_parts(self.path_parts)

    def push_path(self, part: str) -> None:
        """
        Push a rendered segment onto the current path.

        Args:
            part: Path segment such as ".host" or "[0]"; empty segments are ignored
        """
        if not part:
            return
        self.path_parts.append(part)

    def pop_path(self) -> None:
        """Remove the last segment from the current path."""
        if self.path_parts:
            self.path_parts.pop()

    def add_error(self,
                  code: ErrorCode,
                  message: str,
                  expected: SchemaKind,
                  actual: JsonKind) -> None:
        """
        Record a validation error at the current path.

        Args:
            code: Error code
            message: Error message
            expected: Schema kind being checked
            actual: Kind of the value found
        """
        if self.max_errors is not None and len(self.errors) >= self.max_errors:
            self.dropped_errors += 1
            return

        self.errors.append(ValidationError(
            code=code,
            path=self.path,
            message=message,
            expected=expected,
            actual=actual
        ))

    def with_path(self, part: str) -> "PathContext":
        """
        Context manager for adding a path segment temporarily.

        Args:
            part: Rendered path segment

        Returns:
            Context manager
        """
        return PathContext(self, part)

    def with_index(self, index: int) -> "PathContext":
        return PathContext(self, JsonPath.index(index))

    def with_member(self, name: str) -> "PathContext":
        return PathContext(self, JsonPath.member(name))

    def __str__(self) -> str:
        """String representation of the validation context."""
        return f"ValidatorContext(path={self.path}, errors={len(self.errors)})"


class PathContext:
    """Context manager for temporarily adding a path segment."""

    def __init__(self, context: ValidatorContext, part: str):
        self.context = context
        self.part = part
        self._pushed = False

    def __enter__(self):
        """Add the path segment when entering the context."""
        before = len(self.context.path_parts)
        self.context.push_path(self.part)
        self._pushed = len(self.context.path_parts) > before
        return self.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Remove the path segment when exiting the context."""
        if self._pushed:
            self.context.pop_path()


# Value kind each schema kind accepts
KIND_MATCH: Dict[SchemaKind, JsonKind] = {
    SchemaKind.STRING: JsonKind.STRING,
    SchemaKind.NUMBER: JsonKind.NUMBER,
    SchemaKind.BOOLEAN: JsonKind.BOOL,
    SchemaKind.NULL: JsonKind.NULL,
    SchemaKind.ARRAY: JsonKind.ARRAY,
    SchemaKind.OBJECT: JsonKind.OBJECT,
}

SCHEMA_KIND_NAMES: Dict[SchemaKind, str] = {
    SchemaKind.STRING: "string",
    SchemaKind.NUMBER: "number",
    SchemaKind.BOOLEAN: "boolean",
    SchemaKind.NULL: "null",
    SchemaKind.ARRAY: "array",
    SchemaKind.OBJECT: "object",
    SchemaKind.ANY: "any value",
}


class Schema(ABC):
    """
    Base class for all schemas.

    Every schema checks the kind of the value first and stops there on a
    mismatch. Only a value of the right kind reaches the kind-specific
    checks, which record every violation they find instead of stopping at
    the first.
    """

    kind: ClassVar[SchemaKind]

    def validate(self, value: Optional[JsonValue], context: ValidatorContext) -> bool:
        """
        Validate a value against this schema.

        Args:
            value: Value to validate, or None if absent
            context: Validation context

        Returns:
            True if neither this schema nor any nested one recorded an error
        """
        if not self._validate_kind(value, context):
            return False

        return self._validate_kind_specific(value, context)

    def _validate_kind(self, value: Optional[JsonValue], context: ValidatorContext) -> bool:
        """
        Validate that the value is present and has the expected kind.

        Args:
            value: Value to validate
            context: Validation context

        Returns:
            True if the value has the correct kind, False otherwise
        """
        actual = value.kind if value is not None else None
        if actual is not None and self.accepts_kind(actual):
            return True

        context.add_error(
            ErrorCode.TYPE_ERROR,
            f"Expected {SCHEMA_KIND_NAMES[self.kind]}, found {describe_kind(actual)}",
            expected=self.kind,
            actual=actual if actual is not None else JsonKind.NULL
        )
        return False

    def accepts_kind(self, kind: JsonKind) -> bool:
        """
        Check if this schema accepts a value kind.

        Args:
            kind: Value kind

        Returns:
            True if the kind passes the kind check
        """
        return KIND_MATCH.get(self.kind) == kind

    @abstractmethod
    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        """
        Validate kind-specific constraints.

        Args:
            value: Value to validate (guaranteed to be of the correct kind)
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __repr__(self) -> str:
        return self.__str__()


class AnySchema(Schema):
    """
    Wildcard schema accepting any present value.
    """

    kind = SchemaKind.ANY

    def accepts_kind(self, kind: JsonKind) -> bool:
        return True

    def _validate_kind_specific(self, value: Any, context: ValidatorContext) -> bool:
        return True
