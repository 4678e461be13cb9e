"""
Public API for the JSON tree parser and schema validator.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, List, Optional, Union

from .lexer import Token
from .values import JsonKind


class SchemaKind(Enum):
    """Enumeration of schema kinds."""
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    OBJECT = auto()
    ARRAY = auto()
    NULL = auto()
    ANY = auto()


class ErrorCode(Enum):
    """Enumeration of validation error codes."""
    TYPE_ERROR = auto()
    REQUIRED_PROPERTY_MISSING = auto()
    ADDITIONAL_PROPERTY_NOT_ALLOWED = auto()
    STRING_TOO_SHORT = auto()
    STRING_TOO_LONG = auto()
    NUMBER_TOO_SMALL = auto()
    NUMBER_TOO_LARGE = auto()
    ARRAY_TOO_SHORT = auto()
    ARRAY_TOO_LONG = auto()
    ARRAY_ITEMS_NOT_UNIQUE = auto()
    ARRAY_ITEM_UNEXPECTED = auto()
    ARRAY_ITEM_MISSING = auto()
    OBJECT_TOO_FEW_PROPERTIES = auto()
    OBJECT_TOO_MANY_PROPERTIES = auto()


@dataclass
class ValidationError:
    """
    Represents a validation error with structured information.

    Attributes:
        code: The error code identifying the type of error
        path: Location of the offending value, e.g. ".webserver.port"
        message: Human-readable error message
        expected: The schema kind that was being checked
        actual: The kind of the value found (NULL when no value was present)
    """
    code: ErrorCode
    path: str
    message: str
    expected: SchemaKind
    actual: JsonKind

    def __str__(self) -> str:
        return f"Error at '{self.path}': {self.message}"


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any)
        dropped_errors: Errors discarded because the error cap was reached
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)
    dropped_errors: int = 0

    def __bool__(self) -> bool:
        return self.valid


class JsonParseError(Exception):
    """
    Raised by the convenience loaders when a document fails to parse.

    Attributes:
        token: The offending token, if one was recorded
        source: File name or other description of the input
    """

    def __init__(self, token: Optional[Token], source: Optional[str] = None):
        self.token = token
        self.source = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = f" in {self.source}" if self.source else ""
        if self.token is None:
            return f"Failed to parse JSON{where}"
        return f"Failed to parse JSON{where}: unexpected {self.token}"


class JsonValidator:
    """
    Main entrypoint class for parsing and validating JSON documents.

    This class provides a simple API for validating JSON text or files
    against a programmatically built schema.
    """

    def __init__(self, verbose: bool = False, max_errors: Optional[int] = None):
        """
        Initialize a new JSON validator.

        Args:
            verbose: Whether to log validation details at DEBUG level
            max_errors: Maximum number of errors to keep per run (None for no limit)
        """
        from .validator import Validator

        self.verbose = verbose
        self.validator = Validator(verbose=verbose, max_errors=max_errors)

    def validate(self, text: str, schema: Any) -> ValidationResult:
        """
        Parse JSON text and validate it against a schema.

        Args:
            text: The JSON document
            schema: Root schema to validate against

        Returns:
            ValidationResult containing validation status and any errors

        Raises:
            JsonParseError: If the text is not valid JSON
        """
        from .parser import loads

        return self.validator.validate(loads(text), schema)

    def validate_file(self, filepath: Union[str, Path], schema: Any) -> ValidationResult:
        """
        Parse a JSON file and validate it against a schema.

        Args:
            filepath: Path to the JSON file
            schema: Root schema to validate against

        Returns:
            ValidationResult containing validation status and any errors

        Raises:
            FileNotFoundError: If the file doesn't exist
            JsonParseError: If the file is not valid JSON
        """
        from .parser import load

        return self.validator.validate(load(filepath), schema)
