"""
Validator driver running one schema against one value tree.
"""

import logging
from typing import Optional

from .api import ValidationResult
from .schema import Schema, ValidatorContext
from .values import JsonValue

logger = logging.getLogger("json_tree")


class Validator:
    """
    Validates value trees against schemas.

    Each call to ``validate`` gets its own fresh context, so one validator
    (and one schema) can be reused for any number of documents.
    """

    def __init__(self, verbose: bool = False, max_errors: Optional[int] = None):
        """
        Initialize a new validator.

        Args:
            verbose: Whether to log a summary of every run at DEBUG level
            max_errors: Maximum number of errors to keep per run (None for no limit)
        """
        self.verbose = verbose
        self.max_errors = max_errors

    def validate(self, value: Optional[JsonValue], schema: Schema) -> ValidationResult:
        """
        Validate a value tree against a schema.

        Args:
            value: Root of the value tree (None is reported as a missing value)
            schema: Root schema to validate against

        Returns:
            ValidationResult containing validation status and errors
        """
        context = ValidatorContext(max_errors=self.max_errors)

        valid = schema.validate(value, context)

        if self.verbose:
            logger.debug(f"Validated against {schema}: valid={valid}, errors={len(context.errors)}")
            if context.dropped_errors:
                logger.debug(f"Dropped {context.dropped_errors} errors past the limit of {self.max_errors}")

        return ValidationResult(
            valid=valid,
            errors=context.errors,
            dropped_errors=context.dropped_errors
        )


def validate(value: Optional[JsonValue], schema: Schema) -> ValidationResult:
    """
    Validate a value tree against a schema with default settings.

    Args:
        value: Root of the value tree
        schema: Root schema

    Returns:
        ValidationResult containing validation status and errors
    """
    return Validator().validate(value, schema)
