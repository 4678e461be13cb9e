#!/usr/bin/env python3
"""
JSON Tree Parser and Validator

This package parses JSON documents into value trees and validates them
against schemas built programmatically with chainable mutators.
"""

import logging

from .api import ErrorCode, JsonParseError, JsonValidator, SchemaKind, ValidationError, ValidationResult
from .lexer import JsonLexer, Token, TokenType
from .parser import JsonParser, load, loads
from .schema import (
    AnySchema,
    ArraySchema,
    BooleanSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    SchemaFactory,
    StringSchema,
    ValidatorContext,
)
from .utils import JsonPath
from .validator import Validator, validate
from .values import (
    JsonArray,
    JsonBool,
    JsonKind,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    from_python,
    to_python,
)
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("json_tree")

# Export public classes and functions
__all__ = [
    "ErrorCode",
    "JsonParseError",
    "JsonValidator",
    "SchemaKind",
    "ValidationError",
    "ValidationResult",
    "JsonLexer",
    "Token",
    "TokenType",
    "JsonParser",
    "load",
    "loads",
    "Schema",
    "AnySchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "NullSchema",
    "ArraySchema",
    "ObjectSchema",
    "SchemaFactory",
    "ValidatorContext",
    "JsonPath",
    "Validator",
    "validate",
    "JsonKind",
    "JsonValue",
    "JsonNull",
    "JsonBool",
    "JsonNumber",
    "JsonString",
    "JsonArray",
    "JsonObject",
    "from_python",
    "to_python",
]
