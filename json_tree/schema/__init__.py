"""
Schema package initialization.
"""

from ..api import SchemaKind
from .base import AnySchema, PathContext, Schema, ValidatorContext
from .strings import StringSchema
from .numbers import NumberSchema
from .booleans import BooleanSchema
from .nulls import NullSchema
from .arrays import ArraySchema
from .objects import ObjectSchema
from .factory import SchemaFactory

__all__ = [
    "SchemaKind",
    "Schema",
    "ValidatorContext",
    "PathContext",
    "AnySchema",
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "NullSchema",
    "ArraySchema",
    "ObjectSchema",
    "SchemaFactory"
]
