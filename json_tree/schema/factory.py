"""
Schema factory owning the nodes it creates.
"""

from typing import Iterator, List

from .arrays import ArraySchema
from .base import AnySchema, Schema
from .booleans import BooleanSchema
from .nulls import NullSchema
from .numbers import NumberSchema
from .objects import ObjectSchema
from .strings import StringSchema


class SchemaFactory:
    """
    Creates schema nodes and keeps track of every node it created.

    A schema tree built through one factory lives as long as the factory
    holds it; ``release()`` (or leaving a ``with`` block) drops every node
    at once. Nodes created outside the factory are never tracked.

    Example:
        with SchemaFactory() as factory:
            schema = factory.object().property("port", factory.number().min(1024))
    """

    def __init__(self):
        self._managed: List[Schema] = []

    def _manage(self, schema: Schema) -> Schema:
        self._managed.append(schema)
        return schema

    def string(self) -> StringSchema:
        return self._manage(StringSchema())

    def number(self) -> NumberSchema:
        return self._manage(NumberSchema())

    def boolean(self) -> BooleanSchema:
        return self._manage(BooleanSchema())

    def null(self) -> NullSchema:
        return self._manage(NullSchema())

    def array(self) -> ArraySchema:
        return self._manage(ArraySchema())

    def object(self) -> ObjectSchema:
        return self._manage(ObjectSchema())

    def any(self) -> AnySchema:
        return self._manage(AnySchema())

    def release(self) -> None:
        """Drop every node created by this factory."""
        self._managed.clear()

    def __contains__(self, schema: Schema) -> bool:
        return any(managed is schema for managed in self._managed)

    def __iter__(self) -> Iterator[Schema]:
        return iter(list(self._managed))

    def __len__(self) -> int:
        return len(self._managed)

    def __enter__(self) -> "SchemaFactory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
