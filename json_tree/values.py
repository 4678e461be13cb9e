"""
Value model for parsed JSON documents.

A parsed document is a tree of value nodes. Each node class carries a
class-level ``kind`` discriminant so callers can dispatch on
``JsonKind`` without isinstance chains.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Union


class JsonKind(Enum):
    """Enumeration of JSON value kinds."""
    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


_KIND_NAMES = {
    JsonKind.NULL: "Null",
    JsonKind.BOOL: "Bool",
    JsonKind.NUMBER: "Number",
    JsonKind.STRING: "String",
    JsonKind.ARRAY: "Array",
    JsonKind.OBJECT: "Object",
}


def kind_name(kind: Optional[JsonKind]) -> str:
    """
    Get the display name of a value kind.

    Args:
        kind: Value kind, or None for an unknown kind

    Returns:
        Display name such as "Array" or "Number"
    """
    return _KIND_NAMES.get(kind, "UNKNOWN")


@dataclass
class JsonNull:
    """The JSON null value."""
    kind: ClassVar[JsonKind] = JsonKind.NULL


@dataclass
class JsonBool:
    """A JSON boolean."""
    value: bool
    kind: ClassVar[JsonKind] = JsonKind.BOOL


@dataclass
class JsonNumber:
    """A JSON number, always held as a float."""
    value: float
    kind: ClassVar[JsonKind] = JsonKind.NUMBER


@dataclass
class JsonString:
    """A JSON string."""
    value: str
    kind: ClassVar[JsonKind] = JsonKind.STRING


@dataclass
class JsonArray:
    """An ordered sequence of values."""
    items: List["JsonValue"] = field(default_factory=list)
    kind: ClassVar[JsonKind] = JsonKind.ARRAY

    def append(self, value: "JsonValue") -> None:
        self.items.append(value)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]

    def __iter__(self) -> Iterator["JsonValue"]:
        return iter(self.items)


@dataclass
class JsonObject:
    """
    A mapping from unique string keys to values.

    Iteration through ``keys()`` and ``items()`` is key-sorted, so anything
    that walks an object (validation, printing) produces the same order on
    every run.
    """
    members: Dict[str, "JsonValue"] = field(default_factory=dict)
    kind: ClassVar[JsonKind] = JsonKind.OBJECT

    def add(self, key: str, value: "JsonValue") -> None:
        self.members[key] = value

    def get(self, key: str) -> Optional["JsonValue"]:
        return self.members.get(key)

    def keys(self) -> List[str]:
        return sorted(self.members)

    def items(self) -> List[Tuple[str, "JsonValue"]]:
        return [(key, self.members[key]) for key in self.keys()]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> "JsonValue":
        return self.members[key]

    def __len__(self) -> int:
        return len(self.members)


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]


def from_python(data: Any) -> JsonValue:
    """
    Build a value tree from native Python data.

    Args:
        data: None, bool, int, float, str, list/tuple or dict with string keys

    Returns:
        Equivalent value tree

    Raises:
        TypeError: If the data contains a type with no JSON counterpart
    """
    if data is None:
        return JsonNull()
    # bool is a subclass of int, so it must be checked first
    if isinstance(data, bool):
        return JsonBool(data)
    if isinstance(data, (int, float)):
        return JsonNumber(float(data))
    if isinstance(data, str):
        return JsonString(data)
    if isinstance(data, (list, tuple)):
        return JsonArray([from_python(item) for item in data])
    if isinstance(data, dict):
        result = JsonObject()
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            result.add(key, from_python(value))
        return result
    raise TypeError(f"Cannot convert {type(data).__name__} to a JSON value")


def to_python(value: JsonValue) -> Any:
    """
    Convert a value tree back to native Python data.

    Integral numbers come back as floats; callers that need ints convert them.
    """
    kind = value.kind
    if kind is JsonKind.NULL:
        return None
    if kind is JsonKind.ARRAY:
        return [to_python(item) for item in value.items]
    if kind is JsonKind.OBJECT:
        return {key: to_python(member) for key, member in value.members.items()}
    return value.value
