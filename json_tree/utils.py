"""
Utility classes and functions for the JSON tree validator.
"""

import re
from typing import List, Optional

from .values import JsonKind, JsonValue, kind_name

# One path segment: ".name" (name runs until the next "." or "[") or "[index]"
_SEGMENT = re.compile(r"\.([^.\[]*)|\[(\d+)\]")


class JsonPath:
    """
    Utility class for rendering and resolving validation paths.

    Paths concatenate segments without separators: object members render as
    ``.name`` and array indices as ``[index]``, so the third protocol of a
    webserver block is ``.webserver.supported_protocols[2]``. The root is
    the empty string.
    """

    @staticmethod
    def member(name: str) -> str:
        """
        Render an object member segment.

        Args:
            name: Member name

        Returns:
            Path segment such as ".host"
        """
        return f".{name}"

    @staticmethod
    def index(index: int) -> str:
        """
        Render an array index segment.

        Args:
            index: Element index

        Returns:
            Path segment such as "[2]"
        """
        return f"[{index}]"

    @staticmethod
    def from_parts(parts: List[str]) -> str:
        """
        Join rendered segments into a path.

        Args:
            parts: List of rendered path segments

        Returns:
            Path string
        """
        return "".join(parts)

    @staticmethod
    def to_parts(path: str) -> List[str]:
        """
        Split a path into its rendered segments.

        Member names containing "." or "[" cannot be told apart from segment
        boundaries and are split at those characters.

        Args:
            path: Path string

        Returns:
            List of rendered path segments

        Raises:
            ValueError: If the path is malformed
        """
        parts = []
        pos = 0
        while pos < len(path):
            match = _SEGMENT.match(path, pos)
            if not match:
                raise ValueError(f"Invalid path: {path}")
            parts.append(match.group())
            pos = match.end()
        return parts

    @staticmethod
    def resolve(document: JsonValue, path: str) -> JsonValue:
        """
        Resolve a path within a value tree.

        Args:
            document: The root of the tree
            path: Path string

        Returns:
            The referenced value

        Raises:
            ValueError: If the path cannot be resolved
        """
        current = document

        for part in JsonPath.to_parts(path):
            if part.startswith("."):
                name = part[1:]
                if current.kind is not JsonKind.OBJECT:
                    raise ValueError(f"Failed to resolve path: {path}, cannot read member '{name}' of non-object")
                if name not in current:
                    raise ValueError(f"Failed to resolve path: {path}, member '{name}' not found")
                current = current[name]
            else:
                index = int(part[1:-1])
                if current.kind is not JsonKind.ARRAY:
                    raise ValueError(f"Failed to resolve path: {path}, cannot index non-array")
                if index >= len(current):
                    raise ValueError(f"Failed to resolve path: {path}, index {index} out of range")
                current = current[index]

        return current


def format_number(value: float) -> str:
    """
    Render a number for display.

    Integral values lose their fractional part so that 1024.0 reads as 1024.

    Args:
        value: Number to render

    Returns:
        Display text
    """
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):
        return repr(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def describe_kind(kind: Optional[JsonKind]) -> str:
    """
    Describe the kind of a value found during validation.

    Args:
        kind: Value kind, or None when no value was present

    Returns:
        Display name
    """
    if kind is None:
        return "nothing"
    return kind_name(kind)
