"""
Pretty-printer rendering value trees as indented JSON text.
"""

import json
from typing import List

from .utils import format_number
from .values import JsonKind, JsonValue

# ANSI colors for terminal output
RESET = "\033[0m"
STRING_COLOR = "\033[31m"
NUMBER_COLOR = "\033[33m"
BOOL_COLOR = "\033[32m"
NULL_COLOR = "\033[35m"
KEY_COLOR = "\033[94m"
BRACE_COLOR = "\033[36m"
PUNCT_COLOR = "\033[37m"


class _Painter:
    """Wraps text in ANSI colors, or passes it through unchanged."""

    def __init__(self, color: bool):
        self.color = color

    def __call__(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"


def format_value(value: JsonValue, indent: int = 2, color: bool = False) -> str:
    """
    Render a value tree as indented JSON text.

    Args:
        value: Root of the tree
        indent: Spaces per nesting level
        color: Whether to add ANSI color codes

    Returns:
        Rendered text
    """
    lines: List[str] = []
    _render(value, 0, indent, _Painter(color), lines, "")
    return "\n".join(lines)


def _render(value: JsonValue, level: int, indent: int, paint: _Painter, lines: List[str], prefix: str) -> None:
    pad = " " * (indent * level)
    kind = value.kind

    if kind is JsonKind.ARRAY:
        if not len(value):
            lines.append(f"{pad}{prefix}{paint('[]', BRACE_COLOR)}")
            return
        lines.append(f"{pad}{prefix}{paint('[', BRACE_COLOR)}")
        for i, item in enumerate(value):
            _render(item, level + 1, indent, paint, lines, "")
            if i < len(value) - 1:
                lines[-1] += paint(",", PUNCT_COLOR)
        lines.append(f"{pad}{paint(']', BRACE_COLOR)}")
    elif kind is JsonKind.OBJECT:
        if not len(value):
            lines.append(f"{pad}{prefix}{paint('{}', BRACE_COLOR)}")
            return
        lines.append(f"{pad}{prefix}{paint('{', BRACE_COLOR)}")
        members = value.items()
        for i, (key, member) in enumerate(members):
            key_text = paint(json.dumps(key, ensure_ascii=False), KEY_COLOR) + paint(": ", PUNCT_COLOR)
            _render(member, level + 1, indent, paint, lines, key_text)
            if i < len(members) - 1:
                lines[-1] += paint(",", PUNCT_COLOR)
        lines.append(f"{pad}{paint('}', BRACE_COLOR)}")
    else:
        lines.append(f"{pad}{prefix}{format_scalar(value, paint)}")


def format_scalar(value: JsonValue, paint: _Painter = _Painter(False)) -> str:
    """
    Render a scalar value.

    Args:
        value: Null, boolean, number or string value
        paint: Color wrapper

    Returns:
        Rendered text
    """
    kind = value.kind
    if kind is JsonKind.NULL:
        return paint("null", NULL_COLOR)
    if kind is JsonKind.BOOL:
        return paint("true" if value.value else "false", BOOL_COLOR)
    if kind is JsonKind.NUMBER:
        return paint(format_number(value.value), NUMBER_COLOR)
    return paint(json.dumps(value.value, ensure_ascii=False), STRING_COLOR)

