"""
Recursive-descent parser building value trees from lexer tokens.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from .api import JsonParseError
from .lexer import JsonLexer, Token, TokenType
from .printer import format_value
from .values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

logger = logging.getLogger("json_tree")

# Longest leading run that float() accepts, in the spirit of strtod
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(text: str) -> float:
    """
    Convert a NUMBER token to a float without rejecting malformed input.

    The lexer does not check number grammar, so text such as "1.2.3" or
    "5-" can reach this point. The longest valid leading prefix is
    converted; text with no usable prefix becomes 0.0.

    Args:
        text: Raw token text

    Returns:
        Best-effort numeric value
    """
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group())


class JsonParser:
    """
    Parses a token stream into a value tree.

    The parser owns the tree it builds until ``release()`` hands it to the
    caller. A failed parse keeps nothing but the offending token, available
    as ``last_error``.
    """

    def __init__(self, lexer: Optional[JsonLexer] = None):
        """
        Initialize a new parser.

        Args:
            lexer: Token source; can also be supplied later with set_lexer()
        """
        self.lexer = lexer
        self.last_error: Optional[Token] = None
        self._root: Optional[JsonValue] = None
        self._parsed = False

        self._dispatch: Dict[TokenType, Callable[[Token], Optional[JsonValue]]] = {
            TokenType.BRACE_OPEN: self._parse_object,
            TokenType.BRACKET_OPEN: self._parse_array,
            TokenType.STRING: self._parse_string,
            TokenType.NUMBER: self._parse_number,
            TokenType.TRUE: self._parse_literal,
            TokenType.FALSE: self._parse_literal,
            TokenType.NULL: self._parse_literal,
        }

    @classmethod
    def from_string(cls, text: str) -> "JsonParser":
        return cls(JsonLexer(text))

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "JsonParser":
        return cls(JsonLexer.from_file(filepath))

    @property
    def ast(self) -> Optional[JsonValue]:
        """The parsed tree, still owned by the parser."""
        return self._root

    @property
    def is_parsed(self) -> bool:
        return self._parsed

    def set_lexer(self, lexer: JsonLexer) -> None:
        """
        Switch to a new token source, discarding any parsed tree.

        Args:
            lexer: New token source
        """
        self.clear()
        self.lexer = lexer

    def clear(self) -> None:
        """Drop the parsed tree."""
        self._root = None
        self._parsed = False

    def reset(self) -> None:
        """Drop the parsed tree and diagnostics and rewind the lexer."""
        self.clear()
        self.last_error = None
        if self.lexer is not None:
            self.lexer.reset()

    def release(self) -> Optional[JsonValue]:
        """
        Hand the parsed tree to the caller.

        Returns:
            The tree, or None if nothing has been parsed since the last release
        """
        if not self._parsed:
            return None

        root = self._root
        self.clear()
        return root

    def parse(self) -> bool:
        """
        Parse the whole input into a tree.

        Any previously held tree is discarded first. On failure no partial
        tree is kept and the offending token is stored in ``last_error``.

        Returns:
            True if the input is a single well-formed JSON value

        Raises:
            ValueError: If no lexer has been configured
        """
        if self.lexer is None:
            raise ValueError("No lexer configured for parser")

        self.reset()

        root = self._parse_value(self.lexer.next_token())
        if root is None:
            return False

        trailing = self.lexer.next_token()
        if trailing.type != TokenType.END_OF_FILE:
            self._fail(trailing)
            return False

        self._root = root
        self._parsed = True
        return True

    def _fail(self, token: Token) -> None:
        self.last_error = token
        source = self.lexer.file_name if self.lexer and self.lexer.file_name else "<string>"
        logger.debug(f"Parse failed in {source}: unexpected {token}")
        return None

    def _parse_value(self, token: Token) -> Optional[JsonValue]:
        handler = self._dispatch.get(token.type)
        if handler is None:
            return self._fail(token)
        return handler(token)

    def _parse_object(self, token: Token) -> Optional[JsonValue]:
        result = JsonObject()

        token = self.lexer.next_token()
        if token.type == TokenType.BRACE_CLOSE:
            return result

        while True:
            if token.type != TokenType.STRING:
                return self._fail(token)
            key = token.value

            token = self.lexer.next_token()
            if token.type != TokenType.COLON:
                return self._fail(token)

            value = self._parse_value(self.lexer.next_token())
            if value is None:
                return None
            result.add(key, value)

            token = self.lexer.next_token()
            if token.type == TokenType.BRACE_CLOSE:
                return result
            if token.type != TokenType.COMMA:
                return self._fail(token)
            token = self.lexer.next_token()

    def _parse_array(self, token: Token) -> Optional[JsonValue]:
        result = JsonArray()

        token = self.lexer.next_token()
        if token.type == TokenType.BRACKET_CLOSE:
            return result

        while True:
            item = self._parse_value(token)
            if item is None:
                return None
            result.append(item)

            token = self.lexer.next_token()
            if token.type == TokenType.BRACKET_CLOSE:
                return result
            if token.type != TokenType.COMMA:
                return self._fail(token)
            token = self.lexer.next_token()

    def _parse_string(self, token: Token) -> Optional[JsonValue]:
        return JsonString(token.value)

    def _parse_number(self, token: Token) -> Optional[JsonValue]:
        return JsonNumber(to_number(token.value))

    def _parse_literal(self, token: Token) -> Optional[JsonValue]:
        if token.type == TokenType.NULL:
            return JsonNull()
        return JsonBool(token.type == TokenType.TRUE)

    def to_string(self, color: bool = False) -> str:
        """
        Render the parsed tree as indented JSON text.

        Returns:
            Rendered text, or an empty string if nothing is parsed
        """
        if self._root is None:
            return ""
        return format_value(self._root, color=color)

    def pretty_print(self, color: bool = False) -> None:
        """Print the parsed tree to stdout."""
        print(self.to_string(color=color))

    def __repr__(self) -> str:
        return f"JsonParser(lexer={self.lexer!r}, parsed={self._parsed})"


def loads(text: str) -> JsonValue:
    """
    Parse JSON text into a tree.

    Args:
        text: The JSON document

    Returns:
        Parsed value tree

    Raises:
        JsonParseError: If the text is not valid JSON
    """
    parser = JsonParser.from_string(text)
    if not parser.parse():
        raise JsonParseError(parser.last_error)
    return parser.release()


def load(filepath: Union[str, Path]) -> JsonValue:
    """
    Parse a JSON file into a tree.

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed value tree

    Raises:
        FileNotFoundError: If the file doesn't exist
        JsonParseError: If the file is not valid JSON
    """
    parser = JsonParser.from_file(filepath)
    if not parser.parse():
        raise JsonParseError(parser.last_error, source=str(filepath))
    return parser.release()
