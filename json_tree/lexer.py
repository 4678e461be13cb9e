"""
Lexer for JSON text.

The lexer walks a cursor over the whole input buffer and hands out one token
per call. It never raises on malformed input; problems surface as ERROR
tokens whose value carries a diagnostic message.
"""

import string
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterator, List, Optional, Union


class TokenType(Enum):
    """Enumeration of token kinds."""
    BRACE_OPEN = auto()
    BRACE_CLOSE = auto()
    BRACKET_OPEN = auto()
    BRACKET_CLOSE = auto()
    COLON = auto()
    COMMA = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()
    END_OF_FILE = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: Token kind
        value: Decoded text for strings, raw text for numbers and literals,
            the diagnostic message for errors
        line: 0-based line of the token's first character
        col: 0-based column of the token's first character
    """
    type: TokenType
    value: str
    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.type.name} '{self.value}' at line {self.line + 1}, column {self.col + 1}"


PUNCTUATION = {
    "{": TokenType.BRACE_OPEN,
    "}": TokenType.BRACE_CLOSE,
    "[": TokenType.BRACKET_OPEN,
    "]": TokenType.BRACKET_CLOSE,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

LITERALS = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
}

ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

WHITESPACE = frozenset(" \t\r\n")
DIGITS = frozenset(string.digits)
NUMBER_CHARS = frozenset(string.digits + ".-+eE")
LETTERS = frozenset(string.ascii_letters)


class JsonLexer:
    """
    Converts JSON text into tokens.

    Line and column numbers are derived from the cursor position: every
    consumed newline bumps the line and moves the start of the current line.
    """

    def __init__(self, text: str = "", file_name: Optional[str] = None):
        """
        Initialize a new lexer.

        Args:
            text: Complete JSON text to tokenize
            file_name: Name of the file the text came from, for diagnostics
        """
        self.text = text
        self.file_name = file_name
        self.reset()

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "JsonLexer":
        """
        Create a lexer over the contents of a file.

        Args:
            filepath: Path to a UTF-8 encoded JSON file

        Returns:
            Lexer positioned at the start of the file

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "r", encoding="utf-8", newline="") as f:
            return cls(f.read(), file_name=str(filepath))

    def reset(self) -> None:
        """Rewind to the beginning of the input."""
        self.pos = 0
        self.line = 0
        self.line_start = 0

    @property
    def col(self) -> int:
        """0-based column of the cursor."""
        return self.pos - self.line_start

    def is_at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _peek(self) -> str:
        if self.is_at_end():
            return ""
        return self.text[self.pos]

    def _advance(self) -> str:
        ch = self.text[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.line_start = self.pos
        return ch

    def _skip_whitespace(self) -> None:
        while not self.is_at_end() and self.text[self.pos] in WHITESPACE:
            self._advance()

    def next_token(self) -> Token:
        """
        Produce the next token.

        Returns:
            The next token; END_OF_FILE once the input is exhausted
        """
        self._skip_whitespace()
        line, col = self.line, self.col

        if self.is_at_end():
            return Token(TokenType.END_OF_FILE, "", line, col)

        ch = self.text[self.pos]
        if ch in PUNCTUATION:
            self._advance()
            return Token(PUNCTUATION[ch], ch, line, col)
        if ch == '"':
            return self._read_string(line, col)
        if ch in DIGITS or ch == "-":
            return self._read_number(line, col)
        if ch in LETTERS:
            return self._read_literal(line, col)

        self._advance()
        return self._error(f"Unexpected character '{ch}'", line, col)

    def _read_string(self, line: int, col: int) -> Token:
        self._advance()  # opening quote
        chars = []

        while True:
            ch = self._peek()
            if ch in ("", "\n"):
                return self._error("Unterminated string", line, col)
            self._advance()

            if ch == '"':
                return Token(TokenType.STRING, "".join(chars), line, col)

            if ch == "\\":
                escaped = self._peek()
                if escaped in ("", "\n"):
                    return self._error("Unterminated string", line, col)
                self._advance()
                # Unknown escapes keep the escaped character as-is
                chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(ch)

    def _read_number(self, line: int, col: int) -> Token:
        start = self.pos
        while not self.is_at_end() and self.text[self.pos] in NUMBER_CHARS:
            self._advance()
        return Token(TokenType.NUMBER, self.text[start:self.pos], line, col)

    def _read_literal(self, line: int, col: int) -> Token:
        start = self.pos
        while not self.is_at_end() and self.text[self.pos] in LETTERS:
            self._advance()

        word = self.text[start:self.pos]
        if word in LITERALS:
            return Token(LITERALS[word], word, line, col)
        return self._error(f"Invalid literal '{word}'", line, col)

    def _error(self, message: str, line: int, col: int) -> Token:
        return Token(TokenType.ERROR, message, line, col)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the input from the current position.

        Returns:
            Every remaining token, ending with END_OF_FILE
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.END_OF_FILE:
                return

    def __repr__(self) -> str:
        source = self.file_name or "<string>"
        return f"JsonLexer(source={source}, line={self.line}, col={self.col})"
