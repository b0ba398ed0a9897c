"""Tokenizer for mover programs.

Turns source text into a flat stream of number, identifier and operator
tokens. Any character that cannot start a token ends the stream.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

# Numeral with an optional trailing unit suffix ("1.5f"); the suffix is dropped.
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?(?P<suffix>[fF])?")
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
WHITESPACE_RE = re.compile(r"\s*")
OPERATORS = frozenset("(),.=><;")


@dataclass(frozen=True)
class NumberToken:
    value: float


@dataclass(frozen=True)
class IdentifierToken:
    value: str


@dataclass(frozen=True)
class OperatorToken:
    value: str


Token = NumberToken | IdentifierToken | OperatorToken


class Tokenizer:
    """Lazy token stream over a source string."""

    def __init__(self, content: str) -> None:
        self.content = content
        self.position = 0

    def _skip_whitespace(self) -> None:
        match = WHITESPACE_RE.match(self.content, self.position)
        if match:
            self.position = match.end()

    def next_token(self) -> Token | None:
        """Return the next token, or None at end of stream."""
        self._skip_whitespace()
        if self.position >= len(self.content):
            return None

        char = self.content[self.position]
        if char.isdigit() or char in "+-":
            match = NUMBER_RE.match(self.content, self.position)
            if not match:
                return None
            self.position = match.end()
            numeral = match.group()
            if match.group("suffix"):
                numeral = numeral[:-1]
            return NumberToken(float(numeral))

        if char.isalpha() or char == "_":
            match = IDENTIFIER_RE.match(self.content, self.position)
            if not match:
                return None
            self.position = match.end()
            return IdentifierToken(match.group())

        if char in OPERATORS:
            self.position += 1
            return OperatorToken(char)

        return None

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token


def tokenize(content: str) -> list[Token]:
    """Tokenize a whole source string."""
    return list(Tokenizer(content))


__all__ = [
    "IdentifierToken",
    "NumberToken",
    "OperatorToken",
    "Token",
    "Tokenizer",
    "tokenize",
]
