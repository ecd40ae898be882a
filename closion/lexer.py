"""Tokenizer for arithmetic expressions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_DIGITS = frozenset("0123456789")


class TokenKind(Enum):
    """Kinds of tokens the lexer produces; the value is the display text."""

    NUMBER = "Number"
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"
    EOF = "EOF"
    WHITESPACE = "Whitespace"
    BAD = "Bad"

    def __str__(self) -> str:
        return self.value


_PUNCTUATION = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True)
class TextSpan:
    """A region of the input text and the text it covers."""

    start: int
    end: int
    literal: str

    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Token:
    """A token; ``value`` holds the number for NUMBER tokens."""

    kind: TokenKind
    span: TextSpan
    value: int | None = None


class Lexer:
    """Splits text into tokens, ending with a single EOF token."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._position = 0

    def next_token(self) -> Token | None:
        """Return the next token, or None once EOF has been produced."""
        text = self.text
        if self._position > len(text):
            return None
        if self._position == len(text):
            self._position += 1
            return Token(TokenKind.EOF, TextSpan(0, 0, "\0"))

        start = self._position
        char = text[start]
        value = None
        if char in _DIGITS:
            end = start
            while end < len(text) and text[end] in _DIGITS:
                end += 1
            kind = TokenKind.NUMBER
            value = int(text[start:end])
        elif char.isspace():
            end = start + 1
            kind = TokenKind.WHITESPACE
        else:
            end = start + 1
            kind = _PUNCTUATION.get(char, TokenKind.BAD)

        self._position = end
        return Token(kind, TextSpan(start, end, text[start:end]), value)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text``, EOF included."""
    return list(Lexer(text))