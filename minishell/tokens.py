"""Lexical tokens of a shell command line and the scanner that produces them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

_UNQUOTED_STOPS = frozenset("<>|\"' ")


class TokenType(Enum):
    """Kinds of token the scanner recognises."""

    STRING_UNQUOTED = auto()
    STRING_DQ_CLOSED = auto()
    STRING_DQ_UNCLOSED = auto()
    STRING_SQ_CLOSED = auto()
    STRING_SQ_UNCLOSED = auto()
    INFILE = auto()
    INFILE_HEREDOC = auto()
    OUTFILE = auto()
    OUTFILE_APPEND = auto()
    PIPE = auto()

    def expands_vars(self) -> bool:
        """Whether variables inside a token of this kind are expanded."""
        return self in (
            TokenType.STRING_DQ_CLOSED,
            TokenType.STRING_DQ_UNCLOSED,
            TokenType.STRING_UNQUOTED,
        )


_OPERATOR_TEXT = {
    TokenType.INFILE: "<",
    TokenType.INFILE_HEREDOC: "<<",
    TokenType.OUTFILE: ">",
    TokenType.OUTFILE_APPEND: ">>",
    TokenType.PIPE: "|",
}


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the text it carries."""

    type: TokenType
    value: str = ""

    def to_str(self) -> str:
        """Render the token back as it would appear on a command line."""
        kind = self.type
        if kind is TokenType.STRING_UNQUOTED:
            return self.value
        if kind is TokenType.STRING_DQ_UNCLOSED:
            return '"' + self.value
        if kind is TokenType.STRING_SQ_UNCLOSED:
            return "'" + self.value
        if kind is TokenType.STRING_DQ_CLOSED:
            return f'"{self.value}"'
        if kind is TokenType.STRING_SQ_CLOSED:
            return f"'{self.value}'"
        return _OPERATOR_TEXT[kind]

    def is_infile(self) -> bool:
        """True for input redirections (``<`` and ``<<``)."""
        return self.type in (TokenType.INFILE, TokenType.INFILE_HEREDOC)

    def is_outfile(self) -> bool:
        """True for output redirections (``>`` and ``>>``)."""
        return self.type in (TokenType.OUTFILE, TokenType.OUTFILE_APPEND)

    def is_string(self) -> bool:
        """True for unquoted strings and properly closed quoted strings."""
        return self.type in (
            TokenType.STRING_UNQUOTED,
            TokenType.STRING_DQ_CLOSED,
            TokenType.STRING_SQ_CLOSED,
        )


def _quoted(text: str, start: int, quote: str, closed: TokenType,
            unclosed: TokenType) -> Tuple[Token, int]:
    end = text.find(quote, start + 1)
    if end == -1:
        return Token(unclosed, text[start + 1:]), len(text)
    return Token(closed, text[start + 1:end]), end + 1


def _redirect(text: str, start: int, single: TokenType,
              double: TokenType) -> Tuple[Token, int]:
    if text[start + 1:start + 2] == text[start]:
        return Token(double, _OPERATOR_TEXT[double]), start + 2
    return Token(single, _OPERATOR_TEXT[single]), start + 1


def next_token(text: str, pos: int = 0) -> Tuple[Optional[Token], int]:
    """Scan one token of ``text`` starting at ``pos``.

    Leading spaces are skipped. Returns the token and the position just
    after it, or ``None`` and the end position when nothing is left.
    """
    length = len(text)
    while pos < length and text[pos] == " ":
        pos += 1
    if pos >= length:
        return None, pos
    char = text[pos]
    if char == '"':
        return _quoted(text, pos, '"', TokenType.STRING_DQ_CLOSED,
                       TokenType.STRING_DQ_UNCLOSED)
    if char == "'":
        return _quoted(text, pos, "'", TokenType.STRING_SQ_CLOSED,
                       TokenType.STRING_SQ_UNCLOSED)
    if char == "<":
        return _redirect(text, pos, TokenType.INFILE, TokenType.INFILE_HEREDOC)
    if char == ">":
        return _redirect(text, pos, TokenType.OUTFILE, TokenType.OUTFILE_APPEND)
    if char == "|":
        return Token(TokenType.PIPE, "|"), pos + 1
    end = pos
    while end < length and text[end] not in _UNQUOTED_STOPS:
        end += 1
    return Token(TokenType.STRING_UNQUOTED, text[pos:end]), end


def tokenize(text: str) -> list[Token]:
    """Split a whole command line into tokens."""
    tokens: list[Token] = []
    pos = 0
    while True:
        token, pos = next_token(text, pos)
        if token is None:
            return tokens
        tokens.append(token)