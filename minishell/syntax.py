"""Syntax checks on a raw command line and splitting it into pipeline parts."""

from __future__ import annotations

from typing import Iterable

_QUOTES = frozenset("'\"")
_OPERATORS = frozenset("<>|&")

_UNCLOSED_QUOTES = "syntax error: unclosed quotation marks"
_BAD_SYNTAX = "syntax error or syntax not suported"


class ShellSyntaxError(Exception):
    """A command line the shell refuses to run."""

    def __init__(self, message: str, exit_status: int = 2) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status


def _track_quote(stack: list[str], quote: str) -> bool:
    """Update the open-quote stack with ``quote``; True when it closed one."""
    if stack and stack[-1] == quote:
        stack.pop()
        return True
    stack.append(quote)
    return False


def _quote_states(text: Iterable[str]):
    """Yield each character with the quote-tracking state after reading it.

    The state is a pair: whether any quote is still open, and the result of
    the most recent quote update (True after a close, False after an open).
    """
    stack: list[str] = []
    last_closed = True
    for char in text:
        if char in _QUOTES:
            last_closed = _track_quote(stack, char)
        yield char, bool(stack), last_closed


def quotes_closed(text: str) -> bool:
    """True when every quotation mark in ``text`` is matched."""
    inside = False
    for _, inside, _ in _quote_states(text):
        pass
    return not inside


def mask_quoted(prompt: str) -> str:
    """Replace every character inside quotes with ``*``, keeping the quotes."""
    return "".join(
        "*" if inside and char not in _QUOTES else char
        for char, inside, _ in _quote_states(prompt)
    )


def split_pipes(prompt: str) -> list[str]:
    """Split a command line on the pipes that stand outside quotes.

    Empty pieces are dropped; the spaces around each piece are kept.
    """
    chars = []
    for char, inside, last_closed in _quote_states(prompt):
        if inside and char not in _QUOTES:
            chars.append(char)
        elif char == "|" and last_closed:
            chars.append("&")
        else:
            chars.append(char)
    return [piece for piece in "".join(chars).split("&") if piece]


def _next_operator(text: str, start: int) -> int:
    return next(
        (index for index in range(start, len(text)) if text[index] in _OPERATORS),
        len(text),
    )


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _operand_follows(text: str, index: int) -> bool:
    operator = text[index]
    follow = index + 1
    while _char_at(text, follow) == " ":
        follow += 1
    following = _char_at(text, follow)
    if operator == "|" and following == "|":
        return False
    if operator != "|" and following in _OPERATORS:
        return False
    return following != ""


def _operators_valid(masked: str) -> bool:
    index = _next_operator(masked, 0)
    while index < len(masked):
        following = _char_at(masked, index + 1)
        if following in _OPERATORS:
            if masked[index] != following or masked[index] == "|":
                return False
            index += 1
        if masked[index] == "&":
            return False
        if not _operand_follows(masked, index):
            return False
        index = _next_operator(masked, index + 1)
    return True


def validate(prompt: str) -> bool:
    """Check a command line before it is run.

    Returns False for a blank line and True for one that may be run.
    Raises ShellSyntaxError for unclosed quotes or misplaced operators.
    """
    stripped = prompt.lstrip(" ")
    if not stripped:
        return False
    if not quotes_closed(prompt):
        raise ShellSyntaxError(_UNCLOSED_QUOTES)
    if stripped[0] == "|" or not _operators_valid(mask_quoted(prompt)):
        raise ShellSyntaxError(_BAD_SYNTAX)
    return True