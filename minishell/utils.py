"""Small helpers for string lists and string comparison."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def str_equal(first: Optional[str], second: Optional[str]) -> bool:
    """True when both strings exist and are identical."""
    if first is None or second is None:
        return False
    return first == second


def array_size(array: Optional[Iterable[str]]) -> int:
    """Number of elements in ``array``; a missing array has none."""
    if array is None:
        return 0
    return sum(1 for _ in array)


def array_dup(array: Optional[Iterable[str]]) -> Optional[list[str]]:
    """Return an independent copy of ``array``, or ``None`` if it is missing."""
    if array is None:
        return None
    return list(array)


def array_append(array: Optional[Iterable[str]], value: str) -> list[str]:
    """Return a new list holding the elements of ``array`` followed by ``value``."""
    result = [] if array is None else list(array)
    result.append(value)
    return result


def array_print(array: Optional[Iterable[str]], stream: Optional[TextIO] = None) -> None:
    """Write each element of ``array`` on its own line."""
    if array is None:
        return
    out = sys.stdout if stream is None else stream
    for item in array:
        print(item, file=out)