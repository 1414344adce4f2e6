"""Splitting, joining, trimming and mapping of text."""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableSequence
from typing import Any, Optional


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def _words(s: str, sep: str) -> Iterator[str]:
    _check_separator(sep)
    return (word for word in s.split(sep) if word)


def count_words(s: str, sep: str) -> int:
    """Number of non-empty runs of characters between occurrences of sep."""
    return sum(1 for _ in _words(s, sep))


def split(s: str, sep: str) -> list[str]:
    """Split s on sep, dropping the empty pieces that repeated or
    leading and trailing separators would produce."""
    return list(_words(s, sep))


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    if s1 is None or s2 is None:
        raise TypeError("both strings are required")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in charset from both ends of s."""
    if s is None or charset is None:
        raise TypeError("both the string and the character set are required")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start.

    A start at or past the end of s gives an empty string.
    """
    if s is None:
        raise TypeError("a string is required")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def striteri(s: MutableSequence[Any], func: Callable[[int, Any], Optional[Any]]) -> None:
    """Call func(index, item) for every item of the mutable sequence s.

    Where func returns something other than None, that value replaces
    the item in place.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from func(index, char) for each character."""
    if s is None:
        raise TypeError("a string is required")
    return "".join(func(index, ch) for index, ch in enumerate(s))