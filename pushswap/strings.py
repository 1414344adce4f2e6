"""String routines with NUL-terminated semantics.

A string ends at its first NUL character ("\\0"), if it has one;
anything after it is ignored. Positions are returned as indices, with
None where nothing is found. The copy and concatenation routines
return the resulting text together with the count the caller would
use to detect truncation.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import NamedTuple, Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


class CopyResult(NamedTuple):
    """Text produced by a copy or concatenation, plus the reported length."""

    text: str
    length: int


def _terminated(s: str) -> str:
    """Return s up to, not including, its first NUL."""
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    """Normalise a search character; integer codes are reduced to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _compare(a: str, b: str) -> int:
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    Searching for the NUL character gives the index of the terminator.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, or None.

    Searching for the NUL character gives the index of the terminator.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first occurrence of needle lying wholly within the
    first length characters of haystack, or None.

    An empty needle is always found at index 0.
    """
    _check_size("length", length)
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[:length].find(target)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _compare(_terminated(s1), _terminated(s2))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like strcmp, but only the first n characters are compared."""
    _check_size("n", n)
    if n == 0:
        return 0
    return _compare(_terminated(s1)[:n], _terminated(s2)[:n])


def strlcpy(dest: str, src: str, size: int) -> CopyResult:
    """Copy src into a buffer of size characters, terminator included.

    Returns the resulting text and the full length of src. With a size
    of 0 the destination is left as it was.
    """
    _check_size("size", size)
    source = _terminated(src)
    if size == 0:
        return CopyResult(dest, len(source))
    return CopyResult(source[: size - 1], len(source))


def strlcat(dest: str, src: str, size: int) -> CopyResult:
    """Append src to dest in a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would
    have had. When size does not exceed the length of dest nothing is
    appended and the reported length is size plus the length of src.
    """
    _check_size("size", size)
    target = _terminated(dest)
    source = _terminated(src)
    if size <= len(target):
        return CopyResult(target, size + len(source))
    room = size - 1 - len(target)
    return CopyResult(target + source[:room], len(target) + len(source))


def strcpy(dest: str, src: str) -> CopyResult:
    """Copy src over dest; returns the new text and the number of
    characters copied."""
    source = _terminated(src)
    return CopyResult(source, len(source))


def strcat(dest: str, src: str) -> CopyResult:
    """Append src to dest; returns the new text and the number of
    characters appended."""
    source = _terminated(src)
    return CopyResult(_terminated(dest) + source, len(source))


def strdup(s: str) -> str:
    """Return a copy of s up to its terminator."""
    return _terminated(s)


def strndup(s: str, n: int) -> str:
    """Return a copy of exactly the first n characters of s.

    Raises ValueError when n is negative or s holds fewer than n characters.
    """
    _check_size("n", n)
    if n > len(s):
        raise ValueError(f"cannot copy {n} characters from a string of {len(s)}")
    return s[:n]