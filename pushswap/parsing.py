"""Validation and conversion of the command-line numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .chars import is_digit
from .numbers import INT_MAX, INT_MIN, atoi, atol


class InvalidInputError(ValueError):
    """Raised when the arguments do not describe a list of 32-bit integers."""


def join_arguments(args: Sequence[str]) -> str:
    """Join the arguments into one text, separated by single spaces."""
    return " ".join(args)


def _tokens(text: str) -> list[str]:
    return [token for token in text.split(" ") if token]


def _is_integer_token(token: str) -> bool:
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(is_digit(ch) for ch in body)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Return the integers written in args, in order.

    Each argument may hold several numbers separated by spaces. A number
    is an optional sign followed by at least one digit, and must fit in
    a 32-bit signed integer. Raises InvalidInputError otherwise. Empty or
    blank input gives an empty list. Duplicates are not checked here.
    """
    tokens = _tokens(join_arguments(args))
    for token in tokens:
        if not INT_MIN <= atol(token) <= INT_MAX:
            raise InvalidInputError(f"{token!r} does not fit in a 32-bit integer")
    for token in tokens:
        if not _is_integer_token(token):
            raise InvalidInputError(f"{token!r} is not an integer")
    return [atoi(token) for token in tokens]


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False