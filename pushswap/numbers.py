"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_prefix(text: str) -> int:
    """Read optional whitespace, an optional sign and the leading digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = 10 * result + (ord(ch) - ord("0"))
    return sign * result


def atol(text: str) -> int:
    """Parse the leading integer of text as a signed 64-bit value.

    Leading whitespace is skipped, one sign is accepted, and parsing stops
    at the first non-digit. Text without digits gives 0. Values that do not
    fit wrap around.
    """
    return _wrap(_parse_prefix(text), 64)


def atoi(text: str) -> int:
    """Parse the leading integer of text as a signed 32-bit value.

    Same rules as atol, but the result wraps to 32 bits.
    """
    return _wrap(_parse_prefix(text), 32)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)