"""Formatted and plain writing of characters, strings and numbers."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .numbers import itoa

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _wrap_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >> 31 else n


def _target(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def number_in_base(n: int, base: str) -> str:
    """Return the non-negative integer n written with the digits of base."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if n < 0:
        raise ValueError("only non-negative numbers can be written in a base")
    radix = len(base)
    digits = [base[n % radix]]
    n //= radix
    while n:
        digits.append(base[n % radix])
        n //= radix
    return "".join(reversed(digits))


def _char_arg(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + number_in_base(int(value) & 0xFFFFFFFFFFFFFFFF, _HEX_LOWER)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char_arg(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_wrap_int32(int(value)))
    if spec == "u":
        return number_in_base(int(value) & 0xFFFFFFFF, _DECIMAL)
    if spec == "x":
        return number_in_base(int(value) & 0xFFFFFFFF, _HEX_LOWER)
    return number_in_base(int(value) & 0xFFFFFFFF, _HEX_UPPER)


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with the conversions %c %s %p %d %i %u %x %X and %%.

    An unknown conversion character is written as it is. A lone "%" at
    the end of fmt, or too few arguments, raises ValueError.
    """
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with an incomplete conversion")
        if spec == "%":
            parts.append("%")
        elif spec in "cspdiuxX":
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(f"no argument left for %{spec}") from None
            parts.append(_convert(spec, value))
        else:
            parts.append(spec)
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def put_char(c: str, file: Optional[TextIO] = None) -> None:
    """Write one character to file (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(file).write(c)


def put_str(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write s to file; a missing string writes nothing."""
    if s is None:
        return
    _target(file).write(s)


def put_endl(s: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write s followed by a newline."""
    put_str(s, file)
    _target(file).write("\n")


def put_nbr(n: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(file).write(itoa(n))


def put_error(file: Optional[TextIO] = None) -> None:
    """Write the error line to file (standard output by default)."""
    _target(file).write("Error\n")