"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from pipechain.numbers import itoa

_UINT_MASK = (1 << 32) - 1
_PTR_MASK = (1 << 64) - 1


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> int:
    """Write one character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _stream(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` to ``stream``."""
    return _stream(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline to ``stream``."""
    return _stream(stream).write(text + "\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit integer in decimal to ``stream``."""
    return _stream(stream).write(itoa(number))


def format_hex(number: int, spec: str = "x") -> str:
    """Format a 32-bit unsigned value in hexadecimal.

    ``spec`` is "x" for lower-case digits or "X" for upper-case.
    """
    if spec == "x":
        return format(number & _UINT_MASK, "x")
    if spec == "X":
        return format(number & _UINT_MASK, "X")
    raise ValueError(f"hex spec must be 'x' or 'X', got {spec!r}")


def format_pointer(address: int) -> str:
    """Format an address as 0x-prefixed hex, or "(nil)" for zero."""
    address &= _PTR_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def format_unsigned(number: int) -> str:
    """Format a value as a 32-bit unsigned decimal."""
    return str(number & _UINT_MASK)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, args: list) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for format spec %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return itoa(value)
    if spec == "u":
        return format_unsigned(value)
    return format_hex(value, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand %c %s %p %d %i %u %x %X and %% in ``fmt``.

    Unknown conversions and a trailing lone "%" produce nothing.
    """
    remaining = list(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            if spec:
                pieces.append(_convert(spec, remaining))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` and return the number of characters."""
    text = format_printf(fmt, *args)
    _stream(stream).write(text)
    return len(text)