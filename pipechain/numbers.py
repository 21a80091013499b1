"""Integer parsing and formatting with fixed-width wrap-around."""

from __future__ import annotations

import re

_INT_BITS = 32
_LONG_BITS = 64

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value &= modulus - 1
    return value - modulus if value >= modulus >> 1 else value


def _parse(text: str, bits: int) -> int:
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    magnitude = _wrap(int(digits), bits) if digits else 0
    return _wrap(-magnitude if sign == "-" else magnitude, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does, as a 32-bit int.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits yields 0.
    """
    return _parse(text, _INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer as a 64-bit value."""
    return _parse(text, _LONG_BITS)


def itoa(number: int) -> str:
    """Format a 32-bit integer in decimal."""
    return str(_wrap(number, _INT_BITS))


def ltoa(number: int) -> str:
    """Format a 64-bit integer in decimal."""
    return str(_wrap(number, _LONG_BITS))