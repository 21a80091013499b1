"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. The case converters hand back the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(value: CharLike) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(code: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def is_digit(code: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(code) <= ord("9")


def is_digit_str(text: str) -> bool:
    """True when every character of ``text`` is an ASCII digit (and for "")."""
    return all(is_digit(ch) for ch in text)


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(code) or is_alpha(code)


def is_alnum_str(text: str) -> bool:
    """True when every character of ``text`` is an ASCII letter or digit."""
    return all(is_alnum(ch) for ch in text)


def is_ascii(code: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(code) <= 126


def to_upper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    c = _code(code)
    if ord("a") <= c <= ord("z"):
        c -= 32
    return _same_kind(code, c)


def to_lower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    c = _code(code)
    if ord("A") <= c <= ord("Z"):
        c += 32
    return _same_kind(code, c)