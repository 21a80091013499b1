"""String helpers with bounded search, comparison, copying and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(value: CharLike) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the code difference of the first differing pair, 0 when they
    agree. A string that ends early compares as if followed by NUL.
    """
    _non_negative("count", count)
    for a, b in zip(first[:count].ljust(count, "\0"), second[:count].ljust(count, "\0")):
        if a == "\0" and b == "\0":
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    ch = _char(char)
    if ch == "\0" and ch not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    ch = _char(char)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0. Returns None when there is no match.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    return [word for word in text.split(_char(sep)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each item of a mutable character sequence.

    A non-None result replaces the character in place.
    """
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            text[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, at most ``size - 1`` characters, and the
    length of ``src`` (the length it would have needed). A size of 0
    copies nothing.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create:
    ``min(len(dst), size) + len(src)``. When ``dst`` already fills the
    buffer it is returned unchanged.
    """
    _non_negative("size", size)
    used = min(len(dst), size)
    total = used + len(src)
    if used >= size:
        return dst, total
    room = size - used - 1
    return dst + src[:room], total