"""Byte-buffer operations: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = (1 << 64) - 1


def _check(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to the low byte of ``value``."""
    _check(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` into the start of ``dest``."""
    _check(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source was copied out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check(count)
    if max(dest, src) + count > len(buffer):
        raise IndexError("region extends past the end of the buffer")
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Return the index of the low byte of ``value`` in the first ``count`` bytes."""
    _check(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare ``count`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError("requested allocation size overflows")
    return bytearray(total)