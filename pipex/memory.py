"""Byte-buffer helpers: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

from collections.abc import Sized


def _check_count(name: str, data: Sized, count: int, offset: int = 0) -> None:
    if count < 0 or offset < 0:
        raise ValueError("count and offset must not be negative")
    if offset + count > len(data):
        raise ValueError(
            f"{name} holds {len(data)} bytes, {offset + count} requested"
        )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count("buffer", buffer, count)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count("dest", dest, count)
    _check_count("src", src, count)
    dest[:count] = src[:count]
    return dest


def memmove(
    buffer: bytearray, dest_offset: int, src_offset: int, count: int
) -> bytearray:
    """Copy ``count`` bytes within ``buffer``; overlapping regions are handled."""
    _check_count("buffer", buffer, count, dest_offset)
    _check_count("buffer", buffer, count, src_offset)
    buffer[dest_offset:dest_offset + count] = bytes(
        buffer[src_offset:src_offset + count]
    )
    return buffer


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``count``, or None."""
    _check_count("data", data, count)
    index = data.find(bytes([value & 0xFF]), 0, count)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Difference of the first differing byte within ``count`` bytes, else 0."""
    _check_count("first", first, count)
    _check_count("second", second, count)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)