"""Byte-buffer helpers working on bytearrays and writable memoryviews."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadOnly = Union[bytes, bytearray, memoryview]


def _check_len(name: str, data: ReadOnly, n: int) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_len("buffer", buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> Buffer:
    """Zero the first n bytes of buffer."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def _copy(dest: Optional[Buffer], src: Optional[ReadOnly], n: int) -> Optional[Buffer]:
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both dest and src are needed")
    _check_len("dest", dest, n)
    _check_len("src", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memcpy(dest: Optional[Buffer], src: Optional[ReadOnly], n: int) -> Optional[Buffer]:
    """Copy n bytes from src into dest; returns dest, or None when both are None."""
    return _copy(dest, src, n)


def memmove(dest: Optional[Buffer], src: Optional[ReadOnly], n: int) -> Optional[Buffer]:
    """Copy n bytes from src into dest, correct when the two overlap."""
    return _copy(dest, src, n)


def memchr(data: ReadOnly, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_len("data", data, n)
    found = bytes(data[:n]).find(value & 0xFF)
    return None if found == -1 else found


def memcmp(a: ReadOnly, b: ReadOnly, n: int) -> int:
    """Compare the first n bytes; the result is the difference of the first unequal pair."""
    _check_len("a", a, n)
    _check_len("b", b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0