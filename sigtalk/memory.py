"""Byte-buffer helpers: fill, search, compare and copy regions of bytes."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buffer* with the low byte of *value*."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buffer*."""
    memset(buffer, 0, n)


def calloc(nitems: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nitems* elements of *size* bytes."""
    if nitems < 0 or size < 0:
        raise ValueError("item count and size must not be negative")
    return bytearray(nitems * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to *value* in data[:n], or None."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch or 0."""
    _check_count(n, len(first), len(second))
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into the start of *dest*."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes within *buffer* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer