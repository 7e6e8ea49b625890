"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char_fd(c: Union[str, int], fd: int) -> int:
    """Write one character (or one byte given as an int) to *fd*."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return _write_all(fd, bytes([c & 0xFF]))
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return _write_all(fd, c.encode("utf-8"))
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def put_str_fd(text: str, fd: int) -> int:
    """Write *text* to *fd* and return the number of bytes written."""
    return _write_all(fd, text.encode("utf-8"))


def put_endl_fd(text: str, fd: int) -> int:
    """Write *text* followed by a newline to *fd*."""
    return _write_all(fd, text.encode("utf-8") + b"\n")


def put_nbr_fd(number: int, fd: int) -> int:
    """Write the decimal form of *number* to *fd*."""
    return _write_all(fd, str(int(number)).encode("ascii"))