"""Bit-level framing shared by the sending and the receiving side.

Every byte travels as eight bits, most significant bit first. A message
ends with the end-of-transmission byte.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from sigtalk.chars import is_digit
from sigtalk.strings import atoi

EOT = 4
BITS_PER_BYTE = 8

DIGITS_ONLY_MESSAGE = "Invalid PID.\n\nIt should only contain digits!"
POSITIVE_MESSAGE = "Invalid PID.\n\nIt should be a positive number!"


class InvalidPidError(ValueError):
    """The text given as a process id is not usable."""


def byte_to_bits(byte: int) -> list[int]:
    """Return the eight bits of *byte*, most significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return [(byte >> shift) & 1 for shift in range(BITS_PER_BYTE - 1, -1, -1)]


def encode(data: bytes) -> Iterator[int]:
    """Yield the bits of *data* followed by the bits of the terminator."""
    for byte in bytes(data) + bytes([EOT]):
        yield from byte_to_bits(byte)


def _check_digits(text: str) -> None:
    if not all(is_digit(ch) for ch in text):
        raise InvalidPidError(DIGITS_ONLY_MESSAGE)


def _check_positive(pid: int) -> None:
    if pid <= 0:
        raise InvalidPidError(POSITIVE_MESSAGE)


def parse_pid(text: str, digits_first: bool = False) -> int:
    """Parse a process id given on the command line.

    The text must consist of digits only and name a positive number.
    *digits_first* decides which of the two checks reports first when
    both fail.
    """
    pid = atoi(text)
    if digits_first:
        _check_digits(text)
        _check_positive(pid)
    else:
        _check_positive(pid)
        _check_digits(text)
    return pid


@dataclass
class BitAssembler:
    """Collects bits, most significant first, into whole bytes."""

    value: int = 0
    count: int = 0

    def push(self, bit: int) -> Optional[int]:
        """Add one bit; return the finished byte after the eighth, else None."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if bit:
            self.value |= 1 << (BITS_PER_BYTE - 1 - self.count)
        self.count += 1
        if self.count < BITS_PER_BYTE:
            return None
        byte = self.value
        self.value = 0
        self.count = 0
        return byte