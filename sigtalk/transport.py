"""Sending bytes to another process as a stream of user signals.

A one bit is sent as SIGUSR1 and a zero bit as SIGUSR2, with a short
pause after each signal so that the receiver can keep up.
"""

from __future__ import annotations

import os
import signal
import time

from sigtalk.protocol import byte_to_bits

DEFAULT_DELAY = 100e-6
ACKNOWLEDGED_DELAY = 1000e-6


class TransmissionError(RuntimeError):
    """A signal could not be delivered to the other process."""


def bit_to_signal(bit: int) -> signal.Signals:
    """Return the signal that carries *bit*."""
    if bit not in (0, 1):
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def signal_to_bit(signum: int) -> int:
    """Return the bit carried by the signal *signum*."""
    if signum == signal.SIGUSR1:
        return 1
    if signum == signal.SIGUSR2:
        return 0
    raise ValueError(f"signal {signum} carries no bit")


def send_byte(byte: int, pid: int, delay: float = DEFAULT_DELAY) -> None:
    """Send the eight bits of *byte* to process *pid*."""
    if pid <= 0:
        raise ValueError(f"process id must be positive, got {pid}")
    for bit in byte_to_bits(byte):
        try:
            os.kill(pid, bit_to_signal(bit))
        except OSError as exc:
            raise TransmissionError(f"cannot signal process {pid}: {exc}") from exc
        time.sleep(delay)


def send_bytes(data: bytes, pid: int, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of *data* to process *pid*, in order."""
    for byte in bytes(data):
        send_byte(byte, pid, delay)