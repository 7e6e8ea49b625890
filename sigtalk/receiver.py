"""Turning received bits back into message bytes."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable
from typing import BinaryIO, Optional

from sigtalk.protocol import EOT, BitAssembler
from sigtalk.strings import atoi
from sigtalk.transport import TransmissionError


def _send_acknowledgement(pid: int) -> None:
    if pid <= 0:
        raise TransmissionError(f"cannot acknowledge process id {pid}")
    try:
        os.kill(pid, signal.SIGUSR1)
    except OSError as exc:
        raise TransmissionError(f"cannot signal process {pid}: {exc}") from exc


class MessageReceiver:
    """Writes each received byte to an output stream, dropping terminators."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self._output = output
        self._assembler = BitAssembler()

    def _emit(self, byte: int) -> None:
        stream = self._output if self._output is not None else sys.stdout.buffer
        stream.write(bytes([byte]))
        stream.flush()

    def receive_bit(self, bit: int) -> Optional[int]:
        """Take one bit; return the byte it completes, or None."""
        byte = self._assembler.push(bit)
        if byte is not None and byte != EOT:
            self._emit(byte)
        return byte


class AcknowledgingReceiver(MessageReceiver):
    """Receives the sender's process id, then its message, then acknowledges.

    Each exchange starts with the sender's id in decimal digits ended by
    the terminator; the message follows, and its terminator makes the
    receiver call *acknowledge* with that id.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        acknowledge: Optional[Callable[[int], object]] = None,
    ) -> None:
        super().__init__(output)
        self._acknowledge = acknowledge if acknowledge is not None else _send_acknowledgement
        self._pid_digits = bytearray()
        self._client_pid: Optional[int] = None

    def receive_bit(self, bit: int) -> Optional[int]:
        """Take one bit; return the byte it completes, or None."""
        byte = self._assembler.push(bit)
        if byte is None:
            return None
        if self._client_pid is None:
            if byte == EOT:
                self._client_pid = atoi(self._pid_digits.decode("latin-1"))
                self._pid_digits.clear()
            else:
                self._pid_digits.append(byte)
        elif byte != EOT:
            self._emit(byte)
        else:
            pid = self._client_pid
            self._client_pid = None
            self._acknowledge(pid)
        return byte