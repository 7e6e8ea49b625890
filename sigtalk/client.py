"""Command-line client: send a message to a server process by signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import EOT, InvalidPidError, parse_pid
from sigtalk.strings import itoa
from sigtalk.transport import (
    ACKNOWLEDGED_DELAY,
    DEFAULT_DELAY,
    TransmissionError,
    send_bytes,
)

_TERMINATOR = bytes([EOT])


def _program_name() -> str:
    return sys.argv[0] if sys.argv and sys.argv[0] else "client"


def _arguments(argv: Optional[Sequence[str]]) -> Optional[list[str]]:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("\nOpsie! Wrong format!\n\n")
        printf('Proper usage: %s <PID> "Message"\n\n', _program_name())
        return None
    return args


def _server_pid(text: str, digits_first: bool) -> Optional[int]:
    try:
        return parse_pid(text, digits_first=digits_first)
    except InvalidPidError as exc:
        printf("\n%s\n\n", str(exc))
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send a message to the server: arguments are <PID> and the message."""
    args = _arguments(argv)
    if args is None:
        return 1
    server_pid = _server_pid(args[0], digits_first=False)
    if server_pid is None:
        return 1
    try:
        send_bytes(os.fsencode(args[1]) + _TERMINATOR, server_pid, DEFAULT_DELAY)
    except TransmissionError:
        printf("\nError\n\n")
        return 1
    return 0


def main_bonus(argv: Optional[Sequence[str]] = None) -> int:
    """Send this process's id and a message, then wait for the server's reply."""
    args = _arguments(argv)
    if args is None:
        return 1
    server_pid = _server_pid(args[0], digits_first=True)
    if server_pid is None:
        return 1
    acknowledgement = {signal.SIGUSR1}
    previous_mask = signal.pthread_sigmask(signal.SIG_BLOCK, acknowledgement)
    try:
        own_pid = itoa(os.getpid()).encode("ascii")
        send_bytes(own_pid + _TERMINATOR, server_pid, ACKNOWLEDGED_DELAY)
        send_bytes(os.fsencode(args[1]) + _TERMINATOR, server_pid, ACKNOWLEDGED_DELAY)
        signal.sigwait(acknowledgement)
    except TransmissionError:
        printf("\nError\n\n")
        return 1
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous_mask)
    printf("\nMessage received by the server successfully!\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())