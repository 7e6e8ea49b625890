"""Command-line server: print messages that arrive as user signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence

from sigtalk.printf import printf
from sigtalk.receiver import AcknowledgingReceiver, MessageReceiver
from sigtalk.transport import TransmissionError, signal_to_bit

_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


def _serve(receiver: MessageReceiver) -> int:
    printf("Server running with PID: %d\n", os.getpid())

    def handle(signum, _frame):
        receiver.receive_bit(signal_to_bit(signum))

    previous = {signum: signal.signal(signum, handle) for signum in _SIGNALS}
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0
    except TransmissionError:
        printf("\nError\n\n")
        return 1
    finally:
        for signum, handler in previous.items():
            if handler is not None:
                signal.signal(signum, handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every message received until interrupted; takes no arguments."""
    return _serve(MessageReceiver())


def main_bonus(argv: Optional[Sequence[str]] = None) -> int:
    """Print messages and acknowledge each to its sender; takes no arguments."""
    return _serve(AcknowledgingReceiver())


if __name__ == "__main__":
    sys.exit(main())