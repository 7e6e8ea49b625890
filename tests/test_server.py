import os
import signal
from unittest import mock

import pytest

from sigtalk.protocol import encode
from sigtalk.server import main, main_bonus
from sigtalk.transport import bit_to_signal


def _pause_feeding(*chunks):
    def fake_pause():
        handler = signal.getsignal(signal.SIGUSR1)
        for chunk in chunks:
            for bit in encode(chunk):
                handler(bit_to_signal(bit), None)
        raise KeyboardInterrupt

    return fake_pause


@pytest.fixture
def saved_handlers():
    saved = {signum: signal.getsignal(signum) for signum in (signal.SIGUSR1, signal.SIGUSR2)}
    yield saved
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def test_server_prints_pid_and_message(capsys, saved_handlers):
    with mock.patch("signal.pause", side_effect=_pause_feeding(b"hello")):
        assert main() == 0
    out = capsys.readouterr().out
    assert out == f"Server running with PID: {os.getpid()}\nhello"


def test_server_restores_handlers(capsys, saved_handlers):
    with mock.patch("signal.pause", side_effect=_pause_feeding(b"x")):
        status = main()
    assert status == 0
    assert capsys.readouterr().out.endswith("\nx")
    assert signal.getsignal(signal.SIGUSR1) == saved_handlers[signal.SIGUSR1]
    assert signal.getsignal(signal.SIGUSR2) == saved_handlers[signal.SIGUSR2]


def test_bonus_server_acknowledges(capsys, saved_handlers):
    pause = _pause_feeding(b"4242", b"hi")
    with mock.patch("signal.pause", side_effect=pause), mock.patch("os.kill") as kill:
        assert main_bonus() == 0
    assert [call.args for call in kill.call_args_list] == [(4242, signal.SIGUSR1)]
    assert capsys.readouterr().out.endswith("\nhi")


def test_bonus_server_reports_failed_acknowledgement(capsys, saved_handlers):
    pause = _pause_feeding(b"4242", b"hi")
    with mock.patch("signal.pause", side_effect=pause), mock.patch(
        "os.kill", side_effect=ProcessLookupError("gone")
    ):
        assert main_bonus() == 1
    assert "\nError\n\n" in capsys.readouterr().out