import io
import signal
from unittest import mock

import pytest

from sigtalk.protocol import EOT, encode
from sigtalk.receiver import AcknowledgingReceiver, MessageReceiver
from sigtalk.transport import TransmissionError, signal_to_bit


def _feed(receiver, *chunks):
    results = []
    for chunk in chunks:
        results.extend(receiver.receive_bit(bit) for bit in encode(chunk))
    return results


def test_message_written_without_terminator():
    output = io.BytesIO()
    _feed(MessageReceiver(output), b"hello")
    assert output.getvalue() == b"hello"


def test_completed_bytes_are_returned():
    output = io.BytesIO()
    results = _feed(MessageReceiver(output), b"hi")
    assert [value for value in results if value is not None] == [ord("h"), ord("i"), EOT]


def test_several_messages_in_a_row():
    output = io.BytesIO()
    _feed(MessageReceiver(output), b"one", b"two")
    assert output.getvalue() == b"onetwo"


def test_acknowledging_receiver_reads_pid_then_message():
    output = io.BytesIO()
    acks = []
    _feed(AcknowledgingReceiver(output, acks.append), b"4242", b"hello")
    assert output.getvalue() == b"hello"
    assert acks == [4242]


def test_acknowledging_receiver_serves_consecutive_clients():
    output = io.BytesIO()
    acks = []
    receiver = AcknowledgingReceiver(output, acks.append)
    _feed(receiver, b"4242", b"ab", b"777", b"cd")
    assert output.getvalue() == b"abcd"
    assert acks == [4242, 777]


def test_no_acknowledgement_before_message_ends():
    acks = []
    receiver = AcknowledgingReceiver(io.BytesIO(), acks.append)
    _feed(receiver, b"4242")
    assert acks == []


def test_default_acknowledgement_signals_client():
    output = io.BytesIO()
    with mock.patch("os.kill") as kill:
        _feed(AcknowledgingReceiver(output), b"4242", b"x")
    assert output.getvalue() == b"x"
    sent = [call.args for call in kill.call_args_list]
    assert sent == [(4242, signal.SIGUSR1)]
    assert signal_to_bit(sent[0][1]) == 1


def test_failed_acknowledgement_raises():
    receiver = AcknowledgingReceiver(io.BytesIO())
    with mock.patch("os.kill", side_effect=ProcessLookupError("gone")):
        with pytest.raises(TransmissionError):
            _feed(receiver, b"4242", b"x")


def test_unparseable_pid_is_not_signalled():
    receiver = AcknowledgingReceiver(io.BytesIO())
    with mock.patch("os.kill") as kill:
        with pytest.raises(TransmissionError):
            _feed(receiver, b"zz", b"x")
    assert kill.call_count == 0