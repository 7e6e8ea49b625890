# sigtalk

sigtalk sends text from one process to another using only two POSIX
signals. `SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. Each byte
is sent most significant bit first. The byte `0x04` marks the end of a
message.

It needs `SIGUSR1` and `SIGUSR2`, so it runs on POSIX systems only.

## Installation

```
pip install .
```

## Basic exchange

Start the server. It takes no arguments, prints its process id, and writes
the bytes of every message it receives to standard output. The `0x04`
terminators are not written. Stop it with Ctrl-C.

```
sigtalk-server
Server running with PID: 12345
```

In another terminal, send it a message:

```
sigtalk-client 12345 "Hello there"
```

The client needs exactly two arguments. The PID must contain digits only
and must be positive. If either check fails, the client prints an error
message and exits with status 1. It does the same when a signal cannot be
delivered. The client waits about 100 microseconds after each signal.

## Acknowledged exchange

The acknowledging pair works in three steps:

1. The client sends its own PID as decimal digits, ended by `0x04`.
2. The client sends the message, also ended by `0x04`.
3. When the message's terminator arrives, the server sends `SIGUSR1` back to
   that PID.

The client waits for that signal and then prints
"Message received by the server successfully!". In this mode the client
waits about 1 millisecond after each signal. If the server cannot signal
the client back, it prints an error and exits with status 1.

```
sigtalk-server-ack
sigtalk-client-ack 12345 "Hello there"
```

## Library use

The modules can also be used on their own:

- `sigtalk.protocol` handles the bit format:
  - `encode` and `byte_to_bits` produce bits.
  - `parse_pid` validates a PID and raises `InvalidPidError` when it is not valid.
  - `BitAssembler` rebuilds bytes from bits.
- `sigtalk.transport` sends and maps signals:
  - `send_byte` and `send_bytes` send bytes as signals. Both raise `TransmissionError` when delivery fails.
  - `bit_to_signal` and `signal_to_bit` map between bits and signals.
- `sigtalk.receiver` has two state machines, `MessageReceiver` and `AcknowledgingReceiver`. You drive both through `receive_bit`. `AcknowledgingReceiver` accepts an `acknowledge` callable, so you can use it without sending real signals.
- `sigtalk.printf` is a small printf-style formatter:
  - It provides `sprintf` and `printf`, and supports `%c %s %p %d %i %u %x %X %%`.
  - Integers follow 32-bit C `int` rules.
- Helper modules that the tools are built on:
  - `sigtalk.strings` for strings.
  - `sigtalk.chars` for characters.
  - `sigtalk.memory` for byte buffers.
  - `sigtalk.linked_list` for a linked list.
  - `sigtalk.output` for file-descriptor output.

```python
from sigtalk.protocol import encode
from sigtalk.printf import sprintf

bits = list(encode(b"A"))
# the bits of "A" followed by the bits of the 0x04 terminator
assert bits == [0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0]
assert sprintf("%d in hex is %x", 255, 255) == "255 in hex is ff"
```

## Limitations

- The server handles one sender at a time. If two clients send at once, their bits are mixed together.
- The acknowledging client has no timeout. It waits until the acknowledgement arrives.
- Nothing is checked for integrity beyond the byte framing.

## Tests

```
pip install .[test]
pytest
```