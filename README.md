# sigtalk

Pass short text messages from one process to another using only the two
user signals, `SIGUSR1` and `SIGUSR2`. Each byte goes out as eight signals,
least significant bit first: `SIGUSR1` carries a 1 bit, `SIGUSR2` a 0 bit.
A zero byte ends the message. When the server receives that zero byte it
sends `SIGUSR1` back to the sender as an acknowledgement.

The server waits for signals with `signal.sigwaitinfo`, so it needs a
platform that provides it, such as Linux.

## Install

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id, then writes
every byte it receives to standard output as it arrives. Stop it with
Ctrl-C.

```
sigtalk-server
```

```
PID : 12345

```

From a second terminal, send a message to that process id:

```
sigtalk-client 12345 "hello there"
```

The server prints `hello there`. The message is sent as UTF-8, with a pause
of 0.4 ms after each signal; anything after an embedded zero byte is not
sent. If the client receives `SIGUSR1` while it is still running, it prints
`Message received by server`.

The client exits with status 2 when it is not given both a process id and
a message, and with status 1 when the process id is not a positive number
or a signal cannot be sent.

## Library

The bit encoding and decoding work without any real signals:

- `sigtalk.protocol.encode_byte(byte)` returns the eight bits of a byte,
  least significant first; `encode_message(message)` yields the bits of a
  whole message followed by its terminating zero byte.
- `sigtalk.protocol.FrameDecoder.feed(sender, bit)` rebuilds bytes from
  bits and returns each byte once eight bits have arrived. When the sender
  changes, any partial byte is dropped.
- `sigtalk.client.send_message(pid, message, delay, kill)` sends a message
  and returns the number of signals sent.
- `sigtalk.server.Server(stream, kill)` decodes signals passed to
  `handle(signum, sender)` and writes each completed byte to `stream`.

Both `send_message` and `Server` accept a `kill` callable in place of
`os.kill`, so signals can be recorded instead of sent.

Smaller helpers:

- `sigtalk.printf.format_message` and `sigtalk.printf.printf` format with
  the conversions `%c %s %d %i %u %x %X %p %%`. `printf` writes to standard
  output or a given text or binary stream and returns the count written.
- `sigtalk.lines.LineReader(stream, chunk_size)` reads newline-terminated
  lines from a text or binary stream, `chunk_size` units at a time, via
  `read_line()` or by iteration.
- `sigtalk.text` holds string helpers with C-library behaviour:
  `parse_long`, `split`, `trim`, `substring`, `find_bounded`,
  `compare_bounded`, `compare_bytes`, `bounded_copy` and `bounded_concat`.

## Tests

```
pip install ".[test]"
pytest
```